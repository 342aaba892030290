"""Unit tests for linewise.api.transform.cmd_functions."""

from linewise.api.transform import LINE_FUNCTIONS
from linewise.api.transform.cmd_functions import cmd_functions
from tests.conftest import run_cmd


def test_cmd_functions_lists_registry():
    result = run_cmd(cmd_functions)

    assert result.success is True
    assert result.output["count"] == len(LINE_FUNCTIONS)
    names = [entry["name"] for entry in result.output["functions"]]
    assert names == sorted(LINE_FUNCTIONS)
    assert {"name": "upper", "description": "Convert each line to upper case"} in result.output["functions"]
