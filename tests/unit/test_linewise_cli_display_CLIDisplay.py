"""Unit tests for linewise.cli.display.CLIDisplay."""

import json

import yaml

from linewise.cli.display import CLIDisplay


class TestCLIDisplay:
    def test_yaml_output(self, capsys):
        CLIDisplay().json_output({"status": "success", "line_count": 3}, format="yaml")

        out = capsys.readouterr().out
        assert yaml.safe_load(out) == {"status": "success", "line_count": 3}
        assert out.index("status") < out.index("line_count")

    def test_json_output(self, capsys):
        CLIDisplay().json_output({"errors": ["é"]}, format="json")

        out = capsys.readouterr().out
        assert json.loads(out) == {"errors": ["é"]}
        assert "é" in out

    def test_status_lines_go_to_stderr(self, capsys):
        display = CLIDisplay()

        display.status("starting")
        display.success("done")
        display.error("failed")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "starting" in captured.err
        assert "done" in captured.err
        assert "failed" in captured.err
