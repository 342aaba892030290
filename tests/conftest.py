"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from linewise.utils.logger import reset_logging

STOOGES = ["Larry", "Curly", "Moe"]


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")
    config.addinivalue_line("markers", "transform: line transformer tests")
    config.addinivalue_line("markers", "config: configuration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def linewise_home(tmp_path, monkeypatch) -> Path:
    """Point LINEWISE_HOME at a per-test directory and reset logging around each test."""
    home = tmp_path / ".linewise"
    monkeypatch.setenv("LINEWISE_HOME", str(home))
    reset_logging()
    yield home
    reset_logging()


@pytest.fixture
def write_config(linewise_home):
    """Write a config.json into the test home directory."""

    def _write(config: dict) -> Path:
        linewise_home.mkdir(parents=True, exist_ok=True)
        path = linewise_home / "config.json"
        path.write_text(json.dumps(config), encoding="utf-8")
        return path

    return _write


def write_lines(path: Path, lines: list[str]) -> Path:
    """Write lines to a UTF-8 file, each followed by a newline."""
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def read_lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
