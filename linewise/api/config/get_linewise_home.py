"""Utility to discover linewise home directory."""

import os
from pathlib import Path

from ...utils.normalize_path import normalize_path


def get_linewise_home() -> Path:
    """Get linewise home directory based on LINEWISE_HOME or default to ~/.linewise."""
    home_env = os.environ.get("LINEWISE_HOME")
    if home_env:
        return normalize_path(home_env)
    return Path.home() / ".linewise"
