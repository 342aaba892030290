"""Normalize a path for linewise.

Expands user home directory (~) and returns an absolute path
WITHOUT resolving symlinks, so source/destination checks see the
path the caller gave.
"""

import os
from pathlib import Path
from typing import overload


@overload
def normalize_path(path: str | os.PathLike) -> Path: ...


@overload
def normalize_path(path: None) -> None: ...


def normalize_path(path: str | os.PathLike | None) -> Path | None:
    """Expand user and return absolute path (no symlink resolution)."""
    if path is None:
        return None
    return Path(path).expanduser().absolute()
