"""Filesystem predicates used to validate transform arguments.

Each predicate follows symlinks and answers a single question, so the
checks can be combined and tested independently.
"""

import os
from pathlib import Path


def is_regular_file(path: Path) -> bool:
    """True if ``path`` resolves to an existing regular file."""
    return path.is_file()


def is_readable(path: Path) -> bool:
    """True if the current process may read ``path``."""
    return os.access(path, os.R_OK)


def is_directory(path: Path) -> bool:
    """True if ``path`` resolves to an existing directory."""
    return path.is_dir()


def is_not_directory(path: Path) -> bool:
    return not is_directory(path)
