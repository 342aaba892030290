"""Argument precondition helper."""

from collections.abc import Callable
from typing import TypeVar

from .PreconditionError import PreconditionError

T = TypeVar("T")


def check_argument(argument: T, check: Callable[[T], bool], message: str) -> None:
    """Raise PreconditionError with ``message`` unless ``check(argument)`` holds."""
    if not check(argument):
        raise PreconditionError(message)
