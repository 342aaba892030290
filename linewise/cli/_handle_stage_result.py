"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from .display import CLIDisplay
from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _display_format(ctx: typer.Context) -> str:
    """Get the display format stored by the main callback, defaulting to yaml."""
    current: typer.Context | None = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent  # type: ignore[assignment]
    return "yaml"


def _handle_stage_result(func: F, ctx: typer.Context) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, YAML or JSON as chosen by ``--display``)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), _display_format(ctx))

    return wrapper  # type: ignore[return-value]
