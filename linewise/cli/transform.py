"""Transform Typer command registration."""

from pathlib import Path
from typing import Annotated

import typer

from linewise.api.transform.cmd_functions import cmd_functions
from linewise.api.transform.cmd_transform import cmd_transform
from linewise.cli._handle_stage_result import _handle_stage_result


def register_transform(app: typer.Typer) -> None:
    """Register ``transform`` and ``functions`` commands on ``app``."""

    @app.command(name="transform")
    def transform_cmd(
        ctx: typer.Context,
        source: Annotated[Path, typer.Argument(help="Source text file")],
        destination: Annotated[Path, typer.Argument(help="Destination file (overwritten)")],
        function: Annotated[
            str | None,
            typer.Option("--function", "-f", help="Line function name (default from config)"),
        ] = None,
    ) -> None:
        """Transform SOURCE line by line into DESTINATION."""
        _handle_stage_result(cmd_transform, ctx)(source, destination, function)

    @app.command(name="functions")
    def functions_cmd(ctx: typer.Context) -> None:
        """List available line functions."""
        _handle_stage_result(cmd_functions, ctx)()
