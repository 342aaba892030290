"""Create the main Typer CLI app."""

import typer

from linewise.cli.transform import register_transform


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="linewise - transform text files line by line",
        context_settings={"help_option_names": ["-h", "--help"]},
        no_args_is_help=True,
    )

    register_transform(app)

    @app.callback()
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

    return app
