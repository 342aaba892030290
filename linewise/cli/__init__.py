"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    from linewise.api.config.get_linewise_home import get_linewise_home
    from linewise.api.config.LinewiseConfig import LinewiseConfig
    from linewise.utils.logger import configure_logging

    log = LinewiseConfig.load_or_default().log
    configure_logging(
        get_linewise_home(),
        level=log.level,
        file_name=log.file,
        max_bytes=log.max_bytes,
        backup_count=log.backup_count,
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from linewise.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from linewise.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"linewise {result.output['version']}")
        return 0

    try:
        _configure_logging()
    except ValueError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        return 1

    app = _create_app()
    try:
        # Standalone mode: typer reports usage errors itself and exits 2.
        app(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
