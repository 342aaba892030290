import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    home: Path | None = None,
    level: str = "INFO",
    file_name: str = "linewise.log",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure linewise logging.

    Args:
        home: linewise home directory. If None, derived from environment.
        level: Logging level name.
        file_name: Log file name inside ``home``.
        max_bytes: Rotate after this many bytes.
        backup_count: Rotated files to keep.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from linewise.api.config.get_linewise_home import get_linewise_home

        home = get_linewise_home()

    home.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger("linewise")
    root_logger.setLevel(level)

    file_handler = RotatingFileHandler(
        home / file_name,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Remove linewise handlers so logging can be configured again."""
    global _CONFIGURED
    root_logger = logging.getLogger("linewise")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"linewise.{name}")
