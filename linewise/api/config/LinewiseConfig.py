"""Top-level linewise configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .get_linewise_home import get_linewise_home
from .LogConfig import LogConfig
from .TransformConfig import TransformConfig


class LinewiseConfig(BaseModel):
    """Top-level configuration, stored as JSON in the linewise home directory."""

    model_config = ConfigDict(extra="forbid")

    log: LogConfig = Field(default_factory=LogConfig)
    transform: TransformConfig = Field(default_factory=TransformConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on LINEWISE_HOME or default to ~/.linewise."""
        return get_linewise_home() / "config.json"

    @classmethod
    def load(cls) -> "LinewiseConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object (found: {type(raw).__name__})")

        try:
            return cls(**raw)
        except ValidationError as e:
            first = e.errors()[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc)
            error_msg = first.get("msg", str(e))
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    @classmethod
    def load_or_default(cls) -> "LinewiseConfig":
        """Load config from file, or return defaults when no file exists."""
        if not cls.get_config_path().exists():
            return cls()
        return cls.load()

    def to_dict(self) -> dict[str, Any]:
        return {
            "log": self.log.model_dump(),
            "transform": self.transform.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration atomically (temp file, then rename)."""
        path = self.get_config_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                temp_path.unlink(missing_ok=True)
            raise RuntimeError(f"Failed to save config: {e}") from e
