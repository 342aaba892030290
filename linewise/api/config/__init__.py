"""Config API module."""

from .LinewiseConfig import LinewiseConfig
from .LogConfig import LogConfig
from .TransformConfig import TransformConfig

__all__ = ["LinewiseConfig", "LogConfig", "TransformConfig"]
