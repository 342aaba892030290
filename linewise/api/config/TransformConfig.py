"""Transform configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..transform._LINE_FUNCTIONS import LINE_FUNCTIONS


class TransformConfig(BaseModel):
    """Transform defaults."""

    model_config = ConfigDict(extra="forbid")

    default_function: str = Field("upper", description="Line function used when none is given")

    @field_validator("default_function")
    @classmethod
    def _known_function(cls, value: str) -> str:
        if value not in LINE_FUNCTIONS:
            raise ValueError(f"unknown line function {value!r} (expected one of: {', '.join(sorted(LINE_FUNCTIONS))})")
        return value
