"""Output schemas for transform commands."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class TransformOutput(BaseModel):
    """Output of ``cmd_transform``."""

    model_config = ConfigDict(extra="forbid")

    source: str
    destination: str
    function: str
    status: Literal["success", "error"]
    line_count: int = Field(..., ge=0)
    processing_time_ms: int = Field(..., ge=0)
    errors: list[str]
    warnings: list[str]


class LineFunctionInfo(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    description: str


class FunctionsOutput(BaseModel):
    """Output of ``cmd_functions``."""

    model_config = ConfigDict(extra="forbid")

    functions: list[LineFunctionInfo]
    count: int
    errors: list[str]
    warnings: list[str]
