"""Version command - returns linewise version information."""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from ...utils.get_package_version import get_package_version
from ..StageResult import StageResult


class VersionOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: str
    errors: list[str]
    warnings: list[str]


def cmd_version() -> StageResult:
    """Get linewise version information."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Getting package version...")
        version = get_package_version()
        yield (1.0, "Complete")
        result_obj.result = f"linewise version: {version}"
        result_obj.output = VersionOutput(version=version, errors=[], warnings=[]).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Getting version information...",
        progress_callback=do_work,
    )
