"""List line functions command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ._LINE_FUNCTIONS import LINE_FUNCTIONS
from .TransformOutput import FunctionsOutput, LineFunctionInfo


def cmd_functions() -> StageResult:
    """List registered line functions."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading registry...")
        functions = [
            LineFunctionInfo(name=name, description=description)
            for name, (_, description) in sorted(LINE_FUNCTIONS.items())
        ]
        yield (1.0, "Complete")
        result_obj.result = f"Found {len(functions)} line function(s)"
        result_obj.output = FunctionsOutput(
            functions=functions,
            count=len(functions),
            errors=[],
            warnings=[],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing line functions...",
        progress_callback=do_work,
    )
