"""Transform command."""

import time
from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ...utils.normalize_path import normalize_path
from ..config.LinewiseConfig import LinewiseConfig
from ..StageResult import StageResult
from .get_line_function import get_line_function
from .LineTransformer import LineTransformer
from .PreconditionError import PreconditionError
from .TransformOutput import TransformOutput


def cmd_transform(source: Path, destination: Path, function: str | None = None) -> StageResult:
    """Transform a text file line by line.

    Args:
        source: Source text file
        destination: Destination file (overwritten)
        function: Line function name; defaults to ``transform.default_function``

    Returns:
        StageResult with TransformOutput output
    """
    source_path = normalize_path(source)
    destination_path = normalize_path(destination)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("transform")
        function_name = function or ""
        line_count = 0

        def fail(message: str) -> None:
            logger.error("Transform %s -> %s failed: %s", source_path, destination_path, message)
            result_obj.result = message
            result_obj.output = TransformOutput(
                source=str(source_path),
                destination=str(destination_path),
                function=function_name,
                status="error",
                line_count=line_count,
                processing_time_ms=0,
                errors=[message],
                warnings=[],
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Resolving line function...")
        try:
            if not function_name:
                function_name = LinewiseConfig.load_or_default().transform.default_function
            line_function = get_line_function(function_name)
        except ValueError as e:
            yield (1.0, "Failed")
            fail(str(e))
            return

        def counting(line: str) -> str:
            nonlocal line_count
            line_count += 1
            return line_function(line)

        yield (0.3, "Transforming...")
        logger.info("Transform %s -> %s with %s", source_path, destination_path, function_name)
        start_time = time.time()
        try:
            LineTransformer(counting).transform(source_path, destination_path)
        except PreconditionError as e:
            yield (1.0, "Failed")
            fail(str(e))
            return
        except OSError as e:
            yield (1.0, "Failed")
            fail(f"I/O error: {e}")
            return
        except Exception as e:
            yield (1.0, "Failed")
            fail(f"{type(e).__name__} at line {line_count}: {e}")
            return
        processing_time_ms = int((time.time() - start_time) * 1000)

        yield (1.0, "Complete")
        logger.info("Transformed %d lines into %s", line_count, destination_path)
        result_obj.result = f"Transformed {source_path.name} ({line_count} lines, {function_name})"
        result_obj.output = TransformOutput(
            source=str(source_path),
            destination=str(destination_path),
            function=function_name,
            status="success",
            line_count=line_count,
            processing_time_ms=processing_time_ms,
            errors=[],
            warnings=[],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Transforming {source_path}...",
        progress_callback=do_work,
    )
