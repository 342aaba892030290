"""Line-by-line text file transformer."""

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TextIO

from . import path_checks
from .check_argument import check_argument

LineFunction = Callable[[str], str]


class LineTransformer:
    """Apply a line function to every line of a text file.

    The instance holds only the line function, so one transformer can be
    reused for any number of source/destination pairs, including from
    several threads as long as destinations differ.
    """

    ENCODING = "utf-8"
    LINE_TERMINATOR = "\n"

    def __init__(self, line_function: LineFunction):
        """Initialize the transformer.

        Args:
            line_function: Mapping from one line (without terminator) to another
        """
        self.line_function = line_function

    def transform(self, source: str | os.PathLike, destination: str | os.PathLike) -> None:
        """Write ``line_function(line)`` for every source line to destination.

        Destination is created or truncated; each output line ends with a
        single newline whatever terminators the source used.

        Args:
            source: Existing, regular, readable text file
            destination: File to (over)write; must not be a directory

        Raises:
            PreconditionError: If source or destination fails validation
            OSError: If opening, reading or writing fails
        """
        source = Path(source)
        destination = Path(destination)

        check_argument(source, path_checks.is_regular_file, "Source must be regular file.")
        check_argument(source, path_checks.is_readable, "Source must be readable.")
        check_argument(destination, path_checks.is_not_directory, "Destination cannot be directory.")

        with (
            source.open("r", encoding=self.ENCODING, newline=None) as reader,
            destination.open("w", encoding=self.ENCODING, newline="") as writer,
        ):
            for line in self._lines(reader):
                writer.write(self.line_function(line))
                writer.write(self.LINE_TERMINATOR)

    @staticmethod
    def _lines(reader: TextIO) -> Iterator[str]:
        # Universal newlines already folded \r\n and \r into \n.
        for line in reader:
            yield line[:-1] if line.endswith("\n") else line
