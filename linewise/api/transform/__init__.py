"""Transform API module."""

from ._LINE_FUNCTIONS import LINE_FUNCTIONS
from .check_argument import check_argument
from .get_line_function import get_line_function
from .LineTransformer import LineTransformer
from .PreconditionError import PreconditionError

__all__ = [
    "LINE_FUNCTIONS",
    "LineTransformer",
    "PreconditionError",
    "check_argument",
    "get_line_function",
]
