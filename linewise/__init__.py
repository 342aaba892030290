"""linewise - line-by-line text file transformation."""

from .api.transform.LineTransformer import LineTransformer
from .api.transform.PreconditionError import PreconditionError

__all__ = ["LineTransformer", "PreconditionError"]
