"""Precondition error raised before any file is opened."""


class PreconditionError(ValueError):
    """Raised when a transform argument fails validation.

    The message names the violated rule. It never wraps a lower-level cause.
    """
