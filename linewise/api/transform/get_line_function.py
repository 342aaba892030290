"""Look up a registered line function by name."""

from collections.abc import Callable

from ._LINE_FUNCTIONS import LINE_FUNCTIONS


def get_line_function(name: str) -> Callable[[str], str]:
    """Get line function by name.

    Args:
        name: Registered function name (e.g., "upper")

    Returns:
        The line function

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return LINE_FUNCTIONS[name][0]
    except KeyError:
        known = ", ".join(sorted(LINE_FUNCTIONS))
        raise ValueError(f"Unknown line function: {name!r} (expected one of: {known})") from None
