"""Line function registry."""

from collections.abc import Callable


def _identity(line: str) -> str:
    return line


def _reverse(line: str) -> str:
    return line[::-1]


# name -> (function, description)
LINE_FUNCTIONS: dict[str, tuple[Callable[[str], str], str]] = {
    "identity": (_identity, "Copy each line unchanged"),
    "upper": (str.upper, "Convert each line to upper case"),
    "lower": (str.lower, "Convert each line to lower case"),
    "title": (str.title, "Title-case each line"),
    "capitalize": (str.capitalize, "Capitalize the first character of each line"),
    "swapcase": (str.swapcase, "Swap upper and lower case"),
    "strip": (str.strip, "Remove leading and trailing whitespace"),
    "lstrip": (str.lstrip, "Remove leading whitespace"),
    "rstrip": (str.rstrip, "Remove trailing whitespace"),
    "reverse": (_reverse, "Reverse the characters of each line"),
}
