"""
FluidDS Utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def is_blank(value: Any) -> bool:
    """
    Check whether a raw input should be treated as "not yet specified".

    None, non-string values, empty strings and whitespace-only strings are blank.

    Examples:
        >>> is_blank("  ")
        True
        >>> is_blank("0px")
        False
    """
    return not isinstance(value, str) or value.strip() == ""


def size_as_float(size: Any) -> float:
    """
    Read the leading numeral of a size string as a float.

    Mirrors lenient numeric reading of user-typed sizes: "1.5" -> 1.5, "16px" -> 16.0,
    "1.2.3" -> 1.2. Anything without a leading numeral is NaN, which never compares equal.

    Examples:
        >>> size_as_float("-0")
        -0.0
        >>> size_as_float(".")
        nan
    """
    if isinstance(size, bool):
        return math.nan
    if isinstance(size, (int, float)):
        return float(size)
    if not isinstance(size, str):
        return math.nan

    text = size.strip()
    end = 0
    seen_dot = False
    seen_digit = False
    if text[:1] in ("-", "+"):
        end = 1
    while end < len(text):
        char = text[end]
        if char.isdigit() and char.isascii():
            seen_digit = True
        elif char == "." and not seen_dot:
            seen_dot = True
        else:
            break
        end += 1

    if not seen_digit:
        return math.nan
    return float(text[:end])
