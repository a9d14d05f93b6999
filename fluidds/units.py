#
# FluidDS Value-Unit Parsing and Validation
#

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import fluid_conf
from .utils import is_blank, size_as_float


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class CSSUnit(StrEnum):
    """
    Units accepted in user-typed fluid bounds.

    Matching is case-insensitive; the casing typed by the user is kept in the parsed value.
    """
    PX = "px"
    REM = "rem"
    EM = "em"
    PERCENT = "%"
    VW = "vw"
    VH = "vh"


# Numeral (optional minus, digits, at most one dot), at most one optional space, optional unit from CSSUnit
VALUE_WITH_UNIT_PATTERN = re.compile(
    r"^(-?(?:\d+\.?\d*|\.\d+))\s?(" + "|".join(re.escape(u.value) for u in CSSUnit) + r")?$",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class SizeUnit:
    """A parsed size and unit pair such as "1.5rem" -> SizeUnit(size="1.5", unit="rem")."""

    size: str
    unit: str

    def __str__(self) -> str:
        return f"{self.size}{self.unit}"

    @property
    def as_float(self) -> float:
        return size_as_float(self.size)

    @property
    def is_zero(self) -> bool:
        return self.as_float == 0


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a min/max input pair.

    Truthy only when valid. Invalid results carry a user-facing error message,
    valid ones carry both parsed bounds.
    """

    valid: bool
    error: str | None = None
    min_parsed: SizeUnit | None = None
    max_parsed: SizeUnit | None = None

    def __bool__(self) -> bool:
        return self.valid

    @property
    def values(self) -> tuple[SizeUnit, SizeUnit] | None:
        if not self.valid:
            return None
        return self.min_parsed, self.max_parsed


ERROR_INVALID_FORMAT = "Invalid value format"
ERROR_ZERO_RANGE = "Cannot create 0~0 preset"


# Methods --------------------------------------------------------------------------------------------------------------

def parse_value_unit(value: Any) -> SizeUnit | None:
    """
    Parse a raw "number+unit" string into a SizeUnit.

    Rules:
    - Blank input (None, empty, whitespace-only, non-string) is "not yet specified"
      and reads as 0px.
    - Otherwise the trimmed input must be a numeral (optional leading minus, digits and dots)
      followed by an optional single space and an optional unit from CSSUnit.
    - A numeral without a unit defaults to px.
    - Unit casing is preserved verbatim.

    Never raises: unparsable non-blank input returns None.

    Examples:
        >>> parse_value_unit("1.5rem")
        SizeUnit(size='1.5', unit='rem')
        >>> parse_value_unit("20")
        SizeUnit(size='20', unit='px')
        >>> parse_value_unit("")
        SizeUnit(size='0', unit='px')
        >>> parse_value_unit("20pt") is None
        True
    """
    if is_blank(value):
        return SizeUnit(size="0", unit=fluid_conf.DEFAULT_UNIT)

    match = VALUE_WITH_UNIT_PATTERN.match(value.strip())
    if not match:
        return None

    size, unit = match.group(1), match.group(2)
    return SizeUnit(size=size, unit=unit if unit is not None else fluid_conf.DEFAULT_UNIT)


def is_both_zero(min_parsed: SizeUnit, max_parsed: SizeUnit) -> bool:
    """True when both sizes are numerically zero, whatever their units."""
    return min_parsed.is_zero and max_parsed.is_zero


def validate_min_max(min_value: Any, max_value: Any) -> ValidationResult:
    """
    Validate a pair of user-typed fluid bounds.

    Returns:
        ValidationResult: invalid with "Invalid value format" when either side is unparsable,
        invalid with "Cannot create 0~0 preset" when both sides are zero (units ignored),
        valid with both parsed values otherwise.

    Examples:
        >>> validate_min_max("0px", "0rem").error
        'Cannot create 0~0 preset'
        >>> validate_min_max("0px", "10px").valid
        True
    """
    min_parsed = parse_value_unit(min_value)
    max_parsed = parse_value_unit(max_value)

    if min_parsed is None or max_parsed is None:
        return ValidationResult(valid=False, error=ERROR_INVALID_FORMAT)

    if is_both_zero(min_parsed, max_parsed):
        return ValidationResult(valid=False, error=ERROR_ZERO_RANGE)

    return ValidationResult(valid=True, min_parsed=min_parsed, max_parsed=max_parsed)


def validate_live(value: Any) -> bool:
    """
    Per-keystroke validity of a single input field.

    Empty input is valid (the user has not finished typing), anything else must parse.
    """
    if is_blank(value):
        return True
    return parse_value_unit(value) is not None
