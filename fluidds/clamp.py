#
# FluidDS Clamp Formula Codec
#

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import fluid_conf


# Constants ------------------------------------------------------------------------------------------------------------

CLAMP_PREFIX = "clamp("

# Lower envelope bound: min(<first>, <second>)
_ENVELOPE_PATTERN = re.compile(r"min\(([^,]+),\s*([^)]+)\)")

# Additive base of the preferred value: calc((<min value>) + ...
_CALC_BASE_PATTERN = re.compile(r"calc\(\(([^)]+)\)")

# Free-text unit, anything after the numeral
_OPERAND_PATTERN = re.compile(r"^(-?[\d.]+)([^\d.].*)$", re.ASCII)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ParsedClamp:
    """The four components of an inline clamp formula, kept as the exact strings that were encoded."""

    min_size: str
    min_unit: str
    max_size: str
    max_unit: str

    @property
    def min_value(self) -> str:
        return f"{self.min_size}{self.min_unit}"

    @property
    def max_value(self) -> str:
        return f"{self.max_size}{self.max_unit}"


# Methods --------------------------------------------------------------------------------------------------------------

def clamp_formula(
        min_size: int | float | str,
        min_unit: str,
        max_size: int | float | str,
        max_unit: str,
        *,
        min_screen: str | None = None,
        screen_diff: str | None = None,
) -> str:
    """
    Encode a two-point fluid value as a CSS clamp() formula.

    The preferred value interpolates linearly from min to max as the viewport grows from the
    minimum reference screen width across the reference screen span:

        min + (max - min) * ((100vw - min_screen) / screen_diff)

    The envelope bounds are runtime min()/max() over both endpoints, so an inverted pair
    (max smaller than min) is still clamped to a valid range.

    Args:
        min_size: Size at the minimum screen width. Rendered with str().
        min_unit: Unit of min_size.
        max_size: Size at the maximum screen width. Rendered with str().
        max_unit: Unit of max_size.
        min_screen: Reference to the minimum screen width, inserted verbatim.
            Defaults to the configured CSS variable, var(--arts-fluid-min-screen).
        screen_diff: Reference to the screen width span, inserted verbatim.
            Defaults to var(--arts-fluid-screen-diff).

    Returns:
        str: The formula, always starting with "clamp(".

    Examples:
        >>> clamp_formula(16, "px", 24, "px")  # doctest: +NORMALIZE_WHITESPACE
        'clamp(min(16px, 24px), calc((16px) + (((24 - 16) * ((100vw - var(--arts-fluid-min-screen))
        / var(--arts-fluid-screen-diff))))), max(16px, 24px))'
    """
    min_screen = fluid_conf.min_screen_ref if min_screen is None else min_screen
    screen_diff = fluid_conf.screen_diff_ref if screen_diff is None else screen_diff

    min_value = f"{min_size}{min_unit}"
    max_value = f"{max_size}{max_unit}"

    value_diff = f"({max_size} - {min_size})"
    viewport_calc = f"(100vw - {min_screen})"
    scaling = f"({value_diff} * ({viewport_calc} / {screen_diff}))"
    preferred = f"calc(({min_value}) + ({scaling}))"

    lower_bound = f"min({min_value}, {max_value})"
    upper_bound = f"max({min_value}, {max_value})"

    return f"{CLAMP_PREFIX}{lower_bound}, {preferred}, {upper_bound})"


def is_inline_clamp(value: Any) -> bool:
    """
    Check if a value is an inline clamp formula rather than a preset reference or plain value.

    Only a string that starts with "clamp(" qualifies; the prefix anywhere else does not count.
    """
    return isinstance(value, str) and value.startswith(CLAMP_PREFIX)


def is_custom_fluid_value(value: Any) -> bool:
    """True for the custom-mode dropdown token or an inline clamp formula."""
    if not value:
        return False
    return value == fluid_conf.CUSTOM_FLUID_VALUE or is_inline_clamp(value)


def parse_clamp_formula(formula: Any) -> ParsedClamp | None:
    """
    Decode an inline clamp formula back into its min/max components.

    Both endpoints are read from the lower envelope bound min(a, b). CSS min()/max() order by
    value, not by role, so which operand is the interpolation base is recovered from the
    calc((<base>) ...) term: the operand equal to the base is min. When neither operand
    matches the base, or there is no base term, the first operand is taken as min.

    Units are free text here: whatever followed the numeral at encode time.

    Returns:
        ParsedClamp | None: None when the value is not a clamp formula or the envelope
        cannot be read.

    Examples:
        >>> parse_clamp_formula(clamp_formula(24, "px", 16, "px"))
        ParsedClamp(min_size='24', min_unit='px', max_size='16', max_unit='px')
        >>> parse_clamp_formula("preset_heading_1") is None
        True
    """
    if not is_inline_clamp(formula):
        return None

    match = _ENVELOPE_PATTERN.search(formula)
    if not match:
        return None

    first_value = match.group(1).strip()
    second_value = match.group(2).strip()

    first = _split_operand(first_value)
    second = _split_operand(second_value)
    if first is None or second is None:
        return None

    calc_match = _CALC_BASE_PATTERN.search(formula)
    calc_base = calc_match.group(1).strip() if calc_match else None

    if calc_base is not None and calc_base != first_value and calc_base == second_value:
        first, second = second, first

    return ParsedClamp(min_size=first[0], min_unit=first[1], max_size=second[0], max_unit=second[1])


def _split_operand(operand: str) -> tuple[str, str] | None:
    match = _OPERAND_PATTERN.match(operand)
    if not match:
        return None
    return match.group(1), match.group(2)
