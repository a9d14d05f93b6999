"""
FluidDS Formatters

Display text and renderer attributes for fluid values and their inheritance.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping
from typing import Any, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import fluid_conf
from .devices import DIRECT_PARENT_DEVICE, INHERITED_FROM, SOURCE_UNIT
from .units import SizeUnit

SIZE_DIVIDER_SPAN = '<span class="select2-result-fluid-spacing-formatted__size-divider"></span>'


# Methods --------------------------------------------------------------------------------------------------------------

def format_size_range(
        min_size: str,
        min_unit: str,
        max_size: str,
        max_unit: str,
        include_span: bool = False,
) -> str:
    """
    Format a min/max pair for display.

    Equal size and unit show as a single value. Otherwise "min ~ max", or both values joined
    by a divider span when include_span is set.

    Examples:
        >>> format_size_range("16", "px", "24", "px")
        '16px ~ 24px'
        >>> format_size_range("16", "px", "16", "px")
        '16px'
    """
    if min_size == max_size and min_unit == max_unit:
        return f"{min_size}{min_unit}"

    if include_span:
        return f"{min_size}{min_unit}{SIZE_DIVIDER_SPAN}{max_size}{max_unit}"
    return f"{min_size}{min_unit} ~ {max_size}{max_unit}"


def format_inherited_value(inherited_size: str, source_unit: str) -> str:
    """Inherited size with its unit; a "custom" unit means the size is already complete."""
    return inherited_size if source_unit == "custom" else f"{inherited_size}{source_unit}"


def calculate_separator(min_parsed: SizeUnit | None, max_parsed: SizeUnit | None) -> Literal["~", "="]:
    """
    Separator shown between the inline min and max inputs.

    "=" only for equal non-zero sizes in the same unit; "~" for ranges, mixed units,
    zero values and unparsable inputs.
    """
    if min_parsed is None or max_parsed is None:
        return "~"

    min_value = min_parsed.as_float
    max_value = max_parsed.as_float
    is_same_unit = min_parsed.unit == max_parsed.unit
    is_same_value = min_value == max_value
    is_non_zero = min_value != 0 or max_value != 0

    return "=" if is_same_value and is_same_unit and is_non_zero else "~"


def device_label(device: str) -> str:
    """Human label of a device; desktop is shown as "Default"."""
    if device == fluid_conf.DESKTOP:
        return "Default"
    return device[:1].upper() + device[1:]


def inheritance_attributes(inherited: Mapping[str, Any], property_name: str) -> dict[str, str]:
    """
    Data attributes a renderer attaches to a fluid selector showing an inherited value.

    Args:
        inherited: An InheritedValue, or any mapping carrying the same provenance keys.
        property_name: Field holding the inherited size, e.g. "size" or "top".

    Returns:
        dict[str, str]: data-inherited-size/-unit, data-source-unit, data-inherited-from,
        data-inherited-device, and data-inherited-via when the value skipped an empty
        direct parent.
    """
    attributes = {}

    inherited_size = inherited.get(property_name)
    inherited_unit = inherited.get("unit")
    source_unit = inherited.get(SOURCE_UNIT) or inherited_unit
    inherited_from = inherited.get(INHERITED_FROM) or "parent"
    direct_parent = inherited.get(DIRECT_PARENT_DEVICE)

    if inherited_size is not None:
        attributes["data-inherited-size"] = str(inherited_size)
    if inherited_unit:
        attributes["data-inherited-unit"] = str(inherited_unit)
    if source_unit:
        attributes["data-source-unit"] = str(source_unit)

    attributes["data-inherited-from"] = inherited_from

    if direct_parent and direct_parent != inherited_from:
        attributes["data-inherited-via"] = direct_parent

    attributes["data-inherited-device"] = device_label(inherited_from)
    return attributes
