"""
FluidDS Control

Composes parsing, the clamp codec, device inheritance and preset lookup for a single
responsive control, the way an editor view consumes them.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from collections.abc import Sequence
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .clamp import ParsedClamp, clamp_formula, is_inline_clamp, parse_clamp_formula
from .conf import FluidConf, fluid_conf
from .devices import GetValue, InheritedValue, IsEmpty, is_empty_control_value, resolve_inherited_value
from .formatters import calculate_separator
from .presets import PresetMatch, PresetResolver
from .units import ValidationResult, parse_value_unit, validate_min_max

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

class FluidControl:
    """
    A responsive fluid control.

    Args:
        name: Full control name, e.g. "font_size_mobile".
        device_order: Breakpoints from largest to smallest, desktop first.
        get_value: Returns the stored value of a control name, or None.
        is_empty: Control-type specific emptiness test, defaults to "None or empty mapping".
        presets: Preset lookup used by describe().
        conf: Configuration providing the screen width references for encoding.
    """

    def __init__(
            self,
            name: str,
            device_order: Sequence[str],
            get_value: GetValue,
            is_empty: IsEmpty | None = None,
            presets: PresetResolver | None = None,
            conf: FluidConf | None = None,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError(f"name must be a non-empty string, got {name!r}")
        if not callable(get_value):
            raise TypeError(f"get_value must be callable, got {type(get_value).__name__}")

        self.name = name
        self.device_order = tuple(device_order)
        self.get_value = get_value
        self.is_empty = is_empty if is_empty is not None else is_empty_control_value
        self.presets = presets if presets is not None else PresetResolver()
        self.conf = conf if conf is not None else fluid_conf

    def __repr__(self) -> str:
        return f"FluidControl(name={self.name!r}, device_order={self.device_order!r})"

    def inherited_value(self) -> InheritedValue | None:
        return resolve_inherited_value(self.name, self.device_order, self.get_value, self.is_empty)

    def inline_inputs(self, value: Any) -> tuple[str, str] | None:
        """Decode a clamp formula into the two editable field strings, e.g. ("16px", "24px")."""
        parsed = parse_clamp_formula(value)
        if parsed is None:
            return None
        return parsed.min_value, parsed.max_value

    def validate_inputs(self, min_raw: Any, max_raw: Any) -> ValidationResult:
        return validate_min_max(min_raw, max_raw)

    def separator(self, min_raw: Any, max_raw: Any) -> str:
        return calculate_separator(parse_value_unit(min_raw), parse_value_unit(max_raw))

    def commit_inline(self, min_raw: Any, max_raw: Any) -> str | None:
        """
        Encode edited inline inputs as the control's clamp formula.

        Returns None, leaving the stored value alone, when the inputs do not validate.
        """
        result = self.validate_inputs(min_raw, max_raw)
        if not result:
            logger.debug("%s: inline inputs rejected: %s", self.name, result.error)
            return None

        min_parsed, max_parsed = result.values
        return clamp_formula(
            min_parsed.size,
            min_parsed.unit,
            max_parsed.size,
            max_parsed.unit,
            min_screen=self.conf.min_screen_ref,
            screen_diff=self.conf.screen_diff_ref,
        )

    def describe(self, value: Any) -> PresetMatch | ParsedClamp | str | None:
        """
        What a stored value refers to, for display.

        A catalog preset first, then an inline clamp formula, then the raw string.
        None for no value.
        """
        if value is None or value == "":
            return None

        match = self.presets.lookup(value)
        if match is not None:
            return match

        if is_inline_clamp(value):
            parsed = parse_clamp_formula(value)
            if parsed is not None:
                return parsed
            logger.debug("%s: unreadable clamp formula %r", self.name, value)

        return str(value)
