"""
FluidDS Responsive Device Inheritance

Resolves what value a responsive control shows when it has no explicit override,
by walking the breakpoint hierarchy toward desktop until an ancestor with a usable
value is found.

Breakpoint order is supplied by the caller, largest to smallest, with desktop as the
root. Widescreen is special: it always inherits from desktop directly.

Value access and emptiness are injected:
    get_value(control_name) -> Mapping | None
    is_empty(value) -> bool

Example:
    >>> values = {"padding": {"size": "20", "unit": "px"}}
    >>> inherited = resolve_inherited_value(
    ...     "padding_mobile", ["desktop", "tablet", "mobile"], values.get, is_empty_control_value)
    >>> inherited.inherited_from, inherited.direct_parent, inherited.inherit_path
    ('desktop', 'tablet', ('tablet', 'desktop'))
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import fluid_conf

logger = logging.getLogger(__name__)

# get_value must return a Mapping for a set control; any non-mapping (None, False, "", ...) reads as
# "not set". An empty mapping is set but empty.
GetValue = Callable[[str], Mapping[str, Any] | None]
IsEmpty = Callable[[Any], bool]

INHERITED_FROM = "__inheritedFrom"
DIRECT_PARENT_DEVICE = "__directParentDevice"
INHERIT_PATH = "__inheritPath"
SOURCE_UNIT = "__sourceUnit"

PROVENANCE_KEYS = (INHERITED_FROM, DIRECT_PARENT_DEVICE, INHERIT_PATH, SOURCE_UNIT)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ParsedControlName:
    """Control name split into base name and device suffix; device_suffix is None for desktop."""

    base_name: str
    device_suffix: str | None


class InheritedValue(Mapping[str, Any]):
    """
    Read-only copy of an ancestor's control value plus inheritance provenance.

    Behaves as a mapping of the ancestor's own fields (e.g. size/unit, or top/right/bottom/left)
    together with four provenance keys:

    - __inheritedFrom: device that actually supplied the value
    - __directParentDevice: immediate parent in the chain, which differs from __inheritedFrom
      when the parent was empty and a further ancestor supplied the value
    - __inheritPath: devices traversed, nearest-first
    - __sourceUnit: the supplying value's unit, for mixed-unit detection

    A direct parent with an empty value can still come back as an InheritedValue, which is a
    different state from None ("nothing to inherit").
    """

    __slots__ = ("_value", "_inherited_from", "_direct_parent", "_inherit_path")

    def __init__(
            self,
            value: Mapping[str, Any],
            inherited_from: str,
            direct_parent: str,
            inherit_path: Sequence[str],
    ) -> None:
        fields = {k: v for k, v in dict(value).items() if k not in PROVENANCE_KEYS}
        object.__setattr__(self, "_value", MappingProxyType(fields))
        object.__setattr__(self, "_inherited_from", inherited_from)
        object.__setattr__(self, "_direct_parent", direct_parent)
        object.__setattr__(self, "_inherit_path", tuple(inherit_path))

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise TypeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, key: str) -> Any:
        if key == INHERITED_FROM:
            return self._inherited_from
        if key == DIRECT_PARENT_DEVICE:
            return self._direct_parent
        if key == INHERIT_PATH:
            return self._inherit_path
        if key == SOURCE_UNIT:
            return self.source_unit
        return self._value[key]

    def __iter__(self) -> Iterator[str]:
        yield from self._value
        yield from PROVENANCE_KEYS

    def __len__(self) -> int:
        return len(self._value) + len(PROVENANCE_KEYS)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({dict(self._value)!r}, "
            f"inherited_from={self._inherited_from!r}, "
            f"direct_parent={self._direct_parent!r}, "
            f"inherit_path={self._inherit_path!r})"
        )

    @property
    def value(self) -> Mapping[str, Any]:
        """The ancestor's own fields, without provenance."""
        return self._value

    @property
    def inherited_from(self) -> str:
        return self._inherited_from

    @property
    def direct_parent(self) -> str:
        return self._direct_parent

    @property
    def inherit_path(self) -> tuple[str, ...]:
        return self._inherit_path

    @property
    def source_unit(self) -> Any:
        return self._value.get("unit")

    @property
    def is_indirect(self) -> bool:
        """True when the value skipped over an empty direct parent."""
        return self._inherited_from != self._direct_parent

    def has_mixed_units(self, unit: str | None) -> bool:
        """True when the supplying value's unit differs from a control's own unit."""
        source_unit = self.source_unit
        return bool(source_unit) and bool(unit) and source_unit != unit


# Methods --------------------------------------------------------------------------------------------------------------

def _is_set(value: Any) -> bool:
    # Falsy non-mappings mean "not set"; an empty mapping is set but empty
    return isinstance(value, Mapping)


def is_empty_control_value(value: Any) -> bool:
    """Default emptiness policy: None or an empty mapping."""
    return not value


def parse_control_name_device(control_name: str, device_order: Sequence[str]) -> ParsedControlName:
    """
    Split a control name into base name and device suffix.

    Scans device_order for a non-desktop device whose "_<device>" suffix ends the name.
    The first match wins, so suffixes in device_order must not overlap.

    Examples:
        >>> parse_control_name_device("padding_tablet", ["desktop", "tablet", "mobile"])
        ParsedControlName(base_name='padding', device_suffix='tablet')
        >>> parse_control_name_device("padding", ["desktop", "tablet"])
        ParsedControlName(base_name='padding', device_suffix=None)
    """
    for device in device_order:
        if device == fluid_conf.DESKTOP:
            continue
        suffix = f"_{device}"
        if control_name.endswith(suffix):
            return ParsedControlName(base_name=control_name.removesuffix(suffix), device_suffix=device)
    return ParsedControlName(base_name=control_name, device_suffix=None)


def device_control_name(base_name: str, device: str) -> str:
    """Control name of base_name on a device; desktop uses the bare base name."""
    return base_name if device == fluid_conf.DESKTOP else f"{base_name}_{device}"


def ancestor_devices(device: str, device_order: Sequence[str]) -> list[str]:
    """
    Devices strictly before device in device_order; the direct parent is the last element.

    Unknown devices have no ancestors.
    """
    device_order = list(device_order)
    if device not in device_order:
        return []
    return device_order[:device_order.index(device)]


def find_inherited_value(
        base_name: str,
        ancestors: Sequence[str],
        get_value: GetValue,
        is_empty: IsEmpty,
) -> InheritedValue | None:
    """
    Walk ancestors from nearest to furthest and return the first non-empty value.

    The direct parent (last of ancestors) is checked first. If every ancestor is empty, the
    direct parent's value is still returned when it exists at all, so callers can tell
    "inherited but empty" from "nothing to inherit".
    """
    if not ancestors:
        return None

    direct_parent = ancestors[-1]
    inherit_path = [direct_parent]

    parent_value = get_value(device_control_name(base_name, direct_parent))
    if _is_set(parent_value) and not is_empty(parent_value):
        logger.debug("%s: inherited from direct parent %s", base_name, direct_parent)
        return InheritedValue(parent_value, direct_parent, direct_parent, inherit_path)

    for device in reversed(ancestors[:-1]):
        device_value = get_value(device_control_name(base_name, device))
        inherit_path.insert(0, device)
        if _is_set(device_value) and not is_empty(device_value):
            logger.debug("%s: inherited from %s via %s", base_name, device, direct_parent)
            return InheritedValue(device_value, device, direct_parent, inherit_path)

    if _is_set(parent_value):
        logger.debug("%s: no ancestor value, keeping empty parent %s", base_name, direct_parent)
        return InheritedValue(parent_value, direct_parent, direct_parent, inherit_path)

    return None


def widescreen_inherited_value(base_name: str, get_value: GetValue) -> InheritedValue | None:
    """Widescreen inherits straight from desktop, whatever sits between them in the order."""
    desktop_value = get_value(base_name)
    if not _is_set(desktop_value):
        return None
    desktop = fluid_conf.DESKTOP
    return InheritedValue(desktop_value, desktop, desktop, [desktop])


def resolve_inherited_value(
        control_name: str,
        device_order: Sequence[str],
        get_value: GetValue,
        is_empty: IsEmpty,
) -> InheritedValue | None:
    """
    Resolve the value a responsive control inherits from its ancestors.

    Args:
        control_name: Full control name, e.g. "padding_mobile".
        device_order: Breakpoints from largest to smallest, desktop first. Must not change
            during the call.
        get_value: Returns the stored value of a control name, or None when not set.
        is_empty: Control-type specific emptiness test.

    Returns:
        InheritedValue | None: None for desktop (root) controls and when no ancestor holds
        a value.
    """
    device_order = tuple(device_order)
    parsed = parse_control_name_device(control_name, device_order)

    if parsed.device_suffix is None:
        return None

    if parsed.device_suffix == fluid_conf.WIDESCREEN:
        return widescreen_inherited_value(parsed.base_name, get_value)

    ancestors = ancestor_devices(parsed.device_suffix, device_order)
    return find_inherited_value(parsed.base_name, ancestors, get_value, is_empty)
