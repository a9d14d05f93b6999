"""
FluidDS Preset Lookup

Maps a stored control value to the catalog entry it refers to, for display and labeling.

A catalog is an ordered sequence of groups. Each group is a mapping with a "name" and a
"value" that is either:
    - a list of preset records (mappings with "id", "value", "title" and, for fluid presets,
      "min_size"/"min_unit"/"max_size"/"max_unit"), or
    - a literal string, a named shortcut such as an inherit option.

The first match in catalog order wins. A fluid record matches as ComplexPresetMatch, anything
else as SimplePresetMatch. No match returns None, and callers fall back to decoding the value
as an inline clamp formula or showing it raw.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import fluid_conf
from .units import SizeUnit

logger = logging.getLogger(__name__)

PresetRecord = Mapping[str, Any]
PresetGroup = Mapping[str, Any]
Catalog = Sequence[PresetGroup]
CatalogFetcher = Callable[[], Awaitable[Catalog | None] | Catalog | None]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ComplexPresetMatch:
    """A fluid preset with explicit min/max bounds."""

    id: str
    value: str
    title: str
    min_size: str
    min_unit: str
    max_size: str
    max_unit: str
    min_screen_width_size: str | None = None
    min_screen_width_unit: str | None = None
    max_screen_width_size: str | None = None
    max_screen_width_unit: str | None = None
    editable: bool | None = None
    group: str | None = None

    kind: Literal["complex"] = field(default="complex", init=False)

    @property
    def is_complex(self) -> bool:
        return True

    @classmethod
    def from_record(cls, record: PresetRecord, group: str | None = None) -> Self:
        return cls(
            id=_as_str(record.get("id")),
            value=_as_str(record.get("value")),
            title=_as_str(record.get("title")),
            min_size=_as_str(record.get("min_size")),
            min_unit=_as_str(record.get("min_unit")),
            max_size=_as_str(record.get("max_size")),
            max_unit=_as_str(record.get("max_unit")),
            min_screen_width_size=record.get("min_screen_width_size"),
            min_screen_width_unit=record.get("min_screen_width_unit"),
            max_screen_width_size=record.get("max_screen_width_size"),
            max_screen_width_unit=record.get("max_screen_width_unit"),
            editable=record.get("editable"),
            group=group,
        )


@dataclass(frozen=True)
class SimplePresetMatch:
    """A named catalog entry without fluid bounds: a shortcut group or a custom record."""

    id: str
    name: str

    kind: Literal["simple"] = field(default="simple", init=False)

    @property
    def is_complex(self) -> bool:
        return False


PresetMatch = ComplexPresetMatch | SimplePresetMatch


class PresetResolver:
    """
    Preset lookup over a cached catalog, with an async variant that fetches first.

    Both entry points share lookup_preset(), so they never differ in matching, only in where
    the catalog comes from.

    Args:
        fetch_catalog: Callable returning the catalog, or an awaitable of it. Failures are
            logged and read as "no catalog".
        catalog: Initial cached catalog.
    """

    def __init__(self, fetch_catalog: CatalogFetcher | None = None, catalog: Catalog | None = None) -> None:
        if fetch_catalog is not None and not callable(fetch_catalog):
            raise TypeError(f"fetch_catalog must be callable, got {type(fetch_catalog).__name__}")
        self._fetch_catalog = fetch_catalog
        self._catalog = catalog

    @property
    def presets(self) -> Catalog | None:
        """The cached catalog, None until set or fetched."""
        return self._catalog

    @presets.setter
    def presets(self, catalog: Catalog | None) -> None:
        self._catalog = catalog

    def lookup(self, stored_value: Any) -> PresetMatch | None:
        """Match against the cached catalog."""
        return lookup_preset(stored_value, self._catalog)

    async def fetch(self) -> Catalog | None:
        """Fetch the catalog and cache it when the fetch produced one."""
        if self._fetch_catalog is None:
            raise ValueError("PresetResolver has no fetch_catalog to fetch with")

        try:
            catalog = self._fetch_catalog()
            if inspect.isawaitable(catalog):
                catalog = await catalog
        except Exception:
            logger.warning("Preset catalog fetch failed", exc_info=True)
            return None

        if catalog:
            self._catalog = catalog
        return catalog or None

    async def lookup_async(self, stored_value: Any) -> PresetMatch | None:
        """Fetch the catalog, then match."""
        catalog = await self.fetch()
        return lookup_preset(stored_value, catalog)


# Methods --------------------------------------------------------------------------------------------------------------

def is_fluid_preset(record: Any) -> bool:
    """True for a preset record carrying both min_size and max_size."""
    return isinstance(record, Mapping) and "min_size" in record and "max_size" in record


def lookup_preset(stored_value: Any, catalog: Catalog | None) -> PresetMatch | None:
    """
    Find the catalog entry a stored control value refers to.

    Args:
        stored_value: The control's stored value, e.g. "var(--arts-fluid-preset--h1)".
        catalog: Ordered preset groups; None or empty yields None.

    Returns:
        ComplexPresetMatch for a fluid record with an equal value, SimplePresetMatch for a
        non-fluid record or a string group with an equal value, None otherwise.
    """
    if not catalog or stored_value is None:
        return None

    for group in catalog:
        if not isinstance(group, Mapping):
            continue
        name = group.get("name")
        value = group.get("value")

        if isinstance(value, str):
            if value == stored_value:
                logger.debug("Preset %r matched shortcut group %r", stored_value, name)
                return SimplePresetMatch(id=value, name=_as_str(name))
            continue

        if not isinstance(value, Sequence):
            continue

        for record in value:
            if not isinstance(record, Mapping) or record.get("value") != stored_value:
                continue
            logger.debug("Preset %r matched record %r in group %r", stored_value, record.get("id"), name)
            if is_fluid_preset(record):
                return ComplexPresetMatch.from_record(record, group=name)
            return SimplePresetMatch(
                id=_as_str(record.get("id", stored_value)),
                name=_as_str(record.get("title", name)),
            )

    return None


def build_create_preset_data(
        title: str | None,
        min_parsed: SizeUnit,
        max_parsed: SizeUnit,
        group: str | None = None,
) -> dict[str, str]:
    """
    Payload for creating a preset from two parsed bounds.

    A blank title becomes "Custom <min> ~ <max>"; a missing group becomes the default group.
    """
    default_title = f"Custom {min_parsed} ~ {max_parsed}"
    title = title.strip() if isinstance(title, str) else ""
    return {
        "title": title or default_title,
        "min_size": min_parsed.size,
        "min_unit": min_parsed.unit,
        "max_size": max_parsed.size,
        "max_unit": max_parsed.unit,
        "group": group or fluid_conf.DEFAULT_PRESET_GROUP,
    }


def build_update_preset_data(
        preset_id: str,
        title: str | None,
        min_parsed: SizeUnit,
        max_parsed: SizeUnit,
        group_id: str,
) -> dict[str, str]:
    """Payload for updating an existing preset; a blank title stays blank."""
    return {
        "preset_id": preset_id,
        "title": title.strip() if isinstance(title, str) else "",
        "min_size": min_parsed.size,
        "min_unit": min_parsed.unit,
        "max_size": max_parsed.size,
        "max_unit": max_parsed.unit,
        "group": group_id,
    }


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)
