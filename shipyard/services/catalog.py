"""Catalog service: read-only lookup of subsystem type definitions.

Responsibilities:
  - Expose the built-in definitions per category
  - Merge mod overlays on top (by id, ascending priority, later wins)
  - Carry the load-time configuration that travels with a catalog: the ID
    rename tables and the countermeasure packaging ratio

A Catalog is immutable once built; `with_overlays` returns a new one.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable

from pydantic import TypeAdapter, ValidationError

from shipyard.config import settings
from shipyard.data.armor import ARMOR_TYPES, ArmorType
from shipyard.data.categories import CatalogCategory
from shipyard.data.command_control import COMMAND_CONTROL, CommandControlType
from shipyard.data.damage_zones import DAMAGE_ZONE_LAYOUTS, DamageZoneLayout
from shipyard.data.defenses import DEFENSES, DefenseType
from shipyard.data.hangar_misc import HANGAR_MISC, HangarMiscType
from shipyard.data.hulls import HULLS, HullType
from shipyard.data.ordnance import (
    LAUNCH_SYSTEMS,
    ORDNANCE_COMPONENTS,
    LaunchSystemType,
    OrdnanceComponent,
)
from shipyard.data.power import (
    ENGINES,
    FTL_DRIVES,
    POWER_PLANTS,
    EngineType,
    FTLDriveType,
    PowerPlantType,
)
from shipyard.data.renames import BUILTIN_RENAMES, collapse_renames
from shipyard.data.sensors import SENSORS, SensorType
from shipyard.data.support_systems import (
    ACCOMMODATIONS,
    GRAVITY_SYSTEMS,
    LIFE_SUPPORT,
    STORE_SYSTEMS,
    SupportSystemType,
)
from shipyard.data.weapons import WEAPONS, WeaponType
from shipyard.services.design_state import SavedModReference

logger = logging.getLogger(__name__)

BUILTIN_ENTRIES: dict[CatalogCategory, list] = {
    CatalogCategory.hull: HULLS,
    CatalogCategory.armor: ARMOR_TYPES,
    CatalogCategory.power_plant: POWER_PLANTS,
    CatalogCategory.engine: ENGINES,
    CatalogCategory.ftl_drive: FTL_DRIVES,
    CatalogCategory.life_support: LIFE_SUPPORT,
    CatalogCategory.accommodation: ACCOMMODATIONS,
    CatalogCategory.store_system: STORE_SYSTEMS,
    CatalogCategory.gravity_system: GRAVITY_SYSTEMS,
    CatalogCategory.defense: DEFENSES,
    CatalogCategory.command_control: COMMAND_CONTROL,
    CatalogCategory.sensor: SENSORS,
    CatalogCategory.hangar_misc: HANGAR_MISC,
    CatalogCategory.weapon: WEAPONS,
    CatalogCategory.launch_system: LAUNCH_SYSTEMS,
    CatalogCategory.ordnance: ORDNANCE_COMPONENTS,
    CatalogCategory.damage_zone: DAMAGE_ZONE_LAYOUTS,
}

ENTRY_TYPES: dict[CatalogCategory, type] = {
    CatalogCategory.hull: HullType,
    CatalogCategory.armor: ArmorType,
    CatalogCategory.power_plant: PowerPlantType,
    CatalogCategory.engine: EngineType,
    CatalogCategory.ftl_drive: FTLDriveType,
    CatalogCategory.life_support: SupportSystemType,
    CatalogCategory.accommodation: SupportSystemType,
    CatalogCategory.store_system: SupportSystemType,
    CatalogCategory.gravity_system: SupportSystemType,
    CatalogCategory.defense: DefenseType,
    CatalogCategory.command_control: CommandControlType,
    CatalogCategory.sensor: SensorType,
    CatalogCategory.hangar_misc: HangarMiscType,
    CatalogCategory.weapon: WeaponType,
    CatalogCategory.launch_system: LaunchSystemType,
    CatalogCategory.ordnance: OrdnanceComponent,
    CatalogCategory.damage_zone: DamageZoneLayout,
}

_ADAPTERS: dict[type, TypeAdapter] = {
    entry_type: TypeAdapter(entry_type) for entry_type in set(ENTRY_TYPES.values())
}

FILE_MODES = ("add", "replace")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def _snake_keys(raw: dict) -> dict:
    """Mod files use camelCase keys; catalog dataclasses use snake_case."""
    return {_CAMEL_BOUNDARY.sub(r"_\1", key).lower(): value for key, value in raw.items()}


def parse_category(value: str) -> CatalogCategory:
    """Accept both "power_plant" and "power-plant"; raise ValueError otherwise."""
    return CatalogCategory(value.replace("-", "_"))


@dataclass(frozen=True)
class ModOverlay:
    """A mod's contribution to the catalog, detached from the database row."""
    name: str
    version: str = "1.0.0"
    priority: int = 0
    files: dict[str, list[dict]] = field(default_factory=dict)
    file_modes: dict[str, str] = field(default_factory=dict)
    renames: dict[str, dict[str, str]] = field(default_factory=dict)


def validate_entry(category: CatalogCategory, raw: Any):
    """Build a catalog entry from a raw mod dict; raises ValidationError."""
    if not isinstance(raw, dict):
        raise ValueError(f"{category.value} entry must be an object")
    return _ADAPTERS[ENTRY_TYPES[category]].validate_python(_snake_keys(raw))


class Catalog:
    def __init__(
        self,
        entries: dict[CatalogCategory, Iterable],
        rename_table: dict[CatalogCategory, dict[str, str]] | None = None,
        units_per_countermeasure_set: int | None = None,
        active_mods: Iterable[SavedModReference] = (),
    ) -> None:
        self._entries: dict[CatalogCategory, tuple] = {
            category: tuple(entries.get(category, ())) for category in CatalogCategory
        }
        self._index: dict[CatalogCategory, dict[str, Any]] = {
            category: {entry.id: entry for entry in items}
            for category, items in self._entries.items()
        }
        self._raw_renames = {
            category: dict(table) for category, table in (rename_table or {}).items()
        }
        # Raises ValueError on a cyclic table
        self.rename_table = MappingProxyType({
            category: MappingProxyType(collapse_renames(table))
            for category, table in self._raw_renames.items()
        })
        if units_per_countermeasure_set is None:
            units_per_countermeasure_set = settings.countermeasure_units_per_set
        self.units_per_countermeasure_set = units_per_countermeasure_set
        self.active_mods: tuple[SavedModReference, ...] = tuple(active_mods)

    @classmethod
    def builtin(cls, units_per_countermeasure_set: int | None = None) -> Catalog:
        return cls(
            BUILTIN_ENTRIES,
            rename_table=BUILTIN_RENAMES,
            units_per_countermeasure_set=units_per_countermeasure_set,
        )

    def get_all(self, category: CatalogCategory) -> list:
        return list(self._entries[category])

    def find_by_id(self, category: CatalogCategory, entry_id: Any):
        if not isinstance(entry_id, str):
            return None
        return self._index[category].get(entry_id)

    def with_overlays(self, overlays: Iterable[ModOverlay]) -> Catalog:
        """Return a new catalog with mod overlays applied in ascending priority.

        In "add" mode a mod entry replaces the entry with the same id or is
        appended; in "replace" mode the category starts empty before the mod's
        entries are added.  Entries that fail validation are skipped.
        """
        merged: dict[CatalogCategory, dict[str, Any]] = {
            category: dict(index) for category, index in self._index.items()
        }
        renames = {category: dict(table) for category, table in self._raw_renames.items()}
        active = list(self.active_mods)

        for overlay in sorted(overlays, key=lambda o: o.priority):
            for key, raw_entries in overlay.files.items():
                try:
                    category = parse_category(key)
                except ValueError:
                    logger.warning("Mod %s: unknown catalog category %r skipped", overlay.name, key)
                    continue

                mode = overlay.file_modes.get(key, "add")
                if mode not in FILE_MODES:
                    logger.warning("Mod %s: unknown file mode %r for %s, using 'add'", overlay.name, mode, key)
                    mode = "add"
                if mode == "replace":
                    merged[category] = {}

                for raw in raw_entries or []:
                    try:
                        entry = validate_entry(category, raw)
                    except (ValidationError, ValueError) as exc:
                        logger.warning(
                            "Mod %s: invalid %s entry skipped: %s", overlay.name, category.value, exc
                        )
                        continue
                    merged[category][entry.id] = entry

            for key, table in overlay.renames.items():
                try:
                    category = parse_category(key)
                except ValueError:
                    logger.warning("Mod %s: renames for unknown category %r skipped", overlay.name, key)
                    continue
                renames.setdefault(category, {}).update(table)

            active.append(SavedModReference(name=overlay.name, version=overlay.version))

        return Catalog(
            {category: index.values() for category, index in merged.items()},
            rename_table=renames,
            units_per_countermeasure_set=self.units_per_countermeasure_set,
            active_mods=active,
        )
