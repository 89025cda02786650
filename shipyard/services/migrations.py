"""Migration chain: normalises every historical document shape to the current one.

Responsibilities:
  - Define one pure step per structural change in the document format
  - Run every step, in a fixed order, on every document regardless of the
    version it declares
  - Never mutate the input document; each step returns a new dict

Every step is idempotent and a no-op when its target field is absent, so
running the chain on an already-current document changes nothing.  Steps
that introduce a field (ftlDrives, armorLayers) run before the rename step
that rewrites IDs inside it.
"""

from __future__ import annotations

import logging
import math
from functools import partial
from typing import Callable

from shipyard.data.categories import CatalogCategory

logger = logging.getLogger(__name__)

MigrationStep = Callable[[dict], dict]

# Top-level fields that used to live outside the description block
LEGACY_DESCRIPTION_FIELDS = (
    "lore",
    "imageData",
    "imageMimeType",
    "faction",
    "role",
    "classification",
    "manufacturer",
    "commissioningDate",
)

# Document list key -> catalog category of its entries' typeId
TYPED_LIST_CATEGORIES: dict[str, CatalogCategory] = {
    "powerPlants": CatalogCategory.power_plant,
    "engines": CatalogCategory.engine,
    "ftlDrives": CatalogCategory.ftl_drive,
    "lifeSupport": CatalogCategory.life_support,
    "accommodations": CatalogCategory.accommodation,
    "storeSystems": CatalogCategory.store_system,
    "gravitySystems": CatalogCategory.gravity_system,
    "defenses": CatalogCategory.defense,
    "commandControl": CatalogCategory.command_control,
    "sensors": CatalogCategory.sensor,
    "hangarMisc": CatalogCategory.hangar_misc,
    "weapons": CatalogCategory.weapon,
    "launchSystems": CatalogCategory.launch_system,
}

# Fuel tank list key -> (parent reference field, parent category)
FUEL_TANK_FIELDS: dict[str, tuple[str, CatalogCategory]] = {
    "fuelTanks": ("forPowerPlantTypeId", CatalogCategory.power_plant),
    "engineFuelTanks": ("forEngineTypeId", CatalogCategory.engine),
    "ftlFuelTanks": ("forFTLDriveTypeId", CatalogCategory.ftl_drive),
}

ORDNANCE_REFERENCE_FIELDS = ("warheadId", "propulsionId", "guidanceId")

LAUNCH_BATTERY_PREFIX = "launch:"


def _map_entries(doc: dict, key: str, fn: Callable[[dict], dict]) -> dict:
    """Return a copy of `doc` with `fn` applied to each dict entry of doc[key]."""
    entries = doc.get(key)
    if not isinstance(entries, list):
        return doc
    result = dict(doc)
    result[key] = [fn(dict(entry)) if isinstance(entry, dict) else entry for entry in entries]
    return result


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

def rename_version_field(doc: dict) -> dict:
    if "version" not in doc:
        return doc
    result = dict(doc)
    legacy = result.pop("version")
    result.setdefault("schemaVersion", legacy)
    return result


def move_description_fields(doc: dict) -> dict:
    present = [key for key in LEGACY_DESCRIPTION_FIELDS if key in doc]
    if not present:
        return doc
    existing = doc.get("description")
    if existing is not None and not isinstance(existing, dict):
        return doc
    result = dict(doc)
    description = dict(existing or {})
    for key in present:
        value = result.pop(key)
        description.setdefault(key, value)
    result["description"] = description
    return result


def default_design_type(doc: dict) -> dict:
    if doc.get("designType") is not None:
        return doc
    return {**doc, "designType": "warship"}


def wrap_single_ftl_drive(doc: dict) -> dict:
    if "ftlDrive" not in doc:
        return doc
    result = dict(doc)
    legacy = result.pop("ftlDrive")
    if "ftlDrives" not in result:
        result["ftlDrives"] = [legacy] if legacy is not None else []
    return result


def rename_damage_zone_field(doc: dict) -> dict:
    if "damageDiagramZones" not in doc:
        return doc
    result = dict(doc)
    legacy = result.pop("damageDiagramZones")
    result.setdefault("damageZones", legacy)
    return result


def convert_single_armor_to_layers(doc: dict) -> dict:
    if "armor" not in doc:
        return doc
    result = dict(doc)
    legacy = result.pop("armor")
    if "armorLayers" in result:
        return result

    layers = []
    if isinstance(legacy, dict):
        type_ref = legacy.get("type", legacy.get("id"))
        if isinstance(type_ref, dict):
            type_ref = type_ref.get("id")
        if legacy.get("weight") is not None or type_ref is not None:
            layers.append({"weight": legacy.get("weight"), "typeId": type_ref})
    result["armorLayers"] = layers
    return result


def rename_launch_extra_capacity(doc: dict) -> dict:
    def fix(entry: dict) -> dict:
        if "extraCapacity" in entry:
            legacy = entry.pop("extraCapacity")
            entry.setdefault("extraHp", legacy)
        return entry

    entries = doc.get("launchSystems")
    if not isinstance(entries, list) or not any(
        isinstance(e, dict) and "extraCapacity" in e for e in entries
    ):
        return doc
    return _map_entries(doc, "launchSystems", fix)


def normalize_countermeasure_quantities(doc: dict, units_per_set: int) -> dict:
    """Convert raw countermeasure unit counts to whole sets, rounding down.

    Counts that are not finite numbers are left in place for the resolver
    to report.
    """
    entries = doc.get("defenses")
    if not isinstance(entries, list) or not any(
        isinstance(e, dict) and "countermeasureUnits" in e for e in entries
    ):
        return doc

    def fix(entry: dict) -> dict:
        units = entry.get("countermeasureUnits")
        if isinstance(units, (int, float)) and not isinstance(units, bool) and math.isfinite(units):
            del entry["countermeasureUnits"]
            entry["quantity"] = max(0, int(units) // units_per_set)
        return entry

    return _map_entries(doc, "defenses", fix)


def apply_id_renames(doc: dict, renames: dict[CatalogCategory, dict[str, str]]) -> dict:
    """Rewrite retired IDs wherever they are referenced.

    `renames` must already be collapsed (no chains), which keeps a single
    pass idempotent.
    """
    if not any(renames.values()):
        return doc

    def rename(category: CatalogCategory, value: object) -> object:
        if isinstance(value, str):
            return renames.get(category, {}).get(value, value)
        return value

    def rename_typed(category: CatalogCategory) -> Callable[[dict], dict]:
        def fix(entry: dict) -> dict:
            if "typeId" in entry:
                entry["typeId"] = rename(category, entry["typeId"])
            return entry
        return fix

    result = dict(doc)

    hull = result.get("hull")
    if isinstance(hull, dict) and "id" in hull:
        result["hull"] = {**hull, "id": rename(CatalogCategory.hull, hull["id"])}

    result = _map_entries(result, "armorLayers", rename_typed(CatalogCategory.armor))
    for key, category in TYPED_LIST_CATEGORIES.items():
        result = _map_entries(result, key, rename_typed(category))

    for key, (field_name, category) in FUEL_TANK_FIELDS.items():
        def fix_tank(entry: dict, field_name=field_name, category=category) -> dict:
            if field_name in entry:
                entry[field_name] = rename(category, entry[field_name])
            return entry
        result = _map_entries(result, key, fix_tank)

    def fix_ordnance(entry: dict) -> dict:
        for field_name in ORDNANCE_REFERENCE_FIELDS:
            if field_name in entry:
                entry[field_name] = rename(CatalogCategory.ordnance, entry[field_name])
        return entry
    result = _map_entries(result, "ordnanceDesigns", fix_ordnance)

    def fix_link(entry: dict) -> dict:
        key = entry.get("linkedWeaponBatteryKey")
        if isinstance(key, str):
            entry["linkedWeaponBatteryKey"] = rename_battery_key(key, renames)
        return entry
    result = _map_entries(result, "commandControl", fix_link)

    return result


def rename_battery_key(key: str, renames: dict[CatalogCategory, dict[str, str]]) -> str:
    if key.startswith(LAUNCH_BATTERY_PREFIX):
        launch_id = key[len(LAUNCH_BATTERY_PREFIX):]
        table = renames.get(CatalogCategory.launch_system, {})
        return LAUNCH_BATTERY_PREFIX + table.get(launch_id, launch_id)
    weapon_id, sep, mount = key.partition(":")
    table = renames.get(CatalogCategory.weapon, {})
    return table.get(weapon_id, weapon_id) + sep + mount


# ---------------------------------------------------------------------------
# Chain
# ---------------------------------------------------------------------------

class MigrationChain:
    """The fixed, ordered list of migration steps."""

    def __init__(
        self,
        renames: dict[CatalogCategory, dict[str, str]] | None = None,
        units_per_countermeasure_set: int = 4,
    ) -> None:
        if units_per_countermeasure_set < 1:
            raise ValueError("units_per_countermeasure_set must be at least 1")
        self.steps: list[tuple[str, MigrationStep]] = [
            ("rename_version_field", rename_version_field),
            ("move_description_fields", move_description_fields),
            ("default_design_type", default_design_type),
            ("wrap_single_ftl_drive", wrap_single_ftl_drive),
            ("rename_damage_zone_field", rename_damage_zone_field),
            ("convert_single_armor_to_layers", convert_single_armor_to_layers),
            ("rename_launch_extra_capacity", rename_launch_extra_capacity),
            (
                "normalize_countermeasure_quantities",
                partial(normalize_countermeasure_quantities, units_per_set=units_per_countermeasure_set),
            ),
            ("apply_id_renames", partial(apply_id_renames, renames=renames or {})),
        ]

    @classmethod
    def for_catalog(cls, catalog) -> MigrationChain:
        return cls(catalog.rename_table, catalog.units_per_countermeasure_set)

    @property
    def step_names(self) -> list[str]:
        return [name for name, _ in self.steps]

    def apply(self, doc: dict) -> dict:
        for name, step in self.steps:
            migrated = step(doc)
            if migrated != doc:
                logger.debug("Migration step %s changed the document", name)
            doc = migrated
        return doc
