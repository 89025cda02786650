"""Catalog categories and the labels used when reporting on them.

Every subsystem type definition in the catalog belongs to exactly one
category.  Saved designs reference catalog entries by (category, id).
"""

import enum


class CatalogCategory(str, enum.Enum):
    hull = "hull"
    armor = "armor"
    power_plant = "power_plant"
    engine = "engine"
    ftl_drive = "ftl_drive"
    life_support = "life_support"
    accommodation = "accommodation"
    store_system = "store_system"
    gravity_system = "gravity_system"
    defense = "defense"
    command_control = "command_control"
    sensor = "sensor"
    hangar_misc = "hangar_misc"
    weapon = "weapon"
    launch_system = "launch_system"
    ordnance = "ordnance"
    damage_zone = "damage_zone"


# Human-readable prefixes for load warnings ("sensor: could not find ...")
CATEGORY_LABELS: dict[CatalogCategory, str] = {
    CatalogCategory.hull: "hull",
    CatalogCategory.armor: "armor",
    CatalogCategory.power_plant: "power plant",
    CatalogCategory.engine: "engine",
    CatalogCategory.ftl_drive: "FTL drive",
    CatalogCategory.life_support: "life support",
    CatalogCategory.accommodation: "accommodation",
    CatalogCategory.store_system: "store system",
    CatalogCategory.gravity_system: "gravity system",
    CatalogCategory.defense: "defense",
    CatalogCategory.command_control: "command/control",
    CatalogCategory.sensor: "sensor",
    CatalogCategory.hangar_misc: "hangar/misc",
    CatalogCategory.weapon: "weapon",
    CatalogCategory.launch_system: "launch system",
    CatalogCategory.ordnance: "ordnance",
    CatalogCategory.damage_zone: "damage zones",
}


def category_label(category: CatalogCategory) -> str:
    return CATEGORY_LABELS[category]
