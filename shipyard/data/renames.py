"""Built-in ID rename tables.

Catalog entries are occasionally renamed between releases.  Saved designs
keep the old ID, so every load rewrites retired IDs to their current ones
before anything is looked up.  Mods may contribute further renames.

Tables map old ID -> new ID per category.  Chains (a -> b, b -> c) are
allowed in the raw tables and collapsed by `collapse_renames`.
"""

from __future__ import annotations

from shipyard.data.categories import CatalogCategory

BUILTIN_RENAMES: dict[CatalogCategory, dict[str, str]] = {
    CatalogCategory.hull: {
        "escort": "corvette",
        "cruiser": "light-cruiser",
    },
    CatalogCategory.armor: {
        "ceramic": "cerametal",
    },
    CatalogCategory.power_plant: {
        "fusion": "fusion-reactor",
        "fission": "fission-reactor",
    },
    CatalogCategory.engine: {
        "ion-drive": "ion-engine",
    },
    CatalogCategory.sensor: {
        "radar-mk1": "radar",
    },
    CatalogCategory.weapon: {
        "light-laser": "laser-cannon",
        "laser-cannon": "laser",
        "gauss-gun": "mass-driver",
    },
    CatalogCategory.launch_system: {
        "torpedo-tube": "missile-tube",
    },
    CatalogCategory.ordnance: {
        "he-warhead": "high-explosive",
    },
}


def collapse_renames(table: dict[str, str]) -> dict[str, str]:
    """Resolve every chain in a rename table to its final ID.

    Raises ValueError when the table contains a cycle.
    """
    collapsed: dict[str, str] = {}
    for old_id in table:
        seen = {old_id}
        target = table[old_id]
        while target in table:
            if target in seen:
                raise ValueError(f"Rename cycle involving '{old_id}'")
            seen.add(target)
            target = table[target]
        if target != old_id:
            collapsed[old_id] = target
    return collapsed
