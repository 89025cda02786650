"""Tests for the catalog service and the built-in data.

Covers:
- Every category has built-in entries with unique ids
- find_by_id / get_all behaviour
- Built-in rename tables are collapsed
- Mod overlays: add mode, replace mode, priority ordering
- Invalid overlay entries are skipped and logged
- Mod renames extend the tables; cycles are rejected
- Per-subsystem formula helpers
"""

import logging

import pytest

from shipyard.data.armor import ArmorWeight, calculate_armor_cost, calculate_armor_hull_points
from shipyard.data.categories import CatalogCategory, category_label
from shipyard.data.command_control import calculate_command_control_hull_points
from shipyard.data.hulls import HullSize
from shipyard.data.sensors import calculate_tracking_capability
from shipyard.data.weapons import (
    GunConfiguration,
    MountType,
    WeaponType,
    battery_key,
    calculate_weapon_hull_points,
)
from shipyard.services.catalog import Catalog, ModOverlay, parse_category
from shipyard.services.design_state import SavedModReference


PLASMA_LANCE = {
    "id": "plasma-lance",
    "name": "Plasma Lance",
    "category": "beam",
    "progressLevel": 8,
    "firepower": "H",
    "hullPoints": 6,
    "powerRequired": 5,
    "cost": 3_000_000,
}


# ---------------------------------------------------------------------------
# Built-in data
# ---------------------------------------------------------------------------

class TestBuiltinCatalog:
    def test_every_category_has_entries(self, catalog):
        for category in CatalogCategory:
            assert catalog.get_all(category), f"No built-in entries for {category.value}"

    def test_ids_unique_per_category(self, catalog):
        for category in CatalogCategory:
            ids = [entry.id for entry in catalog.get_all(category)]
            assert len(ids) == len(set(ids)), category.value

    def test_find_by_id(self, catalog):
        hull = catalog.find_by_id(CatalogCategory.hull, "destroyer")
        assert hull.size_class == HullSize.medium

    def test_find_unknown_returns_none(self, catalog):
        assert catalog.find_by_id(CatalogCategory.weapon, "nonexistent") is None
        assert catalog.find_by_id(CatalogCategory.weapon, None) is None

    def test_get_all_returns_a_copy(self, catalog):
        catalog.get_all(CatalogCategory.weapon).clear()
        assert catalog.get_all(CatalogCategory.weapon)

    def test_builtin_rename_chain_collapsed(self, catalog):
        assert catalog.rename_table[CatalogCategory.weapon]["light-laser"] == "laser"

    def test_packaging_ratio_defaults_from_settings(self):
        assert Catalog.builtin().units_per_countermeasure_set == 4

    def test_no_active_mods(self, catalog):
        assert catalog.active_mods == ()

    def test_category_labels(self):
        assert category_label(CatalogCategory.command_control) == "command/control"
        assert category_label(CatalogCategory.hangar_misc) == "hangar/misc"

    def test_parse_category_accepts_hyphens(self):
        assert parse_category("power-plant") == CatalogCategory.power_plant
        with pytest.raises(ValueError):
            parse_category("warp-core")


# ---------------------------------------------------------------------------
# Overlays
# ---------------------------------------------------------------------------

class TestOverlays:
    def test_add_mode_appends_entry(self, catalog):
        merged = catalog.with_overlays([ModOverlay(name="lances", files={"weapon": [PLASMA_LANCE]})])
        lance = merged.find_by_id(CatalogCategory.weapon, "plasma-lance")
        assert isinstance(lance, WeaponType)
        assert lance.hull_points == 6
        assert merged.find_by_id(CatalogCategory.weapon, "laser") is not None

    def test_original_catalog_unchanged(self, catalog):
        catalog.with_overlays([ModOverlay(name="lances", files={"weapon": [PLASMA_LANCE]})])
        assert catalog.find_by_id(CatalogCategory.weapon, "plasma-lance") is None

    def test_add_mode_overrides_same_id(self, catalog):
        cheap_laser = {**PLASMA_LANCE, "id": "laser", "name": "Cheap Laser", "cost": 1}
        merged = catalog.with_overlays([ModOverlay(name="cheap", files={"weapon": [cheap_laser]})])
        assert merged.find_by_id(CatalogCategory.weapon, "laser").cost == 1

    def test_higher_priority_wins(self, catalog):
        low = ModOverlay(name="low", priority=1, files={"weapon": [{**PLASMA_LANCE, "cost": 1}]})
        high = ModOverlay(name="high", priority=5, files={"weapon": [{**PLASMA_LANCE, "cost": 2}]})
        for overlays in ([low, high], [high, low]):
            merged = catalog.with_overlays(overlays)
            assert merged.find_by_id(CatalogCategory.weapon, "plasma-lance").cost == 2

    def test_replace_mode_drops_builtins(self, catalog):
        merged = catalog.with_overlays([
            ModOverlay(
                name="only-lances",
                files={"weapon": [PLASMA_LANCE]},
                file_modes={"weapon": "replace"},
            )
        ])
        assert [w.id for w in merged.get_all(CatalogCategory.weapon)] == ["plasma-lance"]
        assert merged.find_by_id(CatalogCategory.sensor, "radar") is not None

    def test_invalid_entry_skipped_and_logged(self, catalog, caplog):
        broken = {"id": "broken-gun", "name": "Broken"}
        with caplog.at_level(logging.WARNING, logger="shipyard.services.catalog"):
            merged = catalog.with_overlays(
                [ModOverlay(name="broken", files={"weapon": [broken, PLASMA_LANCE]})]
            )
        assert merged.find_by_id(CatalogCategory.weapon, "broken-gun") is None
        assert merged.find_by_id(CatalogCategory.weapon, "plasma-lance") is not None
        assert "invalid weapon entry skipped" in caplog.text

    def test_unknown_category_skipped(self, catalog):
        merged = catalog.with_overlays([ModOverlay(name="odd", files={"warp-core": [{"id": "x"}]})])
        assert merged.get_all(CatalogCategory.weapon) == catalog.get_all(CatalogCategory.weapon)

    def test_active_mods_recorded(self, catalog):
        merged = catalog.with_overlays([ModOverlay(name="lances", version="2.1.0")])
        assert merged.active_mods == (SavedModReference(name="lances", version="2.1.0"),)

    def test_mod_renames_extend_tables(self, catalog):
        merged = catalog.with_overlays(
            [ModOverlay(name="r", renames={"sensor": {"old-radar": "radar-mk1"}})]
        )
        # radar-mk1 is itself renamed to radar by the built-in table
        assert merged.rename_table[CatalogCategory.sensor]["old-radar"] == "radar"

    def test_mod_rename_cycle_rejected(self, catalog):
        with pytest.raises(ValueError):
            catalog.with_overlays([ModOverlay(name="loop", renames={"weapon": {"laser": "light-laser"}})])

    def test_damage_zone_layout_overlay(self, catalog):
        layout = {
            "id": "light-6",
            "name": "Light Ship (6 zones)",
            "sizeClass": "light",
            "zones": ["F", "FC", "P", "S", "AC", "A"],
            "hitDie": 8,
        }
        merged = catalog.with_overlays([
            ModOverlay(name="zones", files={"damage_zone": [layout]}, file_modes={"damage_zone": "replace"})
        ])
        [entry] = merged.get_all(CatalogCategory.damage_zone)
        assert entry.zones == ("F", "FC", "P", "S", "AC", "A")

    @pytest.mark.parametrize("overrides", [{"zones": []}, {"hitDie": 0}, {"hitDie": -4}])
    def test_unusable_damage_zone_layout_skipped(self, catalog, caplog, overrides):
        layout = {"id": "light", "name": "Empty", "sizeClass": "light",
                  "zones": ["F", "A"], "hitDie": 8, **overrides}
        with caplog.at_level(logging.WARNING, logger="shipyard.services.catalog"):
            merged = catalog.with_overlays([ModOverlay(name="zones", files={"damage_zone": [layout]})])
        entry = merged.find_by_id(CatalogCategory.damage_zone, "light")
        assert entry.zones == ("F", "FC", "AC", "A")
        assert entry.hit_die == 8
        assert "invalid damage_zone entry skipped" in caplog.text


# ---------------------------------------------------------------------------
# Formula helpers
# ---------------------------------------------------------------------------

class TestFormulas:
    @pytest.mark.parametrize("level, quality, quantity, expected", [
        (6, None, 1, 5),
        (6, "Ordinary", 3, 30),
        (7, "Amazing", 5, -1),
        (8, "none", 1, 20),
        (None, "Good", 2, 80),
        (3, "Ordinary", 1, 10),
        (12, "none", 1, 40),
        (6, "Legendary", 2, 10),
    ])
    def test_tracking_capability(self, level, quality, quantity, expected):
        assert calculate_tracking_capability(level, quality, quantity) == expected

    def test_armor_hull_points_and_cost(self, catalog):
        hull = catalog.find_by_id(CatalogCategory.hull, "frigate")
        alloy = catalog.find_by_id(CatalogCategory.armor, "alloy")
        assert calculate_armor_hull_points(hull, ArmorWeight.medium) == 6
        assert calculate_armor_cost(hull, ArmorWeight.medium, alloy) == 6 * 20_000

    def test_light_armor_pays_for_one_hull_point(self, catalog):
        hull = catalog.find_by_id(CatalogCategory.hull, "frigate")
        alloy = catalog.find_by_id(CatalogCategory.armor, "alloy")
        assert calculate_armor_hull_points(hull, ArmorWeight.light) == 0
        assert calculate_armor_cost(hull, ArmorWeight.light, alloy) == 20_000

    def test_weapon_hull_points_round_up(self, catalog):
        laser = catalog.find_by_id(CatalogCategory.weapon, "laser")
        assert calculate_weapon_hull_points(laser, MountType.turret, GunConfiguration.twin, False) == 4
        assert calculate_weapon_hull_points(laser, MountType.standard, GunConfiguration.single, True) == 3

    def test_battery_key(self):
        assert battery_key("laser", MountType.turret) == "laser:turret"
        assert battery_key("laser", "fixed") == "laser:fixed"

    def test_command_deck_scales_with_ship(self, catalog):
        deck = catalog.find_by_id(CatalogCategory.command_control, "command-deck")
        assert calculate_command_control_hull_points(deck, 120, 1) == 2 + 2
        assert calculate_command_control_hull_points(deck, 3200, 1) == 10
