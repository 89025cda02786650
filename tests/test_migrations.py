"""Tests for the migration chain.

Covers:
- Step order is fixed
- Each step converts its legacy shape and is a no-op on current data
- Every step, and the whole chain, is idempotent
- Input documents are never mutated
- Countermeasure unit counts round down to whole sets
- ID renames reach every reference, including battery keys
- Rename chains collapse and cycles are rejected
"""

import copy

import pytest

from shipyard.data.categories import CatalogCategory
from shipyard.data.renames import collapse_renames
from shipyard.services.migrations import (
    MigrationChain,
    apply_id_renames,
    convert_single_armor_to_layers,
    default_design_type,
    move_description_fields,
    normalize_countermeasure_quantities,
    rename_damage_zone_field,
    rename_launch_extra_capacity,
    rename_version_field,
    wrap_single_ftl_drive,
)


LEGACY_DOCUMENT = {
    "version": "1.0.0",
    "name": "Old Destroyer",
    "lore": "Veteran of the border wars.",
    "faction": "Old Republic",
    "description": {"faction": "Concord"},
    "hull": {"id": "escort"},
    "armor": {"weight": "medium", "type": "ablative"},
    "ftlDrive": {"id": "ftl-1", "typeId": "stardrive", "hullPoints": 6},
    "damageDiagramZones": [{"code": "F", "systems": []}],
    "defenses": [
        {"id": "def-1", "typeId": "chaff", "countermeasureUnits": 12},
        {"id": "def-2", "typeId": "jammer", "countermeasureUnits": 10},
        {"id": "def-3", "typeId": "damage-control", "quantity": 1},
    ],
    "weapons": [{"id": "wpn-1", "typeId": "light-laser", "mountType": "turret"}],
    "commandControl": [
        {"id": "cc-1", "typeId": "fire-control", "linkedWeaponBatteryKey": "laser-cannon:turret"},
        {"id": "cc-2", "typeId": "fire-control", "linkedWeaponBatteryKey": "launch:torpedo-tube"},
    ],
    "launchSystems": [{"id": "launch-1", "typeId": "torpedo-tube", "extraCapacity": 2}],
    "ordnanceDesigns": [
        {"id": "ord-1", "category": "missile", "size": "light", "warheadId": "he-warhead"}
    ],
    "fuelTanks": [{"id": "fuel-1", "forPowerPlantTypeId": "fusion", "hullPoints": 2}],
    "powerPlants": [{"id": "pp-1", "typeId": "fusion", "hullPoints": 6}],
}

RENAMES = {
    CatalogCategory.hull: {"escort": "corvette"},
    CatalogCategory.power_plant: {"fusion": "fusion-reactor"},
    CatalogCategory.weapon: {"light-laser": "laser", "laser-cannon": "laser"},
    CatalogCategory.launch_system: {"torpedo-tube": "missile-tube"},
    CatalogCategory.ordnance: {"he-warhead": "high-explosive"},
    CatalogCategory.armor: {"ablative": "ablative-plate"},
}


@pytest.fixture
def chain() -> MigrationChain:
    return MigrationChain(RENAMES, units_per_countermeasure_set=4)


@pytest.fixture
def legacy() -> dict:
    return copy.deepcopy(LEGACY_DOCUMENT)


# ---------------------------------------------------------------------------
# Chain
# ---------------------------------------------------------------------------

class TestChainOrder:
    def test_step_order_is_pinned(self, chain):
        assert chain.step_names == [
            "rename_version_field",
            "move_description_fields",
            "default_design_type",
            "wrap_single_ftl_drive",
            "rename_damage_zone_field",
            "convert_single_armor_to_layers",
            "rename_launch_extra_capacity",
            "normalize_countermeasure_quantities",
            "apply_id_renames",
        ]

    def test_field_introducing_steps_run_before_renames(self, chain):
        names = chain.step_names
        assert names.index("wrap_single_ftl_drive") < names.index("apply_id_renames")
        assert names.index("convert_single_armor_to_layers") < names.index("apply_id_renames")

    def test_rejects_zero_packaging_ratio(self):
        with pytest.raises(ValueError):
            MigrationChain(units_per_countermeasure_set=0)


class TestChainIdempotence:
    def test_chain_applied_twice_equals_once(self, chain, legacy):
        once = chain.apply(legacy)
        assert chain.apply(once) == once

    def test_every_step_is_idempotent(self, chain, legacy):
        for name, step in chain.steps:
            once = step(legacy)
            assert step(once) == once, f"{name} is not idempotent"

    def test_every_step_tolerates_empty_document(self, chain):
        for name, step in chain.steps:
            assert step({}) is not None, name

    def test_input_is_not_mutated(self, chain, legacy):
        chain.apply(legacy)
        assert legacy == LEGACY_DOCUMENT

    def test_current_document_passes_through(self, chain, sample_document):
        assert chain.apply(sample_document) == sample_document

    def test_full_legacy_conversion(self, chain, legacy):
        doc = chain.apply(legacy)
        assert doc["schemaVersion"] == "1.0.0"
        assert "version" not in doc
        assert doc["designType"] == "warship"
        assert doc["hull"] == {"id": "corvette"}
        assert doc["armorLayers"] == [{"weight": "medium", "typeId": "ablative-plate"}]
        assert doc["ftlDrives"][0]["typeId"] == "stardrive"
        assert doc["damageZones"] == [{"code": "F", "systems": []}]


# ---------------------------------------------------------------------------
# Individual steps
# ---------------------------------------------------------------------------

class TestStructuralSteps:
    def test_rename_version_field(self):
        assert rename_version_field({"version": "1.1.0"}) == {"schemaVersion": "1.1.0"}

    def test_rename_version_field_keeps_current_value(self):
        doc = rename_version_field({"version": "0.9.0", "schemaVersion": "1.1.0"})
        assert doc == {"schemaVersion": "1.1.0"}

    def test_move_description_fields_existing_keys_win(self, legacy):
        doc = move_description_fields(legacy)
        assert doc["description"] == {
            "faction": "Concord",
            "lore": "Veteran of the border wars.",
        }
        assert "lore" not in doc
        assert "faction" not in doc

    def test_move_description_fields_creates_description(self):
        doc = move_description_fields({"role": "Escort"})
        assert doc == {"description": {"role": "Escort"}}

    def test_move_description_fields_keeps_non_object_description(self):
        doc = {"description": "A plain note", "role": "Escort"}
        assert move_description_fields(doc) is doc

    def test_default_design_type(self):
        assert default_design_type({})["designType"] == "warship"
        assert default_design_type({"designType": "station"})["designType"] == "station"

    def test_wrap_single_ftl_drive(self):
        doc = wrap_single_ftl_drive({"ftlDrive": {"typeId": "jump-drive"}})
        assert doc == {"ftlDrives": [{"typeId": "jump-drive"}]}

    def test_wrap_null_ftl_drive(self):
        assert wrap_single_ftl_drive({"ftlDrive": None}) == {"ftlDrives": []}

    def test_wrap_ftl_drive_noop_when_list_exists(self):
        doc = wrap_single_ftl_drive({"ftlDrive": {"typeId": "x"}, "ftlDrives": []})
        assert doc == {"ftlDrives": []}

    def test_rename_damage_zone_field(self):
        doc = rename_damage_zone_field({"damageDiagramZones": []})
        assert doc == {"damageZones": []}

    def test_rename_launch_extra_capacity(self):
        doc = rename_launch_extra_capacity({"launchSystems": [{"typeId": "x", "extraCapacity": 3}]})
        assert doc == {"launchSystems": [{"typeId": "x", "extraHp": 3}]}


class TestArmorConversion:
    def test_single_armor_with_type(self):
        doc = convert_single_armor_to_layers({"armor": {"weight": "medium", "type": "ablative"}})
        assert doc == {"armorLayers": [{"weight": "medium", "typeId": "ablative"}]}

    def test_single_armor_with_id(self):
        doc = convert_single_armor_to_layers({"armor": {"weight": "heavy", "id": "alloy"}})
        assert doc == {"armorLayers": [{"weight": "heavy", "typeId": "alloy"}]}

    def test_single_armor_with_nested_type(self):
        doc = convert_single_armor_to_layers({"armor": {"weight": "light", "type": {"id": "alloy"}}})
        assert doc["armorLayers"] == [{"weight": "light", "typeId": "alloy"}]

    def test_null_armor_becomes_empty_layers(self):
        assert convert_single_armor_to_layers({"armor": None}) == {"armorLayers": []}

    def test_noop_when_layers_exist(self):
        layers = [{"weight": "light", "typeId": "polymeric"}]
        doc = convert_single_armor_to_layers(
            {"armor": {"weight": "heavy", "type": "alloy"}, "armorLayers": layers}
        )
        assert doc == {"armorLayers": layers}


class TestCountermeasureNormalization:
    def test_twelve_units_make_three_sets(self):
        doc = normalize_countermeasure_quantities(
            {"defenses": [{"typeId": "chaff", "countermeasureUnits": 12}]}, units_per_set=4
        )
        assert doc["defenses"] == [{"typeId": "chaff", "quantity": 3}]

    def test_ten_units_round_down(self):
        doc = normalize_countermeasure_quantities(
            {"defenses": [{"typeId": "chaff", "countermeasureUnits": 10}]}, units_per_set=4
        )
        assert doc["defenses"][0]["quantity"] == 2

    def test_raw_units_override_stale_quantity(self):
        doc = normalize_countermeasure_quantities(
            {"defenses": [{"typeId": "chaff", "quantity": 12, "countermeasureUnits": 12}]},
            units_per_set=4,
        )
        assert doc["defenses"][0] == {"typeId": "chaff", "quantity": 3}

    def test_set_counts_untouched(self):
        doc = {"defenses": [{"typeId": "chaff", "quantity": 3}]}
        assert normalize_countermeasure_quantities(doc, units_per_set=4) is doc

    def test_absent_defenses(self):
        assert normalize_countermeasure_quantities({}, units_per_set=4) == {}

    @pytest.mark.parametrize("units", ["12", None, float("nan"), float("inf")])
    def test_unreadable_units_left_in_place(self, units):
        doc = normalize_countermeasure_quantities(
            {"defenses": [{"typeId": "chaff", "quantity": 1, "countermeasureUnits": units}]},
            units_per_set=4,
        )
        assert doc["defenses"][0]["quantity"] == 1
        assert "countermeasureUnits" in doc["defenses"][0]


class TestIdRenames:
    def test_renames_every_reference(self, chain, legacy):
        doc = chain.apply(legacy)
        assert doc["weapons"][0]["typeId"] == "laser"
        assert doc["launchSystems"][0]["typeId"] == "missile-tube"
        assert doc["ordnanceDesigns"][0]["warheadId"] == "high-explosive"
        assert doc["fuelTanks"][0]["forPowerPlantTypeId"] == "fusion-reactor"
        assert doc["powerPlants"][0]["typeId"] == "fusion-reactor"

    def test_renames_battery_keys(self, chain, legacy):
        doc = chain.apply(legacy)
        keys = [cc["linkedWeaponBatteryKey"] for cc in doc["commandControl"]]
        assert keys == ["laser:turret", "launch:missile-tube"]

    def test_unknown_ids_pass_through(self):
        doc = apply_id_renames({"weapons": [{"typeId": "mystery-gun"}]}, RENAMES)
        assert doc["weapons"][0]["typeId"] == "mystery-gun"

    def test_ids_are_renamed_only_in_their_own_category(self):
        doc = apply_id_renames({"sensors": [{"typeId": "light-laser"}]}, RENAMES)
        assert doc["sensors"][0]["typeId"] == "light-laser"


class TestRenameTables:
    def test_chains_collapse(self):
        assert collapse_renames({"a": "b", "b": "c"}) == {"a": "c", "b": "c"}

    def test_longer_chain(self):
        assert collapse_renames({"a": "b", "b": "c", "c": "d"})["a"] == "d"

    def test_cycle_rejected(self):
        with pytest.raises(ValueError):
            collapse_renames({"a": "b", "b": "a"})

    def test_self_rename_rejected(self):
        with pytest.raises(ValueError):
            collapse_renames({"a": "a"})

    def test_collapsed_table_keeps_single_pass_idempotent(self):
        renames = {CatalogCategory.weapon: collapse_renames({"a": "b", "b": "c"})}
        doc = {"weapons": [{"typeId": "a"}]}
        once = apply_id_renames(doc, renames)
        assert once["weapons"][0]["typeId"] == "c"
        assert apply_id_renames(once, renames) == once
