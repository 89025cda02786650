"""Tests for the save serializer.

Covers:
- Saving always writes the current schema version and current shapes
- Save then load reproduces the same design
- Optional fields are omitted when unset
- Description and timestamps pass through untouched
- Bomb/mine casings are not written
"""

import json

from shipyard.services.design_loader import load, save
from shipyard.services.serializer import to_document
from shipyard.services.version_gate import CURRENT_SCHEMA_VERSION


LEGACY_FIELDS = ("version", "armor", "ftlDrive", "damageDiagramZones", "lore", "faction")


def _loaded(doc, catalog):
    result = load(json.dumps(doc), catalog)
    assert result.success, result.message
    return result.state


class TestSave:
    def test_writes_current_version(self, catalog, sample_document):
        sample_document["schemaVersion"] = "1.0.0"
        doc = to_document(_loaded(sample_document, catalog))
        assert doc["schemaVersion"] == CURRENT_SCHEMA_VERSION

    def test_round_trip(self, catalog, sample_text):
        first = load(sample_text, catalog).state
        second = load(save(first), catalog)
        assert second.warnings == []
        assert second.state == first

    def test_legacy_document_saved_in_current_shape(self, catalog, sample_document):
        del sample_document["schemaVersion"]
        del sample_document["armorLayers"]
        sample_document.update(
            version="0.9.0",
            armor={"weight": "light", "type": "polymeric"},
            ftlDrive=None,
            damageDiagramZones=[],
            lore="Old lore",
        )
        doc = to_document(_loaded(sample_document, catalog))
        for field in LEGACY_FIELDS:
            assert field not in doc, field
        assert doc["armorLayers"] == [{"weight": "light", "typeId": "polymeric"}]
        assert doc["description"]["lore"] == "A reliable escort."
        assert doc["ftlDrives"] == []

    def test_key_order(self, catalog, sample_text):
        doc = to_document(load(sample_text, catalog).state)
        keys = list(doc)
        assert keys[:2] == ["schemaVersion", "name"]
        assert keys.index("hull") < keys.index("armorLayers") < keys.index("damageZones")
        assert keys[-1] == "hitLocationChart"

    def test_no_derived_values_written(self, catalog, sample_text):
        doc = to_document(load(sample_text, catalog).state)
        assert "cost" not in doc["weapons"][0]
        assert "hullPoints" not in doc["weapons"][0]
        assert doc["powerPlants"][0] == {"id": "pp-1", "typeId": "fusion-reactor", "hullPoints": 6}

    def test_links_written(self, catalog, sample_text):
        doc = to_document(load(sample_text, catalog).state)
        by_id = {cc["id"]: cc for cc in doc["commandControl"]}
        assert by_id["cc-2"]["linkedWeaponBatteryKey"] == "laser:turret"
        assert by_id["cc-3"]["linkedSensorId"] == "sensor-1"
        assert "linkedWeaponBatteryKey" not in by_id["cc-1"]
        assert "linkedSensorId" not in by_id["cc-1"]


class TestOptionalFields:
    def test_unset_fields_omitted(self, catalog, sample_document):
        for key in ("createdAt", "modifiedAt"):
            del sample_document[key]
        doc = to_document(_loaded(sample_document, catalog))
        assert "createdAt" not in doc
        assert "modifiedAt" not in doc
        assert "stationType" not in doc
        assert "designProgressLevel" not in doc

    def test_metadata_passes_through(self, catalog, sample_document):
        sample_document["description"]["imageData"] = "data:image/png;base64,AAAA"
        sample_document["designProgressLevel"] = 7
        doc = to_document(_loaded(sample_document, catalog))
        assert doc["description"] == sample_document["description"]
        assert doc["createdAt"] == "2025-01-01T00:00:00Z"
        assert doc["modifiedAt"] == "2025-02-01T00:00:00Z"
        assert doc["designProgressLevel"] == 7

    def test_bomb_casing_not_written(self, catalog, sample_document):
        sample_document["ordnanceDesigns"].append(
            {"id": "ord-2", "name": "Anvil", "category": "bomb", "size": "medium", "warheadId": "shaped-charge"}
        )
        doc = to_document(_loaded(sample_document, catalog))
        bomb = next(d for d in doc["ordnanceDesigns"] if d["id"] == "ord-2")
        assert bomb == {
            "id": "ord-2",
            "name": "Anvil",
            "category": "bomb",
            "size": "medium",
            "warheadId": "shaped-charge",
        }
        missile = next(d for d in doc["ordnanceDesigns"] if d["id"] == "ord-1")
        assert missile["propulsionId"] == "solid-rocket"

    def test_serialize_is_readable_json(self, catalog, sample_text):
        text = save(load(sample_text, catalog).state)
        assert text.startswith("{\n  ")
        assert json.loads(text)["name"] == "Test Frigate"
