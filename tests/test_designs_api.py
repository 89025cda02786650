"""Tests for the design and catalog HTTP endpoints.

Covers:
- Health check
- POST /designs/load: success with summary, warnings, fatal errors in body
- POST /designs/upgrade: current document or 422
- GET /catalog and GET /catalog/{category}
- Enabled mods change what a design can resolve
"""

import json

from httpx import AsyncClient


# ---- health -----------------------------------------------------------------

class TestHealth:
    async def test_health(self, client: AsyncClient):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


# ---- load -------------------------------------------------------------------

class TestLoadEndpoint:
    async def test_load_sample(self, db_client: AsyncClient, sample_text):
        resp = await db_client.post("/designs/load", json={"document": sample_text})
        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is True
        assert data["warnings"] == []
        assert data["errorKind"] is None
        assert data["summary"]["hullId"] == "frigate"
        assert data["summary"]["hullPointsAvailable"] == 126
        assert data["summary"]["powerGenerated"] == 12
        assert json.loads(data["document"])["schemaVersion"] == "1.2.0"

    async def test_load_reports_warnings(self, db_client: AsyncClient, sample_document):
        sample_document["sensors"].append({"id": "sensor-9", "typeId": "x-ray"})
        resp = await db_client.post("/designs/load", json={"document": json.dumps(sample_document)})
        data = resp.json()
        assert data["success"] is True
        assert data["warnings"] == ["sensor: could not find type 'x-ray', entry removed"]

    async def test_load_parse_failure(self, db_client: AsyncClient):
        resp = await db_client.post("/designs/load", json={"document": "not json"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is False
        assert data["errorKind"] == "parse"
        assert data["summary"] is None
        assert data["document"] is None

    async def test_load_missing_hull(self, db_client: AsyncClient, sample_document):
        del sample_document["hull"]
        resp = await db_client.post("/designs/load", json={"document": json.dumps(sample_document)})
        assert resp.json()["errorKind"] == "missing-hull"

    async def test_load_requires_document(self, db_client: AsyncClient):
        resp = await db_client.post("/designs/load", json={})
        assert resp.status_code == 422


# ---- upgrade ----------------------------------------------------------------

class TestUpgradeEndpoint:
    async def test_upgrade_legacy_document(self, db_client: AsyncClient, sample_document):
        del sample_document["schemaVersion"]
        del sample_document["armorLayers"]
        sample_document["version"] = "1.0.0"
        sample_document["armor"] = {"weight": "medium", "type": "alloy"}
        resp = await db_client.post("/designs/upgrade", json={"document": json.dumps(sample_document)})
        assert resp.status_code == 200
        doc = json.loads(resp.json()["document"])
        assert doc["schemaVersion"] == "1.2.0"
        assert "version" not in doc
        assert "armor" not in doc
        assert doc["armorLayers"] == [{"weight": "medium", "typeId": "alloy"}]

    async def test_upgrade_newer_major(self, db_client: AsyncClient, sample_document):
        sample_document["schemaVersion"] = "2.0.0"
        resp = await db_client.post("/designs/upgrade", json={"document": json.dumps(sample_document)})
        assert resp.status_code == 422
        assert resp.json()["detail"]["errorKind"] == "version"


# ---- catalog ----------------------------------------------------------------

class TestCatalogEndpoints:
    async def test_list_categories(self, db_client: AsyncClient):
        resp = await db_client.get("/catalog")
        assert resp.status_code == 200
        data = {c["category"]: c for c in resp.json()}
        assert data["weapon"]["label"] == "weapon"
        assert data["command_control"]["label"] == "command/control"
        assert data["damage_zone"]["count"] == 6

    async def test_list_entries(self, db_client: AsyncClient):
        resp = await db_client.get("/catalog/weapon")
        assert resp.status_code == 200
        entries = {e["id"]: e for e in resp.json()["entries"]}
        assert entries["laser"]["hull_points"] == 2
        assert entries["laser"]["category"] == "beam"

    async def test_hyphenated_category(self, db_client: AsyncClient):
        resp = await db_client.get("/catalog/power-plant")
        assert resp.status_code == 200
        assert resp.json()["category"] == "power_plant"

    async def test_unknown_category(self, db_client: AsyncClient):
        resp = await db_client.get("/catalog/warp-core")
        assert resp.status_code == 404


# ---- mods and designs -------------------------------------------------------

class TestModdedDesigns:
    async def test_mod_weapon_becomes_usable(self, db_client: AsyncClient, sample_document):
        sample_document["weapons"].append({"id": "wpn-2", "typeId": "plasma-lance", "quantity": 1})
        body = {"document": json.dumps(sample_document)}

        resp = await db_client.post("/designs/load", json=body)
        assert resp.json()["warnings"] == ["weapon: could not find type 'plasma-lance', entry removed"]

        lance = {
            "id": "plasma-lance",
            "name": "Plasma Lance",
            "category": "beam",
            "progressLevel": 8,
            "firepower": "H",
            "hullPoints": 6,
            "powerRequired": 5,
            "cost": 3_000_000,
        }
        resp = await db_client.post("/mods", json={"name": "lances", "files": {"weapon": [lance]}})
        assert resp.status_code == 201

        resp = await db_client.post("/designs/load", json=body)
        data = resp.json()
        assert data["warnings"] == []
        saved = json.loads(data["document"])
        assert saved["mods"] == [{"name": "lances", "version": "1.0.0"}]
        assert [w["typeId"] for w in saved["weapons"]] == ["laser", "plasma-lance"]
