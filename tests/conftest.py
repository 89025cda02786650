import copy
import json
import os
import tempfile

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from shipyard.database import get_db
from shipyard.main import app
from shipyard.models.base import Base
from shipyard.services.catalog import Catalog


# A current-shape frigate touching most categories; loads with no warnings
SAMPLE_DESIGN = {
    "schemaVersion": "1.2.0",
    "name": "Test Frigate",
    "createdAt": "2025-01-01T00:00:00Z",
    "modifiedAt": "2025-02-01T00:00:00Z",
    "description": {"faction": "Concord", "lore": "A reliable escort."},
    "designType": "warship",
    "hull": {"id": "frigate"},
    "armorLayers": [{"weight": "medium", "typeId": "alloy"}],
    "powerPlants": [{"id": "pp-1", "typeId": "fusion-reactor", "hullPoints": 6}],
    "fuelTanks": [{"id": "fuel-1", "forPowerPlantTypeId": "fusion-reactor", "hullPoints": 2}],
    "engines": [{"id": "eng-1", "typeId": "ion-engine", "hullPoints": 10}],
    "lifeSupport": [{"id": "ls-1", "typeId": "life-support-basic", "quantity": 2}],
    "accommodations": [{"id": "acc-1", "typeId": "crew-quarters", "quantity": 10}],
    "defenses": [{"id": "def-1", "typeId": "chaff", "quantity": 2}],
    "commandControl": [
        {"id": "cc-1", "typeId": "command-deck", "quantity": 1},
        {
            "id": "cc-2",
            "typeId": "fire-control",
            "quantity": 1,
            "linkedWeaponBatteryKey": "laser:turret",
        },
        {"id": "cc-3", "typeId": "sensor-control", "quantity": 1, "linkedSensorId": "sensor-1"},
    ],
    "sensors": [{"id": "sensor-1", "typeId": "radar", "quantity": 1}],
    "weapons": [
        {
            "id": "wpn-1",
            "typeId": "laser",
            "mountType": "turret",
            "gunConfiguration": "twin",
            "concealed": False,
            "quantity": 2,
            "arcs": ["forward", "port"],
        }
    ],
    "ordnanceDesigns": [
        {
            "id": "ord-1",
            "name": "Viper",
            "category": "missile",
            "size": "light",
            "warheadId": "high-explosive",
            "propulsionId": "solid-rocket",
            "guidanceId": "inertial-guidance",
        }
    ],
    "launchSystems": [
        {
            "id": "launch-1",
            "typeId": "missile-rack",
            "quantity": 1,
            "extraHp": 0,
            "loadout": [{"designId": "ord-1", "quantity": 2}],
        }
    ],
}


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.builtin(units_per_countermeasure_set=4)


@pytest.fixture
def sample_document() -> dict:
    """A fresh deep copy of SAMPLE_DESIGN that tests may modify."""
    return copy.deepcopy(SAMPLE_DESIGN)


@pytest.fixture
def sample_text(sample_document) -> str:
    return json.dumps(sample_document)


@pytest.fixture
async def db_engine():
    db_fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(db_fd)
    test_db_url = f"sqlite+aiosqlite:///{db_path}"
    engine = create_async_engine(test_db_url, connect_args={"check_same_thread": False})
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
async def db_session(db_engine) -> AsyncSession:
    session_factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client() -> AsyncClient:
    """HTTP client that does NOT override the DB (for endpoints that don't need DB)."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_client(db_session: AsyncSession) -> AsyncClient:
    """HTTP client with DB dependency overridden to use the test SQLite DB."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
