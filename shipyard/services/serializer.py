"""Save serializer: DesignState -> current-version document text.

Always writes the current schema version and the current field shapes, so
every save upgrades the document.  Only references and user choices are
written; derived hull points / power / cost are recomputed on load (zone
totals are written for readability and recomputed anyway).
"""

from __future__ import annotations

import json

from shipyard.data.ordnance import OrdnanceCategory
from shipyard.services.design_state import (
    DamageZone,
    DesignState,
    FuelTank,
    HitLocationChart,
    SizedSystem,
    CountedSystem,
)
from shipyard.services.version_gate import CURRENT_SCHEMA_VERSION


def _sized(systems: list[SizedSystem]) -> list[dict]:
    return [{"id": s.id, "typeId": s.type.id, "hullPoints": s.hull_points} for s in systems]


def _tanks(tanks: list[FuelTank], parent_field: str) -> list[dict]:
    return [{"id": t.id, parent_field: t.for_type.id, "hullPoints": t.hull_points} for t in tanks]


def _counted(systems: list[CountedSystem]) -> list[dict]:
    return [{"id": s.id, "typeId": s.type.id, "quantity": s.quantity} for s in systems]


def _zones(zones: list[DamageZone]) -> list[dict]:
    result = []
    for zone in zones:
        systems = []
        for ref in zone.systems:
            item = {
                "id": ref.id,
                "systemType": ref.system_type,
                "name": ref.name,
                "hullPoints": ref.hull_points,
                "installedSystemId": ref.installed_system_id,
            }
            if ref.firepower_order is not None:
                item["firepowerOrder"] = ref.firepower_order
            systems.append(item)
        result.append({
            "code": zone.code,
            "systems": systems,
            "totalHullPoints": zone.total_hull_points,
            "maxHullPoints": zone.max_hull_points,
        })
    return result


def _chart(chart: HitLocationChart) -> dict:
    return {
        "hitDie": chart.hit_die,
        "columns": [
            {
                "direction": column.direction,
                "entries": [
                    {"minRoll": e.min_roll, "maxRoll": e.max_roll, "zone": e.zone}
                    for e in column.entries
                ],
            }
            for column in chart.columns
        ],
    }


def to_document(state: DesignState) -> dict:
    doc: dict = {
        "schemaVersion": CURRENT_SCHEMA_VERSION,
        "name": state.name,
    }
    if state.created_at is not None:
        doc["createdAt"] = state.created_at
    if state.modified_at is not None:
        doc["modifiedAt"] = state.modified_at
    doc["description"] = dict(state.description)
    doc["mods"] = [{"name": m.name, "version": m.version} for m in state.mods]
    doc["designType"] = state.design_type.value
    if state.station_type is not None:
        doc["stationType"] = state.station_type.value
    doc["surfaceProvidesLifeSupport"] = state.surface_provides_life_support
    doc["surfaceProvidesGravity"] = state.surface_provides_gravity
    if state.design_progress_level is not None:
        doc["designProgressLevel"] = state.design_progress_level
    doc["designTechTracks"] = list(state.design_tech_tracks)

    doc["hull"] = {"id": state.hull.id}
    doc["armorLayers"] = [
        {"weight": layer.weight.value, "typeId": layer.type.id} for layer in state.armor_layers
    ]
    doc["powerPlants"] = _sized(state.power_plants)
    doc["fuelTanks"] = _tanks(state.fuel_tanks, "forPowerPlantTypeId")
    doc["engines"] = _sized(state.engines)
    doc["engineFuelTanks"] = _tanks(state.engine_fuel_tanks, "forEngineTypeId")
    doc["ftlDrives"] = _sized(state.ftl_drives)
    doc["ftlFuelTanks"] = _tanks(state.ftl_fuel_tanks, "forFTLDriveTypeId")
    doc["lifeSupport"] = _counted(state.life_support)
    doc["accommodations"] = _counted(state.accommodations)
    doc["storeSystems"] = _counted(state.store_systems)
    doc["gravitySystems"] = _sized(state.gravity_systems)
    doc["defenses"] = _counted(state.defenses)

    command_control = []
    for system in state.command_control:
        item = {"id": system.id, "typeId": system.type.id, "quantity": system.quantity}
        if system.linked_weapon_battery_key is not None:
            item["linkedWeaponBatteryKey"] = system.linked_weapon_battery_key
        if system.linked_sensor_id is not None:
            item["linkedSensorId"] = system.linked_sensor_id
        command_control.append(item)
    doc["commandControl"] = command_control

    doc["sensors"] = _counted(state.sensors)
    doc["hangarMisc"] = _counted(state.hangar_misc)
    doc["weapons"] = [
        {
            "id": w.id,
            "typeId": w.type.id,
            "mountType": w.mount_type.value,
            "gunConfiguration": w.gun_configuration.value,
            "concealed": w.concealed,
            "quantity": w.quantity,
            "arcs": list(w.arcs),
        }
        for w in state.weapons
    ]

    ordnance = []
    for design in state.ordnance_designs:
        item = {
            "id": design.id,
            "name": design.name,
            "category": design.category.value,
            "size": design.size.value,
            "warheadId": design.warhead.id,
        }
        # Bomb and mine casings follow from category and size
        if design.category == OrdnanceCategory.missile and design.propulsion is not None:
            item["propulsionId"] = design.propulsion.id
        if design.guidance is not None:
            item["guidanceId"] = design.guidance.id
        ordnance.append(item)
    doc["ordnanceDesigns"] = ordnance

    doc["launchSystems"] = [
        {
            "id": ls.id,
            "typeId": ls.type.id,
            "quantity": ls.quantity,
            "extraHp": ls.extra_hp,
            "loadout": [{"designId": e.design_id, "quantity": e.quantity} for e in ls.loadout],
        }
        for ls in state.launch_systems
    ]
    doc["damageZones"] = _zones(state.damage_zones)
    if state.hit_location_chart is not None:
        doc["hitLocationChart"] = _chart(state.hit_location_chart)
    return doc


def serialize(state: DesignState) -> str:
    return json.dumps(to_document(state), indent=2, ensure_ascii=False)
