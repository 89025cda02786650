"""Derived-stats recalculator: the final pipeline stage.

Runs only after every category has resolved, because the values it
computes depend on the final shape of other categories:

  - fire control cost  = type cost * hull points of the linked battery
  - sensor control cost = type cost * hull points of the linked sensor
  - damage zone totals  = sum of the references still pointing at systems
  - sensor tracking     = per-unit tracking for the design progress level and
                          the quality of the sensor control linked to it

Links, zone references, and loadout entries whose target was dropped
during resolution are removed with a warning.
"""

from __future__ import annotations

import dataclasses
import logging

from shipyard.data.categories import CatalogCategory
from shipyard.data.command_control import (
    LinkedSystemType,
    calculate_command_control_cost,
    calculate_linked_control_cost,
)
from shipyard.data.sensors import calculate_tracking_capability
from shipyard.services.design_state import CountedSystem, DamageZone, DesignState, InstalledCommandControl
from shipyard.services.migrations import LAUNCH_BATTERY_PREFIX
from shipyard.services.report import MigrationReport

logger = logging.getLogger(__name__)

ORPHANED_LINK_MESSAGE = "orphaned link dropped"


def battery_hull_points(state: DesignState, key: str) -> int | None:
    """Total hull points of the battery behind `key`, or None if it is gone.

    A battery is every weapon sharing "weaponTypeId:mountType", or for
    "launch:<typeId>" keys every launch system of that type.
    """
    if key.startswith(LAUNCH_BATTERY_PREFIX):
        launch_type_id = key[len(LAUNCH_BATTERY_PREFIX):]
        members = [ls.hull_points for ls in state.launch_systems if ls.type.id == launch_type_id]
    else:
        members = [w.hull_points for w in state.weapons if w.battery_key == key]
    return sum(members) if members else None


def _relink(
    system: InstalledCommandControl, state: DesignState, report: MigrationReport
) -> InstalledCommandControl:
    linked_kind = system.type.linked_system
    target_hp = None
    weapon_key = None
    sensor_id = None

    if linked_kind == LinkedSystemType.weapon and system.linked_weapon_battery_key:
        target_hp = battery_hull_points(state, system.linked_weapon_battery_key)
        weapon_key = system.linked_weapon_battery_key if target_hp is not None else None
    elif linked_kind == LinkedSystemType.sensor and system.linked_sensor_id:
        sensor = next((s for s in state.sensors if s.id == system.linked_sensor_id), None)
        if sensor is not None:
            target_hp = sensor.hull_points
            sensor_id = sensor.id

    if system.is_linked and target_hp is None:
        report.warn(CatalogCategory.command_control, ORPHANED_LINK_MESSAGE)

    if target_hp is not None:
        cost = calculate_linked_control_cost(system.type, target_hp)
    else:
        cost = calculate_command_control_cost(system.type, state.hull.hull_points, system.quantity)
    return dataclasses.replace(
        system,
        linked_weapon_battery_key=weapon_key,
        linked_sensor_id=sensor_id,
        cost=cost,
    )


def _track(
    sensor: CountedSystem, command_control: list[InstalledCommandControl], progress_level: int | None
) -> CountedSystem:
    control = next((cc for cc in command_control if cc.linked_sensor_id == sensor.id), None)
    quality = control.type.quality if control is not None else None
    return dataclasses.replace(
        sensor,
        tracking_capability=calculate_tracking_capability(progress_level, quality, sensor.quantity),
    )


def _recount_zone(zone: DamageZone, installed: set[str], report: MigrationReport) -> DamageZone:
    kept = []
    for ref in zone.systems:
        if ref.installed_system_id in installed:
            kept.append(ref)
        else:
            report.warn(
                CatalogCategory.damage_zone,
                f"zone '{zone.code}': reference to removed system '{ref.installed_system_id}' dropped",
            )
    return dataclasses.replace(
        zone, systems=kept, total_hull_points=sum(ref.hull_points for ref in kept)
    )


def recompute(
    partial: DesignState, report: MigrationReport | None = None
) -> tuple[DesignState, MigrationReport]:
    """Return the final design with every cross-subsystem value re-derived."""
    if report is None:
        report = MigrationReport()

    command_control = [_relink(system, partial, report) for system in partial.command_control]
    sensors = [
        _track(sensor, command_control, partial.design_progress_level) for sensor in partial.sensors
    ]

    design_ids = {design.id for design in partial.ordnance_designs}
    launch_systems = []
    for launcher in partial.launch_systems:
        loadout = []
        for item in launcher.loadout:
            if item.design_id in design_ids:
                loadout.append(item)
            else:
                report.warn(
                    CatalogCategory.launch_system,
                    f"loadout entry for removed ordnance design '{item.design_id}' dropped",
                )
        launch_systems.append(dataclasses.replace(launcher, loadout=loadout))

    installed = partial.installation_ids()
    damage_zones = [_recount_zone(zone, installed, report) for zone in partial.damage_zones]

    state = dataclasses.replace(
        partial,
        command_control=command_control,
        sensors=sensors,
        launch_systems=launch_systems,
        damage_zones=damage_zones,
    )
    logger.debug("Recomputed derived stats for design %r", state.name)
    return state, report
