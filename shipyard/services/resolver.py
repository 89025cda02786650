"""Catalog resolver: migrated document -> resolved (not yet cross-linked) design.

Responsibilities:
  - Resolve the hull (fatal when absent or unknown)
  - Resolve every installed system against its catalog category, dropping
    entries whose type cannot be found and recording a warning for each
  - Embed a snapshot copy of each resolved catalog entry and compute the
    per-record hull points / power / cost
  - Rebuild the damage zones and hit-location chart for the hull's layout

Cross-subsystem values (linked control costs, zone totals) are left to the
recalculator, which runs after every category has resolved.
"""

from __future__ import annotations

import dataclasses
import logging
import uuid
from typing import Any, Callable

from shipyard.data.armor import ArmorWeight, calculate_armor_cost, calculate_armor_hull_points
from shipyard.data.categories import CatalogCategory
from shipyard.data.command_control import (
    calculate_command_control_cost,
    calculate_command_control_hull_points,
    calculate_command_control_power,
)
from shipyard.data.defenses import (
    calculate_defense_cost,
    calculate_defense_hull_points,
    calculate_defense_power,
)
from shipyard.data.hangar_misc import (
    calculate_hangar_misc_capacity,
    calculate_hangar_misc_cost,
    calculate_hangar_misc_hull_points,
    calculate_hangar_misc_power,
)
from shipyard.data.hulls import HullType
from shipyard.data.ordnance import (
    ComponentKind,
    OrdnanceCategory,
    OrdnanceComponent,
    OrdnanceSize,
    calculate_launch_system_stats,
    calculate_ordnance_stats,
    casing_id,
)
from shipyard.data.power import (
    calculate_fuel_tank_cost,
    calculate_power_consumed,
    calculate_power_generated,
    calculate_sized_system_cost,
)
from shipyard.data.sensors import calculate_arcs_covered, calculate_sensor_stats
from shipyard.data.support_systems import calculate_counted_stats, calculate_gravity_cost
from shipyard.data.weapons import (
    GunConfiguration,
    MountType,
    calculate_weapon_cost,
    calculate_weapon_hull_points,
    calculate_weapon_power,
)
from shipyard.services.damage_diagram import (
    chart_matches_layout,
    create_default_hit_location_chart,
    create_empty_zones,
    select_layout,
)
from shipyard.services.design_state import (
    ArmorLayer,
    CountedSystem,
    DamageZone,
    DesignState,
    DesignType,
    FuelTank,
    HitLocationChart,
    HitLocationColumn,
    HitLocationEntry,
    InstalledCommandControl,
    InstalledLaunchSystem,
    InstalledWeapon,
    LoadoutEntry,
    OrdnanceDesign,
    SizedSystem,
    StationType,
    ZoneSystemRef,
)
from shipyard.services.migrations import LEGACY_DESCRIPTION_FIELDS
from shipyard.services.report import DOCUMENT_LABEL, MigrationReport, MissingHullError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def new_installation_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex}"


def _int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _installation_id(entry: dict, prefix: str) -> str:
    value = entry.get("id")
    if isinstance(value, str) and value:
        return value
    return new_installation_id(prefix)


def _entries(doc: dict, key: str, category: CatalogCategory, report: MigrationReport) -> list[dict]:
    """The dict entries of doc[key]; an absent list is simply empty."""
    raw = doc.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        report.warn(category, f"expected a list for '{key}', field ignored")
        return []
    entries = []
    for entry in raw:
        if isinstance(entry, dict):
            entries.append(entry)
        else:
            report.warn(category, "malformed entry removed")
    return entries


def _lookup(catalog, category: CatalogCategory, type_id: Any, report: MigrationReport):
    """Snapshot of the catalog entry, or None with a warning."""
    found = catalog.find_by_id(category, type_id)
    if found is None:
        report.warn_missing(category, type_id)
        return None
    return dataclasses.replace(found)


# ---------------------------------------------------------------------------
# Hull and armor
# ---------------------------------------------------------------------------

def resolve_hull(doc: dict, catalog) -> HullType:
    hull_ref = doc.get("hull")
    if isinstance(hull_ref, dict):
        hull_id = hull_ref.get("id")
    else:
        hull_id = hull_ref if isinstance(hull_ref, str) else None
    if not hull_id:
        raise MissingHullError("The design has no hull")
    hull = catalog.find_by_id(CatalogCategory.hull, hull_id)
    if hull is None:
        raise MissingHullError(f"Hull type '{hull_id}' was not found in the catalog")
    return dataclasses.replace(hull)


def resolve_armor(doc: dict, hull: HullType, catalog, report: MigrationReport) -> list[ArmorLayer]:
    layers = []
    for entry in _entries(doc, "armorLayers", CatalogCategory.armor, report):
        try:
            weight = ArmorWeight(entry.get("weight"))
        except ValueError:
            report.warn(CatalogCategory.armor, f"unknown weight '{entry.get('weight')}', entry removed")
            continue
        armor_type = _lookup(catalog, CatalogCategory.armor, entry.get("typeId"), report)
        if armor_type is None:
            continue
        layers.append(ArmorLayer(
            weight=weight,
            type=armor_type,
            hull_points=calculate_armor_hull_points(hull, weight),
            cost=calculate_armor_cost(hull, weight, armor_type),
        ))
    if not layers:
        report.warn(CatalogCategory.armor, "no layers configured")
    return layers


# ---------------------------------------------------------------------------
# Sized systems and fuel tanks
# ---------------------------------------------------------------------------

def _resolve_sized(
    doc: dict,
    key: str,
    category: CatalogCategory,
    prefix: str,
    catalog,
    report: MigrationReport,
    power_fn: Callable[[Any, int], int],
    cost_fn: Callable[[Any, int], int],
) -> list[SizedSystem]:
    systems = []
    for entry in _entries(doc, key, category, report):
        system_type = _lookup(catalog, category, entry.get("typeId"), report)
        if system_type is None:
            continue
        hull_points = max(0, _int(entry.get("hullPoints"), getattr(system_type, "min_size", 0)))
        systems.append(SizedSystem(
            id=_installation_id(entry, prefix),
            type=system_type,
            hull_points=hull_points,
            power=power_fn(system_type, hull_points),
            cost=cost_fn(system_type, hull_points),
        ))
    return systems


def _resolve_fuel_tanks(
    doc: dict,
    key: str,
    parent_field: str,
    category: CatalogCategory,
    catalog,
    report: MigrationReport,
) -> list[FuelTank]:
    tanks = []
    for entry in _entries(doc, key, category, report):
        parent = _lookup(catalog, category, entry.get(parent_field), report)
        if parent is None:
            continue
        hull_points = max(0, _int(entry.get("hullPoints")))
        tanks.append(FuelTank(
            id=_installation_id(entry, "fuel"),
            for_type=parent,
            hull_points=hull_points,
            cost=calculate_fuel_tank_cost(parent, hull_points),
        ))
    return tanks


# ---------------------------------------------------------------------------
# Counted systems
# ---------------------------------------------------------------------------

def _resolve_counted(
    doc: dict,
    key: str,
    category: CatalogCategory,
    prefix: str,
    catalog,
    report: MigrationReport,
    stats_fn: Callable[[Any, int], tuple[int, int, int]],
) -> list[CountedSystem]:
    systems = []
    for entry in _entries(doc, key, category, report):
        system_type = _lookup(catalog, category, entry.get("typeId"), report)
        if system_type is None:
            continue
        quantity = max(0, _int(entry.get("quantity"), 1))
        hull_points, power, cost = stats_fn(system_type, quantity)
        systems.append(CountedSystem(
            id=_installation_id(entry, prefix),
            type=system_type,
            quantity=quantity,
            hull_points=hull_points,
            power=power,
            cost=cost,
        ))
    return systems


def _defense_stats(ship_hull_points: int):
    def stats(defense, quantity: int) -> tuple[int, int, int]:
        return (
            calculate_defense_hull_points(defense, ship_hull_points, quantity),
            calculate_defense_power(defense, ship_hull_points, quantity),
            calculate_defense_cost(defense, ship_hull_points, quantity),
        )
    return stats


def _hangar_misc_stats(ship_hull_points: int):
    def stats(system, quantity: int) -> tuple[int, int, int]:
        hull_points = calculate_hangar_misc_hull_points(system, ship_hull_points, quantity)
        return (
            hull_points,
            calculate_hangar_misc_power(system, quantity),
            calculate_hangar_misc_cost(system, hull_points, quantity),
        )
    return stats


def _with_arcs_covered(sensors: list[CountedSystem]) -> list[CountedSystem]:
    for sensor in sensors:
        sensor.arcs_covered = calculate_arcs_covered(sensor.type, sensor.quantity)
    return sensors


def _with_capacity(systems: list[CountedSystem]) -> list[CountedSystem]:
    for system in systems:
        system.capacity = calculate_hangar_misc_capacity(system.type, system.hull_points)
    return systems


def resolve_command_control(
    doc: dict, hull: HullType, catalog, report: MigrationReport
) -> list[InstalledCommandControl]:
    """Resolve C&C systems at their unlinked price; links are priced later."""
    category = CatalogCategory.command_control
    systems = []
    for entry in _entries(doc, "commandControl", category, report):
        system_type = _lookup(catalog, category, entry.get("typeId"), report)
        if system_type is None:
            continue
        quantity = max(0, _int(entry.get("quantity"), 1))
        systems.append(InstalledCommandControl(
            id=_installation_id(entry, "cc"),
            type=system_type,
            quantity=quantity,
            linked_weapon_battery_key=_str_or_none(entry.get("linkedWeaponBatteryKey")),
            linked_sensor_id=_str_or_none(entry.get("linkedSensorId")),
            hull_points=calculate_command_control_hull_points(system_type, hull.hull_points, quantity),
            power=calculate_command_control_power(system_type, quantity),
            cost=calculate_command_control_cost(system_type, hull.hull_points, quantity),
        ))
    return systems


# ---------------------------------------------------------------------------
# Weapons, ordnance and launch systems
# ---------------------------------------------------------------------------

def resolve_weapons(doc: dict, catalog, report: MigrationReport) -> list[InstalledWeapon]:
    category = CatalogCategory.weapon
    weapons = []
    for entry in _entries(doc, "weapons", category, report):
        weapon_type = _lookup(catalog, category, entry.get("typeId"), report)
        if weapon_type is None:
            continue
        raw_mount = entry.get("mountType") or MountType.standard.value
        raw_gun = entry.get("gunConfiguration") or GunConfiguration.single.value
        try:
            mount_type = MountType(raw_mount)
        except ValueError:
            report.warn(category, f"unknown mount type '{raw_mount}', entry removed")
            continue
        try:
            gun_configuration = GunConfiguration(raw_gun)
        except ValueError:
            report.warn(category, f"unknown gun configuration '{raw_gun}', entry removed")
            continue

        concealed = entry.get("concealed") is True
        quantity = max(0, _int(entry.get("quantity"), 1))
        raw_arcs = entry.get("arcs")
        arcs = [arc for arc in raw_arcs if isinstance(arc, str)] if isinstance(raw_arcs, list) else []
        per_mount_hp = calculate_weapon_hull_points(weapon_type, mount_type, gun_configuration, concealed)
        weapons.append(InstalledWeapon(
            id=_installation_id(entry, "wpn"),
            type=weapon_type,
            mount_type=mount_type,
            gun_configuration=gun_configuration,
            concealed=concealed,
            quantity=quantity,
            arcs=arcs,
            hull_points=per_mount_hp * quantity,
            power=calculate_weapon_power(weapon_type, gun_configuration) * quantity,
            cost=calculate_weapon_cost(weapon_type, mount_type, gun_configuration, concealed) * quantity,
        ))
    return weapons


def _component(
    catalog,
    component_id: Any,
    kind: ComponentKind,
    ordnance_category: OrdnanceCategory,
    report: MigrationReport,
) -> OrdnanceComponent | None:
    found = catalog.find_by_id(CatalogCategory.ordnance, component_id)
    if (
        found is None
        or found.kind != kind
        or (found.applies_to and ordnance_category not in found.applies_to)
    ):
        report.warn_missing(CatalogCategory.ordnance, component_id)
        return None
    return dataclasses.replace(found)


def resolve_ordnance_designs(doc: dict, catalog, report: MigrationReport) -> list[OrdnanceDesign]:
    """Resolve user-built missiles, bombs and mines.

    Bombs and mines have no motor; their casing is the propulsion entry
    named "<category>-<size>".  Missiles and mines need a guidance package.
    """
    label = CatalogCategory.ordnance
    designs = []
    for entry in _entries(doc, "ordnanceDesigns", label, report):
        design_id = _installation_id(entry, "ord")
        name = entry.get("name") if isinstance(entry.get("name"), str) else ""
        try:
            ordnance_category = OrdnanceCategory(entry.get("category"))
            size = OrdnanceSize(entry.get("size"))
        except ValueError:
            report.warn(
                label,
                f"design '{name or design_id}' has an unknown category or size, entry removed",
            )
            continue

        warhead = _component(catalog, entry.get("warheadId"), ComponentKind.warhead, ordnance_category, report)
        if warhead is None:
            continue

        if ordnance_category == OrdnanceCategory.missile:
            propulsion_id = entry.get("propulsionId")
        else:
            propulsion_id = casing_id(ordnance_category, size)
        propulsion = _component(catalog, propulsion_id, ComponentKind.propulsion, ordnance_category, report)
        if propulsion is None:
            continue

        guidance = None
        if ordnance_category != OrdnanceCategory.bomb:
            guidance = _component(catalog, entry.get("guidanceId"), ComponentKind.guidance, ordnance_category, report)
            if guidance is None:
                continue

        components = [c for c in (propulsion, guidance, warhead) if c is not None]
        accuracy, cost, capacity = calculate_ordnance_stats(size, *components)
        designs.append(OrdnanceDesign(
            id=design_id,
            name=name,
            category=ordnance_category,
            size=size,
            warhead=warhead,
            propulsion=propulsion,
            guidance=guidance,
            accuracy=accuracy,
            cost=cost,
            capacity_required=capacity,
        ))
    return designs


def resolve_launch_systems(doc: dict, catalog, report: MigrationReport) -> list[InstalledLaunchSystem]:
    category = CatalogCategory.launch_system
    launchers = []
    for entry in _entries(doc, "launchSystems", category, report):
        launcher_type = _lookup(catalog, category, entry.get("typeId"), report)
        if launcher_type is None:
            continue
        quantity = max(0, _int(entry.get("quantity"), 1))
        extra_hp = max(0, _int(entry.get("extraHp")))

        loadout = []
        raw_loadout = entry.get("loadout")
        for item in raw_loadout if isinstance(raw_loadout, list) else []:
            if isinstance(item, dict) and isinstance(item.get("designId"), str):
                loadout.append(LoadoutEntry(
                    design_id=item["designId"],
                    quantity=max(0, _int(item.get("quantity"), 1)),
                ))
            else:
                report.warn(category, "malformed loadout entry removed")

        hull_points, power, cost, capacity = calculate_launch_system_stats(launcher_type, quantity, extra_hp)
        launchers.append(InstalledLaunchSystem(
            id=_installation_id(entry, "launch"),
            type=launcher_type,
            quantity=quantity,
            extra_hp=extra_hp,
            loadout=loadout,
            hull_points=hull_points,
            power=power,
            cost=cost,
            capacity=capacity,
        ))
    return launchers


# ---------------------------------------------------------------------------
# Damage diagram
# ---------------------------------------------------------------------------

def _parse_zone_ref(raw: Any) -> ZoneSystemRef | None:
    if not isinstance(raw, dict) or not isinstance(raw.get("installedSystemId"), str):
        return None
    firepower = raw.get("firepowerOrder")
    return ZoneSystemRef(
        id=raw["id"] if isinstance(raw.get("id"), str) else new_installation_id("zsr"),
        system_type=raw.get("systemType") if isinstance(raw.get("systemType"), str) else "",
        name=raw.get("name") if isinstance(raw.get("name"), str) else "",
        hull_points=max(0, _int(raw.get("hullPoints"))),
        installed_system_id=raw["installedSystemId"],
        firepower_order=_int(firepower) if firepower is not None else None,
    )


def _parse_chart(raw: Any) -> HitLocationChart | None:
    """Structured chart, or None when any part of it is malformed."""
    if not isinstance(raw, dict) or not isinstance(raw.get("columns"), list):
        return None
    hit_die = _int(raw.get("hitDie"), -1)
    if hit_die <= 0:
        return None
    columns = []
    for raw_column in raw["columns"]:
        if not isinstance(raw_column, dict) or not isinstance(raw_column.get("direction"), str):
            return None
        raw_entries = raw_column.get("entries")
        if not isinstance(raw_entries, list):
            return None
        entries = []
        for raw_entry in raw_entries:
            if not isinstance(raw_entry, dict) or not isinstance(raw_entry.get("zone"), str):
                return None
            entries.append(HitLocationEntry(
                min_roll=_int(raw_entry.get("minRoll")),
                max_roll=_int(raw_entry.get("maxRoll")),
                zone=raw_entry["zone"],
            ))
        columns.append(HitLocationColumn(direction=raw_column["direction"], entries=entries))
    return HitLocationChart(hit_die=hit_die, columns=columns)


def resolve_damage_diagram(
    doc: dict, hull: HullType, catalog, report: MigrationReport
) -> tuple[list[DamageZone], HitLocationChart | None]:
    """Zones for every code of the hull's layout, plus a hit-location chart.

    Missing zones and a missing chart are filled in silently; saved data
    that contradicts the layout is replaced with a warning.
    """
    label = CatalogCategory.damage_zone
    layout = select_layout(hull, catalog)
    if layout is None:
        report.warn(label, f"no zone layout for size class '{hull.size_class.value}'")
        return [], None

    saved: dict[str, list[ZoneSystemRef]] = {}
    for entry in _entries(doc, "damageZones", label, report):
        code = entry.get("code")
        if code not in layout.zones:
            report.warn(label, f"zone '{code}' is not part of the {layout.zone_count}-zone layout, entry removed")
            continue
        if code in saved:
            report.warn(label, f"duplicate zone '{code}' removed")
            continue
        refs = []
        raw_systems = entry.get("systems")
        for raw_ref in raw_systems if isinstance(raw_systems, list) else []:
            ref = _parse_zone_ref(raw_ref)
            if ref is None:
                report.warn(label, f"malformed system reference in zone '{code}' removed")
                continue
            refs.append(ref)
        saved[code] = refs

    zones = create_empty_zones(hull, layout)
    for zone in zones:
        zone.systems = saved.get(zone.code, [])

    default_chart = create_default_hit_location_chart(layout)
    raw_chart = doc.get("hitLocationChart")
    if raw_chart is None:
        return zones, default_chart
    chart = _parse_chart(raw_chart)
    if chart is None or not chart_matches_layout(chart, layout):
        report.warn(label, "hit location chart does not match the zone layout, default chart used")
        return zones, default_chart
    return zones, chart


# ---------------------------------------------------------------------------
# Design
# ---------------------------------------------------------------------------

def _resolve_design_type(doc: dict, report: MigrationReport) -> tuple[DesignType, StationType | None]:
    raw_type = doc.get("designType", DesignType.warship.value)
    try:
        design_type = DesignType(raw_type)
    except ValueError:
        report.warn(DOCUMENT_LABEL, f"unknown design type '{raw_type}', using 'warship'")
        design_type = DesignType.warship

    station_type = None
    raw_station = doc.get("stationType")
    if raw_station is not None:
        try:
            station_type = StationType(raw_station)
        except ValueError:
            report.warn(DOCUMENT_LABEL, f"unknown station type '{raw_station}' ignored")
    return design_type, station_type


def _check_mods(doc: dict, catalog, report: MigrationReport) -> None:
    raw_mods = doc.get("mods")
    if not isinstance(raw_mods, list):
        return
    active = {mod.name for mod in catalog.active_mods}
    for mod in raw_mods:
        name = mod.get("name") if isinstance(mod, dict) else None
        if isinstance(name, str) and name not in active:
            report.warn(DOCUMENT_LABEL, f"design was saved with mod '{name}', which is not active")


def _resolve_description(doc: dict, report: MigrationReport) -> dict:
    raw = doc.get("description")
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return dict(raw)
    report.warn(DOCUMENT_LABEL, f"description is not an object, {raw!r} dropped")
    return {key: doc[key] for key in LEGACY_DESCRIPTION_FIELDS if key in doc}


def _check_countermeasure_units(doc: dict, report: MigrationReport) -> None:
    raw = doc.get("defenses")
    for entry in raw if isinstance(raw, list) else []:
        if isinstance(entry, dict) and "countermeasureUnits" in entry:
            units = entry["countermeasureUnits"]
            report.warn(CatalogCategory.defense, f"countermeasure count {units!r} could not be read, ignored")


def resolve(doc: dict, catalog) -> tuple[DesignState, MigrationReport]:
    """Resolve a migrated document against the catalog.

    Raises MissingHullError when the hull cannot be resolved; every other
    gap is recorded on the returned report.
    """
    report = MigrationReport()
    hull = resolve_hull(doc, catalog)
    ship_hp = hull.hull_points
    design_type, station_type = _resolve_design_type(doc, report)
    _check_mods(doc, catalog, report)
    _check_countermeasure_units(doc, report)

    tracks = doc.get("designTechTracks")
    progress_level = doc.get("designProgressLevel")
    name = doc.get("name")

    state = DesignState(
        hull=hull,
        name=name if isinstance(name, str) else "",
        design_type=design_type,
        station_type=station_type,
        surface_provides_life_support=doc.get("surfaceProvidesLifeSupport") is True,
        surface_provides_gravity=doc.get("surfaceProvidesGravity") is True,
        design_progress_level=_int(progress_level) if progress_level is not None else None,
        design_tech_tracks=[t for t in tracks if isinstance(t, str)] if isinstance(tracks, list) else [],
        armor_layers=resolve_armor(doc, hull, catalog, report),
        power_plants=_resolve_sized(
            doc, "powerPlants", CatalogCategory.power_plant, "pp", catalog, report,
            calculate_power_generated, calculate_sized_system_cost,
        ),
        fuel_tanks=_resolve_fuel_tanks(
            doc, "fuelTanks", "forPowerPlantTypeId", CatalogCategory.power_plant, catalog, report,
        ),
        engines=_resolve_sized(
            doc, "engines", CatalogCategory.engine, "eng", catalog, report,
            calculate_power_consumed, calculate_sized_system_cost,
        ),
        engine_fuel_tanks=_resolve_fuel_tanks(
            doc, "engineFuelTanks", "forEngineTypeId", CatalogCategory.engine, catalog, report,
        ),
        ftl_drives=_resolve_sized(
            doc, "ftlDrives", CatalogCategory.ftl_drive, "ftl", catalog, report,
            calculate_power_consumed, calculate_sized_system_cost,
        ),
        ftl_fuel_tanks=_resolve_fuel_tanks(
            doc, "ftlFuelTanks", "forFTLDriveTypeId", CatalogCategory.ftl_drive, catalog, report,
        ),
        life_support=_resolve_counted(
            doc, "lifeSupport", CatalogCategory.life_support, "ls", catalog, report,
            calculate_counted_stats,
        ),
        accommodations=_resolve_counted(
            doc, "accommodations", CatalogCategory.accommodation, "acc", catalog, report,
            calculate_counted_stats,
        ),
        store_systems=_resolve_counted(
            doc, "storeSystems", CatalogCategory.store_system, "store", catalog, report,
            calculate_counted_stats,
        ),
        gravity_systems=_resolve_sized(
            doc, "gravitySystems", CatalogCategory.gravity_system, "grav", catalog, report,
            lambda system, _hp: system.power_required, calculate_gravity_cost,
        ),
        defenses=_resolve_counted(
            doc, "defenses", CatalogCategory.defense, "def", catalog, report,
            _defense_stats(ship_hp),
        ),
        command_control=resolve_command_control(doc, hull, catalog, report),
        sensors=_with_arcs_covered(_resolve_counted(
            doc, "sensors", CatalogCategory.sensor, "sensor", catalog, report,
            calculate_sensor_stats,
        )),
        hangar_misc=_with_capacity(_resolve_counted(
            doc, "hangarMisc", CatalogCategory.hangar_misc, "hm", catalog, report,
            _hangar_misc_stats(ship_hp),
        )),
        weapons=resolve_weapons(doc, catalog, report),
        ordnance_designs=resolve_ordnance_designs(doc, catalog, report),
        launch_systems=resolve_launch_systems(doc, catalog, report),
        description=_resolve_description(doc, report),
        created_at=_str_or_none(doc.get("createdAt")),
        modified_at=_str_or_none(doc.get("modifiedAt")),
        mods=list(catalog.active_mods),
    )
    state.damage_zones, state.hit_location_chart = resolve_damage_diagram(doc, hull, catalog, report)

    logger.debug("Resolved design %r on hull %s with %d warning(s)", state.name, hull.id, len(report))
    return state, report
