"""In-memory representation of a fully resolved ship design.

Every installed record embeds a frozen snapshot of the catalog entry it was
resolved against (`type`), never a live reference into the catalog, plus the
derived hull points / power / cost computed from that snapshot.  Derived
values are never read from a saved document.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from shipyard.data.armor import ArmorType, ArmorWeight
from shipyard.data.command_control import CommandControlType
from shipyard.data.defenses import DefenseType
from shipyard.data.hangar_misc import HangarMiscType
from shipyard.data.hulls import HullType
from shipyard.data.ordnance import (
    LaunchSystemType,
    OrdnanceCategory,
    OrdnanceComponent,
    OrdnanceSize,
)
from shipyard.data.power import EngineType, FTLDriveType, PowerPlantType
from shipyard.data.sensors import SensorType
from shipyard.data.support_systems import SupportSystemType
from shipyard.data.weapons import GunConfiguration, MountType, WeaponType, battery_key


class DesignType(str, enum.Enum):
    warship = "warship"
    station = "station"


class StationType(str, enum.Enum):
    ground_base = "ground-base"
    outpost = "outpost"
    space_station = "space-station"


@dataclass(frozen=True)
class SavedModReference:
    name: str
    version: str


# ---------------------------------------------------------------------------
# Installed systems
# ---------------------------------------------------------------------------

@dataclass
class SizedSystem:
    """A system sized in hull points (power plant, engine, FTL, gravity)."""
    id: str
    type: PowerPlantType | EngineType | FTLDriveType | SupportSystemType
    hull_points: int
    # Generated for power plants, consumed for everything else
    power: int = 0
    cost: int = 0


@dataclass
class FuelTank:
    id: str
    for_type: PowerPlantType | EngineType | FTLDriveType
    hull_points: int
    cost: int = 0


@dataclass
class CountedSystem:
    """A system installed by count (life support, defenses, sensors, ...)."""
    id: str
    type: SupportSystemType | DefenseType | SensorType | HangarMiscType
    quantity: int
    hull_points: int = 0
    power: int = 0
    cost: int = 0
    # Sensors only
    arcs_covered: int = 0
    tracking_capability: int = 0
    # Hangars and cargo holds only
    capacity: int = 0


@dataclass
class InstalledCommandControl:
    id: str
    type: CommandControlType
    quantity: int
    linked_weapon_battery_key: str | None = None
    linked_sensor_id: str | None = None
    hull_points: int = 0
    power: int = 0
    cost: int = 0

    @property
    def is_linked(self) -> bool:
        return self.linked_weapon_battery_key is not None or self.linked_sensor_id is not None


@dataclass
class InstalledWeapon:
    id: str
    type: WeaponType
    mount_type: MountType
    gun_configuration: GunConfiguration
    concealed: bool
    quantity: int
    arcs: list[str] = field(default_factory=list)
    hull_points: int = 0
    power: int = 0
    cost: int = 0

    @property
    def battery_key(self) -> str:
        return battery_key(self.type.id, self.mount_type)


@dataclass
class OrdnanceDesign:
    id: str
    name: str
    category: OrdnanceCategory
    size: OrdnanceSize
    warhead: OrdnanceComponent
    # Missile motor, or the bomb/mine casing
    propulsion: OrdnanceComponent | None = None
    guidance: OrdnanceComponent | None = None
    accuracy: int = 0
    cost: int = 0
    capacity_required: int = 0


@dataclass
class LoadoutEntry:
    design_id: str
    quantity: int


@dataclass
class InstalledLaunchSystem:
    id: str
    type: LaunchSystemType
    quantity: int
    extra_hp: int = 0
    loadout: list[LoadoutEntry] = field(default_factory=list)
    hull_points: int = 0
    power: int = 0
    cost: int = 0
    capacity: int = 0


@dataclass
class ArmorLayer:
    weight: ArmorWeight
    type: ArmorType
    hull_points: int = 0
    cost: int = 0


# ---------------------------------------------------------------------------
# Damage diagram
# ---------------------------------------------------------------------------

@dataclass
class ZoneSystemRef:
    id: str
    system_type: str
    name: str
    hull_points: int
    installed_system_id: str
    firepower_order: int | None = None


@dataclass
class DamageZone:
    code: str
    systems: list[ZoneSystemRef] = field(default_factory=list)
    total_hull_points: int = 0
    max_hull_points: int = 0


@dataclass
class HitLocationEntry:
    min_roll: int
    max_roll: int
    zone: str


@dataclass
class HitLocationColumn:
    direction: str
    entries: list[HitLocationEntry] = field(default_factory=list)


@dataclass
class HitLocationChart:
    hit_die: int
    columns: list[HitLocationColumn] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Design
# ---------------------------------------------------------------------------

@dataclass
class DesignState:
    hull: HullType
    name: str = ""
    design_type: DesignType = DesignType.warship
    station_type: StationType | None = None
    surface_provides_life_support: bool = False
    surface_provides_gravity: bool = False
    design_progress_level: int | None = None
    design_tech_tracks: list[str] = field(default_factory=list)
    armor_layers: list[ArmorLayer] = field(default_factory=list)
    power_plants: list[SizedSystem] = field(default_factory=list)
    fuel_tanks: list[FuelTank] = field(default_factory=list)
    engines: list[SizedSystem] = field(default_factory=list)
    engine_fuel_tanks: list[FuelTank] = field(default_factory=list)
    ftl_drives: list[SizedSystem] = field(default_factory=list)
    ftl_fuel_tanks: list[FuelTank] = field(default_factory=list)
    life_support: list[CountedSystem] = field(default_factory=list)
    accommodations: list[CountedSystem] = field(default_factory=list)
    store_systems: list[CountedSystem] = field(default_factory=list)
    gravity_systems: list[SizedSystem] = field(default_factory=list)
    defenses: list[CountedSystem] = field(default_factory=list)
    command_control: list[InstalledCommandControl] = field(default_factory=list)
    sensors: list[CountedSystem] = field(default_factory=list)
    hangar_misc: list[CountedSystem] = field(default_factory=list)
    weapons: list[InstalledWeapon] = field(default_factory=list)
    ordnance_designs: list[OrdnanceDesign] = field(default_factory=list)
    launch_systems: list[InstalledLaunchSystem] = field(default_factory=list)
    damage_zones: list[DamageZone] = field(default_factory=list)
    hit_location_chart: HitLocationChart | None = None
    # Pass-through metadata, never validated
    description: dict = field(default_factory=dict)
    created_at: str | None = None
    modified_at: str | None = None
    mods: list[SavedModReference] = field(default_factory=list)

    def installation_ids(self) -> set[str]:
        """IDs of every installed system a damage zone may reference."""
        groups = (
            self.power_plants, self.fuel_tanks, self.engines, self.engine_fuel_tanks,
            self.ftl_drives, self.ftl_fuel_tanks, self.life_support, self.accommodations,
            self.store_systems, self.gravity_systems, self.defenses, self.command_control,
            self.sensors, self.hangar_misc, self.weapons, self.launch_systems,
        )
        return {item.id for group in groups for item in group}
