"""Static definitions for ship weapons, mounts, and gun configurations.

Weapon categories:
  BEAM       - lasers, particle beams
  PROJECTILE - mass drivers, railguns, autocannons
  TORPEDO    - self-contained heavy torpedoes
  SPECIAL    - tractor beams and other oddities

An installed weapon is a (weapon type, mount, gun configuration) triple
installed `quantity` times.  All installed weapons sharing a weapon type and
mount type form one *battery*, identified by "weaponTypeId:mountType".

Sizing rule (per mount):
  ceil(base hull points * mount factor * gun factor * concealment factor)
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class WeaponCategory(str, enum.Enum):
    beam = "beam"
    projectile = "projectile"
    torpedo = "torpedo"
    special = "special"


class MountType(str, enum.Enum):
    standard = "standard"
    fixed = "fixed"
    turret = "turret"
    sponson = "sponson"
    bank = "bank"


class GunConfiguration(str, enum.Enum):
    single = "single"
    twin = "twin"
    triple = "triple"
    quadruple = "quadruple"


# (hull point factor, cost factor)
MOUNT_MODIFIERS: dict[MountType, tuple[float, float]] = {
    MountType.standard: (1.0, 1.0),
    MountType.fixed: (0.75, 0.75),
    MountType.turret: (1.25, 1.25),
    MountType.sponson: (1.25, 1.5),
    MountType.bank: (1.0, 1.25),
}

# (hull point factor, power factor, cost factor)
GUN_MODIFIERS: dict[GunConfiguration, tuple[float, int, float]] = {
    GunConfiguration.single: (1.0, 1, 1.0),
    GunConfiguration.twin: (1.5, 2, 1.5),
    GunConfiguration.triple: (2.0, 3, 2.0),
    GunConfiguration.quadruple: (2.5, 4, 2.5),
}

CONCEALED_FACTOR = 1.5

# Lighter firepower is damaged first in a zone
FIREPOWER_ORDER: dict[str, int] = {"Gd": 0, "S": 1, "L": 2, "M": 3, "H": 4, "SH": 5}


@dataclass(frozen=True)
class WeaponType:
    id: str
    name: str
    category: WeaponCategory
    progress_level: int
    firepower: str
    hull_points: int
    power_required: int = 0
    cost: int = 0
    damage: str = ""
    range_short: int = 0


WEAPONS: list[WeaponType] = [
    WeaponType(
        id="laser",
        name="Laser",
        category=WeaponCategory.beam,
        progress_level=6,
        firepower="L",
        hull_points=2,
        power_required=2,
        cost=300_000,
        damage="d6+1w",
        range_short=12,
    ),
    WeaponType(
        id="particle-beam",
        name="Particle Beam",
        category=WeaponCategory.beam,
        progress_level=7,
        firepower="M",
        hull_points=4,
        power_required=4,
        cost=1_200_000,
        damage="d8+1w",
        range_short=15,
    ),
    WeaponType(
        id="mass-driver",
        name="Mass Driver",
        category=WeaponCategory.projectile,
        progress_level=6,
        firepower="S",
        hull_points=1,
        power_required=1,
        cost=150_000,
        damage="d4+1w",
        range_short=8,
    ),
    WeaponType(
        id="railgun",
        name="Railgun",
        category=WeaponCategory.projectile,
        progress_level=7,
        firepower="H",
        hull_points=8,
        power_required=6,
        cost=4_000_000,
        damage="d6+2m",
        range_short=20,
    ),
    WeaponType(
        id="heavy-torpedo",
        name="Heavy Torpedo",
        category=WeaponCategory.torpedo,
        progress_level=7,
        firepower="SH",
        hull_points=12,
        power_required=2,
        cost=6_000_000,
        damage="d8+2m",
        range_short=30,
    ),
    WeaponType(
        id="tractor-beam",
        name="Tractor Beam",
        category=WeaponCategory.special,
        progress_level=8,
        firepower="Gd",
        hull_points=6,
        power_required=5,
        cost=2_000_000,
    ),
]


def battery_key(weapon_type_id: str, mount_type: MountType | str) -> str:
    mount = mount_type.value if isinstance(mount_type, MountType) else mount_type
    return f"{weapon_type_id}:{mount}"


def calculate_weapon_hull_points(
    weapon: WeaponType,
    mount_type: MountType,
    gun_configuration: GunConfiguration,
    concealed: bool,
) -> int:
    """Hull points for a single mount of this weapon."""
    mount_hp, _ = MOUNT_MODIFIERS[mount_type]
    gun_hp, _, _ = GUN_MODIFIERS[gun_configuration]
    factor = mount_hp * gun_hp * (CONCEALED_FACTOR if concealed else 1.0)
    return math.ceil(weapon.hull_points * factor)


def calculate_weapon_power(weapon: WeaponType, gun_configuration: GunConfiguration) -> int:
    _, gun_power, _ = GUN_MODIFIERS[gun_configuration]
    return weapon.power_required * gun_power


def calculate_weapon_cost(
    weapon: WeaponType,
    mount_type: MountType,
    gun_configuration: GunConfiguration,
    concealed: bool,
) -> int:
    _, mount_cost = MOUNT_MODIFIERS[mount_type]
    _, _, gun_cost = GUN_MODIFIERS[gun_configuration]
    factor = mount_cost * gun_cost * (CONCEALED_FACTOR if concealed else 1.0)
    return round(weapon.cost * factor)
