"""Static definitions for launch systems and ordnance components.

Ordnance designs are assembled by the user from components:

  MISSILE - propulsion + guidance + warhead
  BOMB    - casing ("bomb-<size>" propulsion entry) + warhead
  MINE    - casing ("mine-<size>" propulsion entry) + guidance + warhead

Launch systems (tubes, racks, bays) hold ordnance.  Each installed launcher
provides `capacity` slots; extra hull points add magazine capacity.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class OrdnanceCategory(str, enum.Enum):
    missile = "missile"
    bomb = "bomb"
    mine = "mine"


class OrdnanceSize(str, enum.Enum):
    light = "light"
    medium = "medium"
    heavy = "heavy"


class ComponentKind(str, enum.Enum):
    propulsion = "propulsion"
    guidance = "guidance"
    warhead = "warhead"


# Launcher capacity consumed by one round of each size
SIZE_CAPACITY: dict[OrdnanceSize, int] = {
    OrdnanceSize.light: 1,
    OrdnanceSize.medium: 2,
    OrdnanceSize.heavy: 4,
}


@dataclass(frozen=True)
class OrdnanceComponent:
    id: str
    name: str
    kind: ComponentKind
    progress_level: int
    accuracy_modifier: int = 0
    cost: int = 0
    applies_to: tuple[OrdnanceCategory, ...] = field(default_factory=tuple)
    damage: str = ""


@dataclass(frozen=True)
class LaunchSystemType:
    id: str
    name: str
    progress_level: int
    hull_points: int
    power_required: int = 0
    cost: int = 0
    capacity: int = 0
    cost_per_extra_hull_point: int = 0
    capacity_per_extra_hull_point: int = 0
    ordnance: tuple[OrdnanceCategory, ...] = field(default_factory=tuple)


LAUNCH_SYSTEMS: list[LaunchSystemType] = [
    LaunchSystemType(
        id="missile-rack",
        name="Missile Rack",
        progress_level=6,
        hull_points=1,
        cost=50_000,
        capacity=2,
        cost_per_extra_hull_point=10_000,
        capacity_per_extra_hull_point=2,
        ordnance=(OrdnanceCategory.missile,),
    ),
    LaunchSystemType(
        id="missile-tube",
        name="Missile Tube",
        progress_level=6,
        hull_points=3,
        power_required=1,
        cost=200_000,
        capacity=8,
        cost_per_extra_hull_point=20_000,
        capacity_per_extra_hull_point=4,
        ordnance=(OrdnanceCategory.missile,),
    ),
    LaunchSystemType(
        id="bomb-bay",
        name="Bomb Bay",
        progress_level=6,
        hull_points=2,
        cost=40_000,
        capacity=8,
        cost_per_extra_hull_point=5_000,
        capacity_per_extra_hull_point=4,
        ordnance=(OrdnanceCategory.bomb,),
    ),
    LaunchSystemType(
        id="mine-layer",
        name="Mine Layer",
        progress_level=7,
        hull_points=4,
        power_required=1,
        cost=300_000,
        capacity=12,
        cost_per_extra_hull_point=20_000,
        capacity_per_extra_hull_point=4,
        ordnance=(OrdnanceCategory.mine,),
    ),
]

ORDNANCE_COMPONENTS: list[OrdnanceComponent] = [
    # Missile propulsion
    OrdnanceComponent(
        id="solid-rocket",
        name="Solid Rocket",
        kind=ComponentKind.propulsion,
        progress_level=6,
        cost=2_000,
        applies_to=(OrdnanceCategory.missile,),
    ),
    OrdnanceComponent(
        id="fusion-rocket",
        name="Fusion Rocket",
        kind=ComponentKind.propulsion,
        progress_level=7,
        accuracy_modifier=-1,
        cost=8_000,
        applies_to=(OrdnanceCategory.missile,),
    ),
    # Bomb and mine casings, looked up as "<category>-<size>"
    OrdnanceComponent(
        id="bomb-light",
        name="Light Bomb Casing",
        kind=ComponentKind.propulsion,
        progress_level=6,
        cost=500,
        applies_to=(OrdnanceCategory.bomb,),
    ),
    OrdnanceComponent(
        id="bomb-medium",
        name="Medium Bomb Casing",
        kind=ComponentKind.propulsion,
        progress_level=6,
        cost=1_000,
        applies_to=(OrdnanceCategory.bomb,),
    ),
    OrdnanceComponent(
        id="bomb-heavy",
        name="Heavy Bomb Casing",
        kind=ComponentKind.propulsion,
        progress_level=6,
        cost=2_000,
        applies_to=(OrdnanceCategory.bomb,),
    ),
    OrdnanceComponent(
        id="mine-light",
        name="Light Mine Casing",
        kind=ComponentKind.propulsion,
        progress_level=6,
        cost=1_500,
        applies_to=(OrdnanceCategory.mine,),
    ),
    OrdnanceComponent(
        id="mine-heavy",
        name="Heavy Mine Casing",
        kind=ComponentKind.propulsion,
        progress_level=7,
        cost=4_000,
        applies_to=(OrdnanceCategory.mine,),
    ),
    # Guidance
    OrdnanceComponent(
        id="inertial-guidance",
        name="Inertial Guidance",
        kind=ComponentKind.guidance,
        progress_level=6,
        cost=1_000,
        applies_to=(OrdnanceCategory.missile, OrdnanceCategory.mine),
    ),
    OrdnanceComponent(
        id="radar-homing",
        name="Radar Homing",
        kind=ComponentKind.guidance,
        progress_level=6,
        accuracy_modifier=-1,
        cost=3_000,
        applies_to=(OrdnanceCategory.missile, OrdnanceCategory.mine),
    ),
    OrdnanceComponent(
        id="smart-guidance",
        name="Smart Guidance",
        kind=ComponentKind.guidance,
        progress_level=7,
        accuracy_modifier=-2,
        cost=10_000,
        applies_to=(OrdnanceCategory.missile, OrdnanceCategory.mine),
    ),
    # Warheads
    OrdnanceComponent(
        id="high-explosive",
        name="High Explosive",
        kind=ComponentKind.warhead,
        progress_level=6,
        cost=1_000,
        damage="d6+1w",
        applies_to=(OrdnanceCategory.missile, OrdnanceCategory.bomb, OrdnanceCategory.mine),
    ),
    OrdnanceComponent(
        id="shaped-charge",
        name="Shaped Charge",
        kind=ComponentKind.warhead,
        progress_level=7,
        accuracy_modifier=1,
        cost=4_000,
        damage="d8+1w",
        applies_to=(OrdnanceCategory.missile, OrdnanceCategory.bomb, OrdnanceCategory.mine),
    ),
    OrdnanceComponent(
        id="nuclear-warhead",
        name="Nuclear Warhead",
        kind=ComponentKind.warhead,
        progress_level=6,
        cost=50_000,
        damage="d6+2m",
        applies_to=(OrdnanceCategory.missile, OrdnanceCategory.bomb, OrdnanceCategory.mine),
    ),
]


def casing_id(category: OrdnanceCategory, size: OrdnanceSize) -> str:
    return f"{category.value}-{size.value}"


def calculate_ordnance_stats(
    size: OrdnanceSize, *components: OrdnanceComponent
) -> tuple[int, int, int]:
    """Return (total accuracy, total cost, launcher capacity) for one round."""
    accuracy = sum(c.accuracy_modifier for c in components)
    cost = sum(c.cost for c in components)
    return accuracy, cost, SIZE_CAPACITY[size]


def calculate_launch_system_stats(
    launcher: LaunchSystemType, quantity: int, extra_hull_points: int
) -> tuple[int, int, int, int]:
    """Return (hull_points, power_required, cost, total_capacity)."""
    hull_points = launcher.hull_points * quantity + extra_hull_points
    power = launcher.power_required * quantity
    cost = launcher.cost * quantity + launcher.cost_per_extra_hull_point * extra_hull_points
    capacity = launcher.capacity * quantity + launcher.capacity_per_extra_hull_point * extra_hull_points
    return hull_points, power, cost, capacity
