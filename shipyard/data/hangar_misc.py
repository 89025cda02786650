"""Static definitions for hangars, cargo holds, and miscellaneous systems."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class HangarMiscCategory(str, enum.Enum):
    hangar = "hangar"
    cargo = "cargo"
    miscellaneous = "miscellaneous"


@dataclass(frozen=True)
class HangarMiscType:
    id: str
    name: str
    category: HangarMiscCategory
    progress_level: int
    hull_points: int = 1
    # Sized as a share of the ship instead of per unit when > 0
    hull_percentage: float = 0
    power_required: int = 0
    cost: int = 0
    cost_per_hull_point: bool = False
    # Capacity provided per hull point of the installed system
    capacity_per_hull_point: float = 0


HANGAR_MISC: list[HangarMiscType] = [
    HangarMiscType(
        id="hangar-bay",
        name="Hangar Bay",
        category=HangarMiscCategory.hangar,
        progress_level=6,
        hull_points=1,
        cost=30_000,
        capacity_per_hull_point=0.5,
    ),
    HangarMiscType(
        id="docking-clamp",
        name="Docking Clamp",
        category=HangarMiscCategory.hangar,
        progress_level=6,
        hull_points=1,
        cost=10_000,
        capacity_per_hull_point=2,
    ),
    HangarMiscType(
        id="cargo-hold",
        name="Cargo Hold",
        category=HangarMiscCategory.cargo,
        progress_level=6,
        hull_points=1,
        cost=2_000,
        capacity_per_hull_point=20,
    ),
    HangarMiscType(
        id="sickbay",
        name="Sickbay",
        category=HangarMiscCategory.miscellaneous,
        progress_level=6,
        hull_percentage=1,
        power_required=1,
        cost=10_000,
        cost_per_hull_point=True,
    ),
    HangarMiscType(
        id="cloaking-device",
        name="Cloaking Device",
        category=HangarMiscCategory.miscellaneous,
        progress_level=8,
        hull_percentage=10,
        power_required=5,
        cost=50_000,
        cost_per_hull_point=True,
    ),
]


def calculate_hangar_misc_hull_points(
    system: HangarMiscType, ship_hull_points: int, quantity: int
) -> int:
    if system.hull_percentage:
        return math.ceil(system.hull_percentage / 100 * ship_hull_points)
    return system.hull_points * quantity


def calculate_hangar_misc_power(system: HangarMiscType, quantity: int) -> int:
    if system.hull_percentage:
        return system.power_required
    return system.power_required * quantity


def calculate_hangar_misc_cost(system: HangarMiscType, installed_hull_points: int, quantity: int) -> int:
    if system.cost_per_hull_point:
        return system.cost * installed_hull_points
    return system.cost * quantity


def calculate_hangar_misc_capacity(system: HangarMiscType, installed_hull_points: int) -> int:
    return math.floor(system.capacity_per_hull_point * installed_hull_points)
