"""Static definitions for power plants, engines, and FTL drives.

All three are sized in hull points rather than installed by count:

  POWER PLANT - generates power_per_hull_point for every hull point installed
  ENGINE      - consumes power_per_hull_point for every hull point installed
  FTL DRIVE   - consumes power_per_hull_point for every hull point installed

Cost rule:
  base_cost + cost_per_hull_point * installed hull points

Systems with requires_fuel=True need a matching fuel tank, sized in hull
points and priced at fuel_cost_per_hull_point.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PowerPlantType:
    id: str
    name: str
    progress_level: int
    power_per_hull_point: float
    base_cost: int
    cost_per_hull_point: int
    min_size: int = 1
    requires_fuel: bool = False
    fuel_cost_per_hull_point: int = 0


@dataclass(frozen=True)
class EngineType:
    id: str
    name: str
    progress_level: int
    power_per_hull_point: float
    base_cost: int
    cost_per_hull_point: int
    min_size: int = 1
    requires_fuel: bool = False
    fuel_cost_per_hull_point: int = 0


@dataclass(frozen=True)
class FTLDriveType:
    id: str
    name: str
    progress_level: int
    power_per_hull_point: float
    base_cost: int
    cost_per_hull_point: int
    min_size: int = 1
    requires_fuel: bool = False
    fuel_cost_per_hull_point: int = 0


POWER_PLANTS: list[PowerPlantType] = [
    PowerPlantType(
        id="fission-reactor",
        name="Fission Reactor",
        progress_level=6,
        power_per_hull_point=1.5,
        base_cost=1_000_000,
        cost_per_hull_point=200_000,
        min_size=5,
    ),
    PowerPlantType(
        id="fusion-reactor",
        name="Fusion Reactor",
        progress_level=7,
        power_per_hull_point=2,
        base_cost=2_000_000,
        cost_per_hull_point=300_000,
        min_size=4,
        requires_fuel=True,
        fuel_cost_per_hull_point=20_000,
    ),
    PowerPlantType(
        id="antimatter-reactor",
        name="Antimatter Reactor",
        progress_level=8,
        power_per_hull_point=4,
        base_cost=5_000_000,
        cost_per_hull_point=500_000,
        min_size=3,
        requires_fuel=True,
        fuel_cost_per_hull_point=100_000,
    ),
]

ENGINES: list[EngineType] = [
    EngineType(
        id="ion-engine",
        name="Ion Engine",
        progress_level=6,
        power_per_hull_point=0.5,
        base_cost=500_000,
        cost_per_hull_point=100_000,
        min_size=4,
    ),
    EngineType(
        id="fusion-torch",
        name="Fusion Torch",
        progress_level=7,
        power_per_hull_point=1,
        base_cost=1_000_000,
        cost_per_hull_point=150_000,
        min_size=3,
        requires_fuel=True,
        fuel_cost_per_hull_point=10_000,
    ),
    EngineType(
        id="inertial-damper-drive",
        name="Inertial Damper Drive",
        progress_level=8,
        power_per_hull_point=1,
        base_cost=3_000_000,
        cost_per_hull_point=400_000,
        min_size=2,
    ),
]

FTL_DRIVES: list[FTLDriveType] = [
    FTLDriveType(
        id="stardrive",
        name="Stardrive",
        progress_level=7,
        power_per_hull_point=1,
        base_cost=5_000_000,
        cost_per_hull_point=500_000,
        min_size=5,
        requires_fuel=True,
        fuel_cost_per_hull_point=50_000,
    ),
    FTLDriveType(
        id="jump-drive",
        name="Jump Drive",
        progress_level=8,
        power_per_hull_point=2,
        base_cost=8_000_000,
        cost_per_hull_point=800_000,
        min_size=4,
    ),
]


def calculate_power_generated(plant: PowerPlantType, hull_points: int) -> int:
    return math.floor(plant.power_per_hull_point * hull_points)


def calculate_power_consumed(drive: EngineType | FTLDriveType, hull_points: int) -> int:
    return math.ceil(drive.power_per_hull_point * hull_points)


def calculate_sized_system_cost(
    system_type: PowerPlantType | EngineType | FTLDriveType, hull_points: int
) -> int:
    return system_type.base_cost + system_type.cost_per_hull_point * hull_points


def calculate_fuel_tank_cost(
    system_type: PowerPlantType | EngineType | FTLDriveType, hull_points: int
) -> int:
    return system_type.fuel_cost_per_hull_point * hull_points
