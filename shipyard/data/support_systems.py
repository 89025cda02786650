"""Static definitions for crew support systems.

  LIFE SUPPORT   - counted units; each supports `capacity` people
  ACCOMMODATION  - counted units; crew quarters, passenger berths, brigs
  STORE SYSTEM   - counted units; each adds `capacity` person-days of stores
  GRAVITY SYSTEM - sized in hull points, priced per hull point

Counted units use hull_points / power_required / cost per unit.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SupportKind(str, enum.Enum):
    life_support = "life_support"
    accommodation = "accommodation"
    store_system = "store_system"
    gravity_system = "gravity_system"


@dataclass(frozen=True)
class SupportSystemType:
    id: str
    name: str
    kind: SupportKind
    progress_level: int
    hull_points: int = 1
    power_required: int = 0
    cost: int = 0
    cost_per_hull_point: int = 0
    capacity: int = 0


LIFE_SUPPORT: list[SupportSystemType] = [
    SupportSystemType(
        id="life-support-basic",
        name="Basic Life Support",
        kind=SupportKind.life_support,
        progress_level=6,
        hull_points=1,
        power_required=1,
        cost=50_000,
        capacity=10,
    ),
    SupportSystemType(
        id="life-support-recycler",
        name="Closed-Cycle Recycler",
        kind=SupportKind.life_support,
        progress_level=7,
        hull_points=1,
        power_required=1,
        cost=100_000,
        capacity=25,
    ),
]

ACCOMMODATIONS: list[SupportSystemType] = [
    SupportSystemType(
        id="crew-quarters",
        name="Crew Quarters",
        kind=SupportKind.accommodation,
        progress_level=6,
        hull_points=1,
        cost=20_000,
        capacity=2,
    ),
    SupportSystemType(
        id="officer-quarters",
        name="Officer Quarters",
        kind=SupportKind.accommodation,
        progress_level=6,
        hull_points=1,
        cost=40_000,
        capacity=1,
    ),
    SupportSystemType(
        id="passenger-berth",
        name="Passenger Berth",
        kind=SupportKind.accommodation,
        progress_level=6,
        hull_points=1,
        cost=30_000,
        capacity=2,
    ),
]

STORE_SYSTEMS: list[SupportSystemType] = [
    SupportSystemType(
        id="stores",
        name="Stores",
        kind=SupportKind.store_system,
        progress_level=6,
        hull_points=1,
        cost=5_000,
        capacity=100,
    ),
    SupportSystemType(
        id="cold-storage",
        name="Cold Storage",
        kind=SupportKind.store_system,
        progress_level=7,
        hull_points=1,
        power_required=1,
        cost=15_000,
        capacity=300,
    ),
]

GRAVITY_SYSTEMS: list[SupportSystemType] = [
    SupportSystemType(
        id="spin-section",
        name="Spin Section",
        kind=SupportKind.gravity_system,
        progress_level=6,
        cost_per_hull_point=20_000,
    ),
    SupportSystemType(
        id="artificial-gravity",
        name="Artificial Gravity",
        kind=SupportKind.gravity_system,
        progress_level=7,
        power_required=1,
        cost_per_hull_point=50_000,
    ),
]


def calculate_counted_stats(system: SupportSystemType, quantity: int) -> tuple[int, int, int]:
    """Return (hull_points, power_required, cost) for `quantity` units."""
    return (
        system.hull_points * quantity,
        system.power_required * quantity,
        system.cost * quantity,
    )


def calculate_gravity_cost(system: SupportSystemType, hull_points: int) -> int:
    return system.cost_per_hull_point * hull_points
