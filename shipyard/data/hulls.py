"""Static definitions for the built-in hull types.

Hulls are grouped into size classes.  The size class drives the damage
diagram layout (number of zones and hit die) and which armor weights are
allowed:

  small-craft  - fighters and cutters, up to ~40 hull points
  light        - corvettes and frigates
  medium       - destroyers, light cruisers, small stations
  heavy        - cruisers and large stations
  super-heavy  - battleships and dreadnoughts

Hull points are the space available for systems.  Bonus hull points come
from economy of scale and never count for percentage-based sizing.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class HullSize(str, enum.Enum):
    small_craft = "small-craft"
    light = "light"
    medium = "medium"
    heavy = "heavy"
    super_heavy = "super-heavy"


class HullCategory(str, enum.Enum):
    military = "military"
    civilian = "civilian"


@dataclass(frozen=True)
class HullType:
    """Definition of a single hull type."""
    id: str
    name: str
    size_class: HullSize
    category: HullCategory
    hull_points: int
    bonus_hull_points: int = 0
    cost: int = 0
    crew: int = 0
    # Maximum hull points per damage zone; None derives it from the layout
    zone_limit: int | None = None
    description: str = ""

    @property
    def total_hull_points(self) -> int:
        return self.hull_points + self.bonus_hull_points


HULLS: list[HullType] = [
    HullType(
        id="fighter",
        name="Fighter",
        size_class=HullSize.small_craft,
        category=HullCategory.military,
        hull_points=10,
        cost=200_000,
        crew=1,
        zone_limit=7,
    ),
    HullType(
        id="cutter",
        name="Cutter",
        size_class=HullSize.small_craft,
        category=HullCategory.military,
        hull_points=20,
        cost=400_000,
        crew=4,
        zone_limit=14,
    ),
    HullType(
        id="corvette",
        name="Corvette",
        size_class=HullSize.light,
        category=HullCategory.military,
        hull_points=80,
        bonus_hull_points=4,
        cost=4_000_000,
        crew=20,
        zone_limit=22,
    ),
    HullType(
        id="frigate",
        name="Frigate",
        size_class=HullSize.light,
        category=HullCategory.military,
        hull_points=120,
        bonus_hull_points=6,
        cost=6_000_000,
        crew=35,
    ),
    HullType(
        id="destroyer",
        name="Destroyer",
        size_class=HullSize.medium,
        category=HullCategory.military,
        hull_points=200,
        bonus_hull_points=10,
        cost=12_000_000,
        crew=60,
    ),
    HullType(
        id="light-cruiser",
        name="Light Cruiser",
        size_class=HullSize.medium,
        category=HullCategory.military,
        hull_points=300,
        bonus_hull_points=15,
        cost=18_000_000,
        crew=90,
    ),
    HullType(
        id="freighter",
        name="Bulk Freighter",
        size_class=HullSize.medium,
        category=HullCategory.civilian,
        hull_points=240,
        bonus_hull_points=12,
        cost=5_000_000,
        crew=12,
    ),
    HullType(
        id="heavy-cruiser",
        name="Heavy Cruiser",
        size_class=HullSize.heavy,
        category=HullCategory.military,
        hull_points=400,
        bonus_hull_points=40,
        cost=30_000_000,
        crew=150,
        zone_limit=96,
    ),
    HullType(
        id="battleship",
        name="Battleship",
        size_class=HullSize.super_heavy,
        category=HullCategory.military,
        hull_points=1200,
        bonus_hull_points=120,
        cost=120_000_000,
        crew=600,
        zone_limit=195,
    ),
    HullType(
        id="dreadnought",
        name="Dreadnought",
        size_class=HullSize.super_heavy,
        category=HullCategory.military,
        hull_points=3200,
        bonus_hull_points=320,
        cost=400_000_000,
        crew=1800,
        zone_limit=480,
    ),
    HullType(
        id="orbital-platform",
        name="Orbital Platform",
        size_class=HullSize.medium,
        category=HullCategory.civilian,
        hull_points=250,
        bonus_hull_points=25,
        cost=8_000_000,
        crew=40,
        description="Station hull for orbital and deep-space installations.",
    ),
]
