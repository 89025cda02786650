"""Static definitions for defense systems.

Categories:
  SCREEN          - deflection screens; sized as a percentage of the hull
  COUNTERMEASURE  - chaff, jammers, decoys; installed in sets, each set
                    covering `coverage` hull points of the ship
  REPAIR          - damage control and repair bots
  SHIELD_COMPONENT- capacitors feeding an ablative shield

Sizing rule:
  hull_percentage > 0  ->  ceil(ship hull points * hull_percentage / 100)
  otherwise            ->  hull_points * quantity

Cost rule:
  cost_per_hull=True   ->  cost * ship hull points
  otherwise            ->  cost * quantity
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class DefenseCategory(str, enum.Enum):
    screen = "screen"
    countermeasure = "countermeasure"
    repair = "repair"
    shield_component = "shield-component"


@dataclass(frozen=True)
class DefenseType:
    id: str
    name: str
    category: DefenseCategory
    progress_level: int
    hull_points: int = 0
    hull_percentage: float = 0
    power_required: int = 0
    cost: int = 0
    cost_per_hull: bool = False
    coverage: int = 0
    shield_points: int = 0
    effect: str = ""


DEFENSES: list[DefenseType] = [
    DefenseType(
        id="deflection-inducer",
        name="Deflection Inducer",
        category=DefenseCategory.screen,
        progress_level=7,
        hull_percentage=5,
        power_required=3,
        cost=10_000,
        cost_per_hull=True,
        effect="-1 step to be hit by all attacks",
    ),
    DefenseType(
        id="chaff",
        name="Chaff Dispenser",
        category=DefenseCategory.countermeasure,
        progress_level=6,
        hull_points=1,
        cost=25_000,
        coverage=50,
        effect="+1 step penalty for guided weapons",
    ),
    DefenseType(
        id="jammer",
        name="Jammer",
        category=DefenseCategory.countermeasure,
        progress_level=7,
        hull_points=1,
        power_required=1,
        cost=100_000,
        coverage=100,
        effect="+2 step penalty for guided weapons",
    ),
    DefenseType(
        id="decoy-drone",
        name="Decoy Drone",
        category=DefenseCategory.countermeasure,
        progress_level=7,
        hull_points=2,
        cost=150_000,
        coverage=200,
    ),
    DefenseType(
        id="damage-control",
        name="Damage Control",
        category=DefenseCategory.repair,
        progress_level=6,
        hull_points=2,
        cost=50_000,
        effect="-1 step bonus to Damage Checks",
    ),
    DefenseType(
        id="repair-bots",
        name="Repair Bots",
        category=DefenseCategory.repair,
        progress_level=8,
        hull_percentage=2,
        power_required=1,
        cost=2_000,
        cost_per_hull=True,
        effect="-2 step bonus to Damage Checks",
    ),
    DefenseType(
        id="capacitor",
        name="Shield Capacitor",
        category=DefenseCategory.shield_component,
        progress_level=8,
        hull_points=2,
        power_required=2,
        cost=400_000,
        shield_points=5,
    ),
]


def calculate_defense_hull_points(defense: DefenseType, ship_hull_points: int, quantity: int) -> int:
    if defense.hull_percentage:
        return math.ceil(defense.hull_percentage / 100 * ship_hull_points)
    return defense.hull_points * quantity


def calculate_defense_power(defense: DefenseType, ship_hull_points: int, quantity: int) -> int:
    if defense.hull_percentage:
        return defense.power_required
    return defense.power_required * quantity


def calculate_defense_cost(defense: DefenseType, ship_hull_points: int, quantity: int) -> int:
    if defense.cost_per_hull:
        return defense.cost * ship_hull_points
    return defense.cost * quantity
