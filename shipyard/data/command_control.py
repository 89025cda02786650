"""Static definitions for command, communication, and computer systems.

Categories:
  COMMAND        - cockpit (per station) or command deck (scales with ship)
  COMMUNICATION  - transceivers
  COMPUTER       - computer cores and control computers

Fire control and sensor control computers are *linked* systems: each one is
dedicated to a single weapon battery or sensor, and its price is the base
cost multiplied by the hull points of whatever it is linked to.  That price
is never stored; it is recomputed whenever the design is loaded.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class CommandControlCategory(str, enum.Enum):
    command = "command"
    communication = "communication"
    computer = "computer"


class LinkedSystemType(str, enum.Enum):
    weapon = "weapon"
    sensor = "sensor"


@dataclass(frozen=True)
class CommandControlType:
    id: str
    name: str
    category: CommandControlCategory
    progress_level: int
    hull_points: int = 0
    power_required: int = 0
    cost: int = 0
    cost_per_hull: bool = False
    # Hull points scale with the ship: ceil(ship HP / hull_points_per_ship)
    hull_points_per_ship: int | None = None
    max_hull_points: int | None = None
    linked_system: LinkedSystemType | None = None
    quality: str | None = None
    step_bonus: int = 0


COMMAND_CONTROL: list[CommandControlType] = [
    CommandControlType(
        id="cockpit",
        name="Cockpit",
        category=CommandControlCategory.command,
        progress_level=6,
        hull_points=1,
        cost=20_000,
    ),
    CommandControlType(
        id="command-deck",
        name="Command Deck",
        category=CommandControlCategory.command,
        progress_level=6,
        hull_points=2,
        power_required=1,
        cost=2_000,
        cost_per_hull=True,
        hull_points_per_ship=100,
        max_hull_points=10,
    ),
    CommandControlType(
        id="radio-transceiver",
        name="Radio Transceiver",
        category=CommandControlCategory.communication,
        progress_level=6,
        hull_points=1,
        cost=5_000,
    ),
    CommandControlType(
        id="laser-transceiver",
        name="Laser Transceiver",
        category=CommandControlCategory.communication,
        progress_level=7,
        hull_points=1,
        power_required=1,
        cost=10_000,
    ),
    CommandControlType(
        id="computer-core-ordinary",
        name="Computer Core (Ordinary)",
        category=CommandControlCategory.computer,
        progress_level=6,
        power_required=1,
        cost=50_000,
        cost_per_hull=True,
        hull_points_per_ship=200,
        quality="Ordinary",
    ),
    CommandControlType(
        id="computer-core-good",
        name="Computer Core (Good)",
        category=CommandControlCategory.computer,
        progress_level=7,
        power_required=1,
        cost=100_000,
        cost_per_hull=True,
        hull_points_per_ship=200,
        quality="Good",
    ),
    CommandControlType(
        id="fire-control",
        name="Fire Control",
        category=CommandControlCategory.computer,
        progress_level=6,
        hull_points=1,
        power_required=1,
        cost=20_000,
        linked_system=LinkedSystemType.weapon,
        quality="Ordinary",
        step_bonus=1,
    ),
    CommandControlType(
        id="fire-control-good",
        name="Fire Control (Good)",
        category=CommandControlCategory.computer,
        progress_level=7,
        hull_points=1,
        power_required=1,
        cost=40_000,
        linked_system=LinkedSystemType.weapon,
        quality="Good",
        step_bonus=2,
    ),
    CommandControlType(
        id="sensor-control",
        name="Sensor Control",
        category=CommandControlCategory.computer,
        progress_level=6,
        hull_points=1,
        power_required=1,
        cost=10_000,
        linked_system=LinkedSystemType.sensor,
        quality="Ordinary",
        step_bonus=1,
    ),
]


def calculate_command_control_hull_points(
    system: CommandControlType, ship_hull_points: int, quantity: int
) -> int:
    if system.hull_points_per_ship:
        scaled = system.hull_points + math.ceil(ship_hull_points / system.hull_points_per_ship)
        if system.max_hull_points is not None:
            scaled = min(scaled, system.max_hull_points)
        return scaled
    return system.hull_points * quantity


def calculate_command_control_power(system: CommandControlType, quantity: int) -> int:
    return system.power_required * quantity


def calculate_command_control_cost(
    system: CommandControlType, ship_hull_points: int, quantity: int
) -> int:
    """Unlinked price of a C&C system (linked systems are repriced later)."""
    if system.cost_per_hull:
        return system.cost * ship_hull_points
    return system.cost * quantity


def calculate_linked_control_cost(system: CommandControlType, linked_hull_points: int) -> int:
    """Price of a fire/sensor control linked to a target of the given size."""
    return system.cost * linked_hull_points
