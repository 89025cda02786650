"""Static definitions for damage-zone layouts and hit-location rules.

A ship's interior is divided into damage zones.  The hull's size class picks
the layout, which fixes both the zone codes and the die rolled for hit
location:

  small-craft   2 zones  d6
  light         4 zones  d8
  medium        6 zones  d8
  heavy         8 zones  d12
  super-heavy  12 zones  d20   (up to 2000 hull points)
  super-heavy  20 zones  d20   (above 2000 hull points)

Zone codes read fore to aft: F (fore), FC (forward center), P / S (port /
starboard), AC (aft center), A (aft), with compound codes such as FFP
(forward-forward port) on the largest hulls.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from shipyard.data.hulls import HullSize


class AttackDirection(str, enum.Enum):
    forward = "forward"
    port = "port"
    starboard = "starboard"
    aft = "aft"


ZONE_NAMES: dict[str, str] = {
    "F": "Fore",
    "A": "Aft",
    "FC": "Forward Center",
    "AC": "Aft Center",
    "P": "Port",
    "S": "Starboard",
    "FP": "Forward Port",
    "FS": "Forward Starboard",
    "AP": "Aft Port",
    "AS": "Aft Starboard",
    "CF": "Center Forward",
    "CA": "Center Aft",
    "FFP": "Forward-Forward Port",
    "FFC": "Forward-Forward Center",
    "FFS": "Forward-Forward Starboard",
    "PC": "Port Center",
    "SC": "Starboard Center",
    "AAP": "Aft-Aft Port",
    "AAC": "Aft-Aft Center",
    "AAS": "Aft-Aft Starboard",
}

# Zones hit first from each direction; codes not listed sort last
DIRECTION_PRIORITY: dict[AttackDirection, tuple[str, ...]] = {
    AttackDirection.forward: (
        "F", "FFP", "FFC", "FFS", "FC", "FP", "FS", "CF", "P", "S",
        "PC", "SC", "AC", "AP", "AS", "CA", "AAP", "AAC", "AAS", "A",
    ),
    AttackDirection.aft: (
        "A", "AAP", "AAC", "AAS", "AC", "AP", "AS", "CA", "P", "S",
        "PC", "SC", "FC", "FP", "FS", "CF", "FFP", "FFC", "FFS", "F",
    ),
    AttackDirection.port: (
        "P", "FP", "AP", "FFP", "AAP", "PC", "FC", "AC", "F", "A", "S", "SC",
    ),
    AttackDirection.starboard: (
        "S", "FS", "AS", "FFS", "AAS", "SC", "FC", "AC", "F", "A", "P", "PC",
    ),
}


@dataclass(frozen=True)
class DamageZoneLayout:
    id: str
    name: str
    size_class: HullSize
    zones: tuple[str, ...]
    hit_die: int
    # Largest hull (in hull points) this layout applies to; None = no limit
    max_hull_points: int | None = None

    def __post_init__(self) -> None:
        if not self.zones:
            raise ValueError(f"Damage zone layout '{self.id}' has no zones")
        if self.hit_die < 1:
            raise ValueError(f"Damage zone layout '{self.id}' needs a hit die of at least 1")

    @property
    def zone_count(self) -> int:
        return len(self.zones)


DAMAGE_ZONE_LAYOUTS: list[DamageZoneLayout] = [
    DamageZoneLayout(
        id="small-craft",
        name="Small Craft (2 zones)",
        size_class=HullSize.small_craft,
        zones=("F", "A"),
        hit_die=6,
    ),
    DamageZoneLayout(
        id="light",
        name="Light Ship (4 zones)",
        size_class=HullSize.light,
        zones=("F", "FC", "AC", "A"),
        hit_die=8,
    ),
    DamageZoneLayout(
        id="medium",
        name="Medium Ship (6 zones)",
        size_class=HullSize.medium,
        zones=("F", "FC", "P", "S", "AC", "A"),
        hit_die=8,
    ),
    DamageZoneLayout(
        id="heavy",
        name="Heavy Ship (8 zones)",
        size_class=HullSize.heavy,
        zones=("F", "FP", "FS", "FC", "AC", "AP", "AS", "A"),
        hit_die=12,
    ),
    DamageZoneLayout(
        id="super-heavy",
        name="Super-Heavy Ship (12 zones)",
        size_class=HullSize.super_heavy,
        zones=("F", "FP", "FS", "FC", "CF", "P", "S", "CA", "AC", "AP", "AS", "A"),
        hit_die=20,
        max_hull_points=2000,
    ),
    DamageZoneLayout(
        id="super-heavy-20",
        name="Super-Heavy Ship (20 zones)",
        size_class=HullSize.super_heavy,
        zones=(
            "F", "FFP", "FFC", "FFS", "FP", "FS", "FC", "CF", "P", "PC",
            "S", "SC", "CA", "AC", "AP", "AS", "AAP", "AAC", "AAS", "A",
        ),
        hit_die=20,
    ),
]


def order_zones_for_direction(zones: tuple[str, ...], direction: AttackDirection) -> list[str]:
    priority = DIRECTION_PRIORITY[direction]

    def rank(code: str) -> int:
        return priority.index(code) if code in priority else len(priority)

    return sorted(zones, key=rank)
