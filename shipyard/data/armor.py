"""Static definitions for armor materials and armor weights.

An armor layer is one (weight, material) pair.  The weight decides how much
of the hull it occupies; the material decides protection and price:

  light        0% of base hull points (cost charged on 1 hull point)
  medium       5%
  heavy       10%
  super-heavy 20%

Percentages always apply to base hull points (never bonus hull points) and
are rounded up.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from shipyard.data.hulls import HullType


class ArmorWeight(str, enum.Enum):
    light = "light"
    medium = "medium"
    heavy = "heavy"
    super_heavy = "super-heavy"


ARMOR_WEIGHT_HULL_PERCENT: dict[ArmorWeight, int] = {
    ArmorWeight.light: 0,
    ArmorWeight.medium: 5,
    ArmorWeight.heavy: 10,
    ArmorWeight.super_heavy: 20,
}


@dataclass(frozen=True)
class ArmorType:
    """Definition of an armor material."""
    id: str
    name: str
    progress_level: int
    cost_per_hull_point: int
    protection_li: str = ""   # vs low impact
    protection_hi: str = ""   # vs high impact
    protection_en: str = ""   # vs energy
    description: str = ""


ARMOR_TYPES: list[ArmorType] = [
    ArmorType(
        id="polymeric",
        name="Polymeric",
        progress_level=6,
        cost_per_hull_point=10_000,
        protection_li="d4-1",
        protection_hi="d4-2",
        protection_en="d4-2",
    ),
    ArmorType(
        id="alloy",
        name="Alloy",
        progress_level=6,
        cost_per_hull_point=20_000,
        protection_li="d6-1",
        protection_hi="d6-2",
        protection_en="d4",
    ),
    ArmorType(
        id="ablative",
        name="Ablative",
        progress_level=7,
        cost_per_hull_point=30_000,
        protection_li="d4",
        protection_hi="d4",
        protection_en="d6+1",
    ),
    ArmorType(
        id="cerametal",
        name="Cerametal",
        progress_level=7,
        cost_per_hull_point=50_000,
        protection_li="d6+1",
        protection_hi="d6",
        protection_en="d6",
    ),
    ArmorType(
        id="neutronite",
        name="Neutronite",
        progress_level=8,
        cost_per_hull_point=100_000,
        protection_li="d8+1",
        protection_hi="d8",
        protection_en="d8",
    ),
]


def calculate_armor_hull_points(hull: HullType, weight: ArmorWeight) -> int:
    return math.ceil(hull.hull_points * ARMOR_WEIGHT_HULL_PERCENT[weight] / 100)


def calculate_armor_cost(hull: HullType, weight: ArmorWeight, armor: ArmorType) -> int:
    # Light armor still pays for one hull point of material
    return max(1, calculate_armor_hull_points(hull, weight)) * armor.cost_per_hull_point
