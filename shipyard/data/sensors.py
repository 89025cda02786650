"""Static definitions for sensor systems.

Each installed unit covers `arcs_covered` firing arcs (a ship has four), so
several units may be needed for full coverage.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_SENSOR_ARCS = 4


class SensorCategory(str, enum.Enum):
    active = "active"
    passive = "passive"
    remote = "remote"


@dataclass(frozen=True)
class SensorType:
    id: str
    name: str
    category: SensorCategory
    progress_level: int
    hull_points: int = 1
    power_required: int = 0
    cost: int = 0
    arcs_covered: int = 1
    range_short: int = 0


SENSORS: list[SensorType] = [
    SensorType(
        id="radar",
        name="Radar",
        category=SensorCategory.active,
        progress_level=6,
        hull_points=2,
        power_required=1,
        cost=50_000,
        arcs_covered=1,
        range_short=10,
    ),
    SensorType(
        id="ladar",
        name="Ladar",
        category=SensorCategory.active,
        progress_level=7,
        hull_points=2,
        power_required=2,
        cost=150_000,
        arcs_covered=2,
        range_short=15,
    ),
    SensorType(
        id="em-detector",
        name="EM Detector",
        category=SensorCategory.passive,
        progress_level=6,
        hull_points=1,
        cost=30_000,
        arcs_covered=4,
        range_short=8,
    ),
    SensorType(
        id="probe-bay",
        name="Probe Bay",
        category=SensorCategory.remote,
        progress_level=7,
        hull_points=4,
        power_required=1,
        cost=250_000,
        arcs_covered=4,
        range_short=40,
    ),
]


def calculate_sensor_stats(sensor: SensorType, quantity: int) -> tuple[int, int, int]:
    """Return (hull_points, power_required, cost) for `quantity` units."""
    return (
        sensor.hull_points * quantity,
        sensor.power_required * quantity,
        sensor.cost * quantity,
    )


def calculate_arcs_covered(sensor: SensorType, quantity: int) -> int:
    return min(sensor.arcs_covered * quantity, MAX_SENSOR_ARCS)


# Contacts tracked per sensor unit, by design progress level and the quality
# of the sensor control computer assigned to it.  -1 = unlimited.
UNLIMITED_TRACKING = -1
DEFAULT_TRACKING_PROGRESS_LEVEL = 7

TRACKING_TABLE: dict[int, dict[str, int]] = {
    6: {"none": 5, "Ordinary": 10, "Good": 20, "Amazing": 40},
    7: {"none": 10, "Ordinary": 20, "Good": 40, "Amazing": UNLIMITED_TRACKING},
    8: {"none": 20, "Ordinary": 40, "Good": UNLIMITED_TRACKING, "Amazing": UNLIMITED_TRACKING},
    9: {"none": 40, "Ordinary": UNLIMITED_TRACKING, "Good": UNLIMITED_TRACKING, "Amazing": UNLIMITED_TRACKING},
}


def calculate_tracking_capability(progress_level: int | None, quality: str | None, quantity: int) -> int:
    """Contacts `quantity` units can track; UNLIMITED_TRACKING stays unlimited.

    Progress levels outside the table use the nearest level, and an unknown
    computer quality counts as no computer.
    """
    if progress_level is None:
        progress_level = DEFAULT_TRACKING_PROGRESS_LEVEL
    level = min(max(progress_level, min(TRACKING_TABLE)), max(TRACKING_TABLE))
    row = TRACKING_TABLE[level]
    base = row.get(quality or "none", row["none"])
    if base == UNLIMITED_TRACKING:
        return UNLIMITED_TRACKING
    return base * quantity
