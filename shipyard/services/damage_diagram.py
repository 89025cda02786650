"""Damage diagram helpers: zone layout selection and default hit-location charts."""

from __future__ import annotations

import math

from shipyard.data.categories import CatalogCategory
from shipyard.data.damage_zones import AttackDirection, DamageZoneLayout, order_zones_for_direction
from shipyard.data.hulls import HullType
from shipyard.services.design_state import (
    DamageZone,
    HitLocationChart,
    HitLocationColumn,
    HitLocationEntry,
)


def select_layout(hull: HullType, catalog) -> DamageZoneLayout | None:
    """Pick the zone layout for a hull from the catalog.

    Layouts of the hull's size class are tried from the smallest hull-point
    ceiling upwards; a layout without a ceiling matches any hull.
    """
    candidates = [
        layout for layout in catalog.get_all(CatalogCategory.damage_zone)
        if layout.size_class == hull.size_class
    ]
    candidates.sort(key=lambda l: (l.max_hull_points is None, l.max_hull_points or 0))
    for layout in candidates:
        if layout.max_hull_points is None or hull.hull_points <= layout.max_hull_points:
            return layout
    return None


def zone_limit(hull: HullType, layout: DamageZoneLayout) -> int:
    if hull.zone_limit is not None:
        return hull.zone_limit
    return math.ceil(hull.hull_points / layout.zone_count)


def create_empty_zones(hull: HullType, layout: DamageZoneLayout) -> list[DamageZone]:
    limit = zone_limit(hull, layout)
    return [DamageZone(code=code, max_hull_points=limit) for code in layout.zones]


def create_default_hit_location_chart(layout: DamageZoneLayout) -> HitLocationChart:
    """Spread the die faces evenly across the zones for each attack direction.

    Every zone gets hit_die // zones faces; the remainder goes one each to
    the zones nearest the attacker.
    """
    base_rolls, extra_rolls = divmod(layout.hit_die, layout.zone_count)
    columns = []
    for direction in AttackDirection:
        entries = []
        current = 1
        for idx, zone in enumerate(order_zones_for_direction(layout.zones, direction)):
            count = base_rolls + (1 if idx < extra_rolls else 0)
            if count == 0:
                continue
            entries.append(HitLocationEntry(min_roll=current, max_roll=current + count - 1, zone=zone))
            current += count
        columns.append(HitLocationColumn(direction=direction.value, entries=entries))
    return HitLocationChart(hit_die=layout.hit_die, columns=columns)


def chart_matches_layout(chart: HitLocationChart, layout: DamageZoneLayout) -> bool:
    if chart.hit_die != layout.hit_die:
        return False
    zones = set(layout.zones)
    return all(entry.zone in zones for column in chart.columns for entry in column.entries)
