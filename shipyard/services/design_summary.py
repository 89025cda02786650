"""Design aggregates: hull points used, power balance, and total cost.

These are owned by the editor rather than the load pipeline; the pipeline
only guarantees that each installed record carries its own derived values.
"""

from __future__ import annotations

from dataclasses import dataclass

from shipyard.services.design_state import DesignState


@dataclass(frozen=True)
class DesignSummary:
    hull_points_available: int
    hull_points_used: int
    power_generated: int
    power_consumed: int
    total_cost: int

    @property
    def hull_points_remaining(self) -> int:
        return self.hull_points_available - self.hull_points_used

    @property
    def power_balance(self) -> int:
        return self.power_generated - self.power_consumed


def _consumers(state: DesignState) -> list:
    return [
        *state.engines,
        *state.ftl_drives,
        *state.life_support,
        *state.accommodations,
        *state.store_systems,
        *state.gravity_systems,
        *state.defenses,
        *state.command_control,
        *state.sensors,
        *state.hangar_misc,
        *state.weapons,
        *state.launch_systems,
    ]


def _loadout_cost(state: DesignState) -> int:
    """Price of the ordnance carried in every launcher."""
    prices = {design.id: design.cost for design in state.ordnance_designs}
    return sum(
        prices.get(item.design_id, 0) * item.quantity
        for launcher in state.launch_systems
        for item in launcher.loadout
    )


def summarize(state: DesignState) -> DesignSummary:
    consumers = _consumers(state)
    tanks = [*state.fuel_tanks, *state.engine_fuel_tanks, *state.ftl_fuel_tanks]
    hull_points_used = (
        sum(layer.hull_points for layer in state.armor_layers)
        + sum(plant.hull_points for plant in state.power_plants)
        + sum(tank.hull_points for tank in tanks)
        + sum(system.hull_points for system in consumers)
    )
    total_cost = (
        state.hull.cost
        + sum(layer.cost for layer in state.armor_layers)
        + sum(plant.cost for plant in state.power_plants)
        + sum(tank.cost for tank in tanks)
        + sum(system.cost for system in consumers)
        + _loadout_cost(state)
    )
    return DesignSummary(
        hull_points_available=state.hull.total_hull_points,
        hull_points_used=hull_points_used,
        power_generated=sum(plant.power for plant in state.power_plants),
        power_consumed=sum(system.power for system in consumers),
        total_cost=total_cost,
    )
