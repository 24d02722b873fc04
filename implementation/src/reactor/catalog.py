from __future__ import annotations

from typing import Dict, List

from reactor.types import ComponentKind, ComponentTypeStats


# Insertion order is the palette order.
COMPONENT_STATS: Dict[ComponentKind, ComponentTypeStats] = {
    ComponentKind.FUEL_CELL: ComponentTypeStats(
        kind=ComponentKind.FUEL_CELL,
        name="FuelCell",
        sprite_name="FuelCell.png",
        glyph="F",
        cost=10.0,
        display_name="Fuel Cell",
        description=(
            "Produces 1 power and 1 heat per pulse for 900 ticks. "
            "Each adjacent fuel cell adds a pulse."
        ),
    ),
    ComponentKind.VENT: ComponentTypeStats(
        kind=ComponentKind.VENT,
        name="Vent",
        sprite_name="Vent.png",
        glyph="V",
        cost=5.0,
        display_name="Vent",
        description="Removes 2 heat from the reactor every tick.",
    ),
    ComponentKind.COOLANT: ComponentTypeStats(
        kind=ComponentKind.COOLANT,
        name="Coolant",
        sprite_name="Coolant.png",
        glyph="C",
        cost=20.0,
        display_name="Coolant Cell",
        description="Stores up to 200 heat drawn from the reactor. Never cools down.",
    ),
}


def stats_for(kind: ComponentKind) -> ComponentTypeStats:
    return COMPONENT_STATS[ComponentKind(kind)]


def palette() -> List[ComponentTypeStats]:
    return list(COMPONENT_STATS.values())
