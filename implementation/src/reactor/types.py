from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ComponentKind(str, Enum):
    FUEL_CELL = "fuelCell"
    VENT = "vent"
    COOLANT = "coolant"


@dataclass(frozen=True)
class ComponentTypeStats:
    kind: ComponentKind
    name: str
    sprite_name: str
    glyph: str  # drawn in the cell when the sprite is missing
    cost: float
    display_name: str = ""
    description: str = ""
