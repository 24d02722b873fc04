from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, List, Optional, Tuple

from reactor.catalog import stats_for
from reactor.store import ResourceState
from reactor.types import ComponentKind, ComponentTypeStats

if TYPE_CHECKING:
    from reactor.grid import ReactorGrid


@dataclass
class TickContext:
    """Everything a component may touch during its tick."""
    state: ResourceState
    grid: "ReactorGrid"


@dataclass(eq=False)
class ReactorComponent:
    """Base for everything that can sit in a reactor cell.

    Position and the grid back-reference are owned by the grid: they are
    bound by ReactorGrid.place and cleared by ReactorGrid.remove. The
    back-reference is only ever used to look up neighbours.
    """
    kind: ClassVar[ComponentKind]

    grid_x: int = field(default=0, init=False)
    grid_y: int = field(default=0, init=False)
    grid: Optional["ReactorGrid"] = field(default=None, init=False, repr=False)

    @property
    def stats(self) -> ComponentTypeStats:
        return stats_for(self.kind)

    @property
    def cost(self) -> float:
        return self.stats.cost

    @property
    def position(self) -> Tuple[int, int]:
        return self.grid_x, self.grid_y

    @property
    def placed(self) -> bool:
        return self.grid is not None

    def bind(self, grid: "ReactorGrid", x: int, y: int) -> None:
        self.grid_x = x
        self.grid_y = y
        self.grid = grid

    def unbind(self) -> None:
        self.grid = None

    def neighbours(self) -> List["ReactorComponent"]:
        if self.grid is None:
            return []
        return self.grid.adjacent(self.grid_x, self.grid_y)

    def tick(self, ctx: TickContext) -> None:
        pass


@dataclass(eq=False)
class FuelCell(ReactorComponent):
    kind: ClassVar[ComponentKind] = ComponentKind.FUEL_CELL

    age: int = 0
    lifespan: int = 15 * 60
    base_power: float = 1.0
    base_heat: float = 1.0

    @property
    def depleted(self) -> bool:
        return self.age >= self.lifespan

    @property
    def pulses(self) -> int:
        # Linear model: one pulse for the cell plus one per orthogonal fuel neighbour.
        return 1 + sum(1 for comp in self.neighbours() if isinstance(comp, FuelCell))

    def tick(self, ctx: TickContext) -> None:
        if self.depleted:
            return
        self.age += 1
        pulses = self.pulses
        ctx.state.add_power(self.base_power * pulses)
        ctx.state.add_heat(self.base_heat * pulses)


@dataclass(eq=False)
class Vent(ReactorComponent):
    kind: ClassVar[ComponentKind] = ComponentKind.VENT

    cooling_rate: float = 2.0

    def tick(self, ctx: TickContext) -> None:
        ctx.state.remove_heat(self.cooling_rate)


@dataclass(eq=False)
class CoolantCell(ReactorComponent):
    """Passive heat store, filled by the grid's redistribution pass."""
    kind: ClassVar[ComponentKind] = ComponentKind.COOLANT

    capacity: float = 200.0
    stored_heat: float = 0.0

    @property
    def free_capacity(self) -> float:
        return max(0.0, self.capacity - self.stored_heat)

    def accept_heat(self, amount: float) -> float:
        """Store as much of ``amount`` as fits and return the excess."""
        if amount <= 0.0:
            return amount
        accepted = min(amount, self.free_capacity)
        self.stored_heat += accepted
        return amount - accepted


_FACTORIES = {
    ComponentKind.FUEL_CELL: FuelCell,
    ComponentKind.VENT: Vent,
    ComponentKind.COOLANT: CoolantCell,
}


def create_component(kind: ComponentKind) -> ReactorComponent:
    return _FACTORIES[ComponentKind(kind)]()
