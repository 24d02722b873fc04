from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from reactor.components import CoolantCell, FuelCell, ReactorComponent, TickContext
from reactor.store import ResourceState
from reactor.types import ComponentKind


# right, left, down, up
_ADJACENT_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class ReactorGrid:
    """Fixed-size reactor floor holding at most one component per cell.

    Tick pipeline:
    1. Production: every occupied cell ticks, row-major (y outer, x inner).
    2. Redistribution: the shared heat pool is split equally between coolant
       cells; whatever they cannot hold goes back to the pool.

    Meltdown/overload detection is left to the caller (see simulation.py).
    """
    width: int = 6
    height: int = 6
    state: ResourceState = field(default_factory=ResourceState)
    cells: list[Optional[ReactorComponent]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.cells = [None] * (self.width * self.height)

    def index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"Grid index out of bounds: ({x}, {y})")
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[ReactorComponent]:
        if not self.in_bounds(x, y):
            return None
        return self.cells[self.index(x, y)]

    def iter_cells(self) -> Iterable[Tuple[int, int, Optional[ReactorComponent]]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.cells[y * self.width + x]

    def components(self) -> List[ReactorComponent]:
        return [comp for _, _, comp in self.iter_cells() if comp is not None]

    def coolant_cells(self) -> List[CoolantCell]:
        return [comp for comp in self.components() if isinstance(comp, CoolantCell)]

    def count(self, kind: ComponentKind) -> int:
        return sum(1 for comp in self.components() if comp.kind == kind)

    # ── Placement ────────────────────────────────────────────────

    def place(self, component: ReactorComponent, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        if self.get(x, y) is not None:
            return False
        if component.placed:
            return False
        self.cells[self.index(x, y)] = component
        component.bind(self, x, y)
        return True

    def remove(self, x: int, y: int) -> Optional[ReactorComponent]:
        existing = self.get(x, y)
        if existing is None:
            return None
        self.cells[self.index(x, y)] = None
        existing.unbind()
        return existing

    def remove_where(self, predicate: Callable[[ReactorComponent], bool]) -> int:
        removed = 0
        for x, y, comp in list(self.iter_cells()):
            if comp is not None and predicate(comp):
                self.remove(x, y)
                removed += 1
        return removed

    def clear_fuel_cells(self) -> int:
        return self.remove_where(lambda comp: isinstance(comp, FuelCell))

    def clear(self) -> int:
        return self.remove_where(lambda comp: True)

    def adjacent(self, x: int, y: int) -> List[ReactorComponent]:
        neighbours: List[ReactorComponent] = []
        for dx, dy in _ADJACENT_OFFSETS:
            comp = self.get(x + dx, y + dy)
            if comp is not None:
                neighbours.append(comp)
        return neighbours

    # ── Simulation ───────────────────────────────────────────────

    def tick(self) -> None:
        ctx = TickContext(state=self.state, grid=self)
        for comp in self.components():
            comp.tick(ctx)
        self._distribute_heat()

    def _distribute_heat(self) -> None:
        if self.state.heat <= 0.0:
            return
        coolant = self.coolant_cells()
        if not coolant:
            return
        share = self.state.heat / len(coolant)
        self.state.heat = 0.0
        for cell in coolant:
            # Excess goes straight back to the pool so total heat is conserved.
            self.state.heat += cell.accept_heat(share)
