from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from reactor.components import ReactorComponent, create_component
from reactor.grid import ReactorGrid
from reactor.layout import Layout
from reactor.store import ResourceState
from reactor.types import ComponentKind


class TickOutcome(str, Enum):
    NORMAL = "normal"
    MELTDOWN = "meltdown"
    OVERLOAD = "overload"


def assess(state: ResourceState) -> TickOutcome:
    """Classify the state left behind by a tick. Overload outranks meltdown."""
    if state.overloaded:
        return TickOutcome.OVERLOAD
    if state.overheated:
        return TickOutcome.MELTDOWN
    return TickOutcome.NORMAL


@dataclass
class Simulation:
    """One game session: the reactor grid plus the rules layered on top of it.

    The grid only knows how to tick. This class decides when to tick, charges
    for components, and applies the two failure policies after every tick:
    - Meltdown (heat > capacity): every fuel cell is destroyed, heat resets to 0.
    - Overload (power at capacity): the whole grid is cleared.
    """
    width: int = 6
    height: int = 6
    state: ResourceState = field(default_factory=ResourceState)
    grid: ReactorGrid = field(init=False)

    ticks_per_second: float = 1.0
    paused: bool = False
    _tick_accumulator: float = 0.0

    # Palette selection: a component kind, or delete mode.
    selected_kind: Optional[ComponentKind] = None
    delete_mode: bool = False

    total_ticks: int = 0
    meltdowns: int = 0
    overloads: int = 0
    last_outcome: TickOutcome = TickOutcome.NORMAL
    last_heat_change: float = 0.0
    last_power_change: float = 0.0

    def __post_init__(self) -> None:
        self.grid = ReactorGrid(width=self.width, height=self.height, state=self.state)

    # ── Scheduling ───────────────────────────────────────────────

    def step(self, dt: float) -> int:
        """Accumulate time and fire ticks at the configured rate."""
        if self.paused:
            self._tick_accumulator = 0.0
            return 0
        self._tick_accumulator += dt
        tick_interval = 1.0 / self.ticks_per_second if self.ticks_per_second > 0 else 1.0
        fired = 0
        while self._tick_accumulator >= tick_interval:
            self._tick_accumulator -= tick_interval
            self.tick()
            fired += 1
        return fired

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        if self.paused:
            self._tick_accumulator = 0.0
        return self.paused

    def tick(self) -> TickOutcome:
        heat_before = self.state.heat
        power_before = self.state.power
        self.grid.tick()
        self.total_ticks += 1
        self.last_heat_change = self.state.heat - heat_before
        self.last_power_change = self.state.power - power_before

        outcome = TickOutcome.NORMAL
        if self.state.overheated:
            destroyed = self.grid.clear_fuel_cells()
            self.state.heat = 0.0
            self.meltdowns += 1
            outcome = TickOutcome.MELTDOWN
            print(f"[reactor] Meltdown! {destroyed} fuel cell(s) destroyed.")
        if self.state.overloaded:
            destroyed = self.grid.clear()
            self.overloads += 1
            outcome = TickOutcome.OVERLOAD
            print(f"[reactor] Overload! {destroyed} component(s) destroyed.")
        self.last_outcome = outcome
        return outcome

    # ── Player actions ───────────────────────────────────────────

    def buy_component(self, kind: ComponentKind, x: int, y: int) -> bool:
        comp = create_component(kind)
        if not self.state.can_afford(comp.cost):
            return False
        if not self.grid.place(comp, x, y):
            return False
        self.state.spend(comp.cost)
        return True

    def remove_component(self, x: int, y: int) -> Optional[ReactorComponent]:
        # No refund.
        return self.grid.remove(x, y)

    def sell_power(self) -> float:
        return self.state.sell_power()

    def select(self, kind: Optional[ComponentKind]) -> None:
        self.selected_kind = ComponentKind(kind) if kind is not None else None
        self.delete_mode = False

    def select_delete(self) -> None:
        self.selected_kind = None
        self.delete_mode = True

    def click_cell(self, x: int, y: int) -> bool:
        """Apply the selected palette tool to a cell. Returns True on change."""
        if self.delete_mode:
            return self.remove_component(x, y) is not None
        if self.selected_kind is None:
            return False
        return self.buy_component(self.selected_kind, x, y)

    def reset_game(self) -> None:
        self.state = ResourceState()
        self.grid = ReactorGrid(width=self.width, height=self.height, state=self.state)
        self._tick_accumulator = 0.0
        self.total_ticks = 0
        self.meltdowns = 0
        self.overloads = 0
        self.last_outcome = TickOutcome.NORMAL
        self.last_heat_change = 0.0
        self.last_power_change = 0.0


def demo_simulation(layout: Layout | None = None) -> Simulation:
    layout = layout or Layout()
    # Starts paused until the player presses Start.
    return Simulation(
        width=layout.grid_width,
        height=layout.grid_height,
        ticks_per_second=layout.ticks_per_second,
        paused=True,
    )
