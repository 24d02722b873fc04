from reactor.catalog import palette, stats_for
from reactor.components import CoolantCell, FuelCell, TickContext, Vent, create_component
from reactor.grid import ReactorGrid
from reactor.store import ResourceState
from reactor.types import ComponentKind


def make_grid() -> ReactorGrid:
    return ReactorGrid(width=6, height=6, state=ResourceState())


def test_variant_costs_and_kinds() -> None:
    assert FuelCell().cost == 10
    assert Vent().cost == 5
    assert CoolantCell().cost == 20
    assert FuelCell().kind == ComponentKind.FUEL_CELL
    assert Vent().kind == ComponentKind.VENT
    assert CoolantCell().kind == ComponentKind.COOLANT


def test_variant_defaults() -> None:
    cell = FuelCell()
    assert (cell.age, cell.lifespan, cell.base_power, cell.base_heat) == (0, 900, 1, 1)
    assert Vent().cooling_rate == 2
    coolant = CoolantCell()
    assert (coolant.capacity, coolant.stored_heat) == (200, 0)


def test_create_component_builds_each_kind() -> None:
    assert isinstance(create_component(ComponentKind.FUEL_CELL), FuelCell)
    assert isinstance(create_component(ComponentKind.VENT), Vent)
    assert isinstance(create_component("coolant"), CoolantCell)


def test_palette_order_and_glyphs() -> None:
    kinds = [stats.kind for stats in palette()]
    assert kinds == [ComponentKind.FUEL_CELL, ComponentKind.VENT, ComponentKind.COOLANT]
    assert [stats_for(kind).glyph for kind in kinds] == ["F", "V", "C"]


def test_lone_fuel_cell_has_one_pulse() -> None:
    grid = make_grid()
    cell = FuelCell()
    grid.place(cell, 2, 2)
    assert cell.pulses == 1


def test_fuel_cell_surrounded_by_fuel_has_five_pulses() -> None:
    grid = make_grid()
    center = FuelCell()
    grid.place(center, 2, 2)
    for x, y in [(3, 2), (1, 2), (2, 3), (2, 1)]:
        grid.place(FuelCell(), x, y)
    assert center.pulses == 5


def test_diagonal_fuel_neighbour_does_not_pulse() -> None:
    grid = make_grid()
    cell = FuelCell()
    grid.place(cell, 2, 2)
    grid.place(FuelCell(), 3, 3)
    grid.place(FuelCell(), 1, 1)
    assert cell.pulses == 1


def test_non_fuel_neighbours_do_not_pulse() -> None:
    grid = make_grid()
    cell = FuelCell()
    grid.place(cell, 0, 0)
    grid.place(Vent(), 1, 0)
    grid.place(CoolantCell(), 0, 1)
    assert cell.pulses == 1


def test_unplaced_fuel_cell_ticks_alone() -> None:
    state = ResourceState()
    cell = FuelCell()
    cell.tick(TickContext(state=state, grid=make_grid()))
    assert (state.power, state.heat, cell.age) == (1, 1, 1)


def test_fuel_cell_tick_adds_pulses_of_power_and_heat() -> None:
    grid = make_grid()
    cell = FuelCell()
    grid.place(cell, 2, 2)
    grid.place(FuelCell(), 2, 3)
    cell.tick(TickContext(state=grid.state, grid=grid))
    assert grid.state.power == 2
    assert grid.state.heat == 2
    assert cell.age == 1


def test_depleted_fuel_cell_does_nothing() -> None:
    grid = make_grid()
    cell = FuelCell()
    cell.age = cell.lifespan
    grid.place(cell, 0, 0)
    cell.tick(TickContext(state=grid.state, grid=grid))
    assert cell.depleted
    assert cell.age == cell.lifespan
    assert grid.state.power == 0
    assert grid.state.heat == 0


def test_depleted_neighbour_still_counts_as_fuel() -> None:
    grid = make_grid()
    cell = FuelCell()
    spent = FuelCell()
    spent.age = spent.lifespan
    grid.place(cell, 0, 0)
    grid.place(spent, 1, 0)
    assert cell.pulses == 2


def test_vent_removes_heat_floored_at_zero() -> None:
    state = ResourceState(heat=5)
    ctx = TickContext(state=state, grid=make_grid())
    vent = Vent()
    vent.tick(ctx)
    assert state.heat == 3
    vent.tick(ctx)
    vent.tick(ctx)
    assert state.heat == 0


def test_coolant_tick_is_passive() -> None:
    state = ResourceState(heat=50)
    coolant = CoolantCell()
    coolant.tick(TickContext(state=state, grid=make_grid()))
    assert state.heat == 50
    assert coolant.stored_heat == 0


def test_accept_heat_stores_until_capacity() -> None:
    coolant = CoolantCell()
    assert coolant.accept_heat(50) == 0
    assert coolant.stored_heat == 50

    coolant.stored_heat = 190
    assert coolant.accept_heat(50) == 40
    assert coolant.stored_heat == 200

    assert coolant.accept_heat(10) == 10
    assert coolant.stored_heat == 200


def test_accept_heat_rejects_non_positive_amounts() -> None:
    coolant = CoolantCell(stored_heat=10)
    assert coolant.accept_heat(0) == 0
    assert coolant.accept_heat(-5) == -5
    assert coolant.stored_heat == 10
