import pytest

from reactor.store import ResourceState


def test_defaults() -> None:
    state = ResourceState()
    assert (state.heat, state.heat_capacity) == (0, 1000)
    assert (state.power, state.power_capacity) == (0, 100)
    assert state.money == 50


def test_add_heat_is_not_clamped() -> None:
    state = ResourceState()
    state.add_heat(1500)
    assert state.heat == 1500
    assert state.overheated


def test_add_heat_ignores_non_positive() -> None:
    state = ResourceState(heat=10)
    state.add_heat(-4)
    state.add_heat(0)
    assert state.heat == 10


@pytest.mark.parametrize("amount", [0, 1, 7.5, 10, 1e9])
def test_remove_heat_never_negative(amount: float) -> None:
    state = ResourceState(heat=10)
    removed = state.remove_heat(amount)
    assert state.heat >= 0
    assert removed == 10 - state.heat


def test_remove_heat_tracks_dissipation() -> None:
    state = ResourceState(heat=3)
    state.remove_heat(2)
    state.remove_heat(2)
    assert state.total_heat_dissipated == 3


@pytest.mark.parametrize("amount", [0, 1, 50, 99.5, 100, 250])
def test_add_power_is_clamped(amount: float) -> None:
    state = ResourceState(power=20)
    state.add_power(amount)
    assert 0 <= state.power <= state.power_capacity


def test_add_power_reports_credited_amount() -> None:
    state = ResourceState(power=95)
    assert state.add_power(10) == 5
    assert state.power == 100
    assert state.overloaded
    assert state.total_power_produced == 5


def test_sell_power_moves_power_to_money() -> None:
    state = ResourceState(power=42, money=8)
    sold = state.sell_power()
    assert sold == 42
    assert state.power == 0
    assert state.money == 50
    assert state.total_power_sold == 42
    assert state.total_money_earned == 42


def test_sell_power_on_zero_is_idempotent() -> None:
    state = ResourceState(power=0, money=50)
    assert state.sell_power() == 0
    assert state.sell_power() == 0
    assert state.money == 50


def test_spend_refuses_when_short() -> None:
    state = ResourceState(money=15)
    assert state.can_afford(10)
    assert state.spend(10)
    assert state.money == 5
    assert not state.spend(10)
    assert state.money == 5
