from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ResourceState:
    heat: float = 0.0
    heat_capacity: float = 1000.0
    power: float = 0.0
    power_capacity: float = 100.0
    money: float = 50.0

    total_power_produced: float = 0.0
    total_heat_dissipated: float = 0.0
    total_power_sold: float = 0.0
    total_money_earned: float = 0.0

    @property
    def overheated(self) -> bool:
        return self.heat > self.heat_capacity

    @property
    def overloaded(self) -> bool:
        return self.power >= self.power_capacity

    def add_heat(self, amount: float) -> None:
        # Not clamped: heat above capacity is how a meltdown gets noticed.
        if amount <= 0.0:
            return
        self.heat += amount

    def remove_heat(self, amount: float) -> float:
        if amount <= 0.0:
            return 0.0
        prev = self.heat
        self.heat = max(0.0, self.heat - amount)
        removed = prev - self.heat
        self.total_heat_dissipated += removed
        return removed

    def add_power(self, amount: float) -> float:
        """Credit power up to capacity. Returns the amount actually stored."""
        if amount <= 0.0:
            return 0.0
        prev = self.power
        self.power = min(self.power + amount, self.power_capacity)
        credited = self.power - prev
        self.total_power_produced += credited
        return credited

    def sell_power(self) -> float:
        """Convert all stored power to money at 1:1."""
        sold = self.power
        self.power = 0.0
        if sold > 0.0:
            self.money += sold
            self.total_power_sold += sold
            self.total_money_earned += sold
        return sold

    def can_afford(self, cost: float) -> bool:
        return self.money >= cost

    def spend(self, cost: float) -> bool:
        if cost < 0.0 or not self.can_afford(cost):
            return False
        self.money -= cost
        return True
