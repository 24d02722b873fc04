from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from raylib_compat import (
    Color,
    Texture2D,
    Vector2,
    draw_rectangle,
    draw_rectangle_lines,
    draw_text,
    draw_texture_ex,
    measure_text,
)

from reactor.catalog import palette, stats_for
from reactor.components import CoolantCell, FuelCell, ReactorComponent
from reactor.format import format_number_with_suffix, format_ratio
from reactor.layout import PALETTE_DELETE, Layout, hit
from reactor.simulation import Simulation, TickOutcome
from reactor.types import ComponentKind


BACKGROUND = Color(24, 26, 32, 255)
GRID_LINE = Color(70, 74, 90, 255)
TEXT = Color(230, 230, 235, 255)
HEAT_COLOR = Color(240, 80, 80, 255)
POWER_COLOR = Color(80, 200, 255, 255)
MONEY_COLOR = Color(120, 220, 120, 255)
BUTTON = Color(52, 56, 70, 255)
BUTTON_HOVER = Color(72, 78, 98, 255)
SELECTED = Color(245, 200, 70, 255)
WHITE = Color(255, 255, 255, 255)

# Cell fill when a component has no sprite, keyed by kind.
_KIND_COLORS = {
    ComponentKind.FUEL_CELL: Color(70, 160, 70, 255),
    ComponentKind.VENT: Color(90, 120, 200, 255),
    ComponentKind.COOLANT: Color(60, 180, 200, 255),
}


@dataclass
class Ui:
    component_sprites: Dict[ComponentKind, Texture2D] = field(default_factory=dict)
    banner_text: str = ""
    banner_timer: float = 0.0

    def notify(self, outcome: TickOutcome, seconds: float) -> None:
        if outcome == TickOutcome.MELTDOWN:
            self.banner_text = "Reactor Meltdown! All fuel cells destroyed."
        elif outcome == TickOutcome.OVERLOAD:
            self.banner_text = "Power Overload! All components destroyed."
        else:
            return
        self.banner_timer = seconds

    def update(self, dt: float) -> None:
        if self.banner_timer > 0.0:
            self.banner_timer = max(0.0, self.banner_timer - dt)

    def draw(self, sim: Simulation, layout: Layout, mouse_x: float, mouse_y: float) -> None:
        state = sim.state
        draw_text(
            f"$ {format_number_with_suffix(state.money)}",
            layout.hud_x,
            layout.hud_y,
            20,
            MONEY_COLOR,
        )
        self._draw_bar(
            layout.heat_bar_x, layout.heat_bar_y, layout,
            state.heat, state.heat_capacity, HEAT_COLOR, "Heat",
        )
        self._draw_bar(
            layout.power_bar_x, layout.power_bar_y, layout,
            state.power, state.power_capacity, POWER_COLOR, "Power",
        )
        self.draw_palette(sim, layout, mouse_x, mouse_y)
        self.draw_buttons(sim, layout, mouse_x, mouse_y)
        self.draw_grid(sim, layout)
        if self.banner_timer > 0.0 and self.banner_text:
            self._draw_banner(layout)

    def _draw_bar(
        self,
        x: int,
        y: int,
        layout: Layout,
        value: float,
        capacity: float,
        color: Color,
        label: str,
    ) -> None:
        fill = 0.0
        if capacity > 0:
            fill = min(1.0, max(0.0, value / capacity))
        draw_rectangle(x, y, layout.bar_width, layout.bar_height, BUTTON)
        draw_rectangle(x, y, int(layout.bar_width * fill), layout.bar_height, color)
        draw_rectangle_lines(x, y, layout.bar_width, layout.bar_height, GRID_LINE)
        draw_text(f"{label}: {format_ratio(value, capacity)}", x + 6, y + 6, 16, WHITE)

    def draw_palette(self, sim: Simulation, layout: Layout, mouse_x: float, mouse_y: float) -> None:
        tools = [stats.kind.value for stats in palette()]
        for tool, x, y, w, h in layout.palette_slots(tools):
            hovered = hit((x, y, w, h), mouse_x, mouse_y)
            draw_rectangle(x, y, w, h, BUTTON_HOVER if hovered else BUTTON)
            if tool == PALETTE_DELETE:
                selected = sim.delete_mode
                label = "Delete"
            else:
                stats = stats_for(ComponentKind(tool))
                selected = sim.selected_kind == stats.kind
                affordable = sim.state.can_afford(stats.cost)
                label = f"{stats.display_name}  ${format_number_with_suffix(stats.cost)}"
                if not affordable:
                    label += "  (need $)"
            if selected:
                draw_rectangle_lines(x, y, w, h, SELECTED)
            draw_text(label, x + 10, y + (h - 16) // 2, 16, TEXT)

    def draw_buttons(self, sim: Simulation, layout: Layout, mouse_x: float, mouse_y: float) -> None:
        labels = {
            "sell": "Sell power",
            "run": "Start" if sim.paused else "Pause",
        }
        for name, rect in layout.button_rects().items():
            x, y, w, h = rect
            draw_rectangle(x, y, w, h, BUTTON_HOVER if hit(rect, mouse_x, mouse_y) else BUTTON)
            draw_rectangle_lines(x, y, w, h, GRID_LINE)
            label = labels[name]
            text_w = measure_text(label, 16)
            draw_text(label, x + (w - text_w) // 2, y + (h - 16) // 2, 16, TEXT)

    def draw_grid(self, sim: Simulation, layout: Layout) -> None:
        size = layout.grid_cell_size
        for x, y, comp in sim.grid.iter_cells():
            px, py = layout.cell_to_screen(x, y)
            draw_rectangle_lines(px, py, size, size, GRID_LINE)
            if comp is not None:
                self._draw_component(comp, px, py, size)

    def _draw_component(self, comp: ReactorComponent, px: int, py: int, size: int) -> None:
        sprite: Optional[Texture2D] = self.component_sprites.get(comp.kind)
        if sprite is not None:
            scale = size / max(1, sprite.width)
            draw_texture_ex(sprite, Vector2(px, py), 0.0, scale, WHITE)
        else:
            draw_rectangle(px + 2, py + 2, size - 4, size - 4, _KIND_COLORS[comp.kind])
            glyph = comp.stats.glyph
            glyph_w = measure_text(glyph, 28)
            draw_text(glyph, px + (size - glyph_w) // 2, py + (size - 28) // 2, 28, WHITE)

        # Per-cell gauges: remaining fuel life, coolant fill.
        gauge = None
        if isinstance(comp, FuelCell):
            gauge = 1.0 - min(1.0, comp.age / comp.lifespan) if comp.lifespan > 0 else 0.0
        elif isinstance(comp, CoolantCell):
            gauge = comp.stored_heat / comp.capacity if comp.capacity > 0 else 0.0
        if gauge is not None:
            draw_rectangle(px + 4, py + size - 8, int((size - 8) * gauge), 4, SELECTED)

    def _draw_banner(self, layout: Layout) -> None:
        h = 44
        y = layout.window_height // 2 - h // 2
        draw_rectangle(0, y, layout.window_width, h, Color(120, 20, 20, 230))
        text_w = measure_text(self.banner_text, 20)
        draw_text(self.banner_text, (layout.window_width - text_w) // 2, y + 12, 20, WHITE)
