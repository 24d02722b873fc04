from __future__ import annotations

from dataclasses import asdict, dataclass
import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple


PALETTE_DELETE = "delete"


def _repo_root() -> Path:
    here = Path(__file__).resolve()
    # .../implementation/src/reactor/layout.py -> repo root is 3 levels up
    return here.parents[3]


def default_layout_path() -> Path:
    return _repo_root() / "implementation" / "layout.json"


@dataclass
class Layout:
    window_width: int = 720
    window_height: int = 480

    grid_origin_x: int = 300
    grid_origin_y: int = 60
    grid_cell_size: int = 64
    grid_width: int = 6
    grid_height: int = 6

    # One tick per second.
    ticks_per_second: float = 1.0
    banner_seconds: float = 3.0

    hud_x: int = 16
    hud_y: int = 16
    heat_bar_x: int = 16
    heat_bar_y: int = 60
    power_bar_x: int = 16
    power_bar_y: int = 100
    bar_width: int = 250
    bar_height: int = 28

    palette_x: int = 16
    palette_y: int = 160
    palette_w: int = 250
    palette_h: int = 40
    palette_gap: int = 8

    sell_x: int = 16
    sell_y: int = 380
    run_x: int = 146
    run_y: int = 380
    button_w: int = 120
    button_h: int = 40

    # ── Geometry helpers (pure, used for input hit-testing) ─────

    def cell_to_screen(self, x: int, y: int) -> Tuple[int, int]:
        return (
            self.grid_origin_x + x * self.grid_cell_size,
            self.grid_origin_y + y * self.grid_cell_size,
        )

    def screen_to_cell(self, sx: float, sy: float) -> Optional[Tuple[int, int]]:
        if sx < self.grid_origin_x or sy < self.grid_origin_y:
            return None
        x = int((sx - self.grid_origin_x) // self.grid_cell_size)
        y = int((sy - self.grid_origin_y) // self.grid_cell_size)
        if 0 <= x < self.grid_width and 0 <= y < self.grid_height:
            return x, y
        return None

    def palette_slots(self, tools: List[str]) -> List[Tuple[str, int, int, int, int]]:
        """Stacked palette buttons: (tool, x, y, w, h), delete tool last."""
        slots = []
        for i, tool in enumerate(list(tools) + [PALETTE_DELETE]):
            y = self.palette_y + i * (self.palette_h + self.palette_gap)
            slots.append((tool, self.palette_x, y, self.palette_w, self.palette_h))
        return slots

    def button_rects(self) -> Dict[str, Tuple[int, int, int, int]]:
        return {
            "sell": (self.sell_x, self.sell_y, self.button_w, self.button_h),
            "run": (self.run_x, self.run_y, self.button_w, self.button_h),
        }


def hit(rect: Tuple[int, int, int, int], mx: float, my: float) -> bool:
    x, y, w, h = rect
    return x <= mx < x + w and y <= my < y + h


def load_layout(path: Path | None = None) -> Layout:
    if path is None:
        path = default_layout_path()
    if not path.exists():
        return Layout()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return Layout()
    try:
        return Layout(**data)
    except TypeError:
        return Layout()


def save_layout(layout: Layout, path: Path | None = None) -> None:
    if path is None:
        path = default_layout_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(layout), indent=2), encoding="utf-8")
