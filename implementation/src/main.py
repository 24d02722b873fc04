from __future__ import annotations

from raylib_compat import (
    KEY_SPACE,
    MOUSE_BUTTON_LEFT,
    Texture2D,
    begin_drawing,
    clear_background,
    close_window,
    end_drawing,
    get_frame_time,
    get_mouse_position,
    init_window,
    is_key_pressed,
    is_mouse_button_pressed,
    load_texture,
    set_exit_key,
    set_target_fps,
    unload_texture,
    window_should_close,
)

from assets import sprite_path
from reactor.catalog import palette
from reactor.layout import PALETTE_DELETE, Layout, hit, load_layout
from reactor.simulation import Simulation, TickOutcome, demo_simulation
from reactor.types import ComponentKind
from reactor.ui import BACKGROUND, Ui


def _load_component_sprites() -> dict[ComponentKind, Texture2D]:
    sprites = {}
    for stats in palette():
        try:
            path = sprite_path(stats.sprite_name)
        except FileNotFoundError as e:
            print(f"[assets] {e}; drawing '{stats.glyph}' instead")
            continue
        sprites[stats.kind] = load_texture(str(path))
    return sprites


def handle_click(sim: Simulation, layout: Layout, mx: float, my: float) -> None:
    """Route a left click to the palette, the buttons, or the grid."""
    tools = [stats.kind.value for stats in palette()]
    for tool, x, y, w, h in layout.palette_slots(tools):
        if hit((x, y, w, h), mx, my):
            if tool == PALETTE_DELETE:
                sim.select_delete()
            else:
                sim.select(ComponentKind(tool))
            return

    buttons = layout.button_rects()
    if hit(buttons["sell"], mx, my):
        sim.sell_power()
        return
    if hit(buttons["run"], mx, my):
        sim.toggle_pause()
        return

    cell = layout.screen_to_cell(mx, my)
    if cell is not None:
        sim.click_cell(*cell)


def main() -> None:
    layout = load_layout()
    init_window(layout.window_width, layout.window_height, "Reactor Grid")
    set_exit_key(0)  # Disable raylib's default ESC-to-close
    set_target_fps(60)

    sim = demo_simulation(layout)
    ui = Ui(component_sprites=_load_component_sprites())

    try:
        while not window_should_close():
            dt = get_frame_time()
            mouse = get_mouse_position()

            if is_key_pressed(KEY_SPACE):
                sim.toggle_pause()
            if is_mouse_button_pressed(MOUSE_BUTTON_LEFT):
                handle_click(sim, layout, mouse.x, mouse.y)

            if sim.step(dt) and sim.last_outcome != TickOutcome.NORMAL:
                ui.notify(sim.last_outcome, layout.banner_seconds)
            ui.update(dt)

            begin_drawing()
            clear_background(BACKGROUND)
            ui.draw(sim, layout, mouse.x, mouse.y)
            end_drawing()
    finally:
        for tex in ui.component_sprites.values():
            unload_texture(tex)
        close_window()


if __name__ == "__main__":
    main()
