"""raylib compatibility layer for the desktop front-end.

Imports the raylib C bindings (or pyray as a fallback) and re-exports them
under snake_case names, wrapping the functions that expect ``const char*``
so callers can pass plain ``str``.
"""
from __future__ import annotations

try:
    from raylib import *  # type: ignore
except Exception:
    try:
        from pyray import *  # type: ignore
    except Exception as exc:
        raise ImportError(
            "Could not import raylib bindings. Install 'raylib' or 'pyray'."
        ) from exc

# Some bindings expose Color/Vector2 as structs, others use plain tuples.
if "Color" not in globals():
    def Color(r: int, g: int, b: int, a: int):  # type: ignore
        return (r, g, b, a)

if "Vector2" not in globals():
    def Vector2(x: float, y: float):  # type: ignore
        return (x, y)

if "Texture2D" not in globals():
    class Texture2D:  # type: ignore
        pass

# Map the snake_case names the front-end uses to CamelCase bindings if needed.
_CAMEL_MAP = {
    "init_window": "InitWindow",
    "set_target_fps": "SetTargetFPS",
    "window_should_close": "WindowShouldClose",
    "begin_drawing": "BeginDrawing",
    "clear_background": "ClearBackground",
    "end_drawing": "EndDrawing",
    "get_frame_time": "GetFrameTime",
    "is_key_pressed": "IsKeyPressed",
    "load_texture": "LoadTexture",
    "unload_texture": "UnloadTexture",
    "draw_text": "DrawText",
    "draw_rectangle": "DrawRectangle",
    "draw_rectangle_lines": "DrawRectangleLines",
    "draw_texture_ex": "DrawTextureEx",
    "close_window": "CloseWindow",
    "get_mouse_position": "GetMousePosition",
    "is_mouse_button_pressed": "IsMouseButtonPressed",
    "measure_text": "MeasureText",
    "set_exit_key": "SetExitKey",
}

for _snake, _camel in _CAMEL_MAP.items():
    if _snake not in globals() and _camel in globals():
        globals()[_snake] = globals()[_camel]


def _encode_text(value):  # type: ignore
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


_init_window = globals()["init_window"]
_draw_text = globals()["draw_text"]
_measure_text = globals()["measure_text"]
_load_texture = globals()["load_texture"]


def init_window(width, height, title):  # type: ignore
    return _init_window(width, height, _encode_text(title))


def draw_text(text, x, y, size, color):  # type: ignore
    return _draw_text(_encode_text(text), x, y, size, color)


def measure_text(text, size):  # type: ignore
    return _measure_text(_encode_text(text), size)


def load_texture(path):  # type: ignore
    return _load_texture(_encode_text(path))
