"""Asset path resolution for the desktop front-end.

Sprites live under ``implementation/assets/sprites`` (generated by
``scripts/make_component_sprites.py``), with an optional
REACTOR_ASSETS_DIR environment override.
"""
from __future__ import annotations

import os
from pathlib import Path


def repo_root() -> Path:
    here = Path(__file__).resolve()
    # .../implementation/src/assets.py -> repo root is 2 levels up
    return here.parents[2]


def assets_root() -> Path:
    override = os.environ.get("REACTOR_ASSETS_DIR")
    if override:
        return Path(override).resolve()
    return repo_root() / "implementation" / "assets"


def sprites_dir() -> Path:
    return assets_root() / "sprites"


def sprite_path(name: str) -> Path:
    if not name.lower().endswith(".png"):
        name = f"{name}.png"
    p = sprites_dir() / name
    if p.exists():
        return p
    raise FileNotFoundError(f"Sprite not found: {name}")
