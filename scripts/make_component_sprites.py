#!/usr/bin/env python3
"""Render the placeholder component sprites used by the desktop front-end.

Outputs one 64x64 PNG per catalog entry into implementation/assets/sprites
(FuelCell.png, Vent.png, Coolant.png): a rounded tile in the component's
colour with its glyph letter centred on it.
"""

import sys
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "implementation" / "src"))

from reactor.catalog import palette  # noqa: E402
from reactor.types import ComponentKind  # noqa: E402

OUT_DIR = ROOT / "implementation" / "assets" / "sprites"

CELL = 64

COLORS = {
    ComponentKind.FUEL_CELL: (70, 160, 70, 255),
    ComponentKind.VENT: (90, 120, 200, 255),
    ComponentKind.COOLANT: (60, 180, 200, 255),
}


def _font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf", size)
    except (OSError, IOError):
        return ImageFont.load_default()


def render_sprite(glyph, color):
    img = Image.new("RGBA", (CELL, CELL), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rounded_rectangle([2, 2, CELL - 3, CELL - 3], radius=8, fill=color, outline=(20, 20, 20, 255), width=2)
    font = _font(34)
    left, top, right, bottom = draw.textbbox((0, 0), glyph, font=font)
    x = (CELL - (right - left)) // 2 - left
    y = (CELL - (bottom - top)) // 2 - top
    draw.text((x, y), glyph, fill=(255, 255, 255, 255), font=font)
    return img


def main():
    OUT_DIR.mkdir(parents=True, exist_ok=True)
    for stats in palette():
        img = render_sprite(stats.glyph, COLORS[stats.kind])
        out = OUT_DIR / stats.sprite_name
        img.save(out)
        print(f"Sprite: {out}")


if __name__ == "__main__":
    main()
