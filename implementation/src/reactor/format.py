from __future__ import annotations

import math


_SUFFIXES = ["", "K", "M", "B", "T", "Qa", "Qi", "Sx", "Sp", "O", "N"]


def format_number_with_suffix(value: float, max_decimals: int = 1) -> str:
    """Short HUD number: 999 -> "999", 1500 -> "1.5K", 2e6 -> "2M"."""
    if not math.isfinite(value) or value == 0.0:
        return "0"
    abs_val = abs(value)
    group = 0
    if abs_val >= 1000.0:
        group = min(int(math.floor(math.log10(abs_val))) // 3, len(_SUFFIXES) - 1)
    scaled = value / (10 ** (group * 3))
    if group < len(_SUFFIXES) - 1 and abs(scaled) >= 999.95:
        group += 1
        scaled /= 1000.0
    if group == 0:
        # Plain values are floored.
        return str(int(math.floor(value)))
    out = f"{scaled:.{max(0, max_decimals)}f}"
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    return f"{out}{_SUFFIXES[group]}"


def format_ratio(value: float, capacity: float) -> str:
    return f"{format_number_with_suffix(value)}/{format_number_with_suffix(capacity)}"
