"""ANSI color escapes: 256-color palette quantization and 24-bit truecolor."""

import math
from enum import Enum

ESC = "\x1b"
RESET = f"{ESC}[0m"


class ColorMode(str, Enum):
    NONE = "none"
    INDEXED256 = "256"
    TRUECOLOR = "truecolor"


def round_half_up(x: float) -> int:
    # Python's round() is banker's rounding; palette boundaries need .5 -> up
    return int(math.floor(x + 0.5))


# -----------------------------
# 256-color palette
# -----------------------------
def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """
    Map RGB to the xterm 256-color palette.

    Exact grays use the 24-step grayscale ramp (232..255), clamped to the
    cube's black (16) and white (231) at the ends. Everything else goes
    through the 6x6x6 cube (16..231).
    """
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return round_half_up((r - 8) / 247 * 24) + 232

    r_idx = round_half_up(r / 255 * 5)
    g_idx = round_half_up(g / 255 * 5)
    b_idx = round_half_up(b / 255 * 5)
    return 16 + 36 * r_idx + 6 * g_idx + b_idx


def ansi256_escape(code: int) -> str:
    return f"{ESC}[38;5;{code}m"


def truecolor_escape(r: int, g: int, b: int) -> str:
    return f"{ESC}[38;2;{r};{g};{b}m"


def color_escape(mode: ColorMode, r: int, g: int, b: int) -> str:
    """Foreground escape for `mode`; empty string when color is off."""
    if mode is ColorMode.TRUECOLOR:
        return truecolor_escape(r, g, b)
    if mode is ColorMode.INDEXED256:
        return ansi256_escape(rgb_to_ansi256(r, g, b))
    if mode is ColorMode.NONE:
        return ""
    raise ValueError(f"Unknown color mode: {mode}")
