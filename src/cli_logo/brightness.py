import math

from .charsets import CharacterRamp

# Broadcast luma weights (Rec. 601)
R_WEIGHT = 0.299
G_WEIGHT = 0.587
B_WEIGHT = 0.114


def luma(r: int, g: int, b: int) -> float:
    """Brightness in [0,1]: 0 = black, 1 = white."""
    return (R_WEIGHT * r + G_WEIGHT * g + B_WEIGHT * b) / 255


def ramp_index(brightness: float, length: int) -> int:
    idx = math.floor((1 - brightness) * (length - 1))
    # white can land a hair above 1.0
    return max(0, min(idx, length - 1))


def pick_glyph(ramp: CharacterRamp, r: int, g: int, b: int) -> str:
    return ramp[ramp_index(luma(r, g, b), len(ramp))]
