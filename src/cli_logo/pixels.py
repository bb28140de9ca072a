"""Pixel source: decode an image with Pillow and resample it to the character grid."""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image

from .colors import round_half_up

# Terminal cells are roughly twice as tall as they are wide
CELL_ASPECT = 0.5

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA samples, 8 bits per channel, no padding."""

    width: int
    height: int
    data: bytes

    def __post_init__(self):
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"pixel buffer holds {len(self.data)} bytes, "
                f"expected {expected} for {self.width}x{self.height} RGBA"
            )

    @classmethod
    def from_image(cls, img: Image.Image) -> "PixelBuffer":
        img = img.convert("RGBA")
        return cls(img.width, img.height, img.tobytes())

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        i = (y * self.width + x) * 4
        r, g, b, a = self.data[i : i + 4]
        return r, g, b, a

    def as_array(self) -> np.ndarray:
        """HxWx4 uint8 view of the buffer (read-only)."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, 4
        )


def target_height(width: int, native_w: int, native_h: int) -> int:
    """Character rows for `width` columns, keeping the source aspect visually."""
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise ValueError(f"width must be a positive integer, got {width!r}")
    return round_half_up(width * (native_h / native_w) * CELL_ASPECT)


def resample(img: Image.Image, width: int) -> PixelBuffer:
    """Stretch `img` to exactly one sample per output character cell."""
    height = target_height(width, img.width, img.height)
    if height == 0:
        LOG.debug("Target height rounds to 0 for %dx%d source", img.width, img.height)
        return PixelBuffer(width, 0, b"")

    img = img.convert("RGBA").resize((width, height), Image.Resampling.LANCZOS)
    LOG.debug("Resampled %s to %dx%d", img.mode, width, height)
    return PixelBuffer.from_image(img)


def load_pixels(image_path: str, width: int) -> PixelBuffer:
    # Pillow errors (missing file, undecodable data) propagate to the caller
    with Image.open(image_path) as img:
        LOG.debug("Opened %s (%dx%d %s)", image_path, img.width, img.height, img.mode)
        return resample(img, width)
