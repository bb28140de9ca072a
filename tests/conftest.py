"""Shared fixtures: tiny RGBA buffers and on-disk images."""

import pytest
from PIL import Image

from cli_logo.pixels import PixelBuffer

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
CLEAR = (0, 0, 0, 0)


def buffer_from_rows(rows):
    """Build a PixelBuffer from a list of rows of (r, g, b, a) tuples."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    data = bytes(c for row in rows for px in row for c in px)
    return PixelBuffer(width, height, data)


@pytest.fixture
def make_buffer():
    return buffer_from_rows


@pytest.fixture
def ring_image(tmp_path):
    """32x32 PNG: white canvas, black square in the middle with a white hole."""
    img = Image.new("RGBA", (32, 32), WHITE)
    for y in range(12, 20):
        for x in range(12, 20):
            img.putpixel((x, y), BLACK)
    for y in range(15, 17):
        for x in range(15, 17):
            img.putpixel((x, y), WHITE)
    path = tmp_path / "ring.png"
    img.save(path)
    return path


@pytest.fixture
def red_image(tmp_path):
    path = tmp_path / "red.png"
    Image.new("RGBA", (4, 4), (255, 0, 0, 255)).save(path)
    return path
