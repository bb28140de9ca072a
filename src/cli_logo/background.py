"""
Border-connected background detection.

Only background-like pixels reachable from the image border through other
background-like pixels are marked, so an enclosed white region (an eye, a
highlight) survives while the surrounding canvas becomes transparent.
"""

import logging
from collections import deque

import numpy as np

from .pixels import PixelBuffer

DEFAULT_THRESHOLD = 250
ALPHA_CUTOFF = 128

LOG = logging.getLogger(__name__)


def background_like(buffer: PixelBuffer, threshold: int = DEFAULT_THRESHOLD) -> np.ndarray:
    """Flat bool array: translucent (alpha < 128) or near-white in all of R, G, B."""
    px = buffer.as_array().reshape(-1, 4)
    translucent = px[:, 3] < ALPHA_CUTOFF
    light = np.all(px[:, :3] >= threshold, axis=1)
    return translucent | light


def _border_indices(width: int, height: int):
    for x in range(width):
        yield x
        if height > 1:
            yield (height - 1) * width + x
    for y in range(1, height - 1):
        yield y * width
        if width > 1:
            yield y * width + width - 1


def find_background(buffer: PixelBuffer, threshold: int = DEFAULT_THRESHOLD) -> np.ndarray:
    """
    Multi-source BFS flood fill seeded from every background-like border pixel.

    Returns a new flat bool mask of length width*height. Expansion is
    4-connected; each pixel is enqueued at most once.
    """
    width, height = buffer.width, buffer.height
    mask = np.zeros(width * height, dtype=bool)
    if width == 0 or height == 0:
        return mask

    candidate = background_like(buffer, threshold)

    queue = deque()
    for idx in _border_indices(width, height):
        if candidate[idx] and not mask[idx]:
            mask[idx] = True
            queue.append(idx)

    while queue:
        idx = queue.popleft()
        y, x = divmod(idx, width)

        neighbors = []
        if y > 0:
            neighbors.append(idx - width)
        if y < height - 1:
            neighbors.append(idx + width)
        if x > 0:
            neighbors.append(idx - 1)
        if x < width - 1:
            neighbors.append(idx + 1)

        for n in neighbors:
            if not mask[n] and candidate[n]:
                mask[n] = True
                queue.append(n)

    LOG.debug(
        "Background fill marked %d of %d pixels (threshold=%d)",
        int(mask.sum()),
        mask.size,
        threshold,
    )
    return mask
