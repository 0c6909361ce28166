"""
Pytest configuration and shared fixtures for Paint Bucket tests.

This module provides shared test fixtures and a reference flood fill used
across multiple test modules.
"""

from collections import deque
from typing import Set

import pytest

from PB_Libs.FillLib.pixel import Pixel
from PB_Libs.FillLib.pixel_buffer import PixelBuffer


BLACK = Pixel(0, 0, 0, 255)
WHITE = Pixel(255, 255, 255, 255)
RED = Pixel(255, 0, 0, 255)


def _bfs_region(buffer: PixelBuffer, seed, target: Pixel, tolerance: int) -> Set[int]:
    """
    Per-pixel BFS over the 4-connected region matching ``target``.

    Slow but obviously correct; used as an oracle for the scanline fill.
    """
    start = buffer.index_from(*seed)
    if not buffer[start].matches(target, tolerance):
        return set()

    region = {start}
    queue = deque([seed])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if not buffer.contains(nx, ny):
                continue
            index = buffer.index_from(nx, ny)
            if index in region:
                continue
            if buffer[index].matches(target, tolerance):
                region.add(index)
                queue.append((nx, ny))
    return region


@pytest.fixture
def reference_region():
    """Provide the per-pixel BFS region oracle."""
    return _bfs_region


@pytest.fixture
def black_buffer_with_white_corner():
    """
    Provide a 4x4 black buffer whose bottom-right pixel is white.

    Returns:
        PixelBuffer of size 4x4
    """
    buffer = PixelBuffer.filled(4, 4, BLACK)
    buffer.set_pixel(3, 3, WHITE)
    return buffer


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 255),  # Gray
        (10, 20, 30, 0),     # Transparent
    ]
