"""
FillLib - Pixel model, packed pixel buffer and scanline flood fill

This module provides the region replacement core of the Paint Bucket
project. It does not decode or encode images; see ImageEditingLib for the
Pillow adapters.
"""

from PB_Libs.FillLib.pixel import Pixel, TRANSPARENT_BLACK
from PB_Libs.FillLib.pixel_buffer import PixelBuffer
from PB_Libs.FillLib.flood_fill import (
    FillRequest,
    FillStats,
    FloodFillEngine,
    alpha_multiplier,
    fill,
    find_run_starts,
    submit_fill,
)

__all__ = [
    "Pixel",
    "TRANSPARENT_BLACK",
    "PixelBuffer",
    "FillRequest",
    "FillStats",
    "FloodFillEngine",
    "alpha_multiplier",
    "fill",
    "find_run_starts",
    "submit_fill",
]
