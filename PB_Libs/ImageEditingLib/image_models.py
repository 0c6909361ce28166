"""
Image editing data models for Paint Bucket.

This module defines core data structures used throughout the image editing system.

Classes:
    ImageRecord: Container for an image's path and both original and filled versions

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
    Point: An (x, y) tuple of pixel coordinates
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from PB_Libs.pillow_compat import Image

RgbaColor = Tuple[int, int, int, int]
Point = Tuple[int, int]


@dataclass
class ImageRecord:
    path: Path
    original: 'Image.Image'
    modified: 'Image.Image'
