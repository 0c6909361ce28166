"""
ImageEditingLib - Pillow adapters for the flood fill core

This module converts between Pillow images and PixelBuffers and provides
the high-level paint-bucket operation for the Paint Bucket project.
"""

from PB_Libs.ImageEditingLib.image_models import ImageRecord, RgbaColor, Point
from PB_Libs.ImageEditingLib.image_editing_ops import (
    load_image,
    buffer_from_image,
    image_from_buffer,
    color_to_pixel,
    image_by_replacing_color_at,
    build_change_mask,
    save_images,
)

__all__ = [
    "ImageRecord",
    "RgbaColor",
    "Point",
    "load_image",
    "buffer_from_image",
    "image_from_buffer",
    "color_to_pixel",
    "image_by_replacing_color_at",
    "build_change_mask",
    "save_images",
]
