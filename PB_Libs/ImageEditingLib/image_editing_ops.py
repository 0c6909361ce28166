"""
Core image editing operations for Paint Bucket.

This module connects Pillow images to the flood fill core: it packs an
image into a PixelBuffer, unpacks a buffer back into an image, and wraps a
whole paint-bucket fill in a single call.

Buffers always hold straight (non-premultiplied) RGBA, packed with alpha in
the highest byte followed by red, green and blue.

Functions:
    load_image: Decode an image file
    buffer_from_image: Pack a Pillow image into a PixelBuffer
    image_from_buffer: Unpack a PixelBuffer into a Pillow image
    color_to_pixel: Convert a host color value to a Pixel
    image_by_replacing_color_at: Paint-bucket fill of a Pillow image
    build_change_mask: Mask image of pixels that differ between two buffers
    save_images: Batch save multiple ImageRecords to disk
"""

from pathlib import Path
from typing import Any, Iterable, Optional, Union
import logging

import numpy as np

from PB_Libs.constants import (
    ALPHA_SHIFT,
    BLUE_SHIFT,
    BUFFER_IMAGE_MODE,
    CHANNEL_MASK,
    COLOR_MODE_RGBA,
    DEFAULT_ANTIALIAS,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_TOLERANCE,
    GREEN_SHIFT,
    MASK_CHANGED_COLOR,
    MASK_UNCHANGED_COLOR,
    OUTPUT_FILE_PREFIX,
    RED_SHIFT,
)
from PB_Libs.FillLib.flood_fill import fill
from PB_Libs.FillLib.pixel import Pixel
from PB_Libs.FillLib.pixel_buffer import PixelBuffer
from PB_Libs.ImageEditingLib.image_models import ImageRecord, Point
from PB_Libs.pillow_compat import Image

logger = logging.getLogger(__name__)

ColorValue = Union[Pixel, str, int, tuple]


def load_image(path: Path) -> Any:
    """
    Decode an image file fully into memory.

    Raises:
        OSError: If the file cannot be read or is not a recognized image
    """
    with Image.open(path) as image:
        image.load()
        return image.copy() if image.mode == BUFFER_IMAGE_MODE else image.convert(BUFFER_IMAGE_MODE)


def buffer_from_image(image: Any) -> PixelBuffer:
    """
    Pack a Pillow image into a PixelBuffer.

    The image is converted to RGBA first, so any mode Pillow can convert
    is accepted.

    Args:
        image: A PIL Image

    Returns:
        A new PixelBuffer with the image's pixels
    """
    if image.mode != BUFFER_IMAGE_MODE:
        image = image.convert(BUFFER_IMAGE_MODE)

    channels = np.asarray(image).astype(np.uint32)
    packed = (
        (channels[..., 3] << ALPHA_SHIFT)
        | (channels[..., 0] << RED_SHIFT)
        | (channels[..., 1] << GREEN_SHIFT)
        | (channels[..., 2] << BLUE_SHIFT)
    )
    return PixelBuffer(image.width, image.height, packed.ravel())


def image_from_buffer(buffer: PixelBuffer, template: Optional[Any] = None) -> Any:
    """
    Unpack a PixelBuffer into an RGBA Pillow image.

    Args:
        buffer: The buffer to unpack
        template: Optional source image whose ``info`` metadata (dpi,
                  exif orientation, ...) is carried over

    Returns:
        A new PIL Image in RGBA mode
    """
    data = buffer.data
    channels = np.stack(
        [
            (data >> RED_SHIFT) & CHANNEL_MASK,
            (data >> GREEN_SHIFT) & CHANNEL_MASK,
            (data >> BLUE_SHIFT) & CHANNEL_MASK,
            (data >> ALPHA_SHIFT) & CHANNEL_MASK,
        ],
        axis=-1,
    ).astype(np.uint8)

    image = Image.fromarray(channels.reshape(buffer.height, buffer.width, 4))
    if template is not None:
        # RGBA carries its own alpha; a palette transparency index would be stale
        image.info.update(
            {key: value for key, value in template.info.items() if key != "transparency"}
        )
    return image


def color_to_pixel(color: ColorValue, mode: str = COLOR_MODE_RGBA) -> Pixel:
    """
    Convert a host color value to a Pixel.

    Args:
        color: A Pixel, a color string (see ``Pixel.parse``), or a value in
               the Pillow color model ``mode``
        mode: Color model of ``color`` when it is not a Pixel or string

    Returns:
        The Pixel for ``color``
    """
    if isinstance(color, Pixel):
        return color
    if isinstance(color, str):
        return Pixel.parse(color)
    return Pixel.from_color(color, mode)


def image_by_replacing_color_at(
    image: Any,
    point: Point,
    color: ColorValue,
    tolerance: int = DEFAULT_TOLERANCE,
    antialias: bool = DEFAULT_ANTIALIAS,
    color_mode: str = COLOR_MODE_RGBA,
) -> Any:
    """
    Paint-bucket fill a Pillow image.

    The color at ``point`` becomes the target; every pixel connected to it
    within ``tolerance`` is replaced with ``color``. The input image is not
    modified.

    Args:
        image: Source PIL Image
        point: (x, y) seed point; float coordinates are truncated
        color: Replacement color (see ``color_to_pixel``)
        tolerance: Maximum color difference from the seed color
        antialias: Fade the replacement toward the tolerance limit
        color_mode: Color model of ``color`` when given as a tuple or int

    Returns:
        A new RGBA PIL Image with the region filled

    Raises:
        IndexError: If ``point`` is outside the image
    """
    buffer = buffer_from_image(image)
    seed = (int(point[0]), int(point[1]))
    target = buffer.get_pixel(*seed)
    replacement = color_to_pixel(color, color_mode)

    fill(buffer, seed, target, replacement, tolerance, antialias)
    return image_from_buffer(buffer, template=image)


def build_change_mask(original: PixelBuffer, modified: PixelBuffer) -> Any:
    """
    Build an RGBA mask that is white where two buffers differ.

    Raises:
        ValueError: If the buffers have different dimensions
    """
    if original.size != modified.size:
        raise ValueError(f"Buffer sizes differ: {original.size} vs {modified.size}")

    changed = (original.data != modified.data).reshape(original.height, original.width)
    mask = np.where(
        changed[..., None],
        np.array(MASK_CHANGED_COLOR, dtype=np.uint8),
        np.array(MASK_UNCHANGED_COLOR, dtype=np.uint8),
    ).astype(np.uint8)
    return Image.fromarray(mask)


def save_images(records: Iterable[ImageRecord], output_dir: Path) -> int:
    """
    Save multiple ImageRecords to disk in PNG format.

    Each image is saved with a 'filled_' prefix added to the original filename.

    Args:
        records: A sequence of ImageRecord objects to save
        output_dir: Directory path where images should be saved

    Returns:
        The number of images successfully saved

    Raises:
        OSError: If directory cannot be accessed or files cannot be written
    """
    if not output_dir.exists():
        raise OSError(f"Output directory does not exist: {output_dir}")

    if not output_dir.is_dir():
        raise OSError(f"Output path is not a directory: {output_dir}")

    saved_count = 0
    for record in records:
        save_path = output_dir / f"{OUTPUT_FILE_PREFIX}{record.path.stem}.png"
        record.modified.save(save_path, format=DEFAULT_OUTPUT_FORMAT)
        logger.info(f"Saved {save_path}")
        saved_count += 1
    return saved_count
