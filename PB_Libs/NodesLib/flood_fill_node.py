"""
Flood Fill Node for Paint Bucket.

This node applies a paint-bucket fill to an image and can generate a mask
showing which pixels were changed.

Classes:
    FloodFillNodeConfig: Configuration for flood fill node

Functions:
    execute_flood_fill_node: Pipeline executor for flood fill nodes
    create_flood_fill_node: Helper to create flood fill node dictionary
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from PB_Libs.constants import (
    DEFAULT_ANTIALIAS,
    DEFAULT_TOLERANCE,
    NODE_TYPE_FLOOD_FILL,
)
from PB_Libs.FillLib.flood_fill import fill
from PB_Libs.FillLib.pixel import Pixel
from PB_Libs.ImageEditingLib.image_editing_ops import (
    buffer_from_image,
    build_change_mask,
    image_from_buffer,
)
from PB_Libs.ImageEditingLib.image_models import Point, RgbaColor


def _clamp_channel(value: int) -> int:
    return int(max(0, min(255, value)))


@dataclass
class FloodFillNodeConfig:
    """Configuration for flood fill node execution.

    Attributes:
        seed_x: X coordinate of the seed point
        seed_y: Y coordinate of the seed point
        fill_color_r: Red component of the fill color (0-255)
        fill_color_g: Green component of the fill color (0-255)
        fill_color_b: Blue component of the fill color (0-255)
        fill_color_a: Alpha component of the fill color (0-255, default 255)
        tolerance: Maximum color difference from the seed color (0-1020)
        antialias: Fade the fill toward the tolerance limit
        output_mask: If True, return (image, mask) tuple; else just image
    """
    seed_x: int = 0
    seed_y: int = 0
    fill_color_r: int = 0
    fill_color_g: int = 0
    fill_color_b: int = 0
    fill_color_a: int = 255
    tolerance: int = DEFAULT_TOLERANCE
    antialias: bool = DEFAULT_ANTIALIAS
    output_mask: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FloodFillNodeConfig":
        """Create from dictionary."""
        normalized = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**normalized)

    def get_seed(self) -> Point:
        """Get the seed point as (x, y)."""
        return (int(self.seed_x), int(self.seed_y))

    def get_fill_pixel(self) -> Pixel:
        """Get the fill color as a Pixel, channels clamped to 0-255."""
        return Pixel(
            _clamp_channel(self.fill_color_r),
            _clamp_channel(self.fill_color_g),
            _clamp_channel(self.fill_color_b),
            _clamp_channel(self.fill_color_a),
        )


def execute_flood_fill_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Pipeline executor for flood fill nodes.

    Fills the region around the configured seed in the input image, using
    the seed pixel's own color as the target.

    Args:
        node: Node dictionary containing FloodFillNodeConfig fields as node properties
        inputs: Should contain exactly one element: the input PIL Image

    Returns:
        - If output_mask=True: Tuple of (filled_image, change_mask)
        - If output_mask=False: Just filled_image

    Raises:
        ValueError: If inputs list is empty
        TypeError: If input is not a PIL Image
        IndexError: If the seed is outside the image
    """
    if not inputs:
        raise ValueError("Flood fill node requires 1 input image")

    image = inputs[0]

    if not hasattr(image, "size") or not hasattr(image, "getpixel"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    config = FloodFillNodeConfig.from_dict(node)

    original = buffer_from_image(image)
    buffer = original.copy()
    seed = config.get_seed()
    target = buffer.get_pixel(*seed)

    fill(
        buffer,
        seed,
        target,
        config.get_fill_pixel(),
        tolerance=config.tolerance,
        antialias=config.antialias,
    )

    filled_image = image_from_buffer(buffer, template=image)
    if config.output_mask:
        return (filled_image, build_change_mask(original, buffer))
    return filled_image


def create_flood_fill_node(
    node_id: str,
    seed: Point,
    fill_color: RgbaColor,
    tolerance: int = DEFAULT_TOLERANCE,
    antialias: bool = DEFAULT_ANTIALIAS,
    output_mask: bool = False,
) -> Dict[str, Any]:
    """
    Helper to create a flood fill node dictionary for graph building.

    Args:
        node_id: Unique node identifier
        seed: (x, y) seed point
        fill_color: RGBA tuple for the replacement color
        tolerance: Maximum color difference from the seed color
        antialias: Fade the fill toward the tolerance limit
        output_mask: Whether to output a change mask

    Returns:
        Node dictionary ready for graph serialization
    """
    x, y = seed
    r, g, b, a = fill_color

    return {
        "id": node_id,
        "type": NODE_TYPE_FLOOD_FILL,
        "output_ports": ["image", "mask"] if output_mask else ["image"],
        "seed_x": x,
        "seed_y": y,
        "fill_color_r": r,
        "fill_color_g": g,
        "fill_color_b": b,
        "fill_color_a": a,
        "tolerance": tolerance,
        "antialias": antialias,
        "output_mask": output_mask,
    }
