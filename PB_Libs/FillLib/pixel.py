"""
Pixel color model for Paint Bucket.

A pixel is four 8-bit channels (red, green, blue, alpha). It has two
lossless representations: a packed 32-bit integer with alpha in the
highest byte followed by red, green and blue, and an unpacked
``(r, g, b, a)`` tuple.

Classes:
    Pixel: Immutable RGBA value with the tolerance metric and compositing

Constants:
    TRANSPARENT_BLACK: Fallback pixel for unrecognized color models
"""

from dataclasses import dataclass
from typing import Any, Tuple
import logging

from PB_Libs.constants import (
    ALPHA_SHIFT,
    BLUE_SHIFT,
    CHANNEL_MASK,
    CHANNEL_MAX,
    CHANNEL_MIN,
    COLOR_MODE_GRAYSCALE,
    COLOR_MODE_GRAYSCALE_ALPHA,
    COLOR_MODE_RGB,
    COLOR_MODE_RGBA,
    GREEN_SHIFT,
    RED_SHIFT,
)
from PB_Libs.pillow_compat import ImageColor

logger = logging.getLogger(__name__)

RgbaTuple = Tuple[int, int, int, int]


def _channel_diff(left: int, right: int) -> int:
    return max(left, right) - min(left, right)


def _clamp_byte(value: float) -> int:
    return int(max(CHANNEL_MIN, min(CHANNEL_MAX, round(value))))


@dataclass(frozen=True)
class Pixel:
    """An RGBA pixel with 8 bits per channel.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha channel (0-255, 255 is opaque)
    """

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Channel '{name}' must be an int, got {type(value).__name__}")
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ValueError(f"Channel '{name}' out of range 0-255: {value}")

    # ------------------------------------------------------------------
    # Representations
    # ------------------------------------------------------------------

    @classmethod
    def _unchecked(cls, r: int, g: int, b: int, a: int) -> "Pixel":
        # Caller guarantees four ints in 0-255; skips __post_init__.
        pixel = object.__new__(cls)
        object.__setattr__(pixel, "r", r)
        object.__setattr__(pixel, "g", g)
        object.__setattr__(pixel, "b", b)
        object.__setattr__(pixel, "a", a)
        return pixel

    @classmethod
    def from_uint32(cls, value: int) -> "Pixel":
        """Unpack a pixel from its packed 32-bit form."""
        value = int(value)
        return cls._unchecked(
            (value >> RED_SHIFT) & CHANNEL_MASK,
            (value >> GREEN_SHIFT) & CHANNEL_MASK,
            (value >> BLUE_SHIFT) & CHANNEL_MASK,
            (value >> ALPHA_SHIFT) & CHANNEL_MASK,
        )

    @property
    def uint32_value(self) -> int:
        """The packed 32-bit form, alpha in the highest byte."""
        return (
            (self.a << ALPHA_SHIFT)
            | (self.r << RED_SHIFT)
            | (self.g << GREEN_SHIFT)
            | (self.b << BLUE_SHIFT)
        )

    @classmethod
    def from_tuple(cls, values: Tuple[int, ...]) -> "Pixel":
        r, g, b, a = values
        return cls(int(r), int(g), int(b), int(a))

    def as_tuple(self) -> RgbaTuple:
        return (self.r, self.g, self.b, self.a)

    # ------------------------------------------------------------------
    # Host color construction
    # ------------------------------------------------------------------

    @classmethod
    def from_color(cls, value: Any, mode: str) -> "Pixel":
        """
        Build a pixel from a host color value in a given color model.

        The color models are Pillow image modes. Grayscale values expand to
        equal red, green and blue channels. An unrecognized mode yields a
        fully transparent black pixel instead of raising.

        Args:
            value: Color value as Pillow returns it for ``mode``
                   (an int for "L", a tuple otherwise)
            mode: One of "L", "LA", "RGB" or "RGBA"

        Returns:
            The corresponding Pixel
        """
        if mode == COLOR_MODE_GRAYSCALE:
            white = value[0] if isinstance(value, (tuple, list)) else value
            return cls(int(white), int(white), int(white), CHANNEL_MAX)

        if mode == COLOR_MODE_GRAYSCALE_ALPHA:
            white, alpha = value
            return cls(int(white), int(white), int(white), int(alpha))

        if mode == COLOR_MODE_RGB:
            r, g, b = value[:3]
            return cls(int(r), int(g), int(b), CHANNEL_MAX)

        if mode == COLOR_MODE_RGBA:
            return cls.from_tuple(tuple(value))

        logger.warning(f"Unsupported color model '{mode}', using transparent black")
        return TRANSPARENT_BLACK

    @classmethod
    def from_components(cls, r: float, g: float, b: float, a: float = 1.0) -> "Pixel":
        """
        Build a pixel from normalized float components in [0, 1].

        Components are scaled by 255 and truncated, the way UI color
        pickers hand colors over.
        """
        return cls(
            int(max(0.0, min(1.0, r)) * CHANNEL_MAX),
            int(max(0.0, min(1.0, g)) * CHANNEL_MAX),
            int(max(0.0, min(1.0, b)) * CHANNEL_MAX),
            int(max(0.0, min(1.0, a)) * CHANNEL_MAX),
        )

    @property
    def color(self) -> Tuple[float, float, float, float]:
        """Normalized float components (r, g, b, a) in [0, 1]."""
        return (
            self.r / CHANNEL_MAX,
            self.g / CHANNEL_MAX,
            self.b / CHANNEL_MAX,
            self.a / CHANNEL_MAX,
        )

    @classmethod
    def parse(cls, text: str) -> "Pixel":
        """
        Parse a color string.

        Accepts anything ``PIL.ImageColor`` understands ("#ff0000",
        "#ff000080", "red", "rgb(255, 0, 0)") plus bare comma-separated
        channels ("255,0,0" or "255,0,0,128").

        Raises:
            ValueError: If the string is not a valid color
        """
        text = str(text).strip()
        if "," in text and not text.endswith(")"):
            parts = [part.strip() for part in text.split(",")]
            if len(parts) not in (3, 4):
                raise ValueError(f"Expected 3 or 4 channels, got {len(parts)}: {text!r}")
            try:
                channels = [int(part) for part in parts]
            except ValueError:
                raise ValueError(f"Invalid channel value in color: {text!r}") from None
            if len(channels) == 3:
                channels.append(CHANNEL_MAX)
            return cls.from_tuple(tuple(channels))

        return cls.from_tuple(ImageColor.getcolor(text, COLOR_MODE_RGBA))

    # ------------------------------------------------------------------
    # Tolerance metric
    # ------------------------------------------------------------------

    def diff(self, other: "Pixel") -> int:
        """
        Sum of per-channel absolute differences, in [0, 1020].

        This is the tolerance metric: cheap and monotonic, not perceptual.
        """
        return (
            _channel_diff(self.r, other.r)
            + _channel_diff(self.g, other.g)
            + _channel_diff(self.b, other.b)
            + _channel_diff(self.a, other.a)
        )

    def matches(self, other: "Pixel", tolerance: int) -> bool:
        return self.diff(other) <= tolerance

    # ------------------------------------------------------------------
    # Compositing
    # ------------------------------------------------------------------

    def multiply_alpha(self, factor: float) -> "Pixel":
        """Scale alpha by ``factor`` (clamped to [0, 1]), keeping color channels."""
        factor = max(0.0, min(1.0, float(factor)))
        return Pixel(self.r, self.g, self.b, _clamp_byte(self.a * factor))

    def blend(self, overlay: "Pixel") -> "Pixel":
        """
        Composite ``overlay`` over this pixel (straight alpha "over").

        A fully transparent overlay leaves this pixel unchanged and a fully
        opaque overlay replaces it, both exactly.

        Args:
            overlay: Pixel drawn on top

        Returns:
            The composited pixel
        """
        if overlay.a == CHANNEL_MIN:
            return self
        if overlay.a == CHANNEL_MAX:
            return overlay

        top = overlay.a / CHANNEL_MAX
        bottom = (self.a / CHANNEL_MAX) * (1.0 - top)
        out_alpha = top + bottom

        def mix(over: int, under: int) -> int:
            return _clamp_byte((over * top + under * bottom) / out_alpha)

        return Pixel(
            mix(overlay.r, self.r),
            mix(overlay.g, self.g),
            mix(overlay.b, self.b),
            _clamp_byte(out_alpha * CHANNEL_MAX),
        )


TRANSPARENT_BLACK = Pixel(0, 0, 0, 0)
