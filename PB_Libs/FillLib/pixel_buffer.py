"""
Packed pixel buffer for Paint Bucket.

The buffer owns a flat, row-major NumPy array of packed 32-bit pixels
(see ``Pixel.uint32_value``) with the origin at the top-left corner, so
the pixel at ``(x, y)`` lives at index ``x + width * y``.

Every access is bounds-checked. Call sites derive their coordinates from
the buffer itself, so an out-of-range access is a programming error and
raises ``IndexError`` immediately.

Classes:
    PixelBuffer: Mutable packed pixel storage with index mapping
"""

from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from PB_Libs.FillLib.pixel import Pixel

PIXEL_DTYPE = np.uint32


class PixelBuffer:
    """
    Mutable width x height grid of packed pixels.

    Example:
        >>> buffer = PixelBuffer.filled(4, 4, Pixel(0, 0, 0, 255))
        >>> buffer.set_pixel(3, 3, Pixel(255, 255, 255, 255))
        >>> buffer[buffer.index_from(3, 3)]
        Pixel(r=255, g=255, b=255, a=255)
    """

    def __init__(self, width: int, height: int, data: Optional[Iterable[int]] = None):
        """
        Create a buffer.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)
            data: Optional packed pixels, row-major, ``width * height`` long.
                  The values are copied. Defaults to all transparent black.

        Raises:
            ValueError: If the dimensions are not positive or ``data`` has
                        the wrong length
        """
        width = int(width)
        height = int(height)
        if width < 1 or height < 1:
            raise ValueError(f"Buffer dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height

        if data is None:
            self._data = np.zeros(width * height, dtype=PIXEL_DTYPE)
        else:
            array = np.array(data, dtype=PIXEL_DTYPE).ravel()
            if array.size != width * height:
                raise ValueError(
                    f"Expected {width * height} pixels for {width}x{height}, got {array.size}"
                )
            self._data = array

    @classmethod
    def filled(cls, width: int, height: int, pixel: Pixel) -> "PixelBuffer":
        """Create a buffer with every pixel set to ``pixel``."""
        buffer = cls(width, height)
        buffer._data.fill(pixel.uint32_value)
        return buffer

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Iterable[Pixel]) -> "PixelBuffer":
        """Create a buffer from row-major Pixel values."""
        return cls(width, height, [pixel.uint32_value for pixel in pixels])

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def data(self) -> np.ndarray:
        """The backing packed-pixel array (shared, not a copy)."""
        return self._data

    def __len__(self) -> int:
        return self._data.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self._width}, height={self._height})"

    # ------------------------------------------------------------------
    # Index mapping
    # ------------------------------------------------------------------

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def index_from(self, x: int, y: int) -> int:
        """
        Map a coordinate to a flat index.

        Raises:
            IndexError: If ``(x, y)`` is outside the buffer
        """
        if not self.contains(x, y):
            raise IndexError(f"Point ({x}, {y}) outside {self._width}x{self._height} buffer")
        return x + self._width * y

    def point_from(self, index: int) -> Tuple[int, int]:
        """Map a flat index back to its ``(x, y)`` coordinate."""
        self._check_index(index)
        return (index % self._width, index // self._width)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._data.size:
            raise IndexError(f"Index {index} outside buffer of {self._data.size} pixels")

    # ------------------------------------------------------------------
    # Pixel access
    # ------------------------------------------------------------------

    def __getitem__(self, index: int) -> Pixel:
        self._check_index(index)
        return Pixel.from_uint32(self._data[index])

    def __setitem__(self, index: int, pixel: Pixel) -> None:
        self._check_index(index)
        self._data[index] = pixel.uint32_value

    def get_pixel(self, x: int, y: int) -> Pixel:
        return self[self.index_from(x, y)]

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        self[self.index_from(x, y)] = pixel

    def difference_at_index(self, index: int, pixel: Pixel) -> int:
        """Tolerance metric between the pixel at ``index`` and ``pixel``."""
        return pixel.diff(self[index])

    def difference_at_point(self, x: int, y: int, pixel: Pixel) -> int:
        return self.difference_at_index(self.index_from(x, y), pixel)

    def pixels(self) -> Iterator[Pixel]:
        """Iterate over all pixels in row-major order."""
        for value in self._data:
            yield Pixel.from_uint32(value)

    # ------------------------------------------------------------------
    # Whole-buffer helpers
    # ------------------------------------------------------------------

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self._width, self._height, self._data)

    def changed_indices(self, other: "PixelBuffer") -> List[int]:
        """
        Indices where this buffer and ``other`` hold different pixels.

        Raises:
            ValueError: If the buffers have different dimensions
        """
        if self.size != other.size:
            raise ValueError(f"Buffer sizes differ: {self.size} vs {other.size}")
        return np.flatnonzero(self._data != other._data).tolist()
