"""
Scanline flood fill for Paint Bucket.

The engine replaces the 4-connected region of pixels whose color is within
a tolerance of a target pixel, starting from a seed point. It works one
horizontal span at a time instead of one pixel at a time:

1. Pop any pending index; skip it if already visited or if it no longer
   matches the target.
2. Scan left and right from it along its row, writing the replacement into
   every matching, unvisited pixel. The covered columns form the span.
3. Mark the whole span visited and drop it from the pending set.
4. For the rows above and below, enqueue one representative index per
   contiguous run of unvisited matching pixels under the span.

The pending set therefore grows with the number of runs, not with the
number of matching pixels.

With antialiasing enabled the replacement is composited over each pixel
with its alpha scaled by ``(tolerance - diff) / tolerance``, so pixels at
the tolerance limit are left unchanged and the fill fades out toward the
region boundary.

Classes:
    FillRequest: Parameters of one fill call
    FillStats: Counters describing the last fill
    FloodFillEngine: Span-based flood fill over a PixelBuffer

Functions:
    fill: Run one fill on a buffer
    submit_fill: Run one fill on a concurrent.futures executor
    alpha_multiplier: Antialiasing opacity for a pixel's color difference
    find_run_starts: Offsets of the first element of each run of flags
"""

from concurrent.futures import Executor, Future
from dataclasses import dataclass
from typing import Iterable, List, Tuple
import logging

import numpy as np

from PB_Libs.constants import DEFAULT_ANTIALIAS, DEFAULT_TOLERANCE
from PB_Libs.FillLib.pixel import Pixel
from PB_Libs.FillLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


@dataclass(frozen=True)
class FillRequest:
    """Parameters of one fill call.

    Attributes:
        seed: (x, y) point the fill starts from
        target: Color being replaced, usually read from the seed
        replacement: Color written into the region
        tolerance: Maximum ``Pixel.diff`` from target for a pixel to be filled
        antialias: Fade the replacement toward the tolerance limit
    """

    seed: Point
    target: Pixel
    replacement: Pixel
    tolerance: int = DEFAULT_TOLERANCE
    antialias: bool = DEFAULT_ANTIALIAS

    def __post_init__(self):
        if isinstance(self.tolerance, bool) or not isinstance(self.tolerance, int):
            raise ValueError(f"Tolerance must be an int, got {type(self.tolerance).__name__}")
        if self.tolerance < 0:
            raise ValueError(f"Tolerance must be non-negative, got {self.tolerance}")


@dataclass
class FillStats:
    """Counters for one fill call."""

    spans: int = 0
    seeds_enqueued: int = 0
    pixels_written: int = 0


def alpha_multiplier(diff: int, tolerance: int) -> float:
    """
    Opacity of the replacement for a pixel at ``diff`` from the target.

    Returns 1.0 for an exact match and 0.0 at the tolerance limit. A zero
    tolerance always gives 1.0.
    """
    if tolerance == 0:
        return 1.0
    return (tolerance - diff) / tolerance


def find_run_starts(flags: Iterable[bool]) -> List[int]:
    """
    Find the first offset of each maximal run of true flags.

    Example:
        >>> find_run_starts([False, True, True, False, True])
        [1, 4]
    """
    starts: List[int] = []
    in_run = False
    for offset, flag in enumerate(flags):
        if flag and not in_run:
            starts.append(offset)
        in_run = bool(flag)
    return starts


class FloodFillEngine:
    """
    Span-based flood fill over a PixelBuffer.

    The engine mutates its buffer in place and assumes exclusive access to
    it for the duration of ``fill``.

    Example:
        >>> engine = FloodFillEngine(buffer)
        >>> target = buffer.get_pixel(0, 0)
        >>> engine.fill(FillRequest((0, 0), target, Pixel(255, 0, 0, 255)))
    """

    def __init__(self, buffer: PixelBuffer):
        self.buffer = buffer
        self.last_stats = FillStats()

    def fill(self, request: FillRequest) -> None:
        """
        Replace the region connected to ``request.seed``.

        Raises:
            IndexError: If the seed is outside the buffer
        """
        buffer = self.buffer
        seed_index = buffer.index_from(*request.seed)

        visited = np.zeros(len(buffer), dtype=bool)
        pending = {seed_index}
        stats = FillStats(seeds_enqueued=1)

        while pending:
            index = pending.pop()
            if visited[index]:
                continue
            visited[index] = True

            diff = buffer.difference_at_index(index, request.target)
            if diff > request.tolerance:
                continue

            left, right = self._resolve_span(index, diff, request, visited)
            visited[left:right + 1] = True
            pending.difference_update(range(left, right + 1))
            stats.spans += 1
            stats.pixels_written += right - left + 1

            y = index // buffer.width
            for neighbor_y in (y - 1, y + 1):
                if 0 <= neighbor_y < buffer.height:
                    seeds = self._run_seeds(left, right, neighbor_y, request, visited)
                    pending.update(seeds)
                    stats.seeds_enqueued += len(seeds)

        self.last_stats = stats
        logger.debug(
            f"Filled from {request.seed}: {stats.pixels_written} pixels in "
            f"{stats.spans} spans, {stats.seeds_enqueued} seeds enqueued"
        )

    def _resolve_span(
        self,
        index: int,
        diff: int,
        request: FillRequest,
        visited: np.ndarray,
    ) -> Tuple[int, int]:
        """Write the matching span around ``index`` and return its index bounds."""
        buffer = self.buffer
        row_start = index - index % buffer.width
        row_end = row_start + buffer.width - 1

        self._write(index, diff, request)

        left = index
        while left > row_start:
            candidate = left - 1
            if visited[candidate]:
                break
            candidate_diff = buffer.difference_at_index(candidate, request.target)
            if candidate_diff > request.tolerance:
                break
            self._write(candidate, candidate_diff, request)
            left = candidate

        right = index
        while right < row_end:
            candidate = right + 1
            if visited[candidate]:
                break
            candidate_diff = buffer.difference_at_index(candidate, request.target)
            if candidate_diff > request.tolerance:
                break
            self._write(candidate, candidate_diff, request)
            right = candidate

        return left, right

    def _run_seeds(
        self,
        left: int,
        right: int,
        neighbor_y: int,
        request: FillRequest,
        visited: np.ndarray,
    ) -> List[int]:
        """One pending index per run of unvisited matching pixels in a neighboring row."""
        buffer = self.buffer
        row_base = neighbor_y * buffer.width
        columns = range(left % buffer.width, right % buffer.width + 1)
        indices = [row_base + x for x in columns]

        flags = (
            not visited[i]
            and buffer.difference_at_index(i, request.target) <= request.tolerance
            for i in indices
        )
        return [indices[offset] for offset in find_run_starts(flags)]

    def _write(self, index: int, diff: int, request: FillRequest) -> None:
        if request.antialias:
            overlay = request.replacement.multiply_alpha(
                alpha_multiplier(diff, request.tolerance)
            )
            self.buffer[index] = self.buffer[index].blend(overlay)
        else:
            self.buffer[index] = request.replacement


def fill(
    buffer: PixelBuffer,
    seed: Point,
    target: Pixel,
    replacement: Pixel,
    tolerance: int = DEFAULT_TOLERANCE,
    antialias: bool = DEFAULT_ANTIALIAS,
) -> None:
    """
    Flood fill ``buffer`` in place from ``seed``.

    Args:
        buffer: Buffer to mutate
        seed: (x, y) start point, inside the buffer
        target: Color being replaced
        replacement: Color to write
        tolerance: Maximum color difference from ``target`` (>= 0)
        antialias: Fade the replacement toward the tolerance limit

    Raises:
        IndexError: If the seed is outside the buffer
        ValueError: If the tolerance is negative
    """
    request = FillRequest(
        seed=(int(seed[0]), int(seed[1])),
        target=target,
        replacement=replacement,
        tolerance=int(tolerance),
        antialias=bool(antialias),
    )
    FloodFillEngine(buffer).fill(request)


def submit_fill(
    executor: Executor,
    buffer: PixelBuffer,
    seed: Point,
    target: Pixel,
    replacement: Pixel,
    tolerance: int = DEFAULT_TOLERANCE,
    antialias: bool = DEFAULT_ANTIALIAS,
) -> Future:
    """
    Run ``fill`` on an executor and return its Future.

    The fill itself is not interruptible; the Future resolves to None when
    the buffer has been fully updated. The caller must not touch the buffer
    until then.
    """
    return executor.submit(fill, buffer, seed, target, replacement, tolerance, antialias)
