"""Fit a set of positions into a square viewport."""

import math
from collections.abc import Sequence

from ..errors import InvalidParameter
from ..graph import Position

DEFAULT_VIEWPORT = 8.0


def bounding_box(positions: Sequence[Position]) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y) of non-empty ``positions``."""
    xs = [p[0] for p in positions]
    ys = [p[1] for p in positions]
    return min(xs), min(ys), max(xs), max(ys)


def recalibrate(
    positions: Sequence[Position],
    size: float = DEFAULT_VIEWPORT,
) -> list[Position]:
    """Center positions on the origin and scale them into a ``size`` square.

    The bounding-box midpoint moves to the origin and x and y are scaled by the
    same factor, the largest one that keeps both axes within
    ``[-size/2, size/2]``. An axis with zero span does not constrain the scale;
    if both spans are zero the scale is 1. z is passed through unchanged.

    Args:
        positions: Positions to fit.
        size: Side length of the target square.

    Returns:
        New positions, aligned with the input.

    Raises:
        InvalidParameter: If ``size`` is not positive.
    """
    if not size > 0 or not math.isfinite(size):
        raise InvalidParameter(f"Viewport size must be a positive number, got {size!r}")
    if not positions:
        return []

    min_x, min_y, max_x, max_y = bounding_box(positions)
    width = max_x - min_x
    height = max_y - min_y

    scales = [size / span for span in (width, height) if span > 0]
    scale = min(scales) if scales else 1.0

    center_x = (min_x + max_x) / 2
    center_y = (min_y + max_y) / 2
    return [
        ((x - center_x) * scale, (y - center_y) * scale, z)
        for x, y, z in positions
    ]
