"""Line geometry: unit directions and infinite-line intersection."""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from .config import PARALLEL_TOLERANCE
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Vector = Tuple[float, float]


class DegenerateSegmentError(ValueError):
    """Raised when a segment's endpoints coincide and it has no direction."""


def cross(v: Vector, w: Vector) -> float:
    return v[0] * w[1] - v[1] * w[0]


def dir_len(p1: Point, p2: Point) -> Tuple[Vector, float]:
    """Return the unit direction from ``p1`` to ``p2`` and the distance between them."""

    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    length = math.hypot(dx, dy)
    if length == 0.0:
        raise DegenerateSegmentError(f"segment {p1!r} -> {p2!r} has zero length")
    return (dx / length, dy / length), length


def line_parameters(
    p: Point, v: Vector, q: Point, w: Vector, *, tolerance: float = PARALLEL_TOLERANCE
) -> Optional[Tuple[float, float]]:
    """Solve ``p + t*v == q + s*w`` for ``(t, s)``; ``None`` for (near) parallel lines."""

    denom = cross(v, w)
    if abs(denom) < tolerance:
        return None
    diff = (q[0] - p[0], q[1] - p[1])
    t = (diff[0] * w[1] - diff[1] * w[0]) / denom
    s = (diff[0] * v[1] - diff[1] * v[0]) / denom
    return t, s


def intersect(
    p: Point, v: Vector, q: Point, w: Vector, *, tolerance: float = PARALLEL_TOLERANCE
) -> Optional[Point]:
    """Intersection of the infinite lines ``p + t*v`` and ``q + s*w``.

    The lines are treated as parallel when ``|v x w| < tolerance``; with unit
    directions this rejects crossings shallower than roughly 0.006 degrees,
    whose intersection would land arbitrarily far away. The segments' finite
    extents are not checked.
    """

    params = line_parameters(p, v, q, w, tolerance=tolerance)
    if params is None:
        logger.debug("Lines through %s and %s are parallel", p, q)
        return None
    t, _ = params
    return p[0] + t * v[0], p[1] + t * v[1]


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "DegenerateSegmentError",
    "Point",
    "Vector",
    "cross",
    "dir_len",
    "intersect",
    "line_parameters",
]
