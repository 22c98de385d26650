"""Semicircular jump-over outline built from two cubic Bezier curves."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from .paints import SolidPaint

Point = Tuple[float, float]

# 4 * (sqrt(2) - 1) / 3: control-handle length of a quarter-circle cubic
ARC_KAPPA = 0.5522847498


@dataclass(frozen=True)
class CubicBezier:
    start: Point
    control1: Point
    control2: Point
    end: Point

    def point_at(self, t: float) -> Point:
        u = 1.0 - t
        a = u * u * u
        b = 3.0 * u * u * t
        c = 3.0 * u * t * t
        d = t * t * t
        return (
            a * self.start[0] + b * self.control1[0] + c * self.control2[0] + d * self.end[0],
            a * self.start[1] + b * self.control1[1] + c * self.control2[1] + d * self.end[1],
        )


@dataclass(frozen=True)
class ArcDescriptor:
    """Everything the host needs to materialize one jump-over arc.

    ``curves`` live in the canonical frame: x in ``[-radius, radius]``, y in
    ``[-radius, 0]`` with the bulge towards negative y. ``position`` is the
    top-left of that frame once centred on ``center``. Placed in the scene,
    the canonical origin lands on ``center`` and the canonical +x axis turns
    by ``rotation`` degrees to run along the jumper.
    """

    center: Point
    radius: float
    rotation: float
    stroke: SolidPaint
    stroke_weight: float
    stroke_cap: str
    curves: Tuple[CubicBezier, CubicBezier]

    @property
    def position(self) -> Point:
        return self.center[0] - self.radius, self.center[1] - self.radius

    @property
    def path_data(self) -> str:
        first, second = self.curves
        parts = [f"M {format_number(first.start[0])} {format_number(first.start[1])}"]
        for curve in self.curves:
            coords = (*curve.control1, *curve.control2, *curve.end)
            parts.append("C " + " ".join(format_number(value) for value in coords))
        return " ".join(parts)

    def bounds(self) -> Tuple[float, float, float, float]:
        """Canonical-frame bounding box ``(min_x, min_y, max_x, max_y)``."""

        return -self.radius, -self.radius, self.radius, 0.0

    def anchor_points(self) -> Iterator[Point]:
        yield self.curves[0].start
        for curve in self.curves:
            yield curve.end


def format_number(value: float) -> str:
    if not math.isfinite(value):
        raise ValueError("Cannot format non-finite number for path data")
    if value == 0.0:
        return "0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def semicircle_curves(radius: float) -> Tuple[CubicBezier, CubicBezier]:
    k = ARC_KAPPA * radius
    r = float(radius)
    left = CubicBezier((-r, 0.0), (-r, -k), (-k, -r), (0.0, -r))
    right = CubicBezier((0.0, -r), (k, -r), (r, -k), (r, 0.0))
    return left, right


def make_arc(
    center: Point,
    radius: float,
    stroke: SolidPaint,
    weight: float,
    rotation: float,
    *,
    stroke_cap: str = "ROUND",
) -> ArcDescriptor:
    if radius <= 0.0:
        raise ValueError(f"arc radius must be positive, got {radius!r}")
    return ArcDescriptor(
        center=(float(center[0]), float(center[1])),
        radius=float(radius),
        rotation=float(rotation),
        stroke=stroke,
        stroke_weight=float(weight),
        stroke_cap=stroke_cap,
        curves=semicircle_curves(radius),
    )


__all__ = [
    "ARC_KAPPA",
    "ArcDescriptor",
    "CubicBezier",
    "format_number",
    "make_arc",
    "semicircle_curves",
]
