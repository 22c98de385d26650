"""Which of two crossing strokes jumps, and at what angle."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from .config import DEFAULT_OPTIONS, JumpOverOptions
from .geometry import Vector
from .paints import SolidPaint, first_solid_paint
from .segments import ResolvedSegment


@dataclass(frozen=True)
class JumperChoice:
    index: int
    segment: ResolvedSegment
    stroke: SolidPaint
    stroke_weight: float
    rotation: float


def is_horizontal(direction: Vector) -> bool:
    """Horizontal-dominant test; a 45 degree tie counts as horizontal."""

    return abs(direction[0]) >= abs(direction[1])


def rotation_degrees(direction: Vector) -> float:
    return math.degrees(math.atan2(direction[1], direction[0]))


def stroke_weight_or_default(weight: object, default: float) -> float:
    """Numeric, positive, finite weights pass through; anything else is ``default``."""

    if isinstance(weight, numbers.Real) and not isinstance(weight, bool):
        value = float(weight)
        if math.isfinite(value) and value > 0.0:
            return value
    return default


def choose_jumper(
    first: ResolvedSegment,
    second: ResolvedSegment,
    options: JumpOverOptions = DEFAULT_OPTIONS,
) -> JumperChoice:
    """Pick the jumping stroke.

    ``first`` jumps whenever its direction is horizontal-dominant; otherwise
    ``second`` jumps regardless of its own orientation. Two vertical-dominant
    strokes therefore always give ``second``.
    """

    index = 0 if is_horizontal(first.direction) else 1
    segment = first if index == 0 else second
    stroke = first_solid_paint(segment.strokes) or options.default_stroke
    weight = stroke_weight_or_default(segment.stroke_weight, options.default_stroke_weight)
    return JumperChoice(
        index=index,
        segment=segment,
        stroke=stroke,
        stroke_weight=weight,
        rotation=rotation_degrees(segment.direction),
    )


__all__ = [
    "JumperChoice",
    "choose_jumper",
    "is_horizontal",
    "rotation_degrees",
    "stroke_weight_or_default",
]
