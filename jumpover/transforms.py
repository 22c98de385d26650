"""2x3 affine transforms in the host's row-major layout."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]
Row = Tuple[float, float, float]
Transform = Tuple[Row, Row]

IDENTITY: Transform = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))


def as_transform(value: object) -> Transform:
    """Coerce a nested ``[[a, b, tx], [c, d, ty]]`` sequence into a ``Transform``."""

    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"transform must have two rows, got {value!r}")
    rows = []
    for row in value:
        if not isinstance(row, (list, tuple)) or len(row) != 3:
            raise ValueError(f"transform rows must have three entries, got {row!r}")
        try:
            a, b, c = (float(entry) for entry in row)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"transform entries must be numeric, got {row!r}") from exc
        if not all(math.isfinite(entry) for entry in (a, b, c)):
            raise ValueError(f"transform entries must be finite, got {row!r}")
        rows.append((a, b, c))
    return rows[0], rows[1]


def _to_matrix(m: Transform) -> np.ndarray:
    return np.array([m[0], m[1], (0.0, 0.0, 1.0)], dtype=float)


def _from_matrix(matrix: np.ndarray) -> Transform:
    return (
        (float(matrix[0, 0]), float(matrix[0, 1]), float(matrix[0, 2])),
        (float(matrix[1, 0]), float(matrix[1, 1]), float(matrix[1, 2])),
    )


def apply_transform(m: Transform, p: Point) -> Point:
    x, y = p
    return (
        m[0][0] * x + m[0][1] * y + m[0][2],
        m[1][0] * x + m[1][1] * y + m[1][2],
    )


def compose(outer: Transform, inner: Transform) -> Transform:
    """Return the transform that applies ``inner`` first, then ``outer``."""

    return _from_matrix(_to_matrix(outer) @ _to_matrix(inner))


def compose_chain(transforms: Iterable[Transform]) -> Transform:
    """Compose transforms listed outermost first (root ... leaf)."""

    matrix = np.eye(3)
    for m in transforms:
        matrix = matrix @ _to_matrix(m)
    return _from_matrix(matrix)


def is_identity(m: Transform, *, tol: float = 0.0) -> bool:
    return bool(np.allclose(_to_matrix(m), np.eye(3), rtol=0.0, atol=tol))


def translation(tx: float, ty: float) -> Transform:
    return ((1.0, 0.0, float(tx)), (0.0, 1.0, float(ty)))


def scaling(sx: float, sy: float) -> Transform:
    return ((float(sx), 0.0, 0.0), (0.0, float(sy), 0.0))


def rotation_matrix(angle: float) -> Transform:
    """Rotation about the origin taking the +x axis to ``(cos angle, sin angle)``.

    Angles are measured the same way as ``atan2(y, x)`` on page coordinates,
    so in the y-down page frame a positive angle turns clockwise on screen.
    """

    theta = math.radians(angle)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return ((cos_t, 0.0 - sin_t, 0.0), (sin_t, cos_t, 0.0))


def placement_transform(x: float, y: float, rotation: float) -> Transform:
    """``rotation_matrix(rotation)`` followed by a translation to ``(x, y)``."""

    (a, b, _), (c, d, _) = rotation_matrix(rotation)
    return ((a, b, float(x)), (c, d, float(y)))


def pivot_placement(pivot: Point, offset: Point, rotation: float) -> Transform:
    """Placement that rotates a node about the local point ``offset``.

    The local point ``offset`` lands on ``pivot`` and the node's +x axis
    turns by ``rotation`` degrees.
    """

    (a, b, _), (c, d, _) = rotation_matrix(rotation)
    ox, oy = offset
    return placement_transform(
        pivot[0] - (a * ox + b * oy),
        pivot[1] - (c * ox + d * oy),
        rotation,
    )


def rotation_of(m: Transform) -> float:
    """Inverse of ``placement_transform`` for the rotation component, in degrees."""

    return math.degrees(math.atan2(m[1][0], m[0][0]))


def transform_to_list(m: Sequence[Sequence[float]]) -> list:
    return [[float(entry) for entry in row] for row in m]


__all__ = [
    "IDENTITY",
    "Point",
    "Transform",
    "apply_transform",
    "as_transform",
    "compose",
    "compose_chain",
    "is_identity",
    "placement_transform",
    "pivot_placement",
    "rotation_matrix",
    "rotation_of",
    "scaling",
    "transform_to_list",
    "translation",
]
