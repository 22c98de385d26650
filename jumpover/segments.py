from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .geometry import Point, Vector, dir_len
from .paints import Paint
from .scene import LineLike, StrokeWeight


@dataclass(frozen=True)
class ResolvedSegment:
    """A line-like node with its endpoints in shared space."""

    node_id: str
    start: Point
    end: Point
    direction: Vector
    length: float
    strokes: Tuple[Paint, ...]
    stroke_weight: StrokeWeight


def resolve_segment(node: LineLike) -> ResolvedSegment:
    """Resolve ``node``; raises ``DegenerateSegmentError`` for zero-length geometry."""

    start, end = node.resolve_endpoints()
    direction, length = dir_len(start, end)
    return ResolvedSegment(
        node_id=node.id,
        start=start,
        end=end,
        direction=direction,
        length=length,
        strokes=tuple(node.strokes),
        stroke_weight=node.stroke_weight,
    )


def resolve_segments(nodes: List[LineLike]) -> List[ResolvedSegment]:
    return [resolve_segment(node) for node in nodes]


__all__ = ["ResolvedSegment", "resolve_segment", "resolve_segments"]
