"""One-shot jump-over pipeline: validate, resolve, intersect, select, synthesize."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .arc import ArcDescriptor, make_arc
from .config import DEFAULT_OPTIONS, JumpOverOptions
from .geometry import DegenerateSegmentError, Point, intersect
from .logging_utils import apply_debug_logging
from .orientation import choose_jumper
from .scene import LineLike
from .segments import resolve_segments

logger = logging.getLogger(__name__)

WRONG_COUNT = "wrong-count"
PARALLEL = "parallel"
DEGENERATE = "degenerate"

MESSAGES = {
    None: "Jump-over added!",
    WRONG_COUNT: "Select exactly two straight vector strokes",
    PARALLEL: "Those two lines don't intersect",
    DEGENERATE: "Those strokes have zero length",
}


@dataclass(frozen=True)
class Outcome:
    status: str
    reason: Optional[str] = None
    arc: Optional[ArcDescriptor] = None
    intersection: Optional[Point] = None
    jumper_index: Optional[int] = None
    trace: Tuple[str, ...] = ()

    @classmethod
    def success(
        cls, arc: ArcDescriptor, intersection: Point, jumper_index: int, trace: Sequence[str]
    ) -> "Outcome":
        return cls("success", None, arc, intersection, jumper_index, tuple(trace))

    @classmethod
    def rejected(cls, reason: str, trace: Sequence[str]) -> "Outcome":
        return cls("rejected", reason, trace=tuple(trace))

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @property
    def message(self) -> str:
        return MESSAGES[self.reason]


def run_once(lines: Sequence[LineLike], options: JumpOverOptions = DEFAULT_OPTIONS) -> Outcome:
    """Build the jump-over arc for exactly two line-like nodes."""

    trace: List[str] = ["idle"]

    def enter(state: str) -> None:
        trace.append(state)
        logger.debug("Pipeline state -> %s", state)

    enter("validating")
    if len(lines) != 2:
        logger.warning("Expected exactly two line-like nodes, got %d", len(lines))
        enter("rejected")
        return Outcome.rejected(WRONG_COUNT, trace)

    enter("resolving")
    try:
        first, second = resolve_segments(list(lines))
    except DegenerateSegmentError as exc:
        logger.warning("Cannot resolve selection: %s", exc)
        enter("rejected")
        return Outcome.rejected(DEGENERATE, trace)

    enter("intersecting")
    point = intersect(
        first.start,
        first.direction,
        second.start,
        second.direction,
        tolerance=options.parallel_tolerance,
    )
    if point is None:
        logger.warning("Lines %s and %s are parallel", first.node_id, second.node_id)
        enter("rejected")
        return Outcome.rejected(PARALLEL, trace)

    enter("selecting")
    choice = choose_jumper(first, second, options)
    logger.info(
        "Jumper is %s (weight=%s, rotation=%.3f deg)",
        choice.segment.node_id,
        choice.stroke_weight,
        choice.rotation,
    )

    enter("synthesizing")
    arc = make_arc(
        point,
        choice.stroke_weight * options.radius_factor,
        choice.stroke,
        choice.stroke_weight,
        choice.rotation,
        stroke_cap=options.stroke_cap,
    )

    enter("done")
    logger.info("Jump-over arc at (%.3f, %.3f) radius=%.3f", point[0], point[1], arc.radius)
    return Outcome.success(arc, point, choice.index, trace)


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "DEGENERATE",
    "MESSAGES",
    "Outcome",
    "PARALLEL",
    "WRONG_COUNT",
    "run_once",
]
