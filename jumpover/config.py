"""Tunable constants for the jump-over pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .paints import DEFAULT_STROKE, SolidPaint

PARALLEL_TOLERANCE = 1e-4


@dataclass(frozen=True)
class JumpOverOptions:
    """Options threaded through ``run_once``; immutable so runs cannot leak state."""

    parallel_tolerance: float = PARALLEL_TOLERANCE
    default_stroke_weight: float = 2.0
    radius_factor: float = 2.0
    default_stroke: SolidPaint = field(default=DEFAULT_STROKE)
    stroke_cap: str = "ROUND"

    def __post_init__(self) -> None:
        if self.parallel_tolerance < 0.0:
            raise ValueError("parallel_tolerance must be non-negative")
        if self.default_stroke_weight <= 0.0:
            raise ValueError("default_stroke_weight must be positive")
        if self.radius_factor <= 0.0:
            raise ValueError("radius_factor must be positive")

    def replace(self, **changes: object) -> "JumpOverOptions":
        return replace(self, **changes)


DEFAULT_OPTIONS = JumpOverOptions()

__all__ = ["DEFAULT_OPTIONS", "JumpOverOptions", "PARALLEL_TOLERANCE"]
