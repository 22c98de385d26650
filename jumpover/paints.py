"""Stroke paints and hex colour helpers."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Union

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class RGB:
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b"):
            value = float(getattr(self, channel))
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"colour channel {channel}={value!r} outside [0, 1]")
            object.__setattr__(self, channel, value)


@dataclass(frozen=True)
class SolidPaint:
    color: RGB
    opacity: float = 1.0
    visible: bool = True

    @property
    def type(self) -> str:
        return "SOLID"


@dataclass(frozen=True)
class GradientPaint:
    """Any non-solid paint; kept so stroke lists round-trip, never used for arcs."""

    type: str = "GRADIENT_LINEAR"


Paint = Union[SolidPaint, GradientPaint]

DEFAULT_STROKE = SolidPaint(RGB(1.0, 0.0, 0.0))


def paint_to_hex(paint: SolidPaint) -> str:
    """Render the colour of ``paint`` as ``#rrggbb``."""

    color = paint.color
    return "#" + "".join(f"{math.floor(v * 255 + 0.5):02x}" for v in (color.r, color.g, color.b))


def hex_to_rgb(value: str) -> RGB:
    """Parse ``#rrggbb`` (leading ``#`` optional) into 0-1 channels."""

    match = _HEX_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"expected a #rrggbb colour, got {value!r}")
    n = int(match.group(1), 16)
    return RGB(((n >> 16) & 0xFF) / 255, ((n >> 8) & 0xFF) / 255, (n & 0xFF) / 255)


def first_solid_paint(strokes: Sequence[Paint]) -> Optional[SolidPaint]:
    """Return the first stroke when it is a solid paint, mirroring ``strokes[0]``."""

    if not strokes:
        return None
    head = strokes[0]
    return head if isinstance(head, SolidPaint) else None


__all__ = [
    "DEFAULT_STROKE",
    "GradientPaint",
    "Paint",
    "RGB",
    "SolidPaint",
    "first_solid_paint",
    "hex_to_rgb",
    "paint_to_hex",
]
