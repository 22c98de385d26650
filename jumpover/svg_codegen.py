"""Render a page to a standalone SVG preview."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
from xml.sax.saxutils import quoteattr

from .paints import SolidPaint, paint_to_hex
from .scene import MIXED, LineNode, Page, StrokedNode, VectorNode
from .transforms import IDENTITY, Point, Transform, apply_transform, compose

logger = logging.getLogger(__name__)

_LINECAPS = {"ROUND": "round", "SQUARE": "square"}

svg_tpl = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="%s" width="%s" height="%s">
%s</svg>
"""


@dataclass
class _RenderedPath:
    node_id: str
    data: str
    points: List[Point]
    stroke: SolidPaint
    stroke_width: float
    linecap: str
    transform: Optional[Transform] = None


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for SVG output")
    formatted = f"{value:.4f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def _pt(p: Point) -> str:
    return f"{_format_float(p[0])} {_format_float(p[1])}"


def _visible_stroke(node: StrokedNode) -> Optional[SolidPaint]:
    for paint in node.strokes:
        if isinstance(paint, SolidPaint) and paint.visible:
            return paint
    return None


def _stroke_width(node: StrokedNode) -> float:
    weight = node.stroke_weight
    return 1.0 if weight is MIXED else float(weight)


def _line_path(node: LineNode) -> Tuple[str, List[Point]]:
    start, end = node.resolve_endpoints()
    return f"M {_pt(start)} L {_pt(end)}", [start, end]


def _vector_path(node: VectorNode) -> Tuple[str, List[Point], Optional[Transform]]:
    """Absolute path for the vector network, or raw path data plus a transform."""

    to_shared = compose(node.absolute_transform, node.vector_transform or IDENTITY)
    if not node.network.segments:
        data = " ".join(path.data for path in node.vector_paths)
        return data, [], to_shared

    vertices = node.network.vertices
    parts: List[str] = []
    points: List[Point] = []
    cursor: Optional[int] = None
    for segment in node.network.segments:
        start_local = vertices[segment.start].point
        end_local = vertices[segment.end].point
        start = apply_transform(to_shared, start_local)
        end = apply_transform(to_shared, end_local)
        if cursor != segment.start:
            parts.append(f"M {_pt(start)}")
            points.append(start)
        if segment.is_straight:
            parts.append(f"L {_pt(end)}")
        else:
            c1 = apply_transform(
                to_shared,
                (start_local[0] + segment.tangent_start[0], start_local[1] + segment.tangent_start[1]),
            )
            c2 = apply_transform(
                to_shared,
                (end_local[0] + segment.tangent_end[0], end_local[1] + segment.tangent_end[1]),
            )
            parts.append(f"C {_pt(c1)} {_pt(c2)} {_pt(end)}")
            points.extend([c1, c2])
        points.append(end)
        cursor = segment.end
    return " ".join(parts), points, None


def _collect_paths(page: Page) -> List[_RenderedPath]:
    rendered: List[_RenderedPath] = []
    for node in page.iter_nodes():
        if not isinstance(node, (LineNode, VectorNode)):
            continue
        stroke = _visible_stroke(node)
        if stroke is None:
            logger.debug("Skipping %s: no visible solid stroke", node.id)
            continue
        transform: Optional[Transform] = None
        if isinstance(node, LineNode):
            data, points = _line_path(node)
        else:
            data, points, transform = _vector_path(node)
        rendered.append(
            _RenderedPath(
                node_id=node.id,
                data=data,
                points=points,
                stroke=stroke,
                stroke_width=_stroke_width(node),
                linecap=_LINECAPS.get(node.stroke_cap, "butt"),
                transform=transform,
            )
        )
    return rendered


def _bbox(paths: Iterable[_RenderedPath], padding: float) -> Tuple[float, float, float, float]:
    xs: List[float] = []
    ys: List[float] = []
    for path in paths:
        for x, y in path.points:
            xs.append(x - path.stroke_width)
            xs.append(x + path.stroke_width)
            ys.append(y - path.stroke_width)
            ys.append(y + path.stroke_width)
    if not xs:
        return 0.0, 0.0, 100.0, 100.0
    min_x, min_y = min(xs) - padding, min(ys) - padding
    return min_x, min_y, max(xs) + padding - min_x, max(ys) + padding - min_y


def _emit_path(path: _RenderedPath) -> str:
    attrs = [
        f"id={quoteattr(path.node_id)}",
        f"d={quoteattr(path.data)}",
        'fill="none"',
        f'stroke="{paint_to_hex(path.stroke)}"',
        f'stroke-width="{_format_float(path.stroke_width)}"',
        f'stroke-linecap="{path.linecap}"',
    ]
    if path.stroke.opacity != 1.0:
        attrs.append(f'stroke-opacity="{_format_float(path.stroke.opacity)}"')
    if path.transform is not None:
        (a, c, e), (b, d, f) = path.transform
        values = " ".join(_format_float(v) for v in (a, b, c, d, e, f))
        attrs.append(f'transform="matrix({values})"')
    return "  <path " + " ".join(attrs) + "/>\n"


def generate_svg_code(page: Page) -> str:
    """Emit one ``<path>`` element per stroked line or vector, in document order."""

    return "".join(_emit_path(path) for path in _collect_paths(page))


def generate_svg_document(page: Page, *, padding: float = 10.0) -> str:
    paths = _collect_paths(page)
    min_x, min_y, width, height = _bbox(paths, padding)
    view_box = " ".join(_format_float(v) for v in (min_x, min_y, width, height))
    body = "".join(_emit_path(path) for path in paths)
    logger.info("Rendered %d path(s) into SVG", len(paths))
    return svg_tpl % (view_box, _format_float(width), _format_float(height), body)


__all__ = ["generate_svg_code", "generate_svg_document"]
