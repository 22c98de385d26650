"""Load scenes from their JSON representation."""

from __future__ import annotations

import json
import logging
import numbers
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from .paints import GradientPaint, Paint, SolidPaint, hex_to_rgb
from .scene import (
    MIXED,
    GroupNode,
    LineNode,
    Page,
    SceneNode,
    StrokeWeight,
    VectorNetwork,
    VectorNode,
    VectorPath,
    VectorSegment,
    VectorVertex,
)
from .transforms import IDENTITY, Transform, as_transform

logger = logging.getLogger(__name__)

_NODE_TYPES = {"GROUP", "FRAME", "VECTOR", "LINE"}
_STROKE_CAPS = {"NONE", "ROUND", "SQUARE", "ARROW_LINES", "ARROW_EQUILATERAL"}


class SceneFormatError(ValueError):
    """Raised when a scene document does not match the expected layout."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def _expect(value: Any, kind: type, path: str, what: str) -> Any:
    if not isinstance(value, kind):
        raise SceneFormatError(path, f"expected {what}, got {value!r}")
    return value


def _number(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise SceneFormatError(path, f"expected a number, got {value!r}")
    return float(value)


def _point(value: Any, path: str) -> tuple:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise SceneFormatError(path, f"expected [x, y], got {value!r}")
    return _number(value[0], f"{path}[0]"), _number(value[1], f"{path}[1]")


def _transform(value: Any, path: str) -> Transform:
    try:
        return as_transform(value)
    except ValueError as exc:
        raise SceneFormatError(path, str(exc)) from exc


def _paint(value: Any, path: str) -> Paint:
    if isinstance(value, str):
        try:
            return SolidPaint(hex_to_rgb(value))
        except ValueError as exc:
            raise SceneFormatError(path, str(exc)) from exc
    entry = _expect(value, dict, path, "a paint object or #rrggbb string")
    kind = entry.get("type", "SOLID")
    if kind != "SOLID":
        return GradientPaint(type=str(kind))
    color = entry.get("color")
    try:
        rgb = hex_to_rgb(color)
    except ValueError as exc:
        raise SceneFormatError(f"{path}.color", str(exc)) from exc
    opacity = _number(entry.get("opacity", 1.0), f"{path}.opacity")
    visible = _expect(entry.get("visible", True), bool, f"{path}.visible", "a boolean")
    return SolidPaint(rgb, opacity=opacity, visible=visible)


def _stroke_weight(value: Any, path: str) -> StrokeWeight:
    if isinstance(value, str) and value.lower() == "mixed":
        return MIXED
    return _number(value, path)


def _segment(value: Any, path: str, vertex_count: int) -> VectorSegment:
    if isinstance(value, (list, tuple)):
        if len(value) != 2:
            raise SceneFormatError(path, f"expected [start, end], got {value!r}")
        start, end = value
        tangent_start = tangent_end = (0.0, 0.0)
    else:
        entry = _expect(value, dict, path, "a segment")
        start = entry.get("start")
        end = entry.get("end")
        tangent_start = _point(entry.get("tangentStart", (0, 0)), f"{path}.tangentStart")
        tangent_end = _point(entry.get("tangentEnd", (0, 0)), f"{path}.tangentEnd")
    for key, index in (("start", start), ("end", end)):
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < vertex_count:
            raise SceneFormatError(path, f"{key} vertex {index!r} out of range (have {vertex_count})")
    return VectorSegment(start, end, tangent_start, tangent_end)


def _apply_stroke_fields(entry: Mapping[str, Any], path: str, kwargs: Dict[str, Any]) -> None:
    strokes = _expect(entry.get("strokes", []), list, f"{path}.strokes", "a list of paints")
    kwargs["strokes"] = [_paint(item, f"{path}.strokes[{i}]") for i, item in enumerate(strokes)]
    if "strokeWeight" in entry:
        kwargs["stroke_weight"] = _stroke_weight(entry["strokeWeight"], f"{path}.strokeWeight")
    cap = entry.get("strokeCap", "NONE")
    if cap not in _STROKE_CAPS:
        raise SceneFormatError(f"{path}.strokeCap", f"unknown stroke cap {cap!r}")
    kwargs["stroke_cap"] = cap


def _node(entry: Any, path: str, seen: Set[str]) -> SceneNode:
    entry = _expect(entry, dict, path, "a node object")
    kind = entry.get("type")
    if kind not in _NODE_TYPES:
        raise SceneFormatError(f"{path}.type", f"unknown node type {kind!r}")
    node_id = _expect(entry.get("id"), str, f"{path}.id", "a string id")
    if node_id in seen:
        raise SceneFormatError(f"{path}.id", f"duplicate node id {node_id!r}")
    seen.add(node_id)

    kwargs: Dict[str, Any] = {
        "id": node_id,
        "name": _expect(entry.get("name", node_id), str, f"{path}.name", "a string"),
        "relative_transform": _transform(entry["transform"], f"{path}.transform")
        if "transform" in entry
        else IDENTITY,
    }

    if kind in ("GROUP", "FRAME"):
        raw_children = _expect(entry.get("children", []), list, f"{path}.children", "a list")
        children = [_node(child, f"{path}.children[{i}]", seen) for i, child in enumerate(raw_children)]
        return GroupNode(children=children, frame=kind == "FRAME", **kwargs)

    _apply_stroke_fields(entry, path, kwargs)
    if kind == "LINE":
        return LineNode(**kwargs)

    raw_vertices = _expect(entry.get("vertices", []), list, f"{path}.vertices", "a list")
    vertices = [
        VectorVertex(*_point(item, f"{path}.vertices[{i}]")) for i, item in enumerate(raw_vertices)
    ]
    raw_segments = _expect(entry.get("segments", []), list, f"{path}.segments", "a list")
    segments = [
        _segment(item, f"{path}.segments[{i}]", len(vertices)) for i, item in enumerate(raw_segments)
    ]
    raw_paths = _expect(entry.get("vectorPaths", []), list, f"{path}.vectorPaths", "a list")
    paths: List[VectorPath] = []
    for i, item in enumerate(raw_paths):
        item = _expect(item, dict, f"{path}.vectorPaths[{i}]", "a path object")
        data = _expect(item.get("data"), str, f"{path}.vectorPaths[{i}].data", "path data")
        paths.append(VectorPath(data, str(item.get("windingRule", "NONZERO"))))
    vector_transform: Optional[Transform] = None
    if entry.get("vectorTransform") is not None:
        vector_transform = _transform(entry["vectorTransform"], f"{path}.vectorTransform")
    return VectorNode(
        network=VectorNetwork(vertices, segments),
        vector_paths=paths,
        vector_transform=vector_transform,
        **kwargs,
    )


def load_scene_data(document: Any) -> Page:
    """Build a ``Page`` from an already-decoded JSON document."""

    document = _expect(document, dict, "$", "a page object")
    seen: Set[str] = set()
    raw_children = _expect(document.get("children", []), list, "$.children", "a list")
    page = Page(name=_expect(document.get("name", "Page 1"), str, "$.name", "a string"))
    for i, child in enumerate(raw_children):
        page.append_child(_node(child, f"$.children[{i}]", seen))

    raw_selection = _expect(document.get("selection", []), list, "$.selection", "a list of ids")
    for i, node_id in enumerate(raw_selection):
        node = page.find(node_id) if isinstance(node_id, str) else None
        if node is None:
            raise SceneFormatError(f"$.selection[{i}]", f"no node with id {node_id!r}")
        page.selection.append(node)

    logger.info(
        "Loaded page %r: %d node(s), %d selected",
        page.name,
        len(seen),
        len(page.selection),
    )
    return page


def load_scene(text: str) -> Page:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SceneFormatError(f"line {exc.lineno}, col {exc.colno}", exc.msg) from exc
    return load_scene_data(document)


def load_scene_file(path: Union[str, Path]) -> Page:
    return load_scene(Path(path).read_text(encoding="utf-8"))


__all__ = ["SceneFormatError", "load_scene", "load_scene_data", "load_scene_file"]
