import json
from typing import Any, Dict, List

from .paints import GradientPaint, Paint, paint_to_hex
from .scene import MIXED, GroupNode, LineNode, Page, SceneNode, StrokedNode, VectorNode
from .transforms import IDENTITY, transform_to_list


def _paint(paint: Paint) -> object:
    if isinstance(paint, GradientPaint):
        return {"type": paint.type}
    if paint.opacity == 1.0 and paint.visible:
        return paint_to_hex(paint)
    return {
        "type": "SOLID",
        "color": paint_to_hex(paint),
        "opacity": paint.opacity,
        "visible": paint.visible,
    }


def _stroke_fields(node: StrokedNode, out: Dict[str, Any]) -> None:
    out["strokes"] = [_paint(paint) for paint in node.strokes]
    out["strokeWeight"] = "mixed" if node.stroke_weight is MIXED else node.stroke_weight
    if node.stroke_cap != "NONE":
        out["strokeCap"] = node.stroke_cap


def node_to_dict(node: SceneNode) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": node.type, "id": node.id}
    if node.name != node.id:
        out["name"] = node.name
    if node.relative_transform != IDENTITY:
        out["transform"] = transform_to_list(node.relative_transform)
    if isinstance(node, GroupNode):
        out["children"] = [node_to_dict(child) for child in node.children]
    elif isinstance(node, LineNode):
        _stroke_fields(node, out)
    elif isinstance(node, VectorNode):
        _stroke_fields(node, out)
        out["vertices"] = [[v.x, v.y] for v in node.network.vertices]
        segments: List[object] = []
        for segment in node.network.segments:
            if segment.is_straight:
                segments.append([segment.start, segment.end])
            else:
                segments.append(
                    {
                        "start": segment.start,
                        "end": segment.end,
                        "tangentStart": list(segment.tangent_start),
                        "tangentEnd": list(segment.tangent_end),
                    }
                )
        out["segments"] = segments
        if node.vector_paths:
            out["vectorPaths"] = [
                {"windingRule": path.winding_rule, "data": path.data} for path in node.vector_paths
            ]
        if node.vector_transform is not None:
            out["vectorTransform"] = transform_to_list(node.vector_transform)
    else:
        raise ValueError(f"cannot serialise node of type {node.type!r}")
    return out


def dump_scene(page: Page) -> Dict[str, Any]:
    return {
        "name": page.name,
        "selection": [node.id for node in page.selection],
        "children": [node_to_dict(child) for child in page.children],
    }


def print_scene(page: Page) -> str:
    return json.dumps(dump_scene(page), indent=2) + "\n"
