"""In-memory scene graph: containers, stroked leaves, traversal and arc insertion."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .arc import ArcDescriptor
from .paints import Paint
from .transforms import (
    IDENTITY,
    Point,
    Transform,
    apply_transform,
    compose_chain,
    pivot_placement,
    translation,
)

logger = logging.getLogger(__name__)


class _Mixed:
    """Marker for a stroke weight that differs along the path."""

    def __repr__(self) -> str:
        return "MIXED"


MIXED = _Mixed()

StrokeWeight = Union[float, _Mixed]


def resolve_point(
    local_point: Point,
    geometry_transform: Optional[Transform],
    node_to_shared: Transform,
) -> Point:
    """Map a point from geometry space through node space into shared space."""

    inner = IDENTITY if geometry_transform is None else geometry_transform
    return apply_transform(node_to_shared, apply_transform(inner, local_point))


@dataclass(eq=False)
class SceneNode:
    id: str
    name: str = ""
    relative_transform: Transform = IDENTITY
    parent: Optional["GroupNode"] = field(default=None, repr=False)

    @property
    def type(self) -> str:
        return "NODE"

    def ancestors(self) -> Iterator["GroupNode"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def absolute_transform(self) -> Transform:
        chain = [self.relative_transform]
        chain.extend(ancestor.relative_transform for ancestor in self.ancestors())
        return compose_chain(reversed(chain))


@dataclass(eq=False)
class GroupNode(SceneNode):
    children: List[SceneNode] = field(default_factory=list)
    frame: bool = False

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self

    @property
    def type(self) -> str:
        return "FRAME" if self.frame else "GROUP"

    def append_child(self, node: SceneNode) -> None:
        node.parent = self
        self.children.append(node)


@dataclass(eq=False)
class StrokedNode(SceneNode):
    strokes: List[Paint] = field(default_factory=list)
    stroke_weight: StrokeWeight = 1.0
    stroke_cap: str = "NONE"

    @property
    def geometry_transform(self) -> Optional[Transform]:
        return None

    def local_endpoints(self) -> Tuple[Point, Point]:
        raise NotImplementedError

    def resolve_endpoints(self) -> Tuple[Point, Point]:
        """Both endpoints of the single segment, in shared space."""

        node_to_shared = self.absolute_transform
        start, end = self.local_endpoints()
        return (
            resolve_point(start, self.geometry_transform, node_to_shared),
            resolve_point(end, self.geometry_transform, node_to_shared),
        )


@dataclass(frozen=True)
class VectorVertex:
    x: float
    y: float

    @property
    def point(self) -> Point:
        return self.x, self.y


@dataclass(frozen=True)
class VectorSegment:
    start: int
    end: int
    tangent_start: Point = (0.0, 0.0)
    tangent_end: Point = (0.0, 0.0)

    @property
    def is_straight(self) -> bool:
        return self.tangent_start == (0.0, 0.0) and self.tangent_end == (0.0, 0.0)


@dataclass
class VectorNetwork:
    vertices: List[VectorVertex] = field(default_factory=list)
    segments: List[VectorSegment] = field(default_factory=list)

    def __post_init__(self) -> None:
        count = len(self.vertices)
        for segment in self.segments:
            if not (0 <= segment.start < count and 0 <= segment.end < count):
                raise ValueError(
                    f"segment {segment.start}->{segment.end} references a missing vertex "
                    f"(network has {count})"
                )


@dataclass(frozen=True)
class VectorPath:
    data: str
    winding_rule: str = "NONZERO"


@dataclass(eq=False)
class VectorNode(StrokedNode):
    network: VectorNetwork = field(default_factory=VectorNetwork)
    vector_paths: List[VectorPath] = field(default_factory=list)
    vector_transform: Optional[Transform] = None

    @property
    def type(self) -> str:
        return "VECTOR"

    @property
    def segment_count(self) -> int:
        return len(self.network.segments)

    @property
    def geometry_transform(self) -> Optional[Transform]:
        return self.vector_transform

    def local_endpoints(self) -> Tuple[Point, Point]:
        if self.segment_count != 1:
            raise ValueError(f"vector {self.id!r} has {self.segment_count} segments, expected 1")
        segment = self.network.segments[0]
        vertices = self.network.vertices
        return vertices[segment.start].point, vertices[segment.end].point


@dataclass(eq=False)
class LineNode(StrokedNode):
    """Line primitive; its geometry is always ``(0, 0) -> (1, 0)`` in node space."""

    @property
    def type(self) -> str:
        return "LINE"

    def local_endpoints(self) -> Tuple[Point, Point]:
        return (0.0, 0.0), (1.0, 0.0)


@dataclass(eq=False)
class Page:
    name: str = "Page 1"
    children: List[SceneNode] = field(default_factory=list)
    selection: List[SceneNode] = field(default_factory=list)

    def append_child(self, node: SceneNode) -> None:
        node.parent = None
        self.children.append(node)

    def iter_nodes(self) -> Iterator[SceneNode]:
        """Every node on the page in document (depth-first, pre-order) order."""

        stack: List[SceneNode] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, GroupNode):
                stack.extend(reversed(node.children))

    def find(self, node_id: str) -> Optional[SceneNode]:
        for node in self.iter_nodes():
            if node.id == node_id:
                return node
        return None


LineLike = Union[VectorNode, LineNode]


def collect_lines(roots: Iterable[SceneNode]) -> List[LineLike]:
    """Single-segment vectors and lines inside ``roots``, in document order.

    Containers are descended; vectors with any other segment count are
    skipped without looking further.
    """

    found: List[LineLike] = []
    stack: List[SceneNode] = list(reversed(list(roots)))
    while stack:
        node = stack.pop()
        if isinstance(node, VectorNode):
            if node.segment_count == 1:
                found.append(node)
        elif isinstance(node, LineNode):
            found.append(node)
        else:
            children: Sequence[SceneNode] = getattr(node, "children", ())
            stack.extend(reversed(children))
    logger.debug("Collected %d line-like node(s)", len(found))
    return found


def _next_id(page: Page, prefix: str) -> str:
    taken = {node.id for node in page.iter_nodes()}
    index = 1
    while f"{prefix}-{index}" in taken:
        index += 1
    return f"{prefix}-{index}"


def materialize_arc(page: Page, arc: ArcDescriptor, *, name: str = "Jump-over") -> VectorNode:
    """Create a vector node for ``arc`` and append it to ``page``."""

    vertices = [VectorVertex(x, y) for x, y in arc.anchor_points()]
    segments = []
    for index, curve in enumerate(arc.curves):
        segments.append(
            VectorSegment(
                start=index,
                end=index + 1,
                tangent_start=(curve.control1[0] - curve.start[0], curve.control1[1] - curve.start[1]),
                tangent_end=(curve.control2[0] - curve.end[0], curve.control2[1] - curve.end[1]),
            )
        )
    r = arc.radius
    node = VectorNode(
        id=_next_id(page, "jump-over"),
        name=name,
        # the outline's origin sits at (r, r) in node space and must land on the center
        relative_transform=pivot_placement(arc.center, (r, r), arc.rotation),
        strokes=[arc.stroke],
        stroke_weight=arc.stroke_weight,
        stroke_cap=arc.stroke_cap,
        network=VectorNetwork(vertices, segments),
        vector_paths=[VectorPath(arc.path_data)],
        # path data spans [-r, r] x [-r, 0]; shift its top-left onto the node origin
        vector_transform=translation(r, r),
    )
    page.append_child(node)
    logger.info(
        "Inserted %s centered on (%.3f, %.3f) rotated %.3f deg",
        node.id,
        arc.center[0],
        arc.center[1],
        arc.rotation,
    )
    return node


__all__ = [
    "GroupNode",
    "LineLike",
    "LineNode",
    "MIXED",
    "Page",
    "SceneNode",
    "StrokeWeight",
    "StrokedNode",
    "VectorNetwork",
    "VectorNode",
    "VectorPath",
    "VectorSegment",
    "VectorVertex",
    "collect_lines",
    "materialize_arc",
    "resolve_point",
]
