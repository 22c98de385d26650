from jumpover.paints import RGB, SolidPaint
from jumpover.scene import (
    GroupNode,
    LineNode,
    Page,
    VectorNetwork,
    VectorNode,
    VectorSegment,
    VectorVertex,
)
from jumpover.transforms import translation

BLACK = SolidPaint(RGB(0.0, 0.0, 0.0))


def horizontal_line(node_id="horizontal", *, y=50.0, length=100.0, strokes=None, weight=3.0):
    """Line node from (0, y) to (length, y); line geometry is (0,0)-(1,0) scaled by the transform."""

    return LineNode(
        id=node_id,
        relative_transform=((length, 0.0, 0.0), (0.0, length, y)),
        strokes=[BLACK] if strokes is None else strokes,
        stroke_weight=weight,
    )


def straight_vector(node_id, start, end, *, strokes=None, weight=2.0, transform=None, vector_transform=None):
    kwargs = {}
    if transform is not None:
        kwargs["relative_transform"] = transform
    return VectorNode(
        id=node_id,
        network=VectorNetwork(
            [VectorVertex(*start), VectorVertex(*end)],
            [VectorSegment(0, 1)],
        ),
        strokes=[BLACK] if strokes is None else strokes,
        stroke_weight=weight,
        vector_transform=vector_transform,
        **kwargs,
    )


def plus_page():
    """Horizontal line (0,50)-(100,50) and a vertical vector (50,0)-(50,100) inside a group."""

    vertical = straight_vector("vertical", (0.0, 0.0), (0.0, 100.0))
    group = GroupNode(id="wires", relative_transform=translation(50.0, 0.0), children=[vertical])
    horizontal = horizontal_line()
    page = Page(children=[horizontal, group])
    page.selection = [horizontal, group]
    return page
