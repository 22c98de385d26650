import json

import pytest

from jumpover.loader import SceneFormatError, load_scene, load_scene_data, load_scene_file
from jumpover.paints import RGB, GradientPaint, SolidPaint
from jumpover.scene import MIXED, GroupNode, LineNode, VectorNode


def _document():
    return {
        "name": "Crossing",
        "selection": ["h", "wires"],
        "children": [
            {
                "type": "LINE",
                "id": "h",
                "transform": [[100, 0, 0], [0, 100, 50]],
                "strokes": ["#000000"],
                "strokeWeight": 3,
            },
            {
                "type": "FRAME",
                "id": "wires",
                "name": "Wires",
                "transform": [[1, 0, 50], [0, 1, 0]],
                "children": [
                    {
                        "type": "VECTOR",
                        "id": "v",
                        "vertices": [[0, 0], [0, 100]],
                        "segments": [[0, 1]],
                        "strokes": [{"type": "SOLID", "color": "#ff8000", "opacity": 0.5}],
                        "strokeWeight": "mixed",
                        "strokeCap": "ROUND",
                        "vectorTransform": [[1, 0, 0], [0, 1, 0]],
                    }
                ],
            },
        ],
    }


def test_load_scene_builds_nodes_and_selection():
    page = load_scene(json.dumps(_document()))

    assert page.name == "Crossing"
    assert [node.id for node in page.selection] == ["h", "wires"]
    line, frame = page.children
    assert isinstance(line, LineNode)
    assert line.stroke_weight == 3.0
    assert line.strokes == [SolidPaint(RGB(0.0, 0.0, 0.0))]
    assert isinstance(frame, GroupNode) and frame.type == "FRAME"
    assert frame.name == "Wires"
    vector = frame.children[0]
    assert isinstance(vector, VectorNode)
    assert vector.parent is frame
    assert vector.stroke_weight is MIXED
    assert vector.stroke_cap == "ROUND"
    assert vector.strokes[0].opacity == 0.5
    assert vector.strokes[0].color == RGB(1.0, 128 / 255, 0.0)
    assert vector.resolve_endpoints() == ((50.0, 0.0), (50.0, 100.0))


def test_load_scene_file(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(_document()), encoding="utf-8")
    assert load_scene_file(path).find("v") is not None


def test_non_solid_paint_is_kept_as_gradient():
    document = _document()
    document["children"][0]["strokes"] = [{"type": "GRADIENT_RADIAL"}]
    page = load_scene_data(document)
    assert page.children[0].strokes == [GradientPaint(type="GRADIENT_RADIAL")]


def test_curved_segment_tangents_are_loaded():
    document = _document()
    vector = document["children"][1]["children"][0]
    vector["segments"] = [{"start": 0, "end": 1, "tangentStart": [5, 0], "tangentEnd": [-5, 0]}]
    segment = load_scene_data(document).find("v").network.segments[0]
    assert segment.tangent_start == (5.0, 0.0)
    assert not segment.is_straight


@pytest.mark.parametrize(
    "mutate, path",
    [
        (lambda d: d["children"][0].update(type="ELLIPSE"), "$.children[0].type"),
        (lambda d: d["children"][0].update(transform=[[1, 0], [0, 1]]), "$.children[0].transform"),
        (lambda d: d["children"][0].update(strokes=["red"]), "$.children[0].strokes[0]"),
        (lambda d: d["children"][0].update(strokeWeight="thick"), "$.children[0].strokeWeight"),
        (lambda d: d["children"][0].update(strokeCap="BUTT"), "$.children[0].strokeCap"),
        (lambda d: d["children"][1]["children"][0].update(id="h"), "$.children[1].children[0].id"),
        (lambda d: d["children"][1]["children"][0].update(segments=[[0, 2]]), "$.children[1].children[0].segments[0]"),
        (lambda d: d["children"][1]["children"][0].update(vertices=[[0, 0], [0]]), "$.children[1].children[0].vertices[1]"),
        (lambda d: d.update(selection=["nope"]), "$.selection[0]"),
        (lambda d: d.update(children={}), "$.children"),
    ],
)
def test_malformed_documents_report_path(mutate, path):
    document = _document()
    mutate(document)
    with pytest.raises(SceneFormatError) as excinfo:
        load_scene_data(document)
    assert excinfo.value.path == path
    assert str(excinfo.value).startswith(path + ": ")


def test_invalid_json_reports_position():
    with pytest.raises(SceneFormatError) as excinfo:
        load_scene('{"children": [}')
    assert "line 1" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)
