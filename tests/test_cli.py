import json
from pathlib import Path

import jumpover.__main__ as cli

EXAMPLE = Path(__file__).resolve().parents[1] / "examples" / "plus_crossing.json"


def test_main_writes_scene_and_svg(tmp_path, capsys):
    scene_path = tmp_path / "out" / "scene.json"
    svg_path = tmp_path / "out" / "scene.svg"

    code = cli.main([str(EXAMPLE), "--output", str(scene_path), "--svg-output-path", str(svg_path)])

    assert code == 0
    out = capsys.readouterr().out
    assert "Jump-over added!" in out
    assert "Intersection: (50.000000, 50.000000)" in out
    assert "Radius: 6" in out
    written = json.loads(scene_path.read_text(encoding="utf-8"))
    assert written["children"][-1]["id"] == "jump-over-1"
    assert svg_path.read_text(encoding="utf-8").count("<path ") == 3


def test_select_override_with_one_node_is_rejected(capsys):
    code = cli.main([str(EXAMPLE), "--select", "horizontal"])

    assert code == 1
    assert "Select exactly two straight vector strokes" in capsys.readouterr().out


def test_unknown_selection_id_exits_with_error(capsys):
    assert cli.main([str(EXAMPLE), "--select", "nope"]) == 2


def test_malformed_scene_exits_with_error(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"children": [{"type": "CIRCLE", "id": "c"}]}', encoding="utf-8")
    assert cli.main([str(bad)]) == 2


def test_missing_file_exits_with_error(tmp_path):
    assert cli.main([str(tmp_path / "missing.json")]) == 2


def test_main_delegates_to_plugin(tmp_path, monkeypatch):
    calls = []

    def _fake_run_plugin(page, notify):
        calls.append(page.name)
        notify("stubbed")
        return type("Rejected", (), {"ok": False, "arc": None})()

    monkeypatch.setattr(cli, "run_plugin", _fake_run_plugin)

    assert cli.main([str(EXAMPLE)]) == 1
    assert calls == ["Plus crossing"]
