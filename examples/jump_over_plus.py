"""Example pipeline: load a scene, add the jump-over arc, write an SVG preview."""

from pathlib import Path

from jumpover import generate_svg_document, load_scene_file, run_plugin

HERE = Path(__file__).resolve().parent

page = load_scene_file(HERE / "plus_crossing.json")
outcome = run_plugin(page, notify=print)

if outcome.arc is not None:
    print("Center:", outcome.arc.center)
    print("Rotation:", outcome.arc.rotation)
    print("Path:", outcome.arc.path_data)

(HERE / "plus_crossing.svg").write_text(generate_svg_document(page), encoding="utf-8")
