from jumpover import demo, load_scene, run_plugin
from jumpover.demo import DEMO


def test_demo_scene_produces_arc():
    page = load_scene(DEMO)
    outcome = run_plugin(page)

    assert outcome.ok
    assert outcome.arc.center == (100.0, 80.0)
    assert outcome.arc.rotation == 0.0
    assert outcome.arc.radius == 4.0


def test_demo_run_prints_summary(capsys):
    demo.run()
    out = capsys.readouterr().out
    assert "Notify: Jump-over added!" in out
    assert "Outcome: success (None)" in out
    assert '"id": "jump-over-1"' in out
