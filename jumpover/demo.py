from . import load_scene, print_scene, run_plugin

DEMO = """
{
  "name": "Wiring diagram",
  "selection": ["bus"],
  "children": [
    {
      "type": "FRAME",
      "id": "bus",
      "transform": [[1, 0, 40], [0, 1, 20]],
      "children": [
        {"type": "LINE", "id": "feed", "transform": [[120, 0, 0], [0, 120, 60]],
         "strokes": ["#1e1e1e"], "strokeWeight": 2},
        {"type": "VECTOR", "id": "drop", "transform": [[1, 0, 60], [0, 1, 0]],
         "vertices": [[0, 0], [0, 120]], "segments": [[0, 1]],
         "strokes": ["#2f80ed"], "strokeWeight": 2}
      ]
    }
  ]
}
"""


def run():
    page = load_scene(DEMO)
    outcome = run_plugin(page, notify=lambda message: print(f"Notify: {message}"))
    print(f"Outcome: {outcome.status} ({outcome.reason})")
    if outcome.arc is not None:
        print(f"Arc path: {outcome.arc.path_data}")
    print(f"Scene:\n{print_scene(page)}")


if __name__ == "__main__":
    run()
