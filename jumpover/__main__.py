import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from jumpover import (
    SceneFormatError,
    generate_svg_document,
    load_scene_file,
    print_scene,
    run_plugin,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Add a jump-over arc where two strokes cross")
    parser.add_argument("path", help="Path to the scene JSON file")
    parser.add_argument(
        "--select",
        action="append",
        metavar="ID",
        help="Node id to select (repeatable); overrides the selection stored in the scene",
    )
    parser.add_argument(
        "--output",
        help="Write the updated scene JSON to the given path",
    )
    parser.add_argument(
        "--svg-output-path",
        help="Write an SVG preview of the updated scene to the given path",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Loading scene from %s", args.path)
    try:
        page = load_scene_file(args.path)
    except (OSError, SceneFormatError) as exc:
        logger.error("Cannot load scene: %s", exc)
        return 2

    if args.select:
        selection = []
        for node_id in args.select:
            node = page.find(node_id)
            if node is None:
                logger.error("No node with id %r in %s", node_id, args.path)
                return 2
            selection.append(node)
        page.selection = selection

    outcome = run_plugin(page, notify=print)

    if outcome.ok and outcome.arc is not None:
        arc = outcome.arc
        print(f"Intersection: ({arc.center[0]:.6f}, {arc.center[1]:.6f})")
        print(f"Radius: {arc.radius:g}")
        print(f"Rotation: {arc.rotation:.6f}")
        print(f"Path: {arc.path_data}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing scene to %s", output_path)
        output_path.write_text(print_scene(page), encoding="utf-8")

    if args.svg_output_path:
        svg_path = Path(args.svg_output_path)
        svg_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG preview to %s", svg_path)
        svg_path.write_text(generate_svg_document(page), encoding="utf-8")

    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
