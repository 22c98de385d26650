"""Host-facing entry point: selection in, one notification out."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .config import DEFAULT_OPTIONS, JumpOverOptions
from .pipeline import Outcome, run_once
from .scene import Page, VectorNode, collect_lines, materialize_arc

logger = logging.getLogger(__name__)

Notify = Callable[[str], None]


def run_plugin(
    page: Page,
    *,
    notify: Optional[Notify] = None,
    options: JumpOverOptions = DEFAULT_OPTIONS,
) -> Outcome:
    """Run the jump-over tool on ``page.selection`` and append the arc on success."""

    lines = collect_lines(page.selection)
    logger.info(
        "Selection of %d node(s) holds %d line-like node(s)", len(page.selection), len(lines)
    )
    outcome = run_once(lines, options)
    if outcome.ok and outcome.arc is not None:
        node: VectorNode = materialize_arc(page, outcome.arc)
        logger.info("Added %s to %s", node.id, page.name)
    if notify is not None:
        notify(outcome.message)
    return outcome


__all__ = ["Notify", "run_plugin"]
