"""Periodic progress logging shared by the traversal drivers."""

from __future__ import annotations

import logging

DEFAULT_PROGRESS_EVERY = 1_000_000

logger = logging.getLogger("slidegraph.progress")


def report(step: int, every: int, pending: int, discovered: int) -> None:
    """Log a status line on every *every*-th step (``0`` disables)."""
    if every <= 0 or step % every:
        return
    logger.info(
        "Step: %d, queue size: %d, visited: %d",
        step,
        pending,
        discovered - pending,
    )
