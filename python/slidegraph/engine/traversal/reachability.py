"""Reachable-set counting without ids or edges."""

from __future__ import annotations

import logging

from slidegraph.engine.movegen import MoveGenerator
from slidegraph.engine.traversal import progress
from slidegraph.engine.traversal.stack import WorkStack
from slidegraph.models.configuration import Configuration
from slidegraph.models.specification import GameSpecification

logger = logging.getLogger(__name__)


class ReachabilityCounter:
    """Same depth-first walk as :class:`GraphGenerator`, visited set only."""

    def __init__(
        self,
        specification: GameSpecification,
        progress_every: int = progress.DEFAULT_PROGRESS_EVERY,
    ) -> None:
        self.progress_every = progress_every
        self.moves = MoveGenerator(specification)
        initial = specification.initial_configuration()
        self.visited: set[Configuration] = {initial}
        self.queue: WorkStack[Configuration] = WorkStack([initial])
        self.steps = 0

    def visit(self, configuration: Configuration) -> None:
        for slide in self.moves.neighbors(configuration):
            if slide.configuration not in self.visited:
                self.visited.add(slide.configuration)
                self.queue.push(slide.configuration)

    def count(self) -> int:
        """Walk the whole reachable set and return its size."""
        while self.queue:
            progress.report(
                self.steps, self.progress_every, len(self.queue), len(self.visited)
            )
            self.steps += 1
            self.visit(self.queue.pop())

        logger.info("Reached %d configurations in %d steps", len(self.visited), self.steps)
        return len(self.visited)


def count_reachable(
    specification: GameSpecification,
    progress_every: int = progress.DEFAULT_PROGRESS_EVERY,
) -> int:
    return ReachabilityCounter(specification, progress_every).count()
