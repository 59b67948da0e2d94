"""State-space graph generation: every reachable node and every slide edge."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from slidegraph.engine.interner import Interner
from slidegraph.engine.movegen import MoveGenerator
from slidegraph.engine.traversal import progress
from slidegraph.engine.traversal.stack import WorkStack
from slidegraph.models.configuration import Configuration
from slidegraph.models.specification import GameSpecification

logger = logging.getLogger(__name__)

Edge = tuple[int, int]


@dataclass
class GraphResult:
    nodes: Interner
    edges: set[Edge]
    steps: int

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def sorted_edges(self) -> list[Edge]:
        return sorted(self.edges)


class GraphGenerator:
    """Exhaustively explores a puzzle and records the transition graph.

    The initial configuration is id 0.  Each :meth:`visit` pops one id from
    the work stack, generates its slides, interns unseen neighbors (pushing
    only those), and records an undirected edge for every slide, including
    slides into nodes that were already visited.
    """

    def __init__(
        self,
        specification: GameSpecification,
        progress_every: int = progress.DEFAULT_PROGRESS_EVERY,
    ) -> None:
        self.specification = specification
        self.progress_every = progress_every
        self.moves = MoveGenerator(specification)
        self.nodes = Interner()
        self.edges: set[Edge] = set()
        self.queue: WorkStack[int] = WorkStack()
        self.steps = 0

        self.queue.push(self.nodes.insert(specification.initial_configuration()))

    # -- traversal ------------------------------------------------------------

    def enqueue(self, configuration: Configuration, neighbor: int) -> int:
        """Intern *configuration* and record its edge to node *neighbor*."""
        idx = self.nodes.index_of(configuration)
        if idx is None:
            idx = self.nodes.insert(configuration)
            self.queue.push(idx)

        self.edges.add((min(idx, neighbor), max(idx, neighbor)))
        return idx

    def visit(self, idx: int) -> None:
        configuration = self.nodes.get(idx)
        if configuration is None:
            raise KeyError(f"Unknown node id {idx}")

        for slide in self.moves.neighbors(configuration):
            self.enqueue(slide.configuration, idx)

    def step(self) -> bool:
        """Visit one node.  Returns False once the work stack is empty."""
        if not self.queue:
            return False
        progress.report(self.steps, self.progress_every, len(self.queue), len(self.nodes))
        self.steps += 1
        self.visit(self.queue.pop())
        return True

    def generate(self) -> GraphResult:
        """Run until every reachable configuration has been visited."""
        while self.step():
            pass

        logger.info(
            "Explored %d configurations and %d transitions in %d steps",
            len(self.nodes),
            len(self.edges),
            self.steps,
        )
        return GraphResult(nodes=self.nodes, edges=self.edges, steps=self.steps)


def generate_graph(
    specification: GameSpecification,
    progress_every: int = progress.DEFAULT_PROGRESS_EVERY,
) -> GraphResult:
    return GraphGenerator(specification, progress_every).generate()
