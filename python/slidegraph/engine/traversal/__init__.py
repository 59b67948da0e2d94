from slidegraph.engine.traversal.graph import (
    Edge,
    GraphGenerator,
    GraphResult,
    generate_graph,
)
from slidegraph.engine.traversal.progress import DEFAULT_PROGRESS_EVERY
from slidegraph.engine.traversal.reachability import (
    ReachabilityCounter,
    count_reachable,
)
from slidegraph.engine.traversal.stack import WorkStack

__all__ = [
    "DEFAULT_PROGRESS_EVERY",
    "Edge",
    "GraphGenerator",
    "GraphResult",
    "ReachabilityCounter",
    "WorkStack",
    "count_reachable",
    "generate_graph",
]
