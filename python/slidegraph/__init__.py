"""Reachable state-space enumeration for sliding-block puzzles."""

from slidegraph.engine.interner import Interner
from slidegraph.engine.movegen import MoveGenerator, Slide
from slidegraph.engine.traversal import (
    GraphGenerator,
    GraphResult,
    ReachabilityCounter,
    count_reachable,
    generate_graph,
)
from slidegraph.errors import (
    InvariantViolation,
    OutOfBoundsPlacement,
    SlideGraphError,
    SpecParseError,
)
from slidegraph.io import load_specification, loads, parse_specification
from slidegraph.models import (
    Configuration,
    Direction,
    GameSpecification,
    GoalKind,
    GoalSpec,
    OccupancyBoard,
    PieceSpec,
)

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "Direction",
    "GameSpecification",
    "GoalKind",
    "GoalSpec",
    "GraphGenerator",
    "GraphResult",
    "Interner",
    "InvariantViolation",
    "MoveGenerator",
    "OccupancyBoard",
    "OutOfBoundsPlacement",
    "PieceSpec",
    "ReachabilityCounter",
    "SlideGraphError",
    "Slide",
    "SpecParseError",
    "count_reachable",
    "generate_graph",
    "load_specification",
    "loads",
    "parse_specification",
]
