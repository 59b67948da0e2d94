from slidegraph.models.board import Direction, OccupancyBoard
from slidegraph.models.configuration import Configuration, Position
from slidegraph.models.specification import (
    GameSpecification,
    GoalKind,
    GoalSpec,
    PieceSpec,
)

__all__ = [
    "Configuration",
    "Direction",
    "GameSpecification",
    "GoalKind",
    "GoalSpec",
    "OccupancyBoard",
    "PieceSpec",
    "Position",
]
