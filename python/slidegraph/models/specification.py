"""Puzzle specification — board, pieces, and goal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from slidegraph.models.configuration import Configuration, Position


class GoalKind(StrEnum):
    POSITION = "position"


@dataclass(frozen=True)
class GoalSpec:
    """Declared target of the puzzle.

    Only the ``position`` kind (a target cell) exists today.  The goal is
    carried through loading but is not evaluated during exploration.
    """

    kind: GoalKind
    position: Position


@dataclass(frozen=True)
class PieceSpec:
    size: tuple[int, int]
    position: Position
    moves: tuple[bool, bool]

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    @property
    def area(self) -> int:
        return self.size[0] * self.size[1]

    @property
    def horizontal(self) -> bool:
        return self.moves[0]

    @property
    def vertical(self) -> bool:
        return self.moves[1]


@dataclass(frozen=True)
class GameSpecification:
    """Immutable description of a puzzle: grid size, pieces, and goal."""

    dimensions: tuple[int, int]
    pieces: tuple[PieceSpec, ...]
    goal: GoalSpec

    @property
    def width(self) -> int:
        return self.dimensions[0]

    @property
    def height(self) -> int:
        return self.dimensions[1]

    @property
    def total_area(self) -> int:
        """Number of cells the pieces cover when none overlap."""
        return sum(piece.area for piece in self.pieces)

    def initial_configuration(self) -> Configuration:
        return Configuration(tuple(piece.position for piece in self.pieces))
