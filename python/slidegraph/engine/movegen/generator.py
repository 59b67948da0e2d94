"""Single-piece slide generation for one configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from slidegraph.errors import InvariantViolation
from slidegraph.models.board import Direction, OccupancyBoard
from slidegraph.models.configuration import Configuration
from slidegraph.models.specification import GameSpecification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Slide:
    """One legal move: *piece* shifted one cell in *direction*."""

    piece: int
    direction: Direction
    configuration: Configuration


class MoveGenerator:
    """Produces every neighbor reachable by sliding one piece by one cell.

    Owns a single :class:`OccupancyBoard` that is rebuilt for each
    configuration passed to :meth:`neighbors`.
    """

    def __init__(self, specification: GameSpecification) -> None:
        self.specification = specification
        self.board = OccupancyBoard(specification.dimensions)
        self._expected_area = specification.total_area

    # -- board ----------------------------------------------------------------

    def load(self, configuration: Configuration) -> OccupancyBoard:
        """Rebuild the board for *configuration* and check the area invariant."""
        board = self.board
        board.clear()
        for piece, position in zip(self.specification.pieces, configuration.positions):
            board.place(piece, position)

        occupied = board.occupied_count()
        if occupied != self._expected_area:
            raise InvariantViolation(
                f"Expected {self._expected_area} occupied cells, found "
                f"{occupied} for {configuration.positions}; pieces overlap.\n"
                f"{board.render()}"
            )
        return board

    # -- moves ----------------------------------------------------------------

    def neighbors(self, configuration: Configuration) -> list[Slide]:
        """Return every legal slide from *configuration*.

        Order is deterministic: piece order, then left, right, up, down.
        Legality is judged against the board of *configuration* itself;
        only one piece moves per slide.
        """
        board = self.load(configuration)
        slides: list[Slide] = []

        for idx, piece in enumerate(self.specification.pieces):
            x, y = configuration.positions[idx]
            w, h = piece.size

            if piece.horizontal:
                strip = (1, h)
                if x > 0 and board.is_rect_clear((x - 1, y), strip):
                    slides.append(
                        Slide(idx, Direction.LEFT, configuration.moved(idx, (x - 1, y)))
                    )
                if x + w < board.width and board.is_rect_clear((x + w, y), strip):
                    slides.append(
                        Slide(idx, Direction.RIGHT, configuration.moved(idx, (x + 1, y)))
                    )

            if piece.vertical:
                strip = (w, 1)
                if y > 0 and board.is_rect_clear((x, y - 1), strip):
                    slides.append(
                        Slide(idx, Direction.UP, configuration.moved(idx, (x, y - 1)))
                    )
                if y + h < board.height and board.is_rect_clear((x, y + h), strip):
                    slides.append(
                        Slide(idx, Direction.DOWN, configuration.moved(idx, (x, y + 1)))
                    )

        logger.debug("%d slides from %s", len(slides), configuration.positions)
        return slides
