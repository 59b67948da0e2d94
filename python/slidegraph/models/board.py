"""Occupancy board used to test slide legality for one configuration."""

from __future__ import annotations

from enum import StrEnum

from slidegraph.errors import OutOfBoundsPlacement
from slidegraph.models.configuration import Position
from slidegraph.models.specification import PieceSpec


class Direction(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class OccupancyBoard:
    """Reusable width×height grid of occupied cells.

    Cells are stored row-major in a flat ``bytearray``; cell ``(x, y)``
    lives at ``x + y * width``.  One board is allocated per traversal and
    cleared before every visited configuration.
    """

    __slots__ = ("width", "height", "_cells")

    def __init__(self, dimensions: tuple[int, int]) -> None:
        self.width, self.height = dimensions
        self._cells = bytearray(self.width * self.height)

    # -- mutation -------------------------------------------------------------

    def clear(self) -> None:
        self._cells[:] = bytes(len(self._cells))

    def place(self, piece: PieceSpec, position: Position) -> None:
        """Mark the footprint of *piece* at *position* as occupied."""
        x0, y0 = position
        self._check_rect(position, piece.size)
        w = self.width
        for y in range(y0, y0 + piece.height):
            row = y * w
            for x in range(x0, x0 + piece.width):
                self._cells[row + x] = 1

    # -- queries --------------------------------------------------------------

    def is_occupied(self, x: int, y: int) -> bool:
        self._check_rect((x, y), (1, 1))
        return bool(self._cells[x + y * self.width])

    def is_rect_clear(self, position: Position, size: tuple[int, int]) -> bool:
        """Return True if every cell of the rectangle is unoccupied.

        Both extents are checked against the board; a rectangle that leaves
        the grid raises :class:`OutOfBoundsPlacement`.
        """
        self._check_rect(position, size)
        x0, y0 = position
        w = self.width
        for y in range(y0, y0 + size[1]):
            row = y * w
            for x in range(x0, x0 + size[0]):
                if self._cells[row + x]:
                    return False
        return True

    def occupied_count(self) -> int:
        return self._cells.count(1)

    # -- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the grid as text, ``X`` for occupied and ``.`` for free."""
        w = self.width
        return "\n".join(
            "".join("X" if c else "." for c in self._cells[y * w : (y + 1) * w])
            for y in range(self.height)
        )

    def __str__(self) -> str:
        return self.render()

    # -- helpers --------------------------------------------------------------

    def _check_rect(self, position: Position, size: tuple[int, int]) -> None:
        x, y = position
        w, h = size
        if x < 0 or y < 0 or x + w > self.width or y + h > self.height:
            raise OutOfBoundsPlacement(
                f"Rectangle {w}×{h} at ({x}, {y}) does not fit on the "
                f"{self.width}×{self.height} board."
            )
