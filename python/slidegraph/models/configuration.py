"""Configuration model — the canonical search state."""

from __future__ import annotations

from dataclasses import dataclass

Position = tuple[int, int]


@dataclass(frozen=True, order=True)
class Configuration:
    """One (x, y) top-left position per piece, in piece-list order.

    Configurations are plain values: they know nothing about the board or
    the piece footprints, and two configurations are equal iff every
    position matches.
    """

    positions: tuple[Position, ...]

    @classmethod
    def from_positions(cls, positions) -> Configuration:
        """Build a configuration from any iterable of ``(x, y)`` pairs."""
        return cls(tuple((int(x), int(y)) for x, y in positions))

    def __len__(self) -> int:
        return len(self.positions)

    def __getitem__(self, piece: int) -> Position:
        return self.positions[piece]

    def moved(self, piece: int, position: Position) -> Configuration:
        """Return a copy with *piece* relocated to *position*."""
        positions = list(self.positions)
        positions[piece] = position
        return Configuration(tuple(positions))

    def to_json(self) -> list[list[int]]:
        return [[x, y] for x, y in self.positions]
