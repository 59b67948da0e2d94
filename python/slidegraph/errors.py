"""Exceptions raised while loading a puzzle or exploring its state space."""

from __future__ import annotations


class SlideGraphError(Exception):
    """Base class for every fatal error in a run."""


class SpecParseError(SlideGraphError, ValueError):
    """The puzzle document is malformed or fails schema validation."""


class InvariantViolation(SlideGraphError):
    """The occupied-cell count of a configuration differs from the piece area.

    Raised when pieces overlap, which means the specification (or a
    configuration derived from it) is inconsistent.
    """


class OutOfBoundsPlacement(SlideGraphError, IndexError):
    """A piece footprint or query rectangle extends past the board."""
