"""Puzzle document loading and schema validation.

A puzzle document is a JSON object::

    {
        "dimensions": [4, 5],
        "pieces": [
            {"size": [2, 2], "position": [1, 0], "moves": [true, true]},
            ...
        ],
        "goal": {"position": [1, 3]}
    }

Every schema failure is reported as :class:`SpecParseError` before any
exploration starts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from slidegraph.errors import SpecParseError
from slidegraph.models.specification import (
    GameSpecification,
    GoalKind,
    GoalSpec,
    PieceSpec,
)

logger = logging.getLogger(__name__)


# -- public API ---------------------------------------------------------------


def load_specification(path: Path | str) -> GameSpecification:
    """Read and validate the puzzle document at *path*."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise SpecParseError(f"Cannot read {path}: {exc.strerror or exc}") from exc

    spec = loads(text, source=str(path))
    logger.debug(
        "Loaded %s: %dx%d board, %d pieces",
        path,
        spec.width,
        spec.height,
        len(spec.pieces),
    )
    return spec


def loads(text: str, source: str = "<string>") -> GameSpecification:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SpecParseError(f"{source}: invalid JSON ({exc})") from exc
    return parse_specification(data)


def parse_specification(data: Any) -> GameSpecification:
    """Validate an already-decoded document and build the specification."""
    if not isinstance(data, dict):
        raise SpecParseError("Puzzle document must be a JSON object.")

    dimensions = _pair(_field(data, "dimensions"), "dimensions", minimum=1)

    raw_pieces = _field(data, "pieces")
    if not isinstance(raw_pieces, list) or not raw_pieces:
        raise SpecParseError("'pieces' must be a non-empty list.")
    pieces = tuple(_piece(raw, i) for i, raw in enumerate(raw_pieces))

    goal = _goal(_field(data, "goal"))

    return GameSpecification(dimensions=dimensions, pieces=pieces, goal=goal)


# -- helpers ------------------------------------------------------------------


def _field(obj: dict, name: str, where: str = "") -> Any:
    if name not in obj:
        raise SpecParseError(f"Missing field '{where}{name}'.")
    return obj[name]


def _pair(value: Any, name: str, minimum: int) -> tuple[int, int]:
    if (
        not isinstance(value, list)
        or len(value) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    ):
        raise SpecParseError(f"'{name}' must be a list of two integers, got {value!r}.")
    if min(value) < minimum:
        raise SpecParseError(f"'{name}' values must be >= {minimum}, got {value!r}.")
    return value[0], value[1]


def _piece(raw: Any, index: int) -> PieceSpec:
    where = f"pieces[{index}]."
    if not isinstance(raw, dict):
        raise SpecParseError(f"'pieces[{index}]' must be an object.")

    size = _pair(_field(raw, "size", where), where + "size", minimum=1)
    position = _pair(_field(raw, "position", where), where + "position", minimum=0)

    moves = _field(raw, "moves", where)
    if (
        not isinstance(moves, list)
        or len(moves) != 2
        or not all(isinstance(m, bool) for m in moves)
    ):
        raise SpecParseError(
            f"'{where}moves' must be a list of two booleans, got {moves!r}."
        )

    return PieceSpec(size=size, position=position, moves=(moves[0], moves[1]))


def _goal(raw: Any) -> GoalSpec:
    if not isinstance(raw, dict) or len(raw) != 1:
        raise SpecParseError(
            f"'goal' must be an object with exactly one kind, got {raw!r}."
        )

    kind, value = next(iter(raw.items()))
    try:
        goal_kind = GoalKind(kind)
    except ValueError:
        known = ", ".join(k.value for k in GoalKind)
        raise SpecParseError(f"Unknown goal kind '{kind}' (expected: {known}).") from None

    return GoalSpec(kind=goal_kind, position=_pair(value, f"goal.{kind}", minimum=0))
