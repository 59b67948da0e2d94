"""Puzzle document loading and schema validation."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

from slidegraph.errors import SpecParseError
from slidegraph.io import load_specification, loads, parse_specification
from slidegraph.models.specification import GoalKind

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

_VALID = {
    "dimensions": [3, 2],
    "pieces": [
        {"size": [2, 1], "position": [0, 0], "moves": [True, False]},
        {"size": [1, 1], "position": [2, 1], "moves": [False, True]},
    ],
    "goal": {"position": [1, 0]},
}


def _broken(path: list, value=None, delete: bool = False) -> dict:
    """Return a copy of the valid document with one field replaced or removed."""
    doc = copy.deepcopy(_VALID)
    target = doc
    for key in path[:-1]:
        target = target[key]
    if delete:
        del target[path[-1]]
    else:
        target[path[-1]] = value
    return doc


def test_valid_document() -> None:
    spec = parse_specification(_VALID)

    assert spec.dimensions == (3, 2)
    assert spec.pieces[0].size == (2, 1)
    assert spec.pieces[1].moves == (False, True)
    assert spec.goal.kind is GoalKind.POSITION
    assert spec.goal.position == (1, 0)
    assert spec.total_area == 3
    assert spec.initial_configuration().positions == ((0, 0), (2, 1))


def test_klotski_fixture() -> None:
    spec = load_specification(FIXTURES_DIR / "klotski.json")

    assert (spec.width, spec.height) == (4, 5)
    assert len(spec.pieces) == 10
    assert spec.total_area == 18


@pytest.mark.parametrize(
    "doc",
    [
        _broken(["dimensions"], delete=True),
        _broken(["pieces"], delete=True),
        _broken(["goal"], delete=True),
        _broken(["dimensions"], [3]),
        _broken(["dimensions"], [0, 2]),
        _broken(["dimensions"], ["3", "2"]),
        _broken(["dimensions"], [True, 2]),
        _broken(["pieces"], []),
        _broken(["pieces"], {"size": [1, 1]}),
        _broken(["pieces", 0, "size"], delete=True),
        _broken(["pieces", 0, "size"], [0, 1]),
        _broken(["pieces", 0, "position"], [-1, 0]),
        _broken(["pieces", 0, "moves"], [1, 0]),
        _broken(["pieces", 1, "moves"], [True]),
        _broken(["goal"], {"cell": [0, 0]}),
        _broken(["goal"], {"position": [0, 0], "cell": [1, 1]}),
        _broken(["goal"], [0, 0]),
        _broken(["goal", "position"], [0.5, 0]),
        [],
    ],
)
def test_schema_errors(doc) -> None:
    with pytest.raises(SpecParseError):
        parse_specification(doc)


def test_missing_dimensions_names_the_field() -> None:
    with pytest.raises(SpecParseError, match="dimensions"):
        parse_specification(_broken(["dimensions"], delete=True))


def test_missing_piece_field_names_the_piece() -> None:
    with pytest.raises(SpecParseError, match=r"pieces\[1\]\.position"):
        parse_specification(_broken(["pieces", 1, "position"], delete=True))


def test_invalid_json() -> None:
    with pytest.raises(SpecParseError, match="invalid JSON"):
        loads("{not json")


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SpecParseError, match="Cannot read"):
        load_specification(tmp_path / "absent.json")


def test_round_trip_through_file(tmp_path: Path) -> None:
    path = tmp_path / "puzzle.json"
    path.write_text(json.dumps(_VALID))

    assert load_specification(path) == parse_specification(_VALID)
