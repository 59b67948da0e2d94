"""Interner: dense ids, lookup-then-insert and insert-if-absent."""

from __future__ import annotations

from slidegraph.engine.interner import Interner
from slidegraph.models.configuration import Configuration


def _conf(*positions: tuple[int, int]) -> Configuration:
    return Configuration.from_positions(positions)


def test_ids_are_dense_in_first_seen_order() -> None:
    nodes = Interner()
    a, b, c = _conf((0, 0)), _conf((1, 0)), _conf((2, 0))

    assert [nodes.insert(v) for v in (a, b, c)] == [0, 1, 2]
    assert nodes.count() == len(nodes) == 3
    assert [nodes.get(i) for i in range(3)] == [a, b, c]
    assert list(nodes) == [(0, a), (1, b), (2, c)]


def test_index_of_does_not_insert() -> None:
    nodes = Interner()

    assert nodes.index_of(_conf((0, 0))) is None
    assert len(nodes) == 0


def test_get_out_of_range_is_none() -> None:
    nodes = Interner()
    nodes.insert(_conf((0, 0)))

    assert nodes.get(1) is None
    assert nodes.get(-1) is None


def test_lookup_then_insert_and_intern_agree() -> None:
    nodes = Interner()
    value = _conf((1, 2), (3, 4))

    direct = nodes.insert(value)
    # An equal but distinct object must resolve to the same id.
    again = nodes.index_of(_conf((1, 2), (3, 4)))
    interned, created = nodes.intern(_conf((1, 2), (3, 4)))

    assert direct == again == interned == 0
    assert created is False
    assert len(nodes) == 1


def test_intern_creates_only_once() -> None:
    nodes = Interner()

    first = nodes.intern(_conf((0, 0)))
    second = nodes.intern(_conf((0, 0)))
    other = nodes.intern(_conf((0, 1)))

    assert first == (0, True)
    assert second == (0, False)
    assert other == (1, True)
    assert _conf((0, 1)) in nodes
