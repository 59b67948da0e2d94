"""Append-only registry mapping configurations to dense integer ids."""

from __future__ import annotations

from collections.abc import Iterator

from slidegraph.models.configuration import Configuration


class Interner:
    """Bijection between configurations and ids ``0, 1, 2, ...``.

    Ids are handed out in first-seen order and never reused.  ``insert``
    does not deduplicate: call ``index_of`` first, or use ``intern`` which
    does both in one step.
    """

    def __init__(self) -> None:
        self._values: list[Configuration] = []
        self._ids: dict[Configuration, int] = {}

    def index_of(self, value: Configuration) -> int | None:
        return self._ids.get(value)

    def insert(self, value: Configuration) -> int:
        """Append *value* and return its new id."""
        idx = len(self._values)
        self._values.append(value)
        self._ids[value] = idx
        return idx

    def intern(self, value: Configuration) -> tuple[int, bool]:
        """Return ``(id, created)``, inserting *value* only if it is new."""
        idx = self._ids.get(value)
        if idx is not None:
            return idx, False
        return self.insert(value), True

    def get(self, idx: int) -> Configuration | None:
        if 0 <= idx < len(self._values):
            return self._values[idx]
        return None

    def count(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._ids

    def __iter__(self) -> Iterator[tuple[int, Configuration]]:
        return iter(enumerate(self._values))
