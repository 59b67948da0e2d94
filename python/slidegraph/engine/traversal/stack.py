"""Work list used by the traversal drivers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class WorkStack(Generic[T]):
    """Last-in-first-out work list.

    Traversal is therefore depth-first, and node ids are numbered in the
    order this stack discovers them.  Swapping in a FIFO queue would keep
    the same node and edge sets but renumber the nodes.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the most recently pushed item."""
        if not self._items:
            raise IndexError("pop from an empty WorkStack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
