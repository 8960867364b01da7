"""A container of elements that can be walked in several orders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from orderbox.traversal import Cursor, Traversal


class ElementNotFoundError(RuntimeError):
    """Raised when removing an element that the container does not hold."""


class OrderedContainer:
    """Holds elements in insertion order and hands out cursors over them.

    Cursors become invalid once the container is modified.
    """

    def __init__(self, elements: Iterable[Any] | None = None) -> None:
        self._elements: list[Any] = list(elements) if elements is not None else []

    def add(self, element: Any) -> None:
        """Append ``element`` to the container."""
        self._elements.append(element)

    def remove(self, element: Any) -> None:
        """Remove every occurrence of ``element``.

        Raises ElementNotFoundError if there is none.
        """
        kept = [item for item in self._elements if item != element]
        if len(kept) == len(self._elements):
            raise ElementNotFoundError("Element not found in container")
        # Mutate in place so the container keeps one identity for its storage.
        self._elements[:] = kept

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._elements) + "]"

    def __repr__(self) -> str:
        return f"OrderedContainer({self._elements!r})"

    def traverse(self, traversal: Traversal, start: int = 0) -> Cursor:
        """A cursor over the elements in ``traversal`` order, at ``start``."""
        return Cursor(self._elements, traversal, start)

    def ascending(self) -> Cursor:
        """Cursor from the smallest element to the largest."""
        return self.traverse(Traversal.ASCENDING)

    def descending(self) -> Cursor:
        """Cursor from the largest element to the smallest."""
        return self.traverse(Traversal.DESCENDING)

    def side_cross(self) -> Cursor:
        """Cursor alternating between the smallest and largest remaining elements."""
        return self.traverse(Traversal.SIDE_CROSS)

    def reverse(self) -> Cursor:
        """Cursor from the last inserted element to the first."""
        return self.traverse(Traversal.REVERSE)

    def insertion(self) -> Cursor:
        """Cursor in insertion order."""
        return self.traverse(Traversal.INSERTION)

    def middle_out(self) -> Cursor:
        """Cursor from the middle element outwards, left first."""
        return self.traverse(Traversal.MIDDLE_OUT)