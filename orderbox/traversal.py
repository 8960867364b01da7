"""Traversal orders over a sequence and a cursor that walks them."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from itertools import chain, zip_longest
from typing import Any, Callable


def ascending_indices(values: Sequence[Any]) -> list[int]:
    """Indices of ``values`` ordered from the smallest value to the largest."""
    return sorted(range(len(values)), key=values.__getitem__)


def descending_indices(values: Sequence[Any]) -> list[int]:
    """Indices of ``values`` ordered from the largest value to the smallest."""
    return sorted(range(len(values)), key=values.__getitem__, reverse=True)


def side_cross_indices(values: Sequence[Any]) -> list[int]:
    """Indices alternating between the smallest and largest remaining values."""
    ordered = ascending_indices(values)
    half = len(ordered) // 2
    lows = ordered[:half]
    highs = reversed(ordered[half:])
    result: list[int] = []
    for low, high in zip_longest(lows, highs):
        if low is not None:
            result.append(low)
        if high is not None:
            result.append(high)
    return result


def reverse_indices(values: Sequence[Any]) -> list[int]:
    """Indices from the last inserted element to the first."""
    return list(reversed(range(len(values))))


def insertion_indices(values: Sequence[Any]) -> list[int]:
    """Indices in insertion order."""
    return list(range(len(values)))


def middle_out_indices(values: Sequence[Any]) -> list[int]:
    """Indices starting at the middle (rounded down), then alternating left and right."""
    size = len(values)
    if size == 0:
        return []
    mid = size // 2
    left = range(mid - 1, -1, -1)
    right = range(mid + 1, size)
    pairs = zip_longest(left, right)
    return [mid] + [i for i in chain.from_iterable(pairs) if i is not None]


class Traversal(Enum):
    """The orders in which a container can be traversed."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    SIDE_CROSS = "side_cross"
    REVERSE = "reverse"
    INSERTION = "insertion"
    MIDDLE_OUT = "middle_out"

    def indices(self, values: Sequence[Any]) -> list[int]:
        """Positions of ``values`` in this traversal's order."""
        return _BUILDERS[self](values)

    @property
    def strict(self) -> bool:
        """Whether advancing a cursor past the end is an error."""
        return self in _STRICT


_BUILDERS: dict[Traversal, Callable[[Sequence[Any]], list[int]]] = {
    Traversal.ASCENDING: ascending_indices,
    Traversal.DESCENDING: descending_indices,
    Traversal.SIDE_CROSS: side_cross_indices,
    Traversal.REVERSE: reverse_indices,
    Traversal.INSERTION: insertion_indices,
    Traversal.MIDDLE_OUT: middle_out_indices,
}

_STRICT = frozenset({Traversal.ASCENDING, Traversal.DESCENDING, Traversal.MIDDLE_OUT})


class Cursor:
    """A position within one traversal of a sequence.

    The order is computed when the cursor is made; changing the sequence
    afterwards leaves the cursor invalid.
    """

    def __init__(self, values: Sequence[Any], traversal: Traversal, start: int = 0) -> None:
        self._values = values
        self._traversal = traversal
        self._order = traversal.indices(values)
        self._position = start

    @property
    def traversal(self) -> Traversal:
        return self._traversal

    @property
    def position(self) -> int:
        return self._position

    def current(self) -> Any:
        """The element at the cursor; IndexError past the end."""
        if self.at_end():
            raise IndexError(f"{self._traversal.value} cursor: dereference out of range")
        return self._values[self._order[self._position]]

    def advance(self) -> Cursor:
        """Move one step forward and return the cursor itself."""
        if self._traversal.strict and self.at_end():
            raise IndexError(f"{self._traversal.value} cursor: increment past end")
        self._position += 1
        return self

    def at_end(self) -> bool:
        return self._position >= len(self._order)

    def __iter__(self) -> Cursor:
        return self

    def __next__(self) -> Any:
        if self.at_end():
            raise StopIteration
        value = self.current()
        self._position += 1
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return (
            self._values is other._values
            and self._traversal is other._traversal
            and self._position == other._position
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Cursor({self._traversal.name}, position={self._position})"