"""A compact group of entities: explicit entries followed by a contiguous run."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


def _identity(value: int) -> Any:
    return value


class EntityGroup:
    """Entities listed one by one, followed by ``count`` entities built from values.

    Positions below ``num_fragmented()`` hold the listed entities. A later
    position ``index`` holds ``make_entity(first + index)``.
    """

    __slots__ = ("_fragmented", "_first", "_count", "_make_entity")

    def __init__(
        self,
        fragmented: Iterable[Any],
        first: int,
        count: int,
        make_entity: Callable[[int], Any] = _identity,
    ) -> None:
        if first < 0:
            raise ValueError("first must not be negative")
        if count < 0:
            raise ValueError("count must not be negative")
        self._fragmented = tuple(fragmented)
        self._first = first
        self._count = count
        self._make_entity = make_entity

    def at(self, index: int) -> Any:
        """Return the entity at ``index``, raising IndexError when out of range."""
        if index < 0:
            raise IndexError("Invalid index")
        fragmented_count = len(self._fragmented)
        if index < fragmented_count:
            return self._fragmented[index]
        if index - fragmented_count < self._count:
            return self._make_entity(self._first + index)
        raise IndexError("Invalid index")

    def __getitem__(self, index: int) -> Any:
        """Return the entity at ``index`` without checking the upper bound."""
        if index < 0:
            raise IndexError("Invalid index")
        if index < len(self._fragmented):
            return self._fragmented[index]
        return self._make_entity(self._first + index)

    def __iter__(self) -> Iterator[Any]:
        yield from self._fragmented
        start = len(self._fragmented)
        for index in range(start, start + self._count):
            yield self._make_entity(self._first + index)

    def __len__(self) -> int:
        return self._count + len(self._fragmented)

    def num_fragmented(self) -> int:
        """Number of entities listed one by one."""
        return len(self._fragmented)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(fragmented={list(self._fragmented)!r}, "
            f"first={self._first!r}, count={self._count!r})"
        )