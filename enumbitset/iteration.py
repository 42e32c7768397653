"""Iteration over the variants stored in a bitset."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

__all__ = ["BitsetIterator"]

T = TypeVar("T")


class BitsetIterator(Iterator[T], Generic[T]):
    """Yield the variants whose bits are set, lowest bit (first variant) first.

    The iterator works on its own copy of the bits, so changing the set
    while iterating does not affect it.
    """

    __slots__ = ("_items", "_variants")

    def __init__(self, items: int, variants: Sequence[T]) -> None:
        if isinstance(items, bool) or not isinstance(items, int):
            raise TypeError(f"bitset items must be an int, not {type(items).__name__}")
        if items < 0:
            raise ValueError("bitset items must not be negative")
        self._items = items
        self._variants = variants

    def __iter__(self) -> BitsetIterator[T]:
        return self

    def __next__(self) -> T:
        if self._items == 0:
            raise StopIteration
        lowest = self._items & -self._items
        index = lowest.bit_length() - 1
        self._items ^= lowest
        # A bit beyond the last variant breaks the bitset invariant.
        return self._variants[index]

    def __length_hint__(self) -> int:
        return self._items.bit_count()