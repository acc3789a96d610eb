"""Lazy iteration over the subsets of a small sequence.

Subsets come out in ascending bitmask order. Inside each subset the
elements keep the order they had in the input, so callers that need sorted
subsets sort the input first.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class BitMaskCombinator(Generic[T]):
    """Restartable iterable of every subset whose size falls within [min_size, max_size]."""

    def __init__(self, items: Sequence[T], min_size: int = 1, max_size: Optional[int] = None) -> None:
        self.items: List[T] = list(items)
        self.min_size = min_size
        self.max_size = len(self.items) if max_size is None else max_size

    def __iter__(self) -> Iterator[List[T]]:
        for mask in range(1 << len(self.items)):
            ones = bin(mask).count("1")
            if ones < self.min_size or ones > self.max_size:
                continue
            yield [item for idx, item in enumerate(self.items) if mask & (1 << idx)]


def all_combinations(items: Sequence[T]) -> BitMaskCombinator[T]:
    return BitMaskCombinator(items)


def all_combinations_of_min_size(items: Sequence[T], min_size: int) -> BitMaskCombinator[T]:
    return BitMaskCombinator(items, min_size=min_size)


def all_combinations_of_max_size(items: Sequence[T], max_size: int) -> BitMaskCombinator[T]:
    return BitMaskCombinator(items, max_size=max_size)


def all_combinations_of_size(items: Sequence[T], min_size: int, max_size: int) -> BitMaskCombinator[T]:
    return BitMaskCombinator(items, min_size=min_size, max_size=max_size)
