"""Searching and sorting of sequences with a C-style three-way comparator.

A comparator takes two items and returns a negative number, zero or a
positive number, as ``strcmp`` does.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[K, T], int]


def bsearch(key: K, items: Sequence[T], compar: Callable[[K, T], int]) -> Optional[int]:
    """Return the index of the first item for which ``compar(key, item)`` is zero.

    The items are examined one after another from the start, so the sequence
    need not be sorted. Returns ``None`` when no item matches.
    """
    return next(
        (index for index, item in enumerate(items) if compar(key, item) == 0),
        None,
    )


def _partition(
    items: MutableSequence[T], low: int, high: int, compar: Callable[[T, T], int]
) -> int:
    """Partition ``items[low:high + 1]`` around its last item; return the pivot's index."""
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high + 1):
        if compar(items[j], pivot) < 0:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def qsort(items: MutableSequence[T], compar: Callable[[T, T], int]) -> None:
    """Sort ``items`` in place into ascending order under ``compar``.

    Quicksort with the last item of each range as the pivot. The sort is not
    stable.
    """
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(items, low, high, compar)
        # The left range is handled before the right one.
        pending.append((pivot + 1, high))
        pending.append((low, pivot - 1))