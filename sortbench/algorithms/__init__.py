"""Sorting algorithms benchmarked by sortbench.

Contains:
- Bubble sort
- Merge sort
- Quick sort
- Heap sort
- Odd-even transposition sort

Every sorter has the signature ``sorter(items, counter) -> None`` and sorts
``items`` in place.
"""

from __future__ import annotations

from typing import Callable, MutableSequence

from sortbench.algorithms.base import ComparisonCounter
from sortbench.algorithms.bubble import bubble_sort
from sortbench.algorithms.heap import heap_sort
from sortbench.algorithms.merge import merge_sort
from sortbench.algorithms.quick import quick_sort
from sortbench.algorithms.transposition import transposition_sort

Sorter = Callable[[MutableSequence, ComparisonCounter], None]

SORTERS: dict[str, Sorter] = {
    "bubble": bubble_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
    "transposition": transposition_sort,
}
ALGORITHMS_ALL = tuple(SORTERS)


def normalize_algorithm(name: str) -> str:
    return name.strip().lower()


def get_sorter(name: str) -> Sorter:
    """Look up a sorter by case-insensitive name.

    Raises:
        ValueError: If the name is not one of ``ALGORITHMS_ALL``.
    """
    sorter = SORTERS.get(normalize_algorithm(name))
    if sorter is None:
        raise ValueError(f"Unknown algorithm: {name!r} (expected one of {', '.join(ALGORITHMS_ALL)})")
    return sorter


__all__ = [
    "ALGORITHMS_ALL",
    "SORTERS",
    "ComparisonCounter",
    "bubble_sort",
    "get_sorter",
    "heap_sort",
    "merge_sort",
    "normalize_algorithm",
    "quick_sort",
    "transposition_sort",
]
