"""Bubble sort with early exit."""

from __future__ import annotations

from typing import MutableSequence

from sortbench.algorithms.base import ComparisonCounter, T, swap


def bubble_sort(items: MutableSequence[T], counter: ComparisonCounter) -> None:
    """Sort ``items`` in place by repeated adjacent exchanges.

    Pass ``i`` only scans the first ``n - 1 - i`` pairs because the tail is
    already in its final place. A pass without a single exchange ends the
    sort, so pre-sorted input costs exactly ``n - 1`` comparisons.
    """
    size = len(items)
    for i in range(size - 1):
        swapped = False
        for j in range(size - i - 1):
            if counter.compare(items[j], items[j + 1]) > 0:
                swap(items, j, j + 1)
                swapped = True
        if not swapped:
            break
