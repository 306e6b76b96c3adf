"""Quick sort with Lomuto partitioning and a last-element pivot."""

from __future__ import annotations

from typing import MutableSequence

from sortbench.algorithms.base import ComparisonCounter, T, swap


def quick_sort(items: MutableSequence[T], counter: ComparisonCounter) -> None:
    """Sort ``items`` in place.

    Pending ranges live on an explicit stack instead of the call stack:
    already sorted or reversed input degrades to ``n - 1`` nested partitions,
    which would overflow the recursion limit for a few thousand elements.
    The left range is always handled first, matching the recursive order.
    """
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            p = partition(items, left, right, counter)
            pending.append((p + 1, right))
            pending.append((left, p - 1))


def partition(items: MutableSequence[T], left: int, right: int, counter: ComparisonCounter) -> int:
    """Partition ``[left, right]`` around ``items[right]`` and return the pivot index."""
    pivot = items[right]
    i = left - 1
    for j in range(left, right):
        if counter.compare(items[j], pivot) <= 0:
            i += 1
            swap(items, i, j)
    swap(items, i + 1, right)
    return i + 1
