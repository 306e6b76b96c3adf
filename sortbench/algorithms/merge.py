"""Top-down merge sort."""

from __future__ import annotations

from typing import MutableSequence

from sortbench.algorithms.base import ComparisonCounter, T


def merge_sort(items: MutableSequence[T], counter: ComparisonCounter) -> None:
    _merge_sort_range(items, 0, len(items) - 1, counter)


def _merge_sort_range(
    items: MutableSequence[T], left: int, right: int, counter: ComparisonCounter
) -> None:
    if left < right:
        mid = (left + right) // 2
        _merge_sort_range(items, left, mid, counter)
        _merge_sort_range(items, mid + 1, right, counter)
        merge(items, left, mid, right, counter)


def merge(
    items: MutableSequence[T], left: int, mid: int, right: int, counter: ComparisonCounter
) -> None:
    """Merge the sorted runs ``[left, mid]`` and ``[mid + 1, right]``.

    Ties take the left element first. Only cursor comparisons are counted;
    the leftover tail of either run is copied without comparing.
    """
    temp: list[T] = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if counter.compare(items[i], items[j]) <= 0:
            temp.append(items[i])
            i += 1
        else:
            temp.append(items[j])
            j += 1
    temp.extend(items[i : mid + 1])
    temp.extend(items[j : right + 1])
    items[left : right + 1] = temp
