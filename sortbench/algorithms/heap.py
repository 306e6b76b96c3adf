"""In-place heap sort over a max-heap."""

from __future__ import annotations

from typing import MutableSequence

from sortbench.algorithms.base import ComparisonCounter, T, swap


def heap_sort(items: MutableSequence[T], counter: ComparisonCounter) -> None:
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        heapify(items, n, i, counter)
    for i in range(n - 1, 0, -1):
        swap(items, 0, i)
        heapify(items, i, 0, counter)


def heapify(items: MutableSequence[T], n: int, i: int, counter: ComparisonCounter) -> None:
    """Sift ``items[i]`` down inside the heap prefix of length ``n``.

    Each existing child is checked against the current largest, and every
    check is counted whether or not it moves ``largest``.
    """
    largest = i
    left, right = 2 * i + 1, 2 * i + 2
    if left < n and counter.compare(items[left], items[largest]) > 0:
        largest = left
    if right < n and counter.compare(items[right], items[largest]) > 0:
        largest = right
    if largest != i:
        swap(items, i, largest)
        heapify(items, n, largest, counter)
