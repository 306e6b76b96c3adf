"""Odd-even transposition sort, run sequentially."""

from __future__ import annotations

from typing import MutableSequence

from sortbench.algorithms.base import ComparisonCounter, T, swap


def transposition_sort(items: MutableSequence[T], counter: ComparisonCounter) -> None:
    """Alternate odd and even compare-exchange phases until a cycle is clean.

    Odd phase pairs start at 1, 3, 5, ...; even phase pairs at 0, 2, 4, ....
    Pairs inside a phase are disjoint, so a phase could run in parallel.
    """
    size = len(items)
    done = False
    while not done:
        done = True
        for start in (1, 0):
            for i in range(start, size - 1, 2):
                if counter.compare(items[i], items[i + 1]) > 0:
                    swap(items, i, i + 1)
                    done = False
