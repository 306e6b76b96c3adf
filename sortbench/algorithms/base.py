"""Comparison counting and helpers shared by all sorting algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableSequence, Protocol, Sequence, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


@dataclass
class ComparisonCounter:
    """Mutable comparison tally owned by a single benchmark run."""

    count: int = 0

    def compare(self, a: Comparable, b: Comparable) -> int:
        """Return -1, 0 or 1 for ``a`` relative to ``b`` and count the call.

        Only ``<`` is used, so any element type with a total order works.
        """
        self.count += 1
        if a < b:
            return -1
        if b < a:
            return 1
        return 0


def swap(items: MutableSequence[T], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def is_non_decreasing(items: Sequence[T]) -> bool:
    """Check sort order without touching any counter."""
    return all(not (items[k + 1] < items[k]) for k in range(len(items) - 1))
