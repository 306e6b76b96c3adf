"""Core data structures for sorting benchmarks.

This module defines:
    Movie           -- record loaded from the dataset, ordered by rating.
    RunConfig       -- one planned (algorithm, ordering) case.
    BenchmarkResult -- immutable outcome of a single run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Movie:
    """Single dataset row.

    Only ``rating`` takes part in ordering; two movies with the same rating
    compare as equal even if their titles differ.
    """

    title: str
    rating: float
    year: int | None = None

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        return self.rating < other.rating

    def __str__(self) -> str:
        if self.year is None:
            return f"{self.title} - {self.rating}"
        return f"{self.title} ({self.year}) - {self.rating}"


@dataclass(frozen=True)
class RunConfig:
    algorithm: str  # 'bubble' | 'merge' | 'quick' | 'heap' | 'transposition'
    ordering: str  # 'sorted' | 'shuffled' | 'reversed'


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one algorithm run against one ordering.

    Fields:
        algorithm: Normalised algorithm name.
        ordering: Label of the input ordering.
        element_count: Number of elements sorted.
        elapsed_s: Wall clock duration of the sort in seconds.
        comparisons: Final value of the comparison counter.
    """

    algorithm: str
    ordering: str
    element_count: int
    elapsed_s: float
    comparisons: int
