"""Core package for sorting algorithm benchmarks.

Exports the data structures and the benchmark runner.
"""

from sortbench.experiments.runner import BenchmarkRunner, generate_plan  # noqa: F401
from sortbench.models import BenchmarkResult, Movie, RunConfig  # noqa: F401

__all__ = [
    "BenchmarkResult",
    "BenchmarkRunner",
    "Movie",
    "RunConfig",
    "generate_plan",
]
