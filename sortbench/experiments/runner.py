from __future__ import annotations

import logging
import time
from typing import Generic, Iterable, List, Mapping, Protocol, Sequence

from sortbench.algorithms import ALGORITHMS_ALL, ComparisonCounter, get_sorter, normalize_algorithm
from sortbench.algorithms.base import T, is_non_decreasing
from sortbench.models import BenchmarkResult, RunConfig
from sortbench.orderings import ORDERINGS_ALL

logger = logging.getLogger("sortbench.runner")


class ResultSink(Protocol):
    def record(self, result: BenchmarkResult, items: Sequence) -> None: ...


class BenchmarkRunner(Generic[T]):
    """Runs sorting cases one at a time and forwards results to sinks.

    Each case sorts its own copy of the input with a fresh counter, so no
    permutation or count leaks from one case into the next.
    """

    def __init__(self, sinks: Iterable[ResultSink] | None = None):
        self.sinks: List[ResultSink] = list(sinks or [])

    def run(self, configs: Sequence[RunConfig], inputs: Mapping[str, Sequence[T]]) -> List[BenchmarkResult]:
        """Execute every planned case; failing cases are logged and skipped."""
        results: List[BenchmarkResult] = []
        for idx, cfg in enumerate(configs, start=1):
            logger.info("(%d/%d) Running: %s on %s input", idx, len(configs), cfg.algorithm, cfg.ordering)
            if cfg.ordering not in inputs:
                logger.error("No %s input prepared, skipping %s", cfg.ordering, cfg.algorithm)
                continue
            try:
                result, items = self.run_case(cfg.algorithm, inputs[cfg.ordering], cfg.ordering)
            except ValueError as e:
                logger.error("Skipping %s/%s: %s", cfg.algorithm, cfg.ordering, e)
                continue
            results.append(result)
            for sink in self.sinks:
                sink.record(result, items)
        return results

    def run_case(
        self, algorithm: str, data: Sequence[T] | None, ordering: str
    ) -> tuple[BenchmarkResult, List[T]]:
        """Sort a copy of ``data`` with ``algorithm`` and measure the run.

        Returns:
            ``(result, sorted_copy)``; ``data`` itself is left untouched.

        Raises:
            ValueError: If ``data`` is empty or ``None``, the algorithm is unknown,
                or the sorted copy is not in order.
        """
        if not data:
            raise ValueError("input sequence is empty")
        sorter = get_sorter(algorithm)
        name = normalize_algorithm(algorithm)

        copy = list(data)
        counter = ComparisonCounter()
        start = time.perf_counter()
        sorter(copy, counter)
        elapsed = time.perf_counter() - start
        if not is_non_decreasing(copy):
            raise ValueError(f"{name} left the {ordering} input out of order")

        result = BenchmarkResult(
            algorithm=name,
            ordering=ordering,
            element_count=len(copy),
            elapsed_s=elapsed,
            comparisons=counter.count,
        )
        logger.info(
            "%-12s %-10s N=%-5d  Time: %.6fs  Comparisons: %d",
            name,
            ordering,
            result.element_count,
            result.elapsed_s,
            result.comparisons,
        )
        return result, copy


def generate_plan(
    algorithms: Iterable[str] = ALGORITHMS_ALL,
    orderings: Iterable[str] = ORDERINGS_ALL,
) -> List[RunConfig]:
    """One case per (algorithm, ordering), algorithm-major like the CLI output.

    Names are kept as given; unknown algorithms surface as skipped cases at
    run time rather than being dropped here.
    """
    orderings = list(orderings)
    return [
        RunConfig(algorithm=normalize_algorithm(algo), ordering=ordering)
        for algo in algorithms
        for ordering in orderings
    ]
