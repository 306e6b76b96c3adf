"""Persistent result sinks.

``FileResultSink`` appends one CSV line per run to the analysis file and the
full sorted listing to the sorted file, so repeated invocations accumulate.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from sortbench.models import BenchmarkResult

logger = logging.getLogger("sortbench.output")


def format_analysis_line(result: BenchmarkResult) -> str:
    return (
        f"{result.algorithm},{result.ordering},{result.element_count},"
        f"{result.elapsed_s:.6f},{result.comparisons}\n"
    )


class FileResultSink:
    def __init__(
        self,
        out_dir: str | Path = "results",
        analysis_file: str = "analysis.txt",
        sorted_file: str = "sorted.txt",
        write_sorted: bool = True,
    ):
        self.out_dir = Path(out_dir)
        self.out_dir.mkdir(parents=True, exist_ok=True)
        self.analysis_path = self.out_dir / analysis_file
        self.sorted_path = self.out_dir / sorted_file
        self.write_sorted = write_sorted

    def record(self, result: BenchmarkResult, items: Sequence) -> None:
        with open(self.analysis_path, "a", encoding="utf-8") as f:
            f.write(format_analysis_line(result))
        if self.write_sorted:
            with open(self.sorted_path, "a", encoding="utf-8") as f:
                f.write(f"=== {result.algorithm.upper()} ({result.ordering}) ===\n")
                for item in items:
                    f.write(f"{item}\n")
                f.write("\n")
        logger.debug("Recorded %s/%s in %s", result.algorithm, result.ordering, self.out_dir)
