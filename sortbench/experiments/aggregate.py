from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from sortbench.algorithms import ALGORITHMS_ALL
from sortbench.models import BenchmarkResult
from sortbench.orderings import ORDERINGS_ALL

logger = logging.getLogger("sortbench.aggregate")

METRICS = ("comparisons", "elapsed_s")


def load_analysis(path: Path) -> List[BenchmarkResult]:
    """Parse an analysis file written by ``FileResultSink``.

    Blank lines are ignored. Any other line must hold exactly five fields:
    ``algorithm,ordering,n,elapsed_s,comparisons``.
    """
    results: List[BenchmarkResult] = []
    with open(path, "r", encoding="utf-8", newline="") as f:
        for line_no, row in enumerate(csv.reader(f), start=1):
            if not row:
                continue
            if len(row) != 5:
                raise ValueError(f"{path}:{line_no}: expected 5 fields, got {len(row)}")
            algorithm, ordering, n, elapsed, comps = row
            try:
                results.append(
                    BenchmarkResult(
                        algorithm=algorithm,
                        ordering=ordering,
                        element_count=int(n),
                        elapsed_s=float(elapsed),
                        comparisons=int(comps),
                    )
                )
            except ValueError as e:
                raise ValueError(f"{path}:{line_no}: {e}") from e
    return results


def latest_by_case(results: Iterable[BenchmarkResult]) -> Dict[Tuple[str, str], BenchmarkResult]:
    """Map ``(algorithm, ordering)`` to the last result seen for that case."""
    latest: Dict[Tuple[str, str], BenchmarkResult] = {}
    for r in results:
        latest[(r.algorithm, r.ordering)] = r
    return latest


def ordered_names(names: Iterable[str], canonical: Tuple[str, ...]) -> List[str]:
    present = set(names)
    known = [n for n in canonical if n in present]
    return known + sorted(present - set(canonical))


def write_pivot_table(
    results: Iterable[BenchmarkResult], out_path: Path, metric: str = "comparisons"
) -> Path:
    """Write one row per algorithm with one column per ordering.

    Cases never run are left blank. Repeated cases keep the latest value.
    """
    if metric not in METRICS:
        raise ValueError(f"Unknown metric {metric!r}, expected one of {METRICS}")
    latest = latest_by_case(results)
    algorithms = ordered_names((a for a, _ in latest), ALGORITHMS_ALL)
    orderings = ordered_names((o for _, o in latest), ORDERINGS_ALL)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["algorithm", *orderings])
        for algo in algorithms:
            row: List[str] = [algo]
            for ordering in orderings:
                r = latest.get((algo, ordering))
                if r is None:
                    row.append("")
                elif metric == "elapsed_s":
                    row.append(f"{r.elapsed_s:.6f}")
                else:
                    row.append(str(r.comparisons))
            writer.writerow(row)
    logger.info("Pivot table (%s) written: %s", metric, out_path)
    return out_path
