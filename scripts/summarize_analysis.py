#!/usr/bin/env python3
"""Build pivot tables and bar charts from an existing analysis file.

Usage:
    python scripts/summarize_analysis.py results/analysis.txt [--out-dir results/summary]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sortbench.experiments.aggregate import METRICS, load_analysis, write_pivot_table  # noqa: E402
from sortbench.visualization import plot_results  # noqa: E402

logger = logging.getLogger("sortbench.summarize")


def main() -> int:
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("analysis", type=Path, help="analysis.txt written by a benchmark run")
    ap.add_argument("--out-dir", type=Path, default=None, help="defaults to the analysis file directory")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    results = load_analysis(args.analysis)
    if not results:
        logger.error("No results in %s", args.analysis)
        return 1
    out_dir = args.out_dir or args.analysis.parent
    for metric in METRICS:
        write_pivot_table(results, out_dir / f"pivot_{metric}.csv", metric=metric)
        plot_results(results, metric=metric, save_path=str(out_dir / f"{metric}.png"))
    logger.info("Summarised %d results into %s", len(results), out_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
