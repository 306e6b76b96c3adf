"""Command line entry point.

Usage::

    python main.py {dataset-file} {algorithm} {number-of-lines}
    python main.py --config config.yaml
    python main.py data/movies.csv quick 500 --seed 7 --plots

Positional arguments override the matching config values. The algorithm may
also be ``all`` to benchmark every algorithm in turn.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Sequence

from sortbench.algorithms import ALGORITHMS_ALL, normalize_algorithm
from sortbench.config import Settings, load_settings
from sortbench.experiments.aggregate import write_pivot_table
from sortbench.experiments.output import FileResultSink
from sortbench.experiments.runner import BenchmarkRunner, generate_plan
from sortbench.models import BenchmarkResult
from sortbench.orderings import build_orderings
from sortbench.parser import load_movies

logger = logging.getLogger("sortbench.main")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sorting algorithm benchmark over a movie dataset")
    parser.add_argument("dataset", nargs="?", help="CSV file with a header row")
    parser.add_argument(
        "algorithm",
        nargs="?",
        help=f"one of {', '.join(ALGORITHMS_ALL)} or 'all' (case-insensitive)",
    )
    parser.add_argument("lines", nargs="?", type=int, help="number of movies to load")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--seed", type=int, help="seed for the shuffled ordering")
    parser.add_argument("--out-dir", help="directory for analysis/sorted output")
    parser.add_argument("--plots", action="store_true", help="write pivot tables and bar charts")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    if args.dataset:
        settings.input_file = args.dataset
    if args.algorithm:
        algo = normalize_algorithm(args.algorithm)
        settings.algorithms = list(ALGORITHMS_ALL) if algo == "all" else [algo]
    if args.lines is not None:
        settings.limit = args.lines
    if args.seed is not None:
        settings.seed = args.seed
    if args.out_dir:
        settings.out_dir = args.out_dir
    if args.plots:
        settings.plots = True
    if args.log_level:
        settings.log_level = args.log_level.upper()
    settings.validate()
    return settings


def write_reports(results: Sequence[BenchmarkResult], out_dir: str) -> None:
    from sortbench.visualization import plot_results

    for metric in ("comparisons", "elapsed_s"):
        write_pivot_table(results, Path(out_dir) / f"pivot_{metric}.csv", metric=metric)
        saved = plot_results(results, metric=metric, save_path=str(Path(out_dir) / f"{metric}.png"))
        if saved:
            logger.info("Saved %s chart to %s", metric, saved)


def run(settings: Settings) -> list[BenchmarkResult]:
    """Load the dataset, build orderings and run the planned cases."""
    if not settings.input_file:
        raise ValueError("No dataset given: pass it on the command line or set input.file")
    movies = load_movies(
        settings.input_file,
        limit=settings.limit,
        title_column=settings.title_column,
        rating_column=settings.rating_column,
        year_column=settings.year_column,
    )
    if not movies:
        raise ValueError(f"No movies loaded from {settings.input_file}")

    rng = random.Random(settings.seed) if settings.seed is not None else random.Random()
    inputs = build_orderings(movies, rng=rng, orderings=settings.orderings)
    plan = generate_plan(settings.algorithms, settings.orderings)

    sink = FileResultSink(
        out_dir=settings.out_dir,
        analysis_file=settings.analysis_file,
        sorted_file=settings.sorted_file,
        write_sorted=settings.write_sorted,
    )
    results = BenchmarkRunner(sinks=[sink]).run(plan, inputs)
    logger.info("%d/%d cases completed, results in %s", len(results), len(plan), sink.analysis_path)

    if settings.plots and results:
        write_reports(results, settings.out_dir)
    return results


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, (args.log_level or "INFO").upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = apply_cli_overrides(load_settings(args.config), args)
        logging.getLogger().setLevel(getattr(logging, settings.log_level, logging.INFO))
        results = run(settings)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0 if results else 1


if __name__ == "__main__":
    sys.exit(main())
