"""YAML configuration for benchmark runs.

All sections are optional; anything left out falls back to the defaults of
``Settings``. Command line flags are applied on top in ``sortbench.main``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import yaml

from sortbench.algorithms import normalize_algorithm
from sortbench.orderings import ORDERINGS_ALL


@dataclass(slots=True)
class Settings:
    """Flat bundle of every configurable value."""

    log_level: str = "INFO"
    input_file: str | None = None
    limit: int | None = None
    title_column: str = "title"
    rating_column: str = "rating"
    year_column: str = "year"
    algorithms: list[str] = field(default_factory=lambda: ["merge"])
    orderings: list[str] = field(default_factory=lambda: list(ORDERINGS_ALL))
    seed: int | None = None
    out_dir: str = "results"
    analysis_file: str = "analysis.txt"
    sorted_file: str = "sorted.txt"
    write_sorted: bool = True
    plots: bool = False

    def validate(self) -> None:
        """Raise ``ValueError`` on values no run could use."""
        if self.limit is not None and self.limit <= 0:
            raise ValueError(f"input.limit must be positive, got {self.limit}")
        if not self.algorithms:
            raise ValueError("benchmark.algorithms must be a non-empty list")
        if not self.orderings:
            raise ValueError("benchmark.orderings must be a non-empty list")
        unknown = [o for o in self.orderings if o not in ORDERINGS_ALL]
        if unknown:
            raise ValueError(f"Unknown ordering(s): {', '.join(unknown)}")


def _section(cfg: dict[str, Any], name: str) -> dict[str, Any]:
    value = cfg.get(name)
    return value if isinstance(value, dict) else {}


def settings_from_dict(cfg: dict[str, Any]) -> Settings:
    input_cfg = _section(cfg, "input")
    bench_cfg = _section(cfg, "benchmark")
    out_cfg = _section(cfg, "output")
    defaults = Settings()

    limit = input_cfg.get("limit")
    algorithms = bench_cfg.get("algorithms") or defaults.algorithms
    if isinstance(algorithms, str):
        algorithms = [algorithms]

    settings = Settings(
        log_level=str(cfg.get("log_level", defaults.log_level)).upper(),
        input_file=input_cfg.get("file"),
        limit=int(limit) if limit is not None else None,
        title_column=input_cfg.get("title_column", defaults.title_column),
        rating_column=input_cfg.get("rating_column", defaults.rating_column),
        year_column=input_cfg.get("year_column", defaults.year_column),
        algorithms=[normalize_algorithm(str(a)) for a in algorithms],
        orderings=[str(o).lower() for o in bench_cfg.get("orderings") or defaults.orderings],
        seed=bench_cfg.get("seed"),
        out_dir=out_cfg.get("dir", defaults.out_dir),
        analysis_file=out_cfg.get("analysis_file", defaults.analysis_file),
        sorted_file=out_cfg.get("sorted_file", defaults.sorted_file),
        write_sorted=bool(out_cfg.get("write_sorted", defaults.write_sorted)),
        plots=bool(out_cfg.get("plots", defaults.plots)),
    )
    settings.validate()
    return settings


def load_settings(config_file: str | None = None) -> Settings:
    """Load settings from a YAML file, or return defaults when no file is given."""
    if config_file is None:
        return Settings()
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{config_file}: top level must be a mapping")
    return settings_from_dict(cfg)
