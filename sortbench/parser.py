"""Movie dataset loader.

Reads a header-based CSV file into ``Movie`` records. Only the title, rating
and (optionally) year columns are used; everything else is ignored.
"""

from __future__ import annotations

import csv
import logging
import math
import os

from sortbench.models import Movie

logger = logging.getLogger("sortbench.parser")


def load_movies(
    file_path: str,
    limit: int | None = None,
    title_column: str = "title",
    rating_column: str = "rating",
    year_column: str = "year",
) -> list[Movie]:
    """Parse up to ``limit`` movies from a CSV file.

    Args:
        file_path: Path to the CSV file (first line is the header).
        limit: Maximum number of movies to return; ``None`` reads all rows.
        title_column: Header name of the title column.
        rating_column: Header name of the rating column (float).
        year_column: Header name of the year column; may be absent.

    Returns:
        Movies in file order.

    Raises:
        FileNotFoundError: If ``file_path`` does not exist.
        ValueError: If ``limit`` is not positive or a required column is missing.
    """
    if limit is not None and limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")
    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"Dataset not found: {file_path}")

    movies: list[Movie] = []
    with open(file_path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        header = reader.fieldnames or []
        missing = [c for c in (title_column, rating_column) if c not in header]
        if missing:
            raise ValueError(f"{file_path}: missing column(s) {', '.join(missing)}")
        has_year = year_column in header

        for row in reader:
            if limit is not None and len(movies) >= limit:
                break
            raw_rating = (row.get(rating_column) or "").strip()
            try:
                rating = float(raw_rating)
                if not math.isfinite(rating):
                    raise ValueError(raw_rating)
            except ValueError:
                logger.warning(
                    "Skipping line %d: invalid rating %r", reader.line_num, raw_rating
                )
                continue
            year = None
            if has_year:
                raw_year = (row.get(year_column) or "").strip()
                year = int(raw_year) if raw_year.isdigit() else None
            movies.append(Movie(title=(row.get(title_column) or "").strip(), rating=rating, year=year))

    logger.info("Loaded %d movies from %s", len(movies), file_path)
    return movies
