"""Input orderings fed to each benchmark run."""

from __future__ import annotations

import random
from typing import Sequence

from sortbench.algorithms.base import T

ORDERINGS_ALL = ("sorted", "shuffled", "reversed")


def build_orderings(
    items: Sequence[T],
    rng: random.Random | None = None,
    orderings: Sequence[str] = ORDERINGS_ALL,
) -> dict[str, list[T]]:
    """Return independent copies of ``items`` in each requested ordering.

    ``sorted`` is ascending, ``reversed`` descending and ``shuffled`` a
    random permutation drawn from ``rng``. All three hold the same multiset.
    """
    if rng is None:
        rng = random.Random()
    result: dict[str, list[T]] = {}
    for name in orderings:
        if name == "sorted":
            result[name] = sorted(items)
        elif name == "shuffled":
            shuffled = list(items)
            rng.shuffle(shuffled)
            result[name] = shuffled
        elif name == "reversed":
            result[name] = sorted(items, reverse=True)
        else:
            raise ValueError(f"Unknown ordering: {name!r}")
    return result
