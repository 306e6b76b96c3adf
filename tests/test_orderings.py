import random
from collections import Counter

import pytest

from sortbench.orderings import ORDERINGS_ALL, build_orderings


def test_orderings_share_multiset() -> None:
    items = [3, 1, 2, 3, 9, 0]
    out = build_orderings(items, rng=random.Random(0))
    assert set(out) == set(ORDERINGS_ALL)
    assert out["sorted"] == [0, 1, 2, 3, 3, 9]
    assert out["reversed"] == [9, 3, 3, 2, 1, 0]
    assert Counter(out["shuffled"]) == Counter(items)
    assert items == [3, 1, 2, 3, 9, 0]


def test_shuffle_reproducible_with_seed() -> None:
    items = list(range(50))
    a = build_orderings(items, rng=random.Random(5))["shuffled"]
    b = build_orderings(items, rng=random.Random(5))["shuffled"]
    assert a == b


def test_copies_are_independent() -> None:
    out = build_orderings([2, 1], orderings=["sorted", "reversed"])
    out["sorted"].append(99)
    assert out["reversed"] == [2, 1]


def test_unknown_ordering_raises() -> None:
    with pytest.raises(ValueError):
        build_orderings([1], orderings=["random"])
