import math
import random
from collections import Counter

import pytest

from sortbench.algorithms import (
    ALGORITHMS_ALL,
    SORTERS,
    bubble_sort,
    get_sorter,
    heap_sort,
    merge_sort,
    quick_sort,
)
from sortbench.algorithms.base import ComparisonCounter, is_non_decreasing
from sortbench.algorithms.heap import heapify
from sortbench.algorithms.quick import partition
from sortbench.models import Movie
from sortbench.orderings import build_orderings


def _sorted_with(name: str, data: list) -> tuple[list, int]:
    items = list(data)
    counter = ComparisonCounter()
    SORTERS[name](items, counter)
    return items, counter.count


@pytest.mark.parametrize("name", ALGORITHMS_ALL)
@pytest.mark.parametrize("size", [0, 1, 2, 3, 17, 200])
@pytest.mark.parametrize("ordering", ["sorted", "shuffled", "reversed"])
def test_sorts_every_ordering(name: str, size: int, ordering: str) -> None:
    rng = random.Random(size)
    base = [rng.randint(-50, 50) for _ in range(size)]
    data = build_orderings(base, rng=rng)[ordering]
    result, count = _sorted_with(name, data)
    assert result == sorted(base)
    assert Counter(result) == Counter(data)
    assert count >= 0


@pytest.mark.parametrize("name", ALGORITHMS_ALL)
def test_random_multisets_with_duplicates(name: str) -> None:
    rng = random.Random(2024)
    for _ in range(20):
        data = [rng.randint(0, 9) for _ in range(rng.randint(0, 60))]
        result, _ = _sorted_with(name, data)
        assert result == sorted(data)


@pytest.mark.parametrize("name", ALGORITHMS_ALL)
def test_empty_input_costs_nothing(name: str) -> None:
    result, count = _sorted_with(name, [])
    assert result == []
    assert count == 0


@pytest.mark.parametrize("name", ALGORITHMS_ALL)
def test_sorted_input_unchanged(name: str) -> None:
    movies = [Movie(f"m{i}", rating=i / 10) for i in range(40)]
    result, _ = _sorted_with(name, movies)
    assert result == movies
    assert all(a is b for a, b in zip(result, movies))


@pytest.mark.parametrize("name", ALGORITHMS_ALL)
def test_counts_are_deterministic(name: str) -> None:
    data = random.Random(7).sample(range(1000), 300)
    _, first = _sorted_with(name, data)
    _, second = _sorted_with(name, data)
    assert first == second > 0


@pytest.mark.parametrize(
    "name, expected",
    [
        ("merge", 7),
        ("quick", 7),
        ("heap", 10),
        ("bubble", 10),
        ("transposition", 16),
    ],
)
def test_small_scenario_counts(name: str, expected: int) -> None:
    result, count = _sorted_with(name, [5, 3, 1, 4, 2])
    assert result == [1, 2, 3, 4, 5]
    assert count == expected


@pytest.mark.parametrize("n", [1, 2, 10, 500])
def test_bubble_sorted_input_single_pass(n: int) -> None:
    counter = ComparisonCounter()
    bubble_sort(list(range(n)), counter)
    assert counter.count == n - 1


@pytest.mark.parametrize("n", [10, 100, 400])
def test_quick_sort_quadratic_on_sorted_and_reversed(n: int) -> None:
    for data in (list(range(n)), list(range(n, 0, -1))):
        counter = ComparisonCounter()
        quick_sort(data, counter)
        assert counter.count == n * (n - 1) // 2


def test_quick_sort_deep_worst_case_does_not_recurse() -> None:
    n = 2000
    data = list(range(n, 0, -1))
    counter = ComparisonCounter()
    quick_sort(data, counter)
    assert data == list(range(1, n + 1))
    assert counter.count == n * (n - 1) // 2


@pytest.mark.parametrize("name", ["merge", "heap", "quick"])
def test_large_shuffled_input(name: str) -> None:
    n = 10_000
    data = random.Random(n).sample(range(n), n)
    result, _ = _sorted_with(name, data)
    assert result == list(range(n))


def test_quick_sort_shuffled_far_below_quadratic() -> None:
    n = 2000
    data = random.Random(3).sample(range(n), n)
    counter = ComparisonCounter()
    quick_sort(data, counter)
    assert counter.count < n * (n - 1) // 8


@pytest.mark.parametrize("n", [2, 3, 16, 100, 1000])
def test_merge_sort_upper_bound(n: int) -> None:
    rng = random.Random(n)
    for data in (list(range(n)), list(range(n, 0, -1)), rng.sample(range(n), n)):
        counter = ComparisonCounter()
        merge_sort(data, counter)
        assert counter.count <= n * math.log2(n)


def test_merge_sort_is_stable() -> None:
    movies = [Movie("b", 5.0), Movie("a", 1.0), Movie("c", 5.0), Movie("d", 1.0)]
    result, _ = _sorted_with("merge", movies)
    assert [m.title for m in result] == ["a", "d", "b", "c"]


def test_partition_places_pivot() -> None:
    data = [4, 8, 1, 9, 5]
    counter = ComparisonCounter()
    p = partition(data, 0, len(data) - 1, counter)
    assert data[p] == 5
    assert all(x <= 5 for x in data[:p])
    assert all(x > 5 for x in data[p + 1 :])
    assert counter.count == 4


def test_heapify_counts_each_existing_child() -> None:
    counter = ComparisonCounter()
    heapify([9, 1, 2], 3, 0, counter)
    assert counter.count == 2
    counter = ComparisonCounter()
    heapify([9, 1], 2, 0, counter)
    assert counter.count == 1


def test_heap_sort_movies_by_rating() -> None:
    movies = [Movie("x", 7.5), Movie("y", 2.0), Movie("z", 9.1)]
    counter = ComparisonCounter()
    heap_sort(movies, counter)
    assert [m.rating for m in movies] == [2.0, 7.5, 9.1]
    assert is_non_decreasing(movies)


def test_compare_counts_every_call() -> None:
    counter = ComparisonCounter()
    assert counter.compare(1, 2) == -1
    assert counter.compare(2, 1) == 1
    assert counter.compare(Movie("a", 3.0), Movie("b", 3.0)) == 0
    assert counter.count == 3


@pytest.mark.parametrize("name", ["MERGE", " Quick ", "Transposition"])
def test_get_sorter_case_insensitive(name: str) -> None:
    assert get_sorter(name) is SORTERS[name.strip().lower()]


def test_get_sorter_unknown_raises() -> None:
    with pytest.raises(ValueError):
        get_sorter("bogo")
