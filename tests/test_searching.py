import random

import pytest

from algolab.searching import binary_search, linear_search

SOURCE_ARRAY = [2, 3, 4, 10, 40]


def test_linear_search_source_example():
    assert linear_search(SOURCE_ARRAY, 10) == 3


def test_linear_search_missing():
    assert linear_search(SOURCE_ARRAY, 5) is None
    assert linear_search([], 1) is None


def test_linear_search_returns_first_occurrence():
    data = [7, 5, 1, 5, 5]
    index = linear_search(data, 5)
    assert data[index] == 5
    assert 5 not in data[:index]


@pytest.mark.parametrize("key", SOURCE_ARRAY)
def test_binary_search_finds_each_element(key):
    assert binary_search(SOURCE_ARRAY, key) == SOURCE_ARRAY.index(key)


@pytest.mark.parametrize("key", [-1, 0, 5, 11, 41])
def test_binary_search_missing(key):
    assert binary_search(SOURCE_ARRAY, key) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_binary_search_agrees_with_membership():
    rng = random.Random(99)
    for _ in range(50):
        data = sorted(rng.randint(-20, 20) for _ in range(rng.randint(0, 15)))
        key = rng.randint(-25, 25)
        index = binary_search(data, key)
        if key in data:
            assert data[index] == key
        else:
            assert index is None


def test_both_searches_agree_on_unique_sorted_data():
    data = list(range(0, 100, 3))
    for key in range(-2, 102):
        assert binary_search(data, key) == linear_search(data, key)