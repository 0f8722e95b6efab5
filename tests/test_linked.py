import random

import pytest

from thinkdrills.linked import IntList, Node


SAMPLES = [
    [],
    [4],
    [-4],
    [3, -2, 7, -9, 0, 4],
    [-1, -2, -3],
    [5, 5, 1, 5],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_iteration_round_trip(values):
    lst = IntList(values)
    assert list(lst) == values
    assert len(lst) == len(values)


def test_append_keeps_order():
    lst = IntList([1])
    lst.append(2)
    lst.append(3)
    assert list(lst) == [1, 2, 3]
    assert lst.head == Node(1, Node(2, Node(3)))


def test_describe_joins_values():
    assert IntList([1, -2, 3]).describe() == "1 -2 3"


def test_describe_shows_bits_as_digits():
    assert IntList([True, False]).describe() == "1 0"


def test_random_size_and_range():
    lst = IntList.random(30, 10, True, random.Random(5))
    assert len(lst) == 30
    assert all(1 <= abs(v) <= 10 for v in lst)


def test_random_unsigned_positive():
    lst = IntList.random(20, 10, False, random.Random(9))
    assert all(1 <= v <= 10 for v in lst)


def test_random_reproducible():
    a = IntList.random(15, 10, True, random.Random(2))
    b = IntList.random(15, 10, True, random.Random(2))
    assert list(a) == list(b)


@pytest.mark.parametrize("values", SAMPLES)
def test_sum_positive_variants_agree(values):
    lst = IntList(values)
    expected = sum(v for v in values if v > 0)
    assert lst.sum_positive() == expected
    assert lst.sum_positive_recursive() == expected


@pytest.mark.parametrize(
    "bits", [[], [True], [True, True], [True, False, True, True], [False]]
)
def test_parity_variants_agree(bits):
    lst = IntList(bits)
    expected = bits.count(True) % 2 == 1
    assert lst.has_odd_parity() is expected
    assert lst.has_odd_parity_recursive() is expected


@pytest.mark.parametrize("values", SAMPLES)
@pytest.mark.parametrize("target", [5, -2, 0])
def test_count_variants_agree(values, target):
    lst = IntList(values)
    assert lst.count(target) == values.count(target)
    assert lst.count_recursive(target) == values.count(target)


@pytest.mark.parametrize("values", [v for v in SAMPLES if v])
def test_min_variants_agree(values):
    lst = IntList(values)
    assert lst.min() == min(values)
    assert lst.min_recursive() == min(values)


def test_min_empty_raises():
    with pytest.raises(ValueError):
        IntList().min()
    with pytest.raises(ValueError):
        IntList().min_recursive()


def test_count_negatives_alternating_list():
    lst = IntList([-1, 1, -1, 1, -1, 1, -1, 1, -1, 1, 1])
    assert lst.count_negatives() == 5


@pytest.mark.parametrize("values", SAMPLES)
def test_count_negatives_matches_filter(values):
    assert IntList(values).count_negatives() == len([v for v in values if v < 0])