import random

import pytest

from thinkdrills import sequences as sq


SAMPLES = [
    [],
    [5],
    [-5],
    [3, -2, 7, -9, 0, 4],
    [-1, -2, -3],
    [10, 10, 10, -10],
]


def test_random_values_respects_limit_and_count():
    values = sq.random_values(50, 100, True, random.Random(7))
    assert len(values) == 50
    assert all(1 <= abs(v) <= 100 for v in values)


def test_random_values_unsigned_are_positive():
    values = sq.random_values(40, 10, False, random.Random(3))
    assert all(1 <= v <= 10 for v in values)


def test_random_values_is_reproducible_with_seed():
    first = sq.random_values(20, 100, True, random.Random(42))
    second = sq.random_values(20, 100, True, random.Random(42))
    assert first == second


def test_random_values_rejects_bad_limit():
    with pytest.raises(ValueError):
        sq.random_values(3, 0, True, None)


def test_random_bits_are_booleans():
    bits = sq.random_bits(30, random.Random(1))
    assert len(bits) == 30
    assert set(bits) <= {True, False}


@pytest.mark.parametrize("values", SAMPLES)
def test_sum_positive_variants_agree(values):
    expected = sum(filter(lambda v: v > 0, values))
    assert sq.sum_positive(values) == expected
    assert sq.sum_positive_recursive(values) == expected


def test_sum_positive_ignores_negatives():
    assert sq.sum_positive([-4, -8]) == 0


@pytest.mark.parametrize(
    "bits",
    [[], [True], [True, True], [True, False, True, True], [False, False]],
)
def test_parity_variants_agree(bits):
    expected = bits.count(True) % 2 == 1
    assert sq.has_odd_parity(bits) is expected
    assert sq.has_odd_parity_recursive(bits) is expected


def test_parity_on_random_bits():
    bits = sq.random_bits(25, random.Random(11))
    assert sq.has_odd_parity(bits) == sq.has_odd_parity_recursive(bits)


@pytest.mark.parametrize("values", SAMPLES)
@pytest.mark.parametrize("target", [5, 10, -10, 0])
def test_count_occurrences_variants_agree(values, target):
    expected = values.count(target)
    assert sq.count_occurrences(values, target) == expected
    assert sq.count_occurrences_recursive(values, target) == expected


@pytest.mark.parametrize("values", [v for v in SAMPLES if v])
def test_find_min_variants_agree(values):
    assert sq.find_min(values) == min(values)
    assert sq.find_min_recursive(values) == min(values)


def test_find_min_empty_raises():
    with pytest.raises(ValueError):
        sq.find_min([])
    with pytest.raises(ValueError):
        sq.find_min_recursive([])


def test_total_of_one_to_ten():
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert sq.total(values) == 55
    assert sq.total_recursive(values) == 55


@pytest.mark.parametrize("values", SAMPLES)
def test_total_variants_agree(values):
    assert sq.total(values) == sum(values)
    assert sq.total_recursive(values) == sum(values)


def test_factorial_base_cases():
    assert sq.factorial(0) == 1
    assert sq.factorial(1) == 1


@pytest.mark.parametrize("n", range(2, 12))
def test_factorial_recurrence(n):
    assert sq.factorial(n) == n * sq.factorial(n - 1)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        sq.factorial(-1)