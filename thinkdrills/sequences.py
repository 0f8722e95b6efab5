"""Recursive and iterative drills over plain sequences of numbers."""

from __future__ import annotations

import random
from collections.abc import Sequence


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_values(
    count: int,
    limit: int = 100,
    signed: bool = True,
    rng: random.Random | None = None,
) -> list[int]:
    """Return ``count`` integers from 1 to ``limit``, each negated at random if ``signed``."""
    if count < 0:
        raise ValueError("count must not be negative")
    if limit < 1:
        raise ValueError("limit must be at least 1")
    gen = _rng_or_default(rng)
    values = []
    for _ in range(count):
        value = gen.randint(1, limit)
        if signed and gen.randrange(2):
            value = -value
        values.append(value)
    return values


def random_bits(count: int, rng: random.Random | None = None) -> list[bool]:
    """Return ``count`` random booleans."""
    if count < 0:
        raise ValueError("count must not be negative")
    gen = _rng_or_default(rng)
    return [bool(gen.randrange(2)) for _ in range(count)]


def sum_positive(values: Sequence[int]) -> int:
    """Sum only the positive numbers."""
    return sum(value for value in values if value > 0)


def sum_positive_recursive(values: Sequence[int]) -> int:
    """Sum only the positive numbers, recursively."""
    if not values:
        return 0
    rest = sum_positive_recursive(values[:-1])
    last = values[-1]
    return rest + last if last > 0 else rest


def has_odd_parity(bits: Sequence[bool]) -> bool:
    """Tell whether the number of set bits is odd."""
    return sum(1 for bit in bits if bit) % 2 == 1


def has_odd_parity_recursive(bits: Sequence[bool]) -> bool:
    """Tell whether the number of set bits is odd, recursively."""
    if not bits:
        return False
    return bool(bits[-1]) ^ has_odd_parity_recursive(bits[:-1])


def count_occurrences(values: Sequence[int], target: int) -> int:
    """Count how many times ``target`` appears."""
    return sum(1 for value in values if value == target)


def count_occurrences_recursive(values: Sequence[int], target: int) -> int:
    """Count how many times ``target`` appears, recursively."""
    if not values:
        return 0
    rest = count_occurrences_recursive(values[:-1], target)
    return rest + 1 if values[-1] == target else rest


def find_min(values: Sequence[int]) -> int:
    """Return the smallest value; raise ValueError on an empty sequence."""
    if not values:
        raise ValueError("find_min() of an empty sequence")
    smallest = values[0]
    for value in values[1:]:
        if value < smallest:
            smallest = value
    return smallest


def find_min_recursive(values: Sequence[int]) -> int:
    """Return the smallest value, recursively; raise ValueError when empty."""
    if not values:
        raise ValueError("find_min_recursive() of an empty sequence")
    if len(values) == 1:
        return values[0]
    smallest = find_min_recursive(values[:-1])
    return values[-1] if values[-1] < smallest else smallest


def total(values: Sequence[int]) -> int:
    """Sum all the values."""
    result = 0
    for value in values:
        result += value
    return result


def total_recursive(values: Sequence[int]) -> int:
    """Sum all the values, recursively."""
    if not values:
        return 0
    return values[-1] + total_recursive(values[:-1])


def factorial(n: int) -> int:
    """Return ``n!`` computed recursively; negative ``n`` raises ValueError."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n in (0, 1):
        return 1
    return factorial(n - 1) * n