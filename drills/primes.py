"""Prime-number exercises: primality, perfect primes, primes in text and arrays."""

from __future__ import annotations

import math
from collections.abc import Iterable

from drills.strings import extract_numbers

_PRIME_DIGITS = frozenset("2357")


def is_prime(n: int) -> bool:
    """Return True if n is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of a non-negative n."""
    _require_non_negative(n)
    return sum(int(ch) for ch in str(n))


def all_digits_prime(n: int) -> bool:
    """Return True if every decimal digit of a non-negative n is 2, 3, 5 or 7."""
    _require_non_negative(n)
    return all(ch in _PRIME_DIGITS for ch in str(n))


def is_perfect_prime(n: int) -> bool:
    """Return True if n is prime, all its digits are prime and its digit sum is prime."""
    return is_prime(n) and all_digits_prime(n) and is_prime(digit_sum(n))


def perfect_primes_in_range(start: int, end: int) -> list[int]:
    """Return the perfect primes from start to end inclusive, in ascending order."""
    return [n for n in range(start, end + 1) if is_perfect_prime(n)]


def primes_in_string(s: str) -> list[int]:
    """Return the prime numbers formed by the runs of digits in s, in order."""
    return [n for n in extract_numbers(s) if is_prime(n)]


def is_prime_array(values: Iterable[int]) -> bool:
    """Check that the values hold every prime between their smallest and largest prime.

    A collection without any prime counts as a prime array.
    """
    present = set(values)
    primes = [v for v in present if is_prime(v)]
    if not primes:
        return True
    return all(
        n in present for n in range(min(primes), max(primes) + 1) if is_prime(n)
    )


def perfect_squares(values: Iterable[int]) -> list[int]:
    """Return the values that are perfect squares, in their original order."""
    return [v for v in values if v >= 0 and math.isqrt(v) ** 2 == v]