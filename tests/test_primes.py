import pytest

from drills.primes import (
    all_digits_prime,
    digit_sum,
    is_perfect_prime,
    is_prime,
    is_prime_array,
    perfect_primes_in_range,
    perfect_squares,
    primes_in_string,
)
from drills.strings import extract_numbers


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97])
def test_known_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [-7, 0, 1])
def test_small_and_negative_numbers_are_not_prime(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("a", range(2, 12))
@pytest.mark.parametrize("b", range(2, 12))
def test_products_are_not_prime(a, b):
    assert is_prime(a * b) is False


def test_digit_sum_of_single_digits_is_identity():
    assert [digit_sum(d) for d in range(10)] == list(range(10))


def test_digit_sum_ignores_appended_zero():
    for n in (1, 23, 456, 7890):
        assert digit_sum(n * 10) == digit_sum(n)


def test_digit_sum_rejects_negative():
    with pytest.raises(ValueError):
        digit_sum(-5)


def test_all_digits_prime():
    assert all_digits_prime(2357) is True
    assert all_digits_prime(2347) is False


def test_all_digits_prime_rejects_negative():
    with pytest.raises(ValueError):
        all_digits_prime(-23)


def test_single_digit_primes_are_perfect():
    assert all(is_perfect_prime(p) for p in (2, 3, 5, 7))


def test_prime_with_non_prime_digit_is_not_perfect():
    assert is_perfect_prime(13) is False


def test_prime_with_composite_digit_sum_is_not_perfect():
    # 37 is prime with prime digits, but 3 + 7 is not prime
    assert is_prime(37) is True
    assert is_perfect_prime(37) is False


def test_perfect_primes_in_range_consistent():
    found = perfect_primes_in_range(1, 1000)
    assert found == sorted(found)
    assert all(1 <= n <= 1000 and is_perfect_prime(n) for n in found)
    assert set(found) == {n for n in range(1, 1001) if is_perfect_prime(n)}
    assert found[:4] == [2, 3, 5, 7]


def test_perfect_primes_empty_range():
    assert perfect_primes_in_range(10, 5) == []


def test_primes_in_string():
    result = primes_in_string("ab12cd7e9x23")
    assert result == [7, 23]
    assert set(result) <= set(extract_numbers("ab12cd7e9x23"))


def test_primes_in_string_without_digits():
    assert primes_in_string("abc") == []


def test_prime_array_complete():
    assert is_prime_array([2, 3, 4, 5, 7]) is True


def test_prime_array_missing_prime():
    assert is_prime_array([2, 7]) is False


def test_prime_array_without_primes():
    assert is_prime_array([4, 6, 8]) is True


def test_perfect_squares_keeps_order_and_skips_negatives():
    assert perfect_squares([9, 2, 4, -4, 0, 10, 1]) == [9, 4, 0, 1]


def test_perfect_squares_invariant():
    squares = [n * n for n in range(1, 40)]
    assert perfect_squares(squares) == squares
    assert perfect_squares([s + 1 for s in squares[1:]]) == []