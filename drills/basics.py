"""Small arithmetic, sequence and record exercises."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

PI_APPROX = 3.14


def _fizz_buzz_word(i: int) -> str:
    if i % 3 == 0 and i % 5 == 0:
        return "FizzBuzz"
    if i % 3 == 0:
        return "Fizz"
    if i % 5 == 0:
        return "Buzz"
    return str(i)


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz lines for the numbers 1 to n."""
    return [_fizz_buzz_word(i) for i in range(1, n + 1)]


def add(a: int, b: int) -> int:
    """Return a + b."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return a - b."""
    return a - b


def multiply(a: int, b: int) -> int:
    """Return a * b."""
    return a * b


def divide(a: int, b: int) -> float:
    """Return the true quotient of a and b; raises ZeroDivisionError for b == 0."""
    return a / b


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word in s."""
    stripped = s.rstrip(" ")
    return len(stripped) - (stripped.rfind(" ") + 1)


def reverse_string(s: str) -> str:
    """Return s reversed."""
    return s[::-1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of the first element not less than target, or len(nums)."""
    return next((i for i, value in enumerate(nums) if value >= target), len(nums))


def circle_area(radius: float) -> float:
    """Return the area of a circle, using 3.14 for pi."""
    return PI_APPROX * radius * radius


def square_area(side: int) -> int:
    """Return the area of a square."""
    return side * side


def fibonacci_upto(limit: int) -> list[int]:
    """Return 0, 1 and every following Fibonacci number not above limit."""
    sequence = [0, 1]
    a, b = 0, 1
    while a + b <= limit:
        a, b = b, a + b
        sequence.append(b)
    return sequence


def is_even(n: int) -> bool:
    """Return True if n is even."""
    return n % 2 == 0


def factorial(n: int) -> int:
    """Return n! for n >= 1."""
    if n < 1:
        raise ValueError(f"factorial is defined here for n >= 1, got {n}")
    return math.prod(range(1, n + 1))


def sum_of_evens(n: int) -> int:
    """Return the sum of the even numbers from 0 up to n."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return sum(range(0, n + 1, 2))


def swap(a, b):
    """Return the two values in swapped order."""
    return b, a


@dataclass(frozen=True)
class Student:
    """A student's name and three marks."""

    name: str
    marks: tuple[int, int, int]

    def __post_init__(self) -> None:
        marks = tuple(self.marks)
        if len(marks) != 3:
            raise ValueError(f"a student has exactly three marks, got {len(marks)}")
        object.__setattr__(self, "marks", marks)

    def total(self) -> int:
        """Return the sum of the marks."""
        return sum(self.marks)

    def average(self) -> float:
        """Return the average mark, truncated to a whole number."""
        return float(math.trunc(self.total() / 3))