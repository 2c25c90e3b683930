"""String and sequence exercises: validation, filtering and digit extraction."""

from __future__ import annotations

import re
import string
from collections.abc import Hashable, Iterable

_ALNUM = frozenset(string.ascii_letters + string.digits)
_DIGITS = frozenset(string.digits)
_VOWELS = frozenset("aeiou")
_NUMBER = re.compile(r"[0-9]+")


def is_palindrome(s: str) -> bool:
    """Return True if s reads the same forwards and backwards."""
    return s == s[::-1]


def remove_special_chars(s: str) -> str:
    """Return s with everything but ASCII letters and digits removed."""
    return "".join(ch for ch in s if ch in _ALNUM)


def sum_of_digits(s: str) -> int:
    """Return the sum of every decimal digit character in s."""
    return sum(int(ch) for ch in s if ch in _DIGITS)


def extract_numbers(s: str) -> list[int]:
    """Return the numbers formed by each run of digits in s, in order."""
    return [int(run) for run in _NUMBER.findall(s)]


def sum_of_numbers(s: str) -> int:
    """Return the sum of the numbers formed by each run of digits in s."""
    return sum(extract_numbers(s))


def count_consonants(s: str) -> int:
    """Return the number of ASCII consonant letters in s, ignoring case."""
    return sum(
        1 for ch in s.lower() if ch in string.ascii_lowercase and ch not in _VOWELS
    )


def is_valid_password(s: str) -> bool:
    """Check a password rule.

    More than eight characters, at least one lower-case letter, upper-case
    letter, digit and special character, and no whitespace.
    """
    lower = upper = digit = space = special = 0
    for ch in s:
        if ch in string.ascii_lowercase:
            lower += 1
        elif ch in string.ascii_uppercase:
            upper += 1
        elif ch in _DIGITS:
            digit += 1
        elif ch in string.whitespace:
            space += 1
        else:
            special += 1
    return len(s) > 8 and all((lower, upper, digit, special)) and not space


def is_valid_username(s: str) -> bool:
    """Check a username: at least five letters, digits or underscores, not starting with a digit."""
    if s and s[0] in _DIGITS:
        return False
    return len(s) >= 5 and all(ch in _ALNUM or ch == "_" for ch in s)


def remove_duplicates(values: Iterable[Hashable]) -> list:
    """Return the values with repeats dropped, keeping first occurrences in order."""
    return list(dict.fromkeys(values))