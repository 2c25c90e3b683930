"""Number guessing games driven one guess at a time."""

from __future__ import annotations

import random
from enum import Enum


class Hint(Enum):
    """What a guess tells the player about the secret number."""

    LOWER = "Lower"
    HIGHER = "Higher"
    CORRECT = "Correct"


def random_secret(rng: random.Random | None = None) -> int:
    """Return a secret number from 1 to 100."""
    rng = rng or random.Random()
    return rng.randrange(100) + 1


def random_limited_secret(rng: random.Random | None = None) -> int:
    """Return a secret from 10 to 109 nine times in ten, otherwise from 0 to 99."""
    rng = rng or random.Random()
    if rng.randrange(100) < 90:
        return rng.randrange(100) + 10
    return rng.randrange(100)


class GuessingGame:
    """A game that lasts until the secret number is guessed."""

    def __init__(self, secret: int) -> None:
        self.secret = secret
        self.attempts = 0
        self.won = False

    @property
    def finished(self) -> bool:
        """True once no further guesses are accepted."""
        return self.won

    def guess(self, value: int) -> Hint:
        """Record a guess and say where the secret lies relative to it."""
        if self.finished:
            raise RuntimeError("the game is over")
        self.attempts += 1
        if value > self.secret:
            return Hint.LOWER
        if value < self.secret:
            return Hint.HIGHER
        self.won = True
        return Hint.CORRECT


class LimitedGuessingGame(GuessingGame):
    """A guessing game that ends after a number of wrong guesses."""

    def __init__(self, secret: int, lives: int = 5) -> None:
        if lives < 1:
            raise ValueError(f"a game needs at least one life, got {lives}")
        super().__init__(secret)
        self.lives = lives

    @property
    def finished(self) -> bool:
        """True once the secret is guessed or the lives are used up."""
        return self.won or self.lives == 0

    def guess(self, value: int) -> Hint:
        """Record a guess; a wrong one costs a life."""
        hint = super().guess(value)
        if hint is not Hint.CORRECT:
            self.lives -= 1
        return hint