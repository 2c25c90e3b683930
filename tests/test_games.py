import random

import pytest

from drills.games import (
    GuessingGame,
    Hint,
    LimitedGuessingGame,
    random_limited_secret,
    random_secret,
)


def test_hint_values_match_messages():
    game = GuessingGame(50)
    assert game.guess(60).value == "Lower"
    assert game.guess(40).value == "Higher"
    assert game.guess(50).value == "Correct"


def test_guessing_game_hints():
    game = GuessingGame(50)
    assert game.guess(60) is Hint.LOWER
    assert game.guess(40) is Hint.HIGHER
    assert game.finished is False
    assert game.guess(50) is Hint.CORRECT
    assert game.attempts == 3
    assert game.won is True
    assert game.finished is True


def test_guessing_game_rejects_guess_after_win():
    game = GuessingGame(7)
    game.guess(7)
    with pytest.raises(RuntimeError):
        game.guess(7)


def test_limited_game_loses_lives_on_wrong_guesses():
    game = LimitedGuessingGame(30, lives=5)
    for _ in range(5):
        assert game.guess(31) is Hint.LOWER
    assert game.lives == 0
    assert game.finished is True
    assert game.won is False
    assert game.attempts == 5
    with pytest.raises(RuntimeError):
        game.guess(30)


def test_limited_game_correct_guess_keeps_lives():
    game = LimitedGuessingGame(30, lives=5)
    assert game.guess(29) is Hint.HIGHER
    assert game.guess(30) is Hint.CORRECT
    assert game.lives == 4
    assert game.won is True
    assert game.attempts == 2


def test_limited_game_needs_lives():
    with pytest.raises(ValueError):
        LimitedGuessingGame(10, lives=0)


def test_random_secret_range():
    rng = random.Random(1234)
    secrets = [random_secret(rng) for _ in range(2000)]
    assert min(secrets) >= 1
    assert max(secrets) <= 100


def test_random_secret_covers_whole_range():
    rng = random.Random(5)
    secrets = {random_secret(rng) for _ in range(2000)}
    assert 1 in secrets
    assert 100 in secrets
    assert len(secrets) > 90


def test_random_limited_secret_range():
    rng = random.Random(99)
    secrets = [random_limited_secret(rng) for _ in range(2000)]
    assert min(secrets) >= 0
    assert max(secrets) <= 109
    assert any(s >= 100 for s in secrets)


def test_random_limited_secret_reaches_low_values():
    rng = random.Random(3)
    secrets = [random_limited_secret(rng) for _ in range(2000)]
    assert any(s < 10 for s in secrets)
    assert len(set(secrets)) > 90