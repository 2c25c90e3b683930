"""Command line entry point for the interactive drills."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator

from drills import matrices
from drills.basics import fizz_buzz
from drills.games import (
    GuessingGame,
    Hint,
    LimitedGuessingGame,
    random_limited_secret,
    random_secret,
)

_LIMITED_MESSAGES = {
    Hint.HIGHER: "Your guess is lesser than the number.",
    Hint.LOWER: "Your guess is higher than the number.",
}


class _InputError(Exception):
    pass


def _ints(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise _InputError(f"not an integer: {token!r}") from None


def _take(numbers: Iterator[int], count: int) -> list[int]:
    taken = [value for _, value in zip(range(count), numbers)]
    if len(taken) != count:
        raise _InputError("not enough numbers in the input")
    return taken


def _read_matrix(numbers: Iterator[int], rows: int, cols: int) -> list[list[int]]:
    return [_take(numbers, cols) for _ in range(rows)]


def _run_fizzbuzz(args: argparse.Namespace) -> int:
    for line in fizz_buzz(args.n):
        print(line)
    return 0


def _run_matmul(args: argparse.Namespace) -> int:
    numbers = _ints(sys.stdin)
    r1, c1, r2, c2 = _take(numbers, 4)
    if min(r1, c1, r2, c2) < 1:
        raise _InputError("matrix dimensions must be positive")
    if c1 != r2:
        print("Matrix Multiplication not possible")
        return 1
    a = _read_matrix(numbers, r1, c1)
    b = _read_matrix(numbers, r2, c2)
    for row in matrices.multiply(a, b):
        print("\t".join(str(value) for value in row))
    return 0


def _run_hilo(args: argparse.Namespace) -> int:
    game = GuessingGame(random_secret(random.Random(args.seed)))
    for value in _ints(sys.stdin):
        print(game.guess(value).value)
        if game.finished:
            return 0
    raise _InputError("input ended before the number was guessed")


def _run_guess(args: argparse.Namespace) -> int:
    game = LimitedGuessingGame(
        random_limited_secret(random.Random(args.seed)), lives=args.lives
    )
    print("Enter your number: ")
    for value in _ints(sys.stdin):
        hint = game.guess(value)
        if hint is Hint.CORRECT:
            print("Correct Guess.")
            print(f"Attempts: {game.attempts}")
            return 0
        print(_LIMITED_MESSAGES[hint])
        if game.finished:
            print("Out of lives GAME OVER.")
            print(f"Your Number was: {game.secret}")
            return 0
    raise _InputError("input ended before the game was over")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drills", description="Small interactive drills.")
    commands = parser.add_subparsers(dest="command", required=True)

    fizz = commands.add_parser("fizzbuzz", help="print FizzBuzz from 1 to N")
    fizz.add_argument("n", type=int)
    fizz.set_defaults(run=_run_fizzbuzz)

    matmul = commands.add_parser(
        "matmul", help="multiply two matrices read from standard input"
    )
    matmul.set_defaults(run=_run_matmul)

    hilo = commands.add_parser("hilo", help="guess a number from 1 to 100")
    hilo.add_argument("--seed", type=int, default=None)
    hilo.set_defaults(run=_run_hilo)

    guess = commands.add_parser("guess", help="guess a number with limited lives")
    guess.add_argument("--seed", type=int, default=None)
    guess.add_argument("--lives", type=int, default=5)
    guess.set_defaults(run=_run_guess)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a drill chosen on the command line and return the exit status."""
    args = _parser().parse_args(argv)
    try:
        return args.run(args)
    except (_InputError, ValueError) as error:
        print(f"drills: {error}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())