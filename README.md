# drills

Small, classic programming exercises as a Python library: arithmetic
helpers, string checks, prime-number puzzles, matrix operations and
number-guessing games. A `drills` command runs a few of them from a
terminal. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

- `drills.basics`: `fizz_buzz`, `add`, `subtract`, `multiply`, `divide`,
  `length_of_last_word`, `reverse_string`, `search_insert`, `circle_area`
  (which uses 3.14 for pi), `square_area`, `fibonacci_upto`, `is_even`,
  `factorial` (for n >= 1), `sum_of_evens`, `swap`, and a frozen `Student`
  dataclass holding a name and exactly three marks, with `total()` and
  `average()` (the average truncated to a whole number).
- `drills.strings`: `is_palindrome`, `remove_special_chars` (keeps ASCII
  letters and digits), `sum_of_digits`, `extract_numbers`,
  `sum_of_numbers`, `count_consonants`, `is_valid_password`,
  `is_valid_username` and the order-preserving `remove_duplicates`.
- `drills.matrices`: works on lists of rows. `is_identity`,
  `lower_triangle`, `upper_triangle`, `transpose`, `multiply`, `diagonal`,
  `diagonal_sum` (both diagonals, a shared centre counted once) and
  `is_symmetric`. Ragged or, where required, non-square matrices raise
  `ValueError`, as do matrices whose shapes cannot be multiplied.
- `drills.primes`: `is_prime`, `digit_sum`, `all_digits_prime`,
  `is_perfect_prime` (prime, every digit 2, 3, 5 or 7, and a prime digit
  sum), `perfect_primes_in_range`, `primes_in_string`, `is_prime_array`
  and `perfect_squares`.
- `drills.games`: `GuessingGame` and `LimitedGuessingGame`, whose `guess`
  method answers with a `Hint` (`LOWER`, `HIGHER` or `CORRECT`) and keeps
  count of `attempts`; the limited game loses one of its `lives` for each
  wrong guess. `random_secret` and `random_limited_secret` pick the number
  to guess, optionally from a given `random.Random`.

## Examples

```python
from drills import basics, strings, matrices, primes
from drills.games import Hint, LimitedGuessingGame

basics.fizz_buzz(5)                      # ['1', '2', 'Fizz', '4', 'Buzz']
basics.reverse_string("hello")           # 'olleh'
basics.length_of_last_word("fly me to the moon")   # 4
basics.search_insert([1, 3, 5, 6], 5)    # 2
basics.Student("Ada", (80, 90, 75)).average()      # 81.0

strings.is_palindrome("level")           # True
strings.remove_duplicates([1, 2, 2, 3, 1])         # [1, 2, 3]
strings.sum_of_numbers("a12b3")          # 15

matrices.diagonal([[1, 2], [3, 4]])      # [1, 4]
matrices.transpose([[1, 2, 3], [4, 5, 6]])         # [[1, 4], [2, 5], [3, 6]]

primes.is_perfect_prime(23)              # True

game = LimitedGuessingGame(42, lives=3)
game.guess(50) is Hint.LOWER             # True
game.lives                               # 2
```

## Command line

```
drills fizzbuzz 15
drills matmul < input.txt
drills hilo [--seed N]
drills guess [--seed N] [--lives N]
```

- `fizzbuzz N` prints the FizzBuzz lines for 1 to N.
- `matmul` reads whitespace-separated integers from standard input: the
  rows and columns of the first matrix, the rows and columns of the
  second, then the elements of each matrix row by row. It prints the
  product with tab-separated columns, or `Matrix Multiplication not
  possible` and exits with status 1 if the shapes do not fit.
- `hilo` picks a number from 1 to 100 and reads guesses from standard
  input, answering `Lower`, `Higher` or `Correct`.
- `guess` picks a number and allows a limited number of wrong guesses
  (five by default), then reports the attempts or reveals the number.

`--seed` makes the secret number repeatable. Malformed or missing input
ends the command with a message on standard error and exit status 2.

## Limits

The command runs only the four drills above; everything else is available
as library functions only.