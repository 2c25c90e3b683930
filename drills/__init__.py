"""Small classic programming exercises: numbers, strings, primes, matrices and guessing games."""

__version__ = "0.1.0"