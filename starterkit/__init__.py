"""Small console programs: timer, BMI, Fibonacci, guessing, palindromes, primes, rock-paper-scissor, calculator, temperature, to-do list and word counts."""

__version__ = "0.1.0"