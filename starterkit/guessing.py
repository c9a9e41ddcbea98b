"""Number guessing game between 1 and 100."""

from __future__ import annotations

import argparse
import enum
import random
import re
import sys
from collections.abc import Callable

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


class Comparison(enum.Enum):
    """How a guess relates to the secret number."""

    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"


def parse_guess(text: str) -> int:
    """Parse a 32-bit unsigned guess, ignoring surrounding whitespace."""
    stripped = text.strip()
    if not _UNSIGNED.fullmatch(stripped):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(stripped)
    if value > _U32_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def compare_guess(guess: int, secret: int) -> Comparison:
    """Compare a guess with the secret number."""
    if guess < secret:
        return Comparison.LESS
    if guess > secret:
        return Comparison.GREATER
    return Comparison.EQUAL


def new_secret(rng: random.Random | None = None) -> int:
    """Pick a secret number between 1 and 100 inclusive."""
    if rng is None:
        return random.randint(1, 100)
    return rng.randint(1, 100)


def play_round(
    secret: int,
    read_line: Callable[[], str],
    write: Callable[[str], object],
) -> int:
    """Play one round until the secret is guessed; return the number of attempts.

    Raises EOFError if read_line returns an empty string.
    """
    attempts = 0
    while True:
        write("\nPlease input your guess:")
        line = read_line()
        if not line:
            raise EOFError("input ended before the number was guessed")
        try:
            guess = parse_guess(line)
        except ValueError:
            write("⚠️ Please enter a valid number!")
            continue

        attempts += 1
        result = compare_guess(guess, secret)
        if result is Comparison.LESS:
            write("Too small!")
        elif result is Comparison.GREATER:
            write("Too big!")
        else:
            write(f"🎉 Congratulations! You guessed the number in {attempts} tries.")
            return attempts


def wants_replay(answer: str) -> bool:
    """Return True when the answer to "play again?" is y."""
    return answer.strip().lower() == "y"


def main(argv: list[str] | None = None) -> int:
    """Play rounds on standard input until the player declines another."""
    parser = argparse.ArgumentParser(
        prog="guessing", description="Guess a number between 1 and 100."
    )
    parser.parse_args(argv)

    print("Welcome to the guessing game ")
    while True:
        print("\nI'm thinking of a number between 1 and 100, can you guess it?")
        try:
            play_round(new_secret(), sys.stdin.readline, print)
        except EOFError:
            return 1

        print("\nWould you like to play again? (y/n):")
        if not wants_replay(sys.stdin.readline()):
            print("👋 Thanks for playing! Goodbye.")
            return 0