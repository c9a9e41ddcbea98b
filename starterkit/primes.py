"""Primality check for unsigned 32-bit integers."""

from __future__ import annotations

import argparse
import math
import re
import sys

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


def parse_positive(text: str) -> int:
    """Parse a 32-bit unsigned integer, ignoring surrounding whitespace."""
    stripped = text.strip()
    if not _UNSIGNED.fullmatch(stripped):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(stripped)
    if value > _U32_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def is_prime(n: int) -> bool:
    """Return True when n is a prime number, by trial division."""
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % divisor for divisor in range(3, math.isqrt(n) + 1, 2))


def main(argv: list[str] | None = None) -> int:
    """Read a number from standard input and report whether it is prime."""
    parser = argparse.ArgumentParser(
        prog="primes", description="Check whether a positive integer is prime."
    )
    parser.parse_args(argv)

    print("Prime Number Checker")
    print("Enter a positive integer to check if its a prime:")
    try:
        number = parse_positive(sys.stdin.readline())
    except ValueError:
        print("Invalid input. pls enter a postive interger")
        return 0

    if number <= 1:
        print("the number must be greater than 1 ")
        return 0

    if is_prime(number):
        print(f"{number} is a prime number")
    else:
        print(f"{number} is not a prime number")
    return 0