"""Fibonacci sequence generator."""

from __future__ import annotations

import argparse
import re
import sys

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def parse_term_count(text: str) -> int:
    """Parse a 32-bit unsigned term count, ignoring surrounding whitespace."""
    stripped = text.strip()
    if not _UNSIGNED.fullmatch(stripped):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(stripped)
    if value > _U32_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def generate_fibonacci(n: int) -> list[int]:
    """Return the first n Fibonacci numbers, starting 0, 1.

    Raises OverflowError when a term no longer fits in 64 unsigned bits.
    """
    sequence = [0, 1][: max(n, 0)]
    while len(sequence) < n:
        following = sequence[-1] + sequence[-2]
        if following > _U64_MAX:
            raise OverflowError("Fibonacci term exceeds 64-bit range")
        sequence.append(following)
    return sequence


def main(argv: list[str] | None = None) -> int:
    """Ask for a number of terms on standard input and print the sequence."""
    parser = argparse.ArgumentParser(
        prog="fibonacci", description="Print the first terms of the Fibonacci sequence."
    )
    parser.parse_args(argv)

    print("Fibonacci Sequence Generator")
    print("Enter the number of terms you want to generate:")
    try:
        num_terms = parse_term_count(sys.stdin.readline())
    except ValueError:
        print("invalid input. pls enter a postive interger")
        return 0

    if num_terms == 0:
        print("Number of terms must be greater than ")

    try:
        sequence = generate_fibonacci(num_terms)
    except OverflowError as exc:
        print(exc)
        return 1
    print(f"Fibonacci Sequence ({num_terms} terms): {sequence}")
    return 0