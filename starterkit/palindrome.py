"""Palindrome check over the alphanumeric characters of a string."""

from __future__ import annotations

import argparse
import sys


def clean_string(text: str) -> str:
    """Keep only the alphanumeric characters of text."""
    return "".join(ch for ch in text if ch.isalnum())


def is_palindrome(text: str) -> bool:
    """Return True when text reads the same backwards (case-sensitive)."""
    return text == text[::-1]


def main(argv: list[str] | None = None) -> int:
    """Read a line from standard input and report whether it is a palindrome."""
    parser = argparse.ArgumentParser(
        prog="palindrome", description="Check whether a line of text is a palindrome."
    )
    parser.parse_args(argv)

    print("Palindrome checker")
    print("Enter a string to check if its a palindrome")
    line = sys.stdin.readline()
    cleaned = clean_string(line)
    if not cleaned:
        print("pls enter a valid non empty string")
        return 0

    if is_palindrome(cleaned):
        print(f"'{line.strip()}' is a palindrome!")
    else:
        print(f"'{line.strip()}' is not a palindrome")
    return 0