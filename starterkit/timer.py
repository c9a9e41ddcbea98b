"""Countdown timer driven by an hours/minutes/seconds duration."""

from __future__ import annotations

import argparse
import re
import sys
import time
from collections.abc import Callable, Iterator
from typing import TextIO

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U64_MAX = 2**64 - 1


def _parse_u64(token: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"not an unsigned integer: {token!r}")
    value = int(token)
    if value > _U64_MAX:
        raise ValueError(f"number too large: {token!r}")
    return value


def parse_duration(text: str) -> tuple[int, int, int]:
    """Parse "hours minutes seconds" into a tuple of three non-negative ints."""
    parts = text.split()
    if len(parts) != 3:
        raise ValueError("expected three numbers: hours minutes seconds")
    hours, minutes, seconds = (_parse_u64(part) for part in parts)
    return hours, minutes, seconds


def total_seconds(hours: int, minutes: int, seconds: int) -> int:
    """Return the duration expressed in seconds."""
    return hours * 3600 + minutes * 60 + seconds


def format_remaining(seconds: int) -> str:
    """Format a number of seconds as HH:MM:SS."""
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02}:{minutes:02}:{secs:02}"


def countdown(hours: int, minutes: int, seconds: int) -> Iterator[int]:
    """Yield the remaining seconds from the full duration down to 1."""
    yield from range(total_seconds(hours, minutes, seconds), 0, -1)


def run_countdown(
    hours: int,
    minutes: int,
    seconds: int,
    sleep: Callable[[float], object] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Print the remaining time once per second until the duration has passed."""
    pause = time.sleep if sleep is None else sleep
    out = sys.stdout if stream is None else stream
    for remaining in countdown(hours, minutes, seconds):
        out.write(f"\n Time remaining: {format_remaining(remaining)}")
        out.flush()
        pause(1)
    out.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Ask for a duration on standard input and count it down."""
    parser = argparse.ArgumentParser(
        prog="timer",
        description="Count down a duration given as hours, minutes and seconds.",
    )
    parser.parse_args(argv)

    print("Basic Timer Tool")
    print("Enter the Timer duration (format: hours minutes seconds)")
    try:
        hours, minutes, seconds = parse_duration(sys.stdin.readline())
    except ValueError:
        print(
            "Invalid input, please enter numbers only "
            "(e.g., 0 1 30 for 1 minute 30 seconds)."
        )
        return 0

    print(f"Timer set for: {hours} hours, {minutes} minutes, {seconds} seconds")
    run_countdown(hours, minutes, seconds)
    print("Time's up!")
    return 0