"""Word, character and line counts of a text file."""

from __future__ import annotations

import argparse
from pathlib import Path


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def count_chars(text: str) -> int:
    """Count characters (code points)."""
    return len(text)


def count_lines(text: str) -> int:
    """Count lines separated by newlines; a final newline ends the last line."""
    if not text:
        return 0
    lines = text.split("\n")
    return len(lines) - 1 if text.endswith("\n") else len(lines)


def main(argv: list[str] | None = None) -> int:
    """Print the word, character and line counts of the named file."""
    parser = argparse.ArgumentParser(
        prog="wordcount", description="Count words, characters and lines of a file."
    )
    parser.add_argument("file_path", help="file to count")
    args = parser.parse_args(argv)

    print(f"Reading file: {args.file_path}")
    try:
        raw = Path(args.file_path).read_bytes()
    except OSError as exc:
        print(f"Error opening file: {exc}")
        return 1
    try:
        contents = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        print(f"Error reading file: {exc}")
        return 1

    print(f"World Count: {count_words(contents)}")
    print(f"characters  Count: {count_chars(contents)}")
    print(f"lines  Count: {count_lines(contents)}")
    return 0