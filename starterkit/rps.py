"""Rock-paper-scissor against a randomly choosing computer."""

from __future__ import annotations

import argparse
import enum
import random
import sys

CHOICES = ("rock", "paper", "scissor")
QUIT = "quit"

_ACCEPTED = frozenset(CHOICES) | {QUIT}
_WINNING_PAIRS = frozenset(
    {
        ("rock", "scissor"),
        ("paper", "rock"),
        ("scissors", "paper"),
    }
)


class GameResult(enum.Enum):
    """Outcome of one game from the player's side; the value is the message shown."""

    WIN = "You win"
    LOSE = "You lose"
    DRAW = "its a draw"


def _ascii_lower(text: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def parse_choice(text: str) -> str:
    """Normalise a player's entry; accept rock, paper, scissor or quit."""
    choice = _ascii_lower(text.strip())
    if choice not in _ACCEPTED:
        raise ValueError(f"invalid choice: {text!r}")
    return choice


def computer_choice(rng: random.Random | None = None) -> str:
    """Pick rock, paper or scissor at random."""
    chooser = random if rng is None else rng
    return chooser.choice(CHOICES)


def determine_winner(user: str, computer: str) -> GameResult:
    """Decide the game from the player's point of view."""
    if (user, computer) in _WINNING_PAIRS:
        return GameResult.WIN
    if user == computer:
        return GameResult.DRAW
    return GameResult.LOSE


def _read_choice() -> str | None:
    while True:
        line = sys.stdin.readline()
        if not line:
            return None
        try:
            return parse_choice(line)
        except ValueError:
            print("Invalid choice. pls enter 'rock', 'paper', 'sissors or quit")


def main(argv: list[str] | None = None) -> int:
    """Play games on standard input until the player types quit."""
    parser = argparse.ArgumentParser(
        prog="rps", description="Play rock-paper-scissor against the computer."
    )
    parser.parse_args(argv)

    print("Welcome to Rock-paper-scissor")
    print(
        "Instructions: Enter 'rock', 'paper', or 'scissors'. "
        "Type 'quit'. Type 'quit' to exit."
    )
    while True:
        print("\n make your choice")
        choice = _read_choice()
        if choice is None:
            return 1
        if choice == QUIT:
            print("Thanks for playing! Goodbye")
            return 0

        opponent = computer_choice()
        print(f"Computer chose: {opponent}")
        print(determine_winner(choice, opponent).value)