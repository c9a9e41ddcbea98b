import io
import random

import pytest

from starterkit.guessing import (
    Comparison,
    compare_guess,
    main,
    new_secret,
    parse_guess,
    play_round,
    wants_replay,
)


@pytest.mark.parametrize("text, expected", [("42", 42), (" 7\n", 7), ("+5", 5)])
def test_parse_guess(text, expected):
    assert parse_guess(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-3", "4.5", "4294967296"])
def test_parse_guess_rejects(text):
    with pytest.raises(ValueError):
        parse_guess(text)


@pytest.mark.parametrize(
    "guess, secret, expected",
    [(1, 50, Comparison.LESS), (99, 50, Comparison.GREATER), (50, 50, Comparison.EQUAL)],
)
def test_compare_guess(guess, secret, expected):
    assert compare_guess(guess, secret) is expected


def test_new_secret_in_range():
    rng = random.Random(1234)
    values = {new_secret(rng) for _ in range(2000)}
    assert min(values) >= 1
    assert max(values) <= 100
    assert len(values) > 50


def test_new_secret_reproducible_with_seed():
    rng_a = random.Random(7)
    rng_b = random.Random(7)
    first = [new_secret(rng_a) for _ in range(20)]
    second = [new_secret(rng_b) for _ in range(20)]
    assert first == second
    assert all(1 <= value <= 100 for value in first)
    assert len(set(first)) > 1


def test_play_round_counts_valid_attempts():
    lines = iter(["x\n", "10\n", "90\n", "50\n"])
    written = []
    attempts = play_round(50, lambda: next(lines), written.append)
    assert attempts == 3
    assert "⚠️ Please enter a valid number!" in written
    assert "Too small!" in written
    assert "Too big!" in written
    assert written[-1] == "🎉 Congratulations! You guessed the number in 3 tries."


def test_play_round_first_try():
    written = []
    assert play_round(17, lambda: "17\n", written.append) == 1
    assert written.count("\nPlease input your guess:") == 1


def test_play_round_eof():
    with pytest.raises(EOFError):
        play_round(50, lambda: "", lambda _msg: None)


@pytest.mark.parametrize("answer, expected", [("y\n", True), ("Y", True), (" y ", True), ("n", False), ("yes", False), ("", False)])
def test_wants_replay(answer, expected):
    assert wants_replay(answer) is expected


def test_main_plays_one_round_and_quits(monkeypatch, capsys):
    guesses = "\n".join(str(i) for i in range(1, 101)) + "\nn\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(guesses))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Congratulations!") == 1
    assert "Thanks for playing! Goodbye." in out