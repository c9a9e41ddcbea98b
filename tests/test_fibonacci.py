import io

import pytest

from starterkit.fibonacci import generate_fibonacci, main, parse_term_count


@pytest.mark.parametrize("text, expected", [("7", 7), ("  12 \n", 12), ("+3", 3), ("4294967295", 4294967295)])
def test_parse_term_count(text, expected):
    assert parse_term_count(text) == expected


@pytest.mark.parametrize("text", ["", "-1", "abc", "2.0", "1_0", "4294967296"])
def test_parse_term_count_rejects(text):
    with pytest.raises(ValueError):
        parse_term_count(text)


def test_first_terms_fixed_by_definition():
    assert generate_fibonacci(0) == []
    assert generate_fibonacci(1) == [0]
    assert generate_fibonacci(2) == [0, 1]


@pytest.mark.parametrize("n", [3, 10, 30, 94])
def test_recurrence_and_length(n):
    seq = generate_fibonacci(n)
    assert len(seq) == n
    assert seq[:2] == [0, 1]
    assert all(seq[i] == seq[i - 1] + seq[i - 2] for i in range(2, n))


def test_prefix_property():
    assert generate_fibonacci(20)[:12] == generate_fibonacci(12)


def test_largest_fitting_term():
    assert generate_fibonacci(94)[-1] < 2**64


def test_overflow_beyond_64_bits():
    with pytest.raises(OverflowError):
        generate_fibonacci(95)


def test_main_prints_sequence(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"Fibonacci Sequence (5 terms): {generate_fibonacci(5)}" in out


def test_main_zero_terms(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    main([])
    out = capsys.readouterr().out
    assert "Number of terms must be greater than" in out
    assert "Fibonacci Sequence (0 terms): []" in out


def test_main_invalid(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("many\n"))
    main([])
    assert "invalid input. pls enter a postive interger" in capsys.readouterr().out