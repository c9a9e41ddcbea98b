import io

import pytest

from starterkit.palindrome import clean_string, is_palindrome, main


@pytest.mark.parametrize("text", ["A man, a plan!", "  hello\n", "x-y_z 1.2", "", "!!!"])
def test_clean_string_keeps_only_alnum_in_order(text):
    cleaned = clean_string(text)
    assert all(ch.isalnum() for ch in cleaned)
    assert cleaned == "".join(ch for ch in text if ch.isalnum()) or cleaned == clean_string(cleaned)
    assert clean_string(cleaned) == cleaned


def test_clean_string_preserves_case():
    assert clean_string("Ab, C!") == "AbC"


@pytest.mark.parametrize("word", ["racecar", "level", "a", "", "12321", "abba"])
def test_palindromes(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["hello", "ab", "Racecar", "123"])
def test_non_palindromes(word):
    assert is_palindrome(word) is False


@pytest.mark.parametrize("word", ["abc", "rust", "python"])
def test_word_plus_reverse_is_palindrome(word):
    assert is_palindrome(word + word[::-1])


def test_main_palindrome(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("level\n"))
    assert main([]) == 0
    assert "'level' is a palindrome!" in capsys.readouterr().out


def test_main_case_sensitive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Was it a rat I saw\n"))
    main([])
    assert "'Was it a rat I saw' is not a palindrome" in capsys.readouterr().out


def test_main_ignores_punctuation(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab, b-a\n"))
    main([])
    assert "'ab, b-a' is a palindrome!" in capsys.readouterr().out


def test_main_empty(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("!!! ??\n"))
    main([])
    assert "pls enter a valid non empty string" in capsys.readouterr().out