import pytest

from starterkit.wordcount import count_chars, count_lines, count_words, main


@pytest.mark.parametrize("words", [["one"], ["a", "b", "c"], ["hello", "world", "again", "x"]])
@pytest.mark.parametrize("separator", [" ", "  ", "\t", "\n", " \r\n "])
def test_count_words_joined(words, separator):
    assert count_words(separator.join(words)) == len(words)


def test_count_words_ignores_surrounding_whitespace():
    assert count_words("  alpha beta \n") == count_words("alpha beta")


def test_count_words_empty():
    assert count_words(" \n\t ") == 0


def test_count_chars_counts_code_points():
    assert count_chars("日本") == 2


@pytest.mark.parametrize("text", ["a", "a\nb", "\n\nx"])
def test_trailing_newline_does_not_add_a_line(text):
    assert count_lines(text + "\n") == count_lines(text)


def test_count_lines_crlf():
    assert count_lines("a\r\nb\r\n") == count_lines("a\nb\n")


def test_count_lines_empty():
    assert count_lines("") == 0


def test_main_prints_counts(tmp_path, capsys):
    text = "the quick brown\nfox jumps\n"
    path = tmp_path / "sample.txt"
    path.write_bytes(text.encode("utf-8"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert f"Reading file: {path}" in out
    assert f"World Count: {count_words(text)}" in out
    assert f"characters  Count: {count_chars(text)}" in out
    assert f"lines  Count: {count_lines(text)}" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Error opening file:" in capsys.readouterr().out


def test_main_invalid_utf8(tmp_path, capsys):
    path = tmp_path / "binary.bin"
    path.write_bytes(b"\xff\xfe\xfa")
    assert main([str(path)]) == 1
    assert "Error reading file:" in capsys.readouterr().out