"""
Tests for the command line front end
"""

import pytest

from dicephrase import __version__
from dicephrase.main import main, parse_word_count
from dicephrase.passphrase import SPECIAL_CHARS
from dicephrase.schemas import EmbeddedList
from dicephrase.wordlist import get_embedded_list


def test_prints_passphrase_with_default_list(capsys):
    assert main(["8"]) == 0

    captured = capsys.readouterr()
    tokens = captured.out.rstrip("\n").split(" ")
    members = set(get_embedded_list(EmbeddedList.EN))
    assert captured.out.endswith("\n")
    assert len(tokens) == 8
    assert all(token in members for token in tokens)
    assert captured.err == ""


def test_french_list(capsys):
    assert main(["--fr", "5"]) == 0

    tokens = capsys.readouterr().out.split()
    members = set(get_embedded_list(EmbeddedList.FR))
    assert len(tokens) == 5
    assert all(token in members for token in tokens)


def test_with_special_char(capsys):
    assert main(["--fr", "-s", "6"]) == 0

    tokens = capsys.readouterr().out.split()
    members = set(get_embedded_list(EmbeddedList.FR))
    altered = [token for token in tokens if token not in members]
    assert len(tokens) == 6
    assert len(altered) == 1
    assert any(char in SPECIAL_CHARS for char in altered[0])


def test_default_list_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("DICEPHRASE_DEFAULT_LIST", "FR")

    assert main(["12"]) == 0

    members = set(get_embedded_list(EmbeddedList.FR))
    assert all(token in members for token in capsys.readouterr().out.split())


def test_word_file(capsys, write_wordlist, valid_words):
    path = write_wordlist(valid_words)

    assert main(["3", "-f", str(path)]) == 0

    tokens = capsys.readouterr().out.split()
    assert len(tokens) == 3
    assert all(token in set(valid_words) for token in tokens)


def test_missing_word_file_reports_path(capsys, tmp_path):
    path = tmp_path / "missing.txt"

    assert main(["4", "--file", str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == f"Error: {path}: No such file or directory\n"


def test_short_word_file_reports_counts(capsys, write_wordlist, valid_words):
    path = write_wordlist(valid_words[:-1])

    assert main(["4", "-f", str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Word list: invalid length (7775, expected 7776)\n"


def test_duplicate_word_reports_word(capsys, write_wordlist, valid_words):
    valid_words[41] = valid_words[9]
    path = write_wordlist(valid_words)

    assert main(["4", "-f", str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Word list: word0009: duplicate word\n"


def test_zero_words(capsys):
    assert main(["0"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: No words to generate\n"


@pytest.mark.parametrize("value", ["abc", "1.5", "-3", ""])
def test_invalid_word_count(capsys, value):
    assert main([value]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == (
        f"Error: `{value}` is not a valid number of words. "
        "Please use an integer instead.\n"
    )


def test_word_list_options_are_exclusive(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["4", "--en", "--fr"])

    assert exc.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])

    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == f"dicephrase {__version__}"


def test_invalid_log_level_setting(capsys, monkeypatch):
    monkeypatch.setenv("DICEPHRASE_LOG_LEVEL", "LOUD")

    assert main(["4"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "LOG_LEVEL" in captured.err


@pytest.mark.parametrize(
    "value, expected",
    [("8", 8), ("0", 0), (" 3 ", 3), ("x", None), ("-1", None)],
)
def test_parse_word_count(value, expected):
    assert parse_word_count(value) == expected


def test_rejected_list_is_logged_at_info(capsys, monkeypatch, write_wordlist):
    monkeypatch.setenv("DICEPHRASE_LOG_LEVEL", "INFO")
    path = write_wordlist(["one", "two"])

    assert main(["4", "-f", str(path)]) == 1

    err_lines = capsys.readouterr().err.splitlines()
    assert len(err_lines) == 2
    assert " - dicephrase - INFO - Word list " in err_lines[0]
    assert err_lines[1] == "Error: Word list: invalid length (2, expected 7776)"


def test_rejected_list_prints_only_the_error_by_default(capsys, write_wordlist):
    path = write_wordlist(["one", "two"])

    assert main(["4", "-f", str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Word list: invalid length (2, expected 7776)\n"
