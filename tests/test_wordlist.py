"""
Tests for word list loading and validation
"""

import pytest

from dicephrase.errors import (
    DuplicateWordError,
    InvalidLengthError,
    WordListIOError,
)
from dicephrase.schemas import EmbeddedList, EmbeddedSource, FileSource
from dicephrase.wordlist import (
    WORD_LIST_LENGTH,
    check_duplicates,
    get_embedded_list,
    load,
    read_wordlist_file,
)


@pytest.mark.parametrize("name", list(EmbeddedList))
def test_embedded_lists_are_valid(name: EmbeddedList):
    words = load(EmbeddedSource(name=name))

    assert len(words) == WORD_LIST_LENGTH
    assert len(set(words)) == WORD_LIST_LENGTH
    assert all(words)


def test_word_list_length_is_five_dice():
    assert WORD_LIST_LENGTH == 7776


def test_english_list_is_the_original_diceware_list():
    words = get_embedded_list(EmbeddedList.EN)

    assert words[0] == "a"
    assert words[1] == "a&p"
    assert words[-1] == "@"


def test_french_list_is_plain_ascii():
    words = get_embedded_list(EmbeddedList.FR)

    assert all(word.isascii() for word in words)
    assert words[0] == "abaisse"
    assert words[-1] == "zozoter"
    assert "Internet" in words


@pytest.mark.parametrize("name", list(EmbeddedList))
def test_embedded_words_are_single_tokens(name: EmbeddedList):
    words = get_embedded_list(name)

    assert all(word and word.split() == [word] for word in words)


def test_get_embedded_list_rejects_unknown_name():
    with pytest.raises(ValueError):
        get_embedded_list("DE")


@pytest.mark.parametrize("name", list(EmbeddedList))
def test_load_is_repeatable(name: EmbeddedList):
    source = EmbeddedSource(name=name)

    assert load(source) == load(source)


def test_load_file_preserves_order(write_wordlist, valid_words):
    path = write_wordlist(valid_words)

    words = load(FileSource(path=path))

    assert list(words) == valid_words


def test_load_file_twice_gives_same_list(write_wordlist, valid_words):
    source = FileSource(path=write_wordlist(valid_words))

    assert load(source) == load(source)


def test_load_file_without_trailing_newline(write_wordlist, valid_words):
    path = write_wordlist(valid_words, trailing_newline=False)

    assert len(load(FileSource(path=path))) == WORD_LIST_LENGTH


def test_load_file_rejects_short_list(write_wordlist, valid_words):
    path = write_wordlist(valid_words[:-1])

    with pytest.raises(InvalidLengthError) as exc:
        load(FileSource(path=path))

    assert exc.value.length == 7775
    assert "7775" in str(exc.value)
    assert "7776" in str(exc.value)


def test_load_file_rejects_long_list(write_wordlist, valid_words):
    path = write_wordlist(valid_words + ["extra"])

    with pytest.raises(InvalidLengthError) as exc:
        load(FileSource(path=path))

    assert exc.value.length == 7777


def test_trailing_blank_line_counts_as_a_line(tmp_path, valid_words):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(valid_words) + "\n\n", encoding="utf-8")

    with pytest.raises(InvalidLengthError) as exc:
        load(FileSource(path=path))

    assert exc.value.length == 7777


def test_blank_line_is_not_a_word(write_wordlist, valid_words):
    # 7776 lines, one of them blank
    words = valid_words[:-1]
    words.insert(100, "")
    path = write_wordlist(words)

    with pytest.raises(InvalidLengthError) as exc:
        load(FileSource(path=path))

    assert exc.value.length == 7775
    assert str(exc.value) == "Word list: invalid length (7775, expected 7776)"


def test_trailing_blank_line_completing_the_count_is_rejected(tmp_path, valid_words):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(valid_words[:-1]) + "\n\n", encoding="utf-8")

    with pytest.raises(InvalidLengthError) as exc:
        load(FileSource(path=path))

    assert exc.value.length == 7775


def test_whitespace_only_line_is_blank(write_wordlist, valid_words):
    valid_words[5] = " \t "
    path = write_wordlist(valid_words)

    with pytest.raises(InvalidLengthError) as exc:
        load(FileSource(path=path))

    assert exc.value.length == 7775


def test_empty_file_has_no_lines(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    with pytest.raises(InvalidLengthError) as exc:
        load(FileSource(path=path))

    assert exc.value.length == 0


def test_load_file_rejects_duplicate_word(write_wordlist, valid_words):
    # Line 42 repeats line 10
    valid_words[41] = valid_words[9]
    path = write_wordlist(valid_words)

    with pytest.raises(DuplicateWordError) as exc:
        load(FileSource(path=path))

    assert exc.value.word == "word0009"
    assert str(exc.value) == "Word list: word0009: duplicate word"


def test_duplicate_check_reports_first_repeat_in_list_order():
    words = ["alpha", "beta", "gamma", "beta", "alpha"]

    with pytest.raises(DuplicateWordError) as exc:
        check_duplicates(words)

    assert exc.value.word == "beta"


def test_duplicate_check_is_case_sensitive():
    check_duplicates(["Word", "word", "WORD"])


def test_length_is_checked_before_duplicates(write_wordlist):
    path = write_wordlist(["same"] * 10)

    with pytest.raises(InvalidLengthError):
        load(FileSource(path=path))


def test_crlf_line_endings_are_trimmed(tmp_path, valid_words):
    path = tmp_path / "words.txt"
    path.write_bytes(("\r\n".join(valid_words) + "\r\n").encode("utf-8"))

    words = load(FileSource(path=path))

    assert list(words) == valid_words


def test_surrounding_whitespace_is_trimmed(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("  one\ntwo  \n\tthree\n", encoding="utf-8")

    assert read_wordlist_file(path) == ("one", "two", "three")


def test_multibyte_words_are_kept(write_wordlist, valid_words):
    valid_words[0] = "église"
    valid_words[1] = "naïve"
    path = write_wordlist(valid_words)

    words = load(FileSource(path=path))

    assert words[0] == "église"
    assert words[1] == "naïve"


def test_missing_file_raises_io_error_with_path(tmp_path):
    path = tmp_path / "missing.txt"

    with pytest.raises(WordListIOError) as exc:
        load(FileSource(path=path))

    assert exc.value.path == str(path)
    assert str(exc.value).startswith(f"{path}: ")
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_directory_raises_io_error(tmp_path):
    with pytest.raises(WordListIOError) as exc:
        load(FileSource(path=tmp_path))

    assert isinstance(exc.value.__cause__, OSError)


def test_invalid_utf8_raises_io_error(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("caf\xe9\n".encode("latin-1"))

    with pytest.raises(WordListIOError) as exc:
        load(FileSource(path=path))

    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
    assert str(path) in str(exc.value)
