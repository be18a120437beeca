"""
Tests for passphrase assembly
"""

import string

import pytest

from dicephrase.errors import (
    InvalidLengthError,
    NoWordsRequestedError,
)
from dicephrase.passphrase import (
    SPECIAL_CHARS,
    assemble,
    grapheme_boundaries,
    insert_special_char,
    make_passphrase,
)
from dicephrase.schemas import (
    EmbeddedList,
    EmbeddedSource,
    FileSource,
    GenerationRequest,
)
from dicephrase.wordlist import get_embedded_list

from conftest import SeededRandom


def without_one_special_char(token: str, members) -> bool:
    """True if deleting one special character from token gives a member."""
    for i, char in enumerate(token):
        if char in SPECIAL_CHARS and token[:i] + token[i + 1:] in members:
            return True
    return False


def test_special_chars_are_punctuation_and_digits():
    assert SPECIAL_CHARS == "~!#$%^&*()-=+[]\\{}:;\"'<>?/0123456789"
    assert len(SPECIAL_CHARS) == 36
    assert len(set(SPECIAL_CHARS)) == len(SPECIAL_CHARS)
    assert set(string.digits) <= set(SPECIAL_CHARS)
    assert not any(char.isalpha() or char.isspace() for char in SPECIAL_CHARS)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("", [0]),
        ("a", [0, 1]),
        ("abc", [0, 1, 2, 3]),
        ("été", [0, 1, 2, 3]),
        # e + combining acute accent is one grapheme
        ("e\u0301te\u0301", [0, 2, 3, 5]),
        # Regional indicator pair (flag) is one grapheme
        ("\U0001F1EB\U0001F1F7x", [0, 2, 3]),
    ],
)
def test_grapheme_boundaries(word, expected):
    assert grapheme_boundaries(word) == expected


def test_insert_special_char_at_start(scripted):
    assert insert_special_char("word", "#", scripted(choice_indices=[0])) == "#word"


def test_insert_special_char_at_end(scripted):
    assert insert_special_char("word", "#", scripted(choice_indices=[4])) == "word#"


def test_insert_special_char_never_splits_a_grapheme(scripted):
    word = "ét"
    results = {
        insert_special_char(word, "!", scripted(choice_indices=[i]))
        for i in range(len(grapheme_boundaries(word)))
    }

    assert results == {"!ét", "é!t", "ét!"}


def test_assemble_rejects_zero_words_without_randomness():
    rng = SeededRandom()

    with pytest.raises(NoWordsRequestedError) as exc:
        assemble(["a", "b"], 0, True, rng)

    assert str(exc.value) == "No words to generate"
    assert rng.calls == 0


def test_assemble_samples_with_replacement(scripted):
    rng = scripted(randbelow_values=[2, 0, 2])

    assert assemble(["alpha", "beta", "gamma"], 3, False, rng) == "gamma alpha gamma"


def test_assemble_injects_into_chosen_word(scripted):
    # picks beta, alpha; char '~'; target word 1; boundary 0
    rng = scripted(randbelow_values=[1, 0, 1], choice_indices=[0, 0])

    assert assemble(["alpha", "beta"], 2, True, rng) == "beta ~alpha"


def test_assemble_can_inject_at_word_end(scripted):
    rng = scripted(randbelow_values=[1, 0], choice_indices=[SPECIAL_CHARS.index("9"), 4])

    assert assemble(["alpha", "beta"], 1, True, rng) == "beta9"


@pytest.mark.parametrize("word_count", [1, 2, 8, 50])
@pytest.mark.parametrize("name", list(EmbeddedList))
def test_assemble_uses_only_list_words(name, word_count, rng):
    words = get_embedded_list(name)
    members = set(words)

    passphrase = assemble(words, word_count, False, rng)
    tokens = passphrase.split(" ")

    assert len(tokens) == word_count
    assert all(token in members for token in tokens)


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("word_count", [1, 3, 8])
def test_assemble_with_special_char_alters_exactly_one_word(seed, word_count):
    words = get_embedded_list(EmbeddedList.FR)
    members = set(words)

    passphrase = assemble(words, word_count, True, SeededRandom(seed))
    tokens = passphrase.split(" ")
    altered = [token for token in tokens if token not in members]

    assert len(tokens) == word_count
    assert len(altered) == 1
    assert without_one_special_char(altered[0], members)


def test_assemble_with_special_char_in_multibyte_word():
    words = ["e\u0301te\u0301", "cafe\u0301"]

    for seed in range(20):
        token = assemble(words, 1, True, SeededRandom(seed))

        assert without_one_special_char(token, set(words))
        # No character is ever placed between a letter and its accent
        assert "\u0301" not in {token[i + 1] for i, c in enumerate(token[:-1]) if c in SPECIAL_CHARS}


def test_assemble_uses_system_random_by_default(valid_words):
    passphrase = assemble(valid_words, 6)

    assert len(passphrase.split(" ")) == 6


def test_passphrase_has_single_spaces_only(valid_words, rng):
    passphrase = assemble(valid_words, 8, True, rng)

    assert passphrase == passphrase.strip()
    assert "  " not in passphrase
    assert "\n" not in passphrase


def test_make_passphrase_english_eight_words(rng):
    members = set(get_embedded_list(EmbeddedList.EN))
    request = GenerationRequest(source=EmbeddedSource(name=EmbeddedList.EN), word_count=8)

    tokens = make_passphrase(request, rng).split(" ")

    assert len(tokens) == 8
    assert all(token in members for token in tokens)


def test_make_passphrase_zero_words_skips_file_and_randomness(tmp_path):
    rng = SeededRandom()
    request = GenerationRequest(
        source=FileSource(path=tmp_path / "does-not-exist.txt"),
        word_count=0,
        inject_special_char=True,
    )

    with pytest.raises(NoWordsRequestedError):
        make_passphrase(request, rng)

    assert rng.calls == 0


@pytest.mark.parametrize("name", list(EmbeddedList))
def test_make_passphrase_zero_words_embedded(name):
    request = GenerationRequest(source=EmbeddedSource(name=name), word_count=0)

    with pytest.raises(NoWordsRequestedError):
        make_passphrase(request)


def test_make_passphrase_invalid_file_fails_before_sampling(write_wordlist, valid_words):
    rng = SeededRandom()
    request = GenerationRequest(
        source=FileSource(path=write_wordlist(valid_words[:100])),
        word_count=4,
    )

    with pytest.raises(InvalidLengthError):
        make_passphrase(request, rng)

    assert rng.calls == 0


def test_make_passphrase_from_file(write_wordlist, valid_words, rng):
    request = GenerationRequest(
        source=FileSource(path=write_wordlist(valid_words)),
        word_count=5,
        inject_special_char=True,
    )

    tokens = make_passphrase(request, rng).split(" ")
    altered = [token for token in tokens if token not in set(valid_words)]

    assert len(tokens) == 5
    assert len(altered) == 1
    assert without_one_special_char(altered[0], set(valid_words))
