from pathlib import Path

import pytest
from pydantic import TypeAdapter, ValidationError

from dicephrase.schemas import (
    EmbeddedList,
    EmbeddedSource,
    FileSource,
    GenerationRequest,
    WordSource,
)


def test_request_defaults_to_english_without_special_char():
    request = GenerationRequest(word_count=6)

    assert request.source == EmbeddedSource(name=EmbeddedList.EN)
    assert request.inject_special_char is False


def test_request_accepts_zero_words():
    # Refused later with NoWordsRequestedError, not here
    assert GenerationRequest(word_count=0).word_count == 0


def test_request_rejects_negative_word_count():
    with pytest.raises(ValidationError):
        GenerationRequest(word_count=-1)


def test_request_is_immutable():
    request = GenerationRequest(word_count=3)

    with pytest.raises(ValidationError):
        request.word_count = 4


@pytest.mark.parametrize(
    "data, expected_type",
    [
        ({"kind": "embedded", "name": "FR"}, EmbeddedSource),
        ({"kind": "file", "path": "/tmp/words.txt"}, FileSource),
    ],
)
def test_word_source_is_selected_by_kind(data, expected_type):
    source = TypeAdapter(WordSource).validate_python(data)

    assert isinstance(source, expected_type)


def test_file_source_path_is_a_path():
    source = FileSource(path="words.txt")

    assert source.path == Path("words.txt")


def test_embedded_source_rejects_unknown_list():
    with pytest.raises(ValidationError):
        EmbeddedSource(name="DE")


def test_request_accepts_source_as_mapping():
    request = GenerationRequest(
        source={"kind": "embedded", "name": "FR"},
        word_count=4,
        inject_special_char=True,
    )

    assert request.source.name is EmbeddedList.FR
