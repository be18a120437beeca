import logging

import pytest

from dicephrase.logging_config import (
    SecretFilter,
    log_list_loaded,
    log_list_rejected,
    log_passphrase_generated,
    setup_logging,
)
from dicephrase.passphrase import make_passphrase
from dicephrase.schemas import FileSource, GenerationRequest


def make_record(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord("dicephrase", logging.INFO, __file__, 1, msg, args, None)


@pytest.fixture
def stderr_logging(capsys):
    setup_logging("INFO")
    return capsys


def test_secret_filter_redacts_assignments():
    record = make_record("passphrase=%s", "correct horse battery staple")

    assert SecretFilter().filter(record) is True
    assert record.getMessage() == "[REDACTED - Sensitive data filtered]"


def test_secret_filter_keeps_plain_events():
    record = make_record("Word list EN loaded (7776 entries)")

    SecretFilter().filter(record)

    assert record.getMessage() == "Word list EN loaded (7776 entries)"


def test_setup_logging_replaces_handlers():
    logger = setup_logging("INFO")
    setup_logging("INFO")

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_events_go_to_stderr(stderr_logging):
    log_list_loaded("EN", 7776)
    log_list_rejected("words.txt", "Word list: invalid length (3, expected 7776)")
    log_passphrase_generated(8, True)

    captured = stderr_logging.readouterr()
    assert captured.out == ""
    assert "Word list EN loaded (7776 entries)" in captured.err
    assert "Word list words.txt rejected" in captured.err
    assert "Generated 8-word passphrase with special character" in captured.err


def test_generated_words_are_never_logged(stderr_logging, rng, write_wordlist, valid_words):
    request = GenerationRequest(
        source=FileSource(path=write_wordlist(valid_words)),
        word_count=4,
    )
    passphrase = make_passphrase(request, rng)

    captured = stderr_logging.readouterr()
    assert "Generated 4-word passphrase" in captured.err
    for word in passphrase.split(" "):
        assert word not in captured.err
