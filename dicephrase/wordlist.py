"""
Word list loading and validation
Every list is checked on every run, embedded ones included, so the
caller never has to trust whoever produced the list
"""

from pathlib import Path
from typing import Iterable, Sequence, Tuple, Union

from dicephrase.errors import (
    DicewareError,
    DuplicateWordError,
    InvalidLengthError,
    WordListIOError,
)
from dicephrase.logging_config import log_list_loaded, log_list_rejected
from dicephrase.schemas import EmbeddedList, FileSource, WordSource
from dicephrase.wordlists import en, fr

# One entry per roll of five six-sided dice
WORD_LIST_LENGTH = 6 ** 5

_EMBEDDED_LISTS = {
    EmbeddedList.EN: en.WORDS,
    EmbeddedList.FR: fr.WORDS,
}


def get_embedded_list(name: EmbeddedList) -> Tuple[str, ...]:
    """Return an embedded word list, unvalidated"""
    return _EMBEDDED_LISTS[EmbeddedList(name)]


def read_wordlist_file(path: Union[str, Path]) -> Tuple[str, ...]:
    """
    Read a word list file, one word per line, unvalidated.

    Lines are the '\\n'-separated segments of the file, except that the
    empty segment after a final newline is not a line. Blank lines
    elsewhere are lines too and come back as empty strings. Each word is
    its line with surrounding whitespace removed, which also drops the
    '\\r' of CRLF files.

    Raises:
      WordListIOError if the file cannot be opened, read or decoded as UTF-8.
    """
    try:
        # newline="" keeps a lone '\r' from being taken as a line break
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise WordListIOError(path, e) from e

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()

    return tuple(line.strip() for line in lines)


def check_length(words: Sequence[str]) -> None:
    """
    Raise InvalidLengthError unless the list has exactly 7776 words.

    Lines are counted first. A blank line holds no word, so a list with
    the right line count but blank lines reports how many words it
    really has.
    """
    if len(words) != WORD_LIST_LENGTH:
        raise InvalidLengthError(len(words), WORD_LIST_LENGTH)

    filled = sum(1 for word in words if word)
    if filled != WORD_LIST_LENGTH:
        raise InvalidLengthError(filled, WORD_LIST_LENGTH)


def check_duplicates(words: Iterable[str]) -> None:
    """Raise DuplicateWordError for the first word seen twice, in list order"""
    seen = set()
    for word in words:
        if word in seen:
            raise DuplicateWordError(word)
        seen.add(word)


def describe_source(source: WordSource) -> str:
    """Human readable name of a word source"""
    if isinstance(source, FileSource):
        return str(source.path)
    return source.name.value


def load(source: WordSource) -> Tuple[str, ...]:
    """
    Resolve a word source into a validated word list.

    Returns the words in list order once the list is known to hold
    exactly 7776 unique entries.

    Raises:
      WordListIOError for unreadable files,
      InvalidLengthError if the line or word count is not 7776,
      DuplicateWordError naming the first repeated entry.
    """
    label = describe_source(source)

    try:
        if isinstance(source, FileSource):
            words = read_wordlist_file(source.path)
        else:
            words = get_embedded_list(source.name)

        check_length(words)
        check_duplicates(words)
    except DicewareError as e:
        log_list_rejected(label, str(e))
        raise

    log_list_loaded(label, len(words))
    return words
