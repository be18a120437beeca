"""
Passphrase assembly
Samples words uniformly with replacement and optionally inserts one
special character into one of them at a grapheme boundary
"""

from typing import List, Optional, Sequence

import regex

from dicephrase.errors import NoWordsRequestedError
from dicephrase.logging_config import log_passphrase_generated
from dicephrase.random_source import RandomSource, SystemRandomSource
from dicephrase.schemas import GenerationRequest
from dicephrase.wordlist import load

# Printable ASCII punctuation and digits, no letters, no whitespace
SPECIAL_CHARS = "~!#$%^&*()-=+[]\\{}:;\"'<>?/0123456789"

# One match per extended grapheme cluster (user-perceived character)
_GRAPHEME = regex.compile(r"\X")


def grapheme_boundaries(word: str) -> List[int]:
    """
    Return every offset of word where a character may be inserted
    without splitting a grapheme cluster.

    This is the start of each cluster plus the end of the word, so an
    empty word has the single boundary 0.
    """
    boundaries = [match.start() for match in _GRAPHEME.finditer(word)]
    boundaries.append(len(word))
    return boundaries


def insert_special_char(word: str, char: str, rng: RandomSource) -> str:
    """Insert char into word at a uniformly chosen grapheme boundary"""
    position = rng.choice(grapheme_boundaries(word))
    return word[:position] + char + word[position:]


def assemble(
    words: Sequence[str],
    word_count: int,
    inject_special_char: bool = False,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Build a passphrase from a validated word list.

    Draws word_count words independently and uniformly, with replacement.
    With inject_special_char, one special character goes into one of the
    drawn words. Words are joined with single spaces.

    Raises:
      NoWordsRequestedError if word_count is zero, before any random draw.
    """
    if word_count < 1:
        raise NoWordsRequestedError()

    if rng is None:
        rng = SystemRandomSource()

    picked = [words[rng.randbelow(len(words))] for _ in range(word_count)]

    if inject_special_char:
        char = rng.choice(SPECIAL_CHARS)
        target = rng.randbelow(len(picked))
        picked[target] = insert_special_char(picked[target], char, rng)

    return " ".join(picked)


def make_passphrase(
    request: GenerationRequest,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Load the requested word list and assemble a passphrase from it.

    The word count is checked first, so a request for zero words fails
    without touching the word list or the random source.
    """
    if request.word_count < 1:
        raise NoWordsRequestedError()

    words = load(request.source)
    passphrase = assemble(
        words,
        request.word_count,
        request.inject_special_char,
        rng,
    )

    log_passphrase_generated(request.word_count, request.inject_special_char)
    return passphrase
