"""
Pytest fixtures for dicephrase tests
"""

import logging
import random
from pathlib import Path
from typing import Callable, Iterable, List

import pytest

from dicephrase.config import get_settings
from dicephrase.wordlist import WORD_LIST_LENGTH


class SeededRandom:
    """Deterministic RandomSource for tests"""

    def __init__(self, seed: int = 0):
        self._random = random.Random(seed)
        self.calls = 0

    def randbelow(self, n: int) -> int:
        self.calls += 1
        return self._random.randrange(n)

    def choice(self, seq):
        self.calls += 1
        return self._random.choice(seq)


class ScriptedRandom:
    """RandomSource replaying fixed answers, for exact placement tests"""

    def __init__(self, randbelow_values: Iterable[int] = (), choice_indices: Iterable[int] = ()):
        self._randbelow = list(randbelow_values)
        self._choices = list(choice_indices)

    def randbelow(self, n: int) -> int:
        value = self._randbelow.pop(0)
        assert 0 <= value < n
        return value

    def choice(self, seq):
        return seq[self._choices.pop(0)]


@pytest.fixture
def rng() -> SeededRandom:
    """Seeded random source."""
    return SeededRandom(1234)


@pytest.fixture
def valid_words() -> List[str]:
    """7776 distinct words."""
    return [f"word{i:04d}" for i in range(WORD_LIST_LENGTH)]


@pytest.fixture
def write_wordlist(tmp_path: Path) -> Callable[..., Path]:
    """Write words to a word list file and return its path."""
    def _write(words: Iterable[str], name: str = "words.txt", trailing_newline: bool = True) -> Path:
        content = "\n".join(words)
        if trailing_newline:
            content += "\n"
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from DICEPHRASE_* variables and cached settings."""
    monkeypatch.delenv("DICEPHRASE_DEFAULT_LIST", raising=False)
    monkeypatch.delenv("DICEPHRASE_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging, which may hold captured streams."""
    yield
    logger = logging.getLogger("dicephrase")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
