"""
Error taxonomy for passphrase generation
Every failure reaching the caller is one of these, carrying its context
"""

from pathlib import Path
from typing import Union


class DicewareError(Exception):
    """Base class for all passphrase generation errors"""


class WordListIOError(DicewareError):
    """The word list file could not be opened, read or decoded"""

    def __init__(self, path: Union[str, Path], cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"{self.path}: {self._describe(cause)}")

    @staticmethod
    def _describe(cause: Exception) -> str:
        # OSError.__str__ repeats the filename; keep only the reason
        if isinstance(cause, OSError) and cause.strerror:
            return cause.strerror
        return str(cause)


class WordListError(DicewareError):
    """The word list content is invalid"""


class InvalidLengthError(WordListError):
    """The word list does not hold exactly 7776 words"""

    def __init__(self, length: int, expected: int = 7776):
        self.length = length
        self.expected = expected
        super().__init__(
            f"Word list: invalid length ({length}, expected {expected})"
        )


class DuplicateWordError(WordListError):
    """The word list contains the same word twice"""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Word list: {word}: duplicate word")


class NoWordsRequestedError(DicewareError):
    """Zero words were requested"""

    def __init__(self):
        super().__init__("No words to generate")
