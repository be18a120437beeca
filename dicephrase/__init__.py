"""
Diceware passphrase generator
"""

__version__ = "1.0.1"

from dicephrase.errors import (  # noqa: E402
    DicewareError,
    DuplicateWordError,
    InvalidLengthError,
    NoWordsRequestedError,
    WordListError,
    WordListIOError,
)
from dicephrase.passphrase import SPECIAL_CHARS, assemble, make_passphrase  # noqa: E402
from dicephrase.schemas import (  # noqa: E402
    EmbeddedList,
    EmbeddedSource,
    FileSource,
    GenerationRequest,
)
from dicephrase.wordlist import WORD_LIST_LENGTH, load  # noqa: E402
