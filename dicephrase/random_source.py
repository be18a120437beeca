"""
Randomness used for passphrase generation
Production code only ever uses the system CSPRNG; tests may inject
a deterministic source with the same two operations
"""

import secrets
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Uniform sampling capability"""

    def randbelow(self, n: int) -> int:
        """Return a uniform integer in [0, n)"""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence"""
        ...


class SystemRandomSource:
    """RandomSource backed by the operating system CSPRNG"""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)

    def choice(self, seq: Sequence[T]) -> T:
        return secrets.choice(seq)
