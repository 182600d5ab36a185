"""
Secure random source: the only place the generator gets randomness from.
"""

from __future__ import annotations

import os
from typing import Callable, Sequence, TypeVar

from .errors import RandomSourceUnavailable

T = TypeVar("T")

UINT32_RANGE = 1 << 32


class SecureRandom:
    """
    Uniform integers drawn from the operating system CSPRNG.

    The byte source is injectable so tests can bind a seeded double.
    os.urandom is safe to call from several threads, so no lock is held.
    """

    def __init__(self, entropy_source: Callable[[int], bytes] | None = None) -> None:
        self._entropy_source = entropy_source or os.urandom

    def random_bytes(self, n: int) -> bytes:
        try:
            data = self._entropy_source(n)
        except (NotImplementedError, OSError) as exc:
            raise RandomSourceUnavailable(
                "No cryptographically secure random source is available."
            ) from exc

        if len(data) != n:
            raise RandomSourceUnavailable(
                f"Random source returned {len(data)} bytes, expected {n}."
            )
        return data

    def random_uint32(self) -> int:
        return int.from_bytes(self.random_bytes(4), "big")

    def randbelow(self, upper: int) -> int:
        """
        Return a uniform integer in [0, upper).

        Draws that fall in the incomplete last block of 32-bit values are
        rejected, so every result is equally likely.
        """
        if not 1 <= upper <= UINT32_RANGE:
            raise ValueError(f"upper must be in 1..{UINT32_RANGE}, got {upper}")

        limit = UINT32_RANGE - (UINT32_RANGE % upper)
        while True:
            value = self.random_uint32()
            if value < limit:
                return value % upper

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]
