"""Mersenne Twister pseudo-random generator over a 64-bit state word."""

from __future__ import annotations

STATE_VECTOR_LENGTH = 624
STATE_VECTOR_M = 397

UPPER_MASK = 0x80000000
LOWER_MASK = 0x7FFFFFFF
TEMPERING_MASK_B = 0x9D2C5680
TEMPERING_MASK_C = 0xEFC60000

_WORD_MASK = (1 << 64) - 1
_MAG = (0x0, 0x9908B0DF)
_DEFAULT_SEED = 4357


class MTRand:
    """Mersenne Twister generator with Knuth's line-25 seeding."""

    def __init__(self, seed: int = _DEFAULT_SEED) -> None:
        self._mt = [0] * STATE_VECTOR_LENGTH
        self._index = STATE_VECTOR_LENGTH
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the state from ``seed``."""
        mt = self._mt
        mt[0] = seed & _WORD_MASK
        for i in range(1, STATE_VECTOR_LENGTH):
            mt[i] = (6069 * mt[i - 1]) & _WORD_MASK
        self._index = STATE_VECTOR_LENGTH

    def _twist(self) -> None:
        mt = self._mt
        n, m = STATE_VECTOR_LENGTH, STATE_VECTOR_M
        for kk in range(n - 1):
            y = (mt[kk] & UPPER_MASK) | (mt[kk + 1] & LOWER_MASK)
            mt[kk] = mt[(kk + m) % n] ^ (y >> 1) ^ _MAG[y & 0x1]
        y = (mt[n - 1] & UPPER_MASK) | (mt[0] & LOWER_MASK)
        mt[n - 1] = mt[m - 1] ^ (y >> 1) ^ _MAG[y & 0x1]
        self._index = 0

    def next_uint(self) -> int:
        """Return the next pseudo-random unsigned word."""
        if self._index >= STATE_VECTOR_LENGTH:
            if self._index >= STATE_VECTOR_LENGTH + 1:
                self.seed(_DEFAULT_SEED)
            self._twist()
        y = self._mt[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & TEMPERING_MASK_B
        y ^= (y << 15) & TEMPERING_MASK_C
        y ^= y >> 18
        return y & _WORD_MASK

    def next_float(self) -> float:
        """Return the next pseudo-random float in the range [0, 1]."""
        return float(self.next_uint()) / float(_WORD_MASK)