"""Integer logarithms, digit counts and power-of-two helpers on 64-bit words."""

from __future__ import annotations

import math

from harbol.common import SIZE_BITS, SIZE_MASK

MAX_LOG_TABLE_SIZE = SIZE_BITS + 1


def bitwise_ceil(x: int) -> int:
    """Set every bit below the highest set bit of ``x``."""
    x &= SIZE_MASK
    shift = 1
    while shift < SIZE_BITS:
        x |= x >> shift
        shift <<= 1
    return x


def next_pow_of_2(x: int) -> int:
    """One past :func:`bitwise_ceil`, wrapping at the word size."""
    return (bitwise_ceil(x) + 1) & SIZE_MASK


def int_log2(x: int) -> int:
    """Floor of the base-2 logarithm of ``x``; zero for zero."""
    x &= SIZE_MASK
    return x.bit_length() - 1 if x else 0


def int_log10(x: int) -> int:
    """Floor of the base-10 logarithm of ``x``; zero for zero."""
    x &= SIZE_MASK
    return len(str(x)) - 1 if x else 0


def base_2_digits(x: int) -> int:
    """Number of binary digits in ``x``; zero for zero."""
    return (x & SIZE_MASK).bit_length()


def base_10_digits(x: int) -> int:
    """Number of decimal digits in ``x``."""
    return int_log10(x) + 1


def make_int_log_tables(base: int) -> tuple[list[int], list[int]]:
    """Build the lookup tables used by :func:`int_log` for ``base``.

    Returns ``(log_table, powers)``: ``log_table[i]`` is the floor of the
    base-``base`` logarithm of ``2**i`` and ``powers`` holds every power of
    ``base`` that fits in a word, starting with 1.
    """
    if base < 3:
        raise ValueError(f"base must be at least 3, got {base}")
    num_exp = int(math.log(SIZE_MASK) / math.log(base)) + 1
    powers = [1]
    for _ in range(1, num_exp):
        powers.append((powers[-1] * base) & SIZE_MASK)
    log_table = [
        math.floor(math.log(1 << i) / math.log(base))
        for i in range(MAX_LOG_TABLE_SIZE)
    ]
    return log_table, powers


def int_log(x: int, log_table: list[int], powers: list[int]) -> int:
    """Floor of the logarithm of ``x`` in the base the tables were built for."""
    x &= SIZE_MASK
    power_idx = log_table[int_log2(x)]
    next_idx = power_idx + 1
    next_pow = powers[next_idx] if next_idx < len(powers) else 0
    return power_idx + (1 if 0 < next_pow <= x else 0)