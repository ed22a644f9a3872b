"""Hashing, alignment, bounds and sequence helpers shared across the package."""

from __future__ import annotations

import struct
from collections.abc import MutableSequence
from typing import Union

SIZE_BITS = 64
SIZE_MASK = (1 << SIZE_BITS) - 1

BytesLike = Union[bytes, bytearray, memoryview]


def _sdbm_step(h: int, value: int) -> int:
    return (value + (h << 6) + (h << 16) - h) & SIZE_MASK


def _as_bytes(key: Union[str, BytesLike]) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


def string_hash(key: Union[str, BytesLike], seed: int = 0) -> int:
    """SDBM hash of a NUL-terminated string; bytes count as signed chars.

    Not a cryptographic hash: meant for hash tables only.
    """
    h = seed & SIZE_MASK
    for byte in _as_bytes(key):
        if byte == 0:
            break
        signed = byte - 256 if byte >= 128 else byte
        h = _sdbm_step(h, signed & SIZE_MASK)
    return h


def array_hash(key: Union[str, BytesLike], seed: int = 0) -> int:
    """SDBM hash over every byte of ``key``, treated as unsigned."""
    h = seed & SIZE_MASK
    for byte in _as_bytes(key):
        h = _sdbm_step(h, byte)
    return h


def int_hash(i: int, seed: int = 0) -> int:
    """SDBM hash over the eight little-endian bytes of a 64-bit integer."""
    h = seed & SIZE_MASK
    value = i & SIZE_MASK
    for shift in range(0, SIZE_BITS, 8):
        h = _sdbm_step(h, (value >> shift) & 0xFF)
    return h


def float_hash(value: float, seed: int = 0) -> int:
    """Hash a double by the bit pattern of its IEEE-754 representation."""
    (bits,) = struct.unpack("<Q", struct.pack("<d", value))
    return int_hash(bits, seed)


def align_size(size: int, align: int) -> int:
    """Round ``size`` up to the next multiple of ``align`` (a power of two)."""
    return (size + (align - 1)) & ~(align - 1) & SIZE_MASK


def pad_size(size: int, align: int) -> int:
    """Number of bytes needed to pad ``size`` to a multiple of ``align``."""
    mask = align - 1
    return (align - (size & mask)) & mask


def is_uint_in_bounds(val: int, max_value: int, min_value: int) -> bool:
    """True if ``min_value <= val <= max_value`` using unsigned wrap-around."""
    return ((val - min_value) & SIZE_MASK) <= ((max_value - min_value) & SIZE_MASK)


def cstr_switch(text: str, *args: str) -> int:
    """Index of the first argument equal to ``text``, or -1 if none match."""
    for index, candidate in enumerate(args):
        if candidate == text:
            return index
    return -1


def array_shift_up(seq: MutableSequence, index: int, amount: int = 1) -> None:
    """Remove ``amount`` items starting at ``index``, shifting the rest down.

    An ``amount`` of zero removes one item. If the span runs past the end,
    everything from ``index`` onwards is removed.
    """
    if index < 0 or index >= len(seq):
        raise IndexError(f"index {index} out of range for length {len(seq)}")
    if amount <= 0:
        amount = 1
    del seq[index:index + amount]