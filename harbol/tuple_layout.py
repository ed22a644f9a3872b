"""Byte layout of a C-style tuple of fields, with padding and alignment."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from harbol.common import align_size

_PTR_SIZE = 8
_FIELD_MAX = 0xFFFF

BytesLike = Union[bytes, bytearray, memoryview]


def _layout(sizes: Sequence[int], packed: bool) -> tuple[list[tuple[int, int]], int]:
    count = len(sizes)
    largest = max(sizes, default=0)
    fields: list[tuple[int, int]] = []
    pos = 0
    prev = 0
    for i, size in enumerate(sizes):
        fields.append((pos, size))
        pos += size
        if packed or count == 1:
            continue
        offalign = sizes[i + 1] if i + 1 < count else prev
        pos = align_size(pos, min(offalign, _PTR_SIZE))
        prev = size
    if packed:
        return fields, pos
    return fields, align_size(pos, min(largest, _PTR_SIZE))


class Tuple:
    """A block of bytes laid out as consecutive fields of given sizes.

    Unless ``packed``, fields are padded the way a C compiler pads a struct
    of the same member sizes.
    """

    __slots__ = ("_fields", "_data", "_packed")

    def __init__(self, sizes: Sequence[int], packed: bool = False) -> None:
        sizes = list(sizes)
        for size in sizes:
            if not 0 < size <= _FIELD_MAX:
                raise ValueError(f"field size must be between 1 and {_FIELD_MAX}, got {size}")
        fields, total = _layout(sizes, packed)
        if total > _FIELD_MAX:
            raise ValueError(f"tuple of {total} bytes exceeds {_FIELD_MAX} bytes")
        self._fields = fields
        self._data = bytearray(total)
        self._packed = bool(packed)

    @property
    def packed(self) -> bool:
        """True if the fields carry no padding."""
        return self._packed

    @property
    def field_count(self) -> int:
        """Number of fields."""
        return len(self._fields)

    def _field(self, index: int) -> tuple[int, int]:
        if not 0 <= index < len(self._fields):
            raise IndexError(f"field index {index} out of range")
        return self._fields[index]

    def field_size(self, index: int) -> int:
        """Size in bytes of field ``index``."""
        return self._field(index)[1]

    def offset(self, index: int) -> int:
        """Byte offset of field ``index``."""
        return self._field(index)[0]

    def get(self, index: int) -> bytes:
        """The bytes currently stored in field ``index``."""
        off, size = self._field(index)
        return bytes(self._data[off:off + size])

    def set(self, index: int, value: BytesLike) -> None:
        """Store ``value``, which must be exactly the field's size."""
        off, size = self._field(index)
        raw = bytes(value)
        if len(raw) != size:
            raise ValueError(f"field {index} takes {size} bytes, got {len(raw)}")
        self._data[off:off + size] = raw

    def to_bytes(self) -> bytes:
        """The whole block, padding included."""
        return bytes(self._data)

    def clear(self) -> None:
        """Drop every field and the data."""
        self._fields = []
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Tuple(fields={self._fields!r}, packed={self._packed})"