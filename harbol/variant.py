"""Tagged blob of bytes: a value together with an integer type tag."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class Variant:
    """A copy of some bytes paired with a caller-defined ``tag``."""

    __slots__ = ("_data", "tag")

    def __init__(self, data: BytesLike, tag: int = 0) -> None:
        self._data = bytes(data)
        self.tag = tag

    @property
    def data(self) -> bytes:
        """The stored bytes."""
        return self._data

    @property
    def size(self) -> int:
        """Number of stored bytes."""
        return len(self._data)

    def set(self, data: BytesLike) -> None:
        """Replace the stored bytes; the tag is left unchanged."""
        self._data = bytes(data)

    def clear(self) -> None:
        """Drop the data and reset the tag to zero."""
        self._data = b""
        self.tag = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variant):
            return NotImplemented
        return self._data == other._data and self.tag == other.tag

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Variant({self._data!r}, tag={self.tag})"