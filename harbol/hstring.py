"""Mutable string type with in-place editing, searching and formatting."""

from __future__ import annotations

import os
import string
from typing import Union

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_SPACES = frozenset(" \t\n\v\f\r")

StrLike = Union["HarbolString", str]


def _sign(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


class HarbolString:
    """A growable, mutable string.

    An empty string holds no content; several operations that take another
    string do nothing and return ``False`` when that string is empty.
    """

    __hash__ = None  # mutable

    def __init__(self, text: str = "") -> None:
        self._text = ""
        self.copy(text)

    def clear(self) -> None:
        """Drop the contents."""
        self._text = ""

    def add_char(self, c: str) -> None:
        """Append one character."""
        self._text += _single_char(c)

    def add_char_rep(self, c: str, amount: int) -> None:
        """Append ``c`` repeated ``amount`` times."""
        if amount < 0:
            raise ValueError(f"amount must not be negative, got {amount}")
        self._text += _single_char(c) * amount

    def add(self, other: StrLike) -> bool:
        """Append ``other``; returns False and does nothing if it is empty."""
        text = self._coerce(other)
        if not text:
            return False
        self._text += text
        return True

    def copy(self, other: StrLike) -> bool:
        """Replace the contents with ``other``; an empty ``other`` is ignored."""
        if other is self:
            return True
        text = self._coerce(other)
        if not text:
            return False
        self._text = text
        return True

    def format(self, clear: bool, fmt: str, *args: object) -> int:
        """Write printf-style formatted text, appending unless ``clear``.

        Returns the number of characters written.
        """
        piece = fmt % args if args else fmt % ()
        if clear:
            self._text = piece
        else:
            self._text += piece
        return len(piece)

    def compare(self, other: StrLike) -> int:
        """Three-way comparison giving -1, 0 or 1.

        Against another HarbolString the order is ``self`` versus ``other``;
        against a plain str it is ``other`` versus ``self``. Either side
        being empty yields -1.
        """
        if isinstance(other, HarbolString):
            if not self._text or not other._text:
                return -1
            return _sign(self._text, other._text)
        if not isinstance(other, str):
            raise TypeError(f"cannot compare with {type(other).__name__}")
        if not self._text or not other:
            return -1
        return _sign(other, self._text)

    def is_empty(self) -> bool:
        """True if there is no content."""
        return not self._text or self._text[0] == "\0"

    def is_palindrome(self) -> bool:
        """True if the contents read the same backwards; False when empty."""
        if self.is_empty():
            return False
        return self._text == self._text[::-1]

    def read_file(self, path: Union[str, os.PathLike]) -> bool:
        """Replace the contents with those of a text file.

        Returns False and leaves the contents alone if the file is empty.
        Raises OSError if the file cannot be opened.
        """
        with open(path, encoding="utf-8") as handle:
            data = handle.read()
        if not data:
            return False
        self._text = data
        return True

    def replace_char(self, old: str, new: str) -> bool:
        """Replace every ``old`` character with ``new``; True if any changed."""
        old = _single_char(old)
        new = _single_char(new)
        if not self._text or old == "\0" or new == "\0" or old not in self._text:
            return False
        self._text = self._text.replace(old, new)
        return True

    def replace(self, old: str, new: str, amount: int = -1) -> bool:
        """Replace up to ``amount`` occurrences of ``old`` (all if negative).

        Returns False if ``old`` does not occur.
        """
        if not old:
            raise ValueError("substring to replace must not be empty")
        counts = self.count(old)
        if counts == 0:
            return False
        if amount < 0 or amount > counts:
            amount = counts
        self._text = self._text.replace(old, new, amount)
        return True

    def count_char(self, c: str) -> int:
        """Number of times the character ``c`` occurs."""
        return self._text.count(_single_char(c))

    def count(self, sub: str) -> int:
        """Number of non-overlapping occurrences of ``sub``."""
        if not sub:
            raise ValueError("substring must not be empty")
        return self._text.count(sub)

    def offsets(self, sub: str, limit: int) -> list[int]:
        """Offsets of the first ``limit`` occurrences of ``sub``.

        Each search starts one past the previous match, so overlapping
        matches are reported.
        """
        if not sub:
            raise ValueError("substring must not be empty")
        found: list[int] = []
        start = 0
        while len(found) < limit:
            pos = self._text.find(sub, start)
            if pos < 0:
                break
            found.append(pos)
            start = pos + 1
        return found

    def upper(self) -> bool:
        """Upper-case ASCII letters in place; True if any changed."""
        new = self._text.translate(_UPPER)
        changed = new != self._text
        self._text = new
        return changed

    def lower(self) -> bool:
        """Lower-case ASCII letters in place; True if any changed."""
        new = self._text.translate(_LOWER)
        changed = new != self._text
        self._text = new
        return changed

    def reverse(self) -> bool:
        """Reverse in place; True if at least two characters were swapped."""
        self._text = self._text[::-1]
        return len(self._text) >= 2

    def remove_char(self, c: str) -> int:
        """Remove every ``c``; returns how many were removed."""
        c = _single_char(c)
        removed = self._text.count(c)
        self._text = self._text.replace(c, "")
        return removed

    def trim_spaces(self) -> int:
        """Remove all whitespace characters; returns how many were removed."""
        kept = "".join(ch for ch in self._text if ch not in _SPACES)
        removed = len(self._text) - len(kept)
        self._text = kept
        return removed

    def find_char(self, c: str) -> int:
        """Index of the first ``c``, or -1 if absent."""
        return self._text.find(_single_char(c))

    def replace_range(self, lower: int, upper: int, with_text: str) -> None:
        """Replace characters ``lower`` through ``upper`` inclusive.

        An ``upper`` past the end is clamped to the last character.
        """
        length = len(self._text)
        if lower < 0 or lower >= length:
            raise IndexError(f"lower bound {lower} out of range for length {length}")
        if upper >= length:
            upper = length - 1
        if upper < lower:
            raise ValueError(f"upper bound {upper} is below lower bound {lower}")
        self._text = self._text[:lower] + with_text + self._text[upper + 1:]

    @staticmethod
    def _coerce(other: StrLike) -> str:
        if isinstance(other, HarbolString):
            return other._text
        if isinstance(other, str):
            return other
        raise TypeError(f"expected str or HarbolString, got {type(other).__name__}")

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"HarbolString({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HarbolString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented