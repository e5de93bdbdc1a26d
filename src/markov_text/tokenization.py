from __future__ import annotations

import re
from typing import Iterator

from .config import DEFAULT_BOUNDARY


BOUNDARY = DEFAULT_BOUNDARY

_SPACES_RE = re.compile(r" +")


def _decode(text: str | bytes) -> str:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")
    return text


class Tokenizer:
    """Streaming tokenizer over an in-memory buffer.

    Words are separated by spaces. The boundary character (a line break by
    default) is never part of a word: a contiguous run of it comes back as one
    boundary token, which is the boundary character itself. Tabs and other
    whitespace are ordinary word characters.
    """

    def __init__(self, text: str | bytes, boundary_char: str = BOUNDARY):
        self.text = _decode(text)
        self.boundary = boundary_char
        self.pos = 0

        b = re.escape(boundary_char)
        self._boundary_re = re.compile(f"{b}+")
        self._word_re = re.compile(f"[^ {b}]+")

    def _skip_spaces(self) -> None:
        m = _SPACES_RE.match(self.text, self.pos)
        if m:
            self.pos = m.end()

    def done(self) -> bool:
        """True once nothing but spaces is left to read."""
        self._skip_spaces()
        return self.pos >= len(self.text)

    def next(self) -> str:
        if self.done():
            raise StopIteration

        m = self._boundary_re.match(self.text, self.pos)
        if m:
            self.pos = m.end()
            return self.boundary

        m = self._word_re.match(self.text, self.pos)
        self.pos = m.end()
        return m.group()

    __next__ = next

    def __iter__(self) -> Iterator[str]:
        return self


def tokenize(text: str | bytes, boundary_char: str = BOUNDARY) -> list[str]:
    """Split a whole buffer into word and boundary tokens."""

    return list(Tokenizer(text, boundary_char))
