"""Character cursor contract consumed by the lexer.

The lexer never touches raw bytes or the source string directly. It pulls
characters through two operations:

- ``current()``: peek at the next character without consuming it
- ``read()``: consume the next character and return it

Both return ``EOF`` (the empty string) once the input is exhausted. Since
every real character is a one-character string, ``EOF`` can never be
confused with input.

Decoding bytes into characters is the caller's job; ``StringCursor`` covers
the common case of an already-decoded ``str``.

"""

from typing import Final, Protocol, runtime_checkable

EOF: Final = ""


@runtime_checkable
class CharCursor(Protocol):
    """Anything the lexer can pull characters from."""

    def current(self) -> str: ...
    def read(self) -> str: ...


class StringCursor:
    """CharCursor over an in-memory string.

    Usage:
            >>> cursor = StringCursor("ab")
            >>> cursor.current(), cursor.read(), cursor.read(), cursor.read()
            ('a', 'a', 'b', '')

    Thread Safety:
        Holds a mutable read position. Use one cursor per document.

    """

    __slots__ = ("_source", "_source_len", "_pos")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    def current(self) -> str:
        if self._pos >= self._source_len:
            return EOF
        return self._source[self._pos]

    def read(self) -> str:
        if self._pos >= self._source_len:
            return EOF
        char = self._source[self._pos]
        self._pos += 1
        return char

    @property
    def position(self) -> int:
        """Number of characters consumed so far."""
        return self._pos

    def __repr__(self) -> str:
        return f"StringCursor(pos={self._pos}, len={self._source_len})"
