"""Run scanners for the minimark lexer.

Each scanner consumes a maximal run of characters of one class and returns
the consumed text. Scanners are only called when the current character
belongs to their class, so every run has at least one character.

"""

from __future__ import annotations

from minimark.cursor import EOF, CharCursor
from minimark.lexer.charsets import TEXT_STOP


class ScannerMixin:
    """Character-class scanners.

    Required Host Attributes:
        - _cursor: CharCursor

    Required Host Methods:
        - _advance() -> str

    """

    __slots__ = ()

    _cursor: CharCursor

    def _advance(self) -> str:
        raise NotImplementedError

    def _scan_run(self, char: str) -> str:
        """Consume ``char`` and every identical character right after it.

        Stops at the first differing character, so mixed runs never occur.
        """
        chars: list[str] = []
        while self._cursor.current() == char:
            chars.append(self._advance())
        return "".join(chars)

    def _scan_whitespace(self) -> str:
        """Consume consecutive whitespace (any mix of spaces, tabs, newlines)."""
        chars: list[str] = []
        char = self._cursor.current()
        while char != EOF and char.isspace():
            chars.append(self._advance())
            char = self._cursor.current()
        return "".join(chars)

    def _scan_text(self) -> str:
        """Consume characters up to whitespace, a text-stop character, or EOF."""
        chars: list[str] = []
        char = self._cursor.current()
        while char != EOF and not char.isspace() and char not in TEXT_STOP:
            chars.append(self._advance())
            char = self._cursor.current()
        return "".join(chars)
