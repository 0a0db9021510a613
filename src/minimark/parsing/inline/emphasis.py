"""Emphasis and code span parsing for the minimark parser.

Delimiters are matched by run length straight from the token stream:
a run of one ``*`` or ``_`` opens italic, a run of two ``*`` opens bold,
a run of one backtick opens code. Other run lengths open nothing.

"""

from __future__ import annotations

from minimark.nodes import Bold, Code, Italic
from minimark.tokens import TokenType


class EmphasisMixin:
    """Italic, bold, and code parsing.

    Required Host Methods:
        - _eat() -> Token
        - _expect(token_type, construct, opener, count) -> Token
        - _nesting(token) -> context manager
        - _parse_inlines(stop) -> tuple[Inline, ...]
        - _parse_required_text(construct, opener) -> str
        - _span(start) -> SourceLocation

    """

    def _parse_italic(self) -> Italic:
        """Italic := (* | _) InlineToken* (same delimiter).

        ``*a*`` and ``_a_`` are italic; ``*a_`` is not closed.
        """
        opener = self._eat()
        with self._nesting(opener):
            children = self._parse_inlines(stop=(opener.type, 1))
        self._expect(opener.type, "italic", opener, count=1)
        return Italic(location=self._span(opener), children=children)

    def _parse_bold(self) -> Bold:
        """Bold := ** InlineToken* **"""
        opener = self._eat()
        with self._nesting(opener):
            children = self._parse_inlines(stop=(TokenType.ASTERISK, 2))
        self._expect(TokenType.ASTERISK, "bold", opener, count=2)
        return Bold(location=self._span(opener), children=children)

    def _parse_code(self) -> Code:
        """Code := ` Text `

        The body is merged text and whitespace. A text run does not stop at
        a backtick, so a closing backtick glued to the end of a word becomes
        part of that word. The span only closes when the closing backtick
        starts a new token, i.e. after whitespace or punctuation.
        """
        opener = self._eat()
        code = self._parse_required_text("code", opener)
        self._expect(TokenType.BACKTICKS, "code", opener, count=1)
        return Code(location=self._span(opener), code=code)

