"""Pull-based lexer for the minimark dialect.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (dispatch + position tracking)
├── scanners.py          # Run scanners (delimiters, whitespace, text)
└── charsets.py          # Character classes for dispatch

Usage:
    >>> from minimark.lexer import Lexer
    >>> lexer = Lexer.from_string("# Hi")
    >>> for token in lexer.tokenize():
    ...     print(token)
    Token(HASH, '#', 1:1)
    Token(WHITESPACE, ' ', 1:2)
    Token(TEXT, 'Hi', 1:3)
    Token(EOF, '', 1:5)

"""

from minimark.lexer.core import Lexer

__all__ = ["Lexer"]
