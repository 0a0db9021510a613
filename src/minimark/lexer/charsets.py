"""Character classes driving lexer dispatch.

Frozensets give O(1) membership tests in the scanning loops.
"""

from minimark.tokens import TokenType

# Characters that form delimiter runs; the token count is the run length
DELIMITER_RUNS: dict[str, TokenType] = {
    "#": TokenType.HASH,
    "*": TokenType.ASTERISK,
    "`": TokenType.BACKTICKS,
    "-": TokenType.DASH,
    "_": TokenType.UNDERSCORE,
}

# Characters that always form a token on their own
SINGLE_CHARS: dict[str, TokenType] = {
    "(": TokenType.OPENING_PAREN,
    ")": TokenType.CLOSING_PAREN,
    "[": TokenType.OPENING_BRACKET,
    "]": TokenType.CLOSING_BRACKET,
    "!": TokenType.EXCLAMATION_MARK,
}

# Characters that end a text run. Backtick and dash are deliberately absent:
# "a-b" and "x`y" stay single text tokens.
TEXT_STOP: frozenset[str] = frozenset("[]()#*_!")
