"""minimark: a small markup dialect parsed into a typed AST.

The dialect covers headings, paragraphs, ordered and unordered lists, and
inline bold, italic, code, links, and images. Parsing is a two-stage front
end: a pull-based lexer feeding a recursive-descent parser with one token
of lookahead. Errors are strict: the first syntax error aborts the parse.

Quick Start:
    >>> from minimark import parse
    >>> doc = parse("# Hello **World**")
    >>> doc.children[0].level
    1

    >>> from minimark import tokenize
    >>> [t.type.name for t in tokenize("**hi**")]
    ['ASTERISK', 'TEXT', 'ASTERISK', 'EOF']

Configuration:
    >>> from minimark import ParseConfig
    >>> doc = parse("- a\\n  - b", config=ParseConfig(max_nesting_depth=8))

"""

from minimark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from minimark.cursor import EOF, CharCursor, StringCursor
from minimark.errors import (
    InternalError,
    MinimarkError,
    NestingDepthError,
    ParseError,
    UnexpectedTokenError,
    UnterminatedConstructError,
)
from minimark.lexer import Lexer
from minimark.location import SourceLocation
from minimark.nodes import (
    Block,
    Bold,
    Code,
    Document,
    Heading,
    Image,
    Inline,
    Italic,
    Link,
    List,
    ListItem,
    ListKind,
    Node,
    Paragraph,
    Text,
    plain_text,
)
from minimark.parser import Parser
from minimark.tokens import Token, TokenType
from minimark.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(
    source: str | CharCursor,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse source text into a typed AST.

    Args:
        source: Source text, or any CharCursor producing it
        source_file: Optional source file path for error messages
        config: Parse configuration for this call. When omitted, the
            configuration active in the current context is used.

    Returns:
        Document AST root node

    Raises:
        ParseError: on the first syntax error (see minimark.errors)

    Example:
        >>> doc = parse("[docs](https://example.com)")
        >>> doc.children[0].children[0].href
        'https://example.com'
    """
    if config is None:
        return Parser(source, source_file=source_file).parse()

    with parse_config_context(config):
        return Parser(source, source_file=source_file).parse()


def tokenize(source: str | CharCursor, *, source_file: str | None = None) -> list[Token]:
    """Lex source into a list of tokens ending with EOF.

    Example:
        >>> "".join(t.value for t in tokenize("# a *b*"))
        '# a *b*'
    """
    cursor = StringCursor(source) if isinstance(source, str) else source
    return list(Lexer(cursor, source_file).tokenize())


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse",
    "tokenize",
    # Block nodes
    "Block",
    "Document",
    "Heading",
    "List",
    "ListItem",
    "ListKind",
    "Node",
    "Paragraph",
    # Inline nodes
    "Inline",
    "Bold",
    "Code",
    "Image",
    "Italic",
    "Link",
    "Text",
    "plain_text",
    # Parser components
    "CharCursor",
    "EOF",
    "Lexer",
    "Parser",
    "StringCursor",
    "Token",
    "TokenType",
    # Errors
    "InternalError",
    "MinimarkError",
    "NestingDepthError",
    "ParseError",
    "UnexpectedTokenError",
    "UnterminatedConstructError",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Location
    "SourceLocation",
]
