"""Recursive descent parser producing a typed AST.

Pulls tokens from a Lexer one at a time and builds immutable (frozen)
dataclass nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: One-token lookahead (eat, expect, skip)
- `InlineParsingMixin`: Inline content (text, emphasis, code, links)
- `BlockParsingMixin`: Block-level content (headings, paragraphs, lists)

Grammar:
    Document  := Element* EOF
    Element   := Heading | List | Paragraph
    Heading   := HASH(n) InlineToken*
    List      := ListItem+
    ListItem  := (DASH(n) | ordered marker) Element*
    Paragraph := InlineToken+

Failure:
The first grammar violation raises a ParseError subclass out of parse().
There is no recovery and no partial document.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from minimark.config import ParseConfig, get_parse_config
from minimark.cursor import CharCursor, StringCursor
from minimark.errors import InternalError, NestingDepthError, ParseError
from minimark.lexer import Lexer
from minimark.location import SourceLocation
from minimark.nodes import Block, Document
from minimark.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from minimark.tokens import Token
from minimark.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Recursive descent parser for the minimark dialect.

    Usage:
            >>> parser = Parser("# Hello")
            >>> doc = parser.parse()
            >>> doc.children[0]
            Heading(location=..., level=1, children=(Text(location=..., content=' Hello'),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        document. Configuration is read from ContextVar (thread-local).
        The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_lexer",
        "_source_file",
        # One-token lookahead buffer and the last consumed token
        "_current",
        "_previous",
        # Nesting depth of list items and inline constructs
        "_depth",
        # Inline boundary state
        "_single_line",
        "_block_ended",
    )

    def __init__(
        self,
        source: str | CharCursor,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before parsing
        if you need non-default configuration.

        Args:
            source: Source text, or any CharCursor producing it
            source_file: Optional source file path for error messages

        """
        cursor = StringCursor(source) if isinstance(source, str) else source
        self._lexer = Lexer(cursor, source_file)
        self._source_file = source_file
        self._current: Token | None = None
        self._previous: Token | None = None
        self._depth = 0
        self._single_line = False
        self._block_ended = False

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> Document:
        """Parse the whole input into a Document.

        Returns:
            Document AST root node

        Raises:
            UnexpectedTokenError: a token fits no grammar alternative
            UnterminatedConstructError: a construct is missing its closer
            NestingDepthError: nesting exceeds ParseConfig.max_nesting_depth
            InternalError: the parser was already used
        """
        if self._current is not None:
            msg = "Parser instances are single-use; create a new Parser per document"
            raise InternalError(msg)

        self._current = self._lexer.next_token()

        blocks: list[Block] = []
        try:
            while True:
                self._skip_whitespace()
                if self._at_end():
                    break
                blocks.append(self._parse_block())
        except ParseError as exc:
            logger.debug("Parse failed after %d blocks: %s", len(blocks), exc)
            raise

        logger.debug(
            "Parsed %d characters into %d blocks",
            self._lexer.position,
            len(blocks),
        )
        loc = SourceLocation(
            lineno=1,
            col_offset=1,
            offset=0,
            end_offset=self._lexer.position,
            source_file=self._source_file,
        )
        return Document(location=loc, children=tuple(blocks))

    @contextmanager
    def _nesting(self, token: Token) -> Iterator[None]:
        """Track one level of nesting opened by ``token``.

        Raises:
            NestingDepthError: when the configured limit is exceeded.
        """
        limit = self._config.max_nesting_depth
        if self._depth >= limit:
            raise NestingDepthError(limit, token)
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
