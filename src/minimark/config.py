"""ContextVar-based parse configuration for minimark.

Configuration lives in a ContextVar (PEP 567) rather than on the Parser, so
it is thread-local and any parser created in a context sees the same
settings without them being threaded through every call.

Usage:
    from minimark.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(max_nesting_depth=16)):
        doc = Parser(source).parse()

    # Or let the public API do it
    doc = minimark.parse(source, config=ParseConfig(max_nesting_depth=16))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

# Keeps the deepest parse inside the default interpreter recursion limit
MAX_NESTING_DEPTH_LIMIT = 128


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is per-call state, not configuration. It stays on
    the Parser instance.

    Attributes:
        max_nesting_depth: Deepest allowed nesting of lists and inline
            constructs, between 1 and MAX_NESTING_DEPTH_LIMIT. Deeper input
            raises NestingDepthError instead of exhausting the interpreter
            stack.
        blank_line_splits_paragraphs: End a paragraph at a blank line.
            When False, only block markers at the start of a line end a
            paragraph.

    """

    max_nesting_depth: int = 64
    blank_line_splits_paragraphs: bool = True

    def __post_init__(self) -> None:
        if not 1 <= self.max_nesting_depth <= MAX_NESTING_DEPTH_LIMIT:
            msg = (
                f"max_nesting_depth must be between 1 and {MAX_NESTING_DEPTH_LIMIT}, "
                f"got {self.max_nesting_depth}"
            )
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> ParseConfig.from_dict({"max_nesting_depth": 8, "theme": "dark"})
            ParseConfig(max_nesting_depth=8, blank_line_splits_paragraphs=True)

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "minimark_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset the current context to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Temporarily use ``config``, restoring the previous one on exit.

    The previous config is restored even if the body raises.
    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "MAX_NESTING_DEPTH_LIMIT",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
