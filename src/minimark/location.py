"""Source positions for tokens, AST nodes, and error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A span of source text.

    Line and column are 1-indexed; offsets are 0-indexed character positions
    into the decoded source, end-exclusive.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        offset: Absolute start offset
        end_offset: Absolute end offset (exclusive)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5, source_file="notes.md")
            >>> str(loc)
            'notes.md:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format as ``file:line:col`` or ``line:col``."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a location running from the start of this one to the end of ``end``."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
            source_file=self.source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for synthetic nodes built outside the parser."""
        return cls(lineno=0, col_offset=0)
