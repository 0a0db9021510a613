"""List parsing for the minimark parser.

Lists nest by column. Every item remembers the column of its marker; the
item owns each following block that starts to the right of that column,
and ends at the first block starting at or left of it (the dedent).

    - one
      - nested
    - two
    1. three

parses as two lists: an unordered one whose first item holds the
paragraph "one" and a nested list, then an ordered one holding "three".

A list keeps the kind of its first marker. A marker of the other kind at
the same column ends it, and starts a new adjacent list.

"""

from __future__ import annotations

from minimark.nodes import Block, List, ListItem, ListKind


class ListParsingMixin:
    """List and list item parsing.

    Required Host Methods:
        - _eat() -> Token
        - _at_end() -> bool
        - _skip_whitespace() -> None
        - _span(start) -> SourceLocation
        - _nesting(token) -> context manager
        - _parse_block() -> Block
        - _list_marker_kind(token) -> ListKind | None

    """

    def _parse_list(self, kind: ListKind) -> List:
        """List := ListItem+

        Items continue while the lookahead is a marker of the same kind in
        the same column as the first one.
        """
        first = self._current
        column = first.col
        items: list[ListItem] = []
        while (
            not self._at_end()
            and self._current.col == column
            and self._list_marker_kind(self._current) is kind
        ):
            items.append(self._parse_list_item())
        return List(location=self._span(first), kind=kind, items=tuple(items))

    def _parse_list_item(self) -> ListItem:
        """ListItem := Marker Element*

        The first element may share the marker's line. Later elements
        belong to the item while they start right of the marker's column.
        """
        marker = self._eat()
        children: list[Block] = []
        with self._nesting(marker):
            while True:
                self._skip_whitespace()
                if self._at_end() or self._current.col <= marker.col:
                    break
                children.append(self._parse_block())
        return ListItem(location=self._span(marker), children=tuple(children))

