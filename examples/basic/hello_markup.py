"""Parse a line of markup and print the resulting tree."""

from minimark import parse

doc = parse("# Hello **World**")
print(doc.children[0])
