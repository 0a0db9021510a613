"""Typed AST: collect headings for a table of contents."""

from minimark import parse, plain_text
from minimark.nodes import Heading
from minimark.visitor import BaseVisitor


class TocCollector(BaseVisitor[None]):
    """Collect headings for a table of contents."""

    def __init__(self) -> None:
        self.headings: list[tuple[int, str]] = []

    def visit_heading(self, node: Heading) -> None:
        self.headings.append((node.level, plain_text(node.children).strip()))


source = """# Introduction

Welcome to the guide.

## Getting Started

- read *this*
- then **that**

### Installation

See [the docs](https://example.com/install).
"""

collector = TocCollector()
collector.visit(parse(source))

for level, text in collector.headings:
    print("  " * (level - 1) + f"- {text}")
