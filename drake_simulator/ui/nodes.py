"""Text node tree for the simulator display.

A Node is a column container; a TextNode is one rendered line made of its own
text followed by any TextSpan children. Spans carry tags so the refresh step
can find the ones it is allowed to overwrite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from ..constants import (
    LABEL_FONT_FILE,
    LABEL_FONT_SIZE,
    RESULT_FONT_SIZE,
    RESULT_PLACEHOLDER,
    RESULT_PREFIX,
    RESULT_TAG,
    ROW_MARGIN,
    TITLE,
    TITLE_FONT_FILE,
    TITLE_FONT_SIZE,
    WHITE,
    YELLOW,
)
from ..models.drake import ParameterDescriptor


@dataclass
class TextStyle:
    font_size: int
    color: tuple[int, int, int]
    font_file: str | None = None


@dataclass
class TextSpan:
    text: str
    style: TextStyle
    tags: set[str] = field(default_factory=set)


@dataclass
class TextNode:
    text: str
    style: TextStyle
    spans: list[TextSpan] = field(default_factory=list)

    @property
    def full_text(self) -> str:
        return self.text + "".join(span.text for span in self.spans)


@dataclass
class Node:
    """Container laid out as a centred column."""

    children: list[Node | TextNode] = field(default_factory=list)
    margin: int = 0
    parameter: ParameterDescriptor | None = None

    def add(self, child: Node | TextNode) -> Node | TextNode:
        self.children.append(child)
        return child

    def walk(self) -> Iterator[Node | TextNode]:
        for child in self.children:
            yield child
            if isinstance(child, Node):
                yield from child.walk()

    def text_nodes(self) -> list[TextNode]:
        return [n for n in self.walk() if isinstance(n, TextNode)]

    def tagged_spans(self, tag: str) -> list[TextSpan]:
        return [span for node in self.text_nodes() for span in node.spans if tag in span.tags]


def build_display_tree(descriptors: list[ParameterDescriptor]) -> tuple[Node, TextSpan]:
    """Build title, one row per parameter and the result line.

    Returns the root node and the result span, the only node the refresh
    step writes to.
    """
    title_style = TextStyle(TITLE_FONT_SIZE, WHITE, TITLE_FONT_FILE)
    label_style = TextStyle(LABEL_FONT_SIZE, WHITE, LABEL_FONT_FILE)
    result_style = TextStyle(RESULT_FONT_SIZE, YELLOW, LABEL_FONT_FILE)

    root = Node()
    root.add(TextNode(TITLE, title_style))

    for desc in descriptors:
        # Row container kept separate from its label for future controls
        row = Node(margin=ROW_MARGIN, parameter=desc)
        row.add(TextNode(desc.label, label_style))
        root.add(row)

    result_span = TextSpan(RESULT_PLACEHOLDER, result_style, tags={RESULT_TAG})
    root.add(TextNode(RESULT_PREFIX, result_style, spans=[result_span]))
    return root, result_span
