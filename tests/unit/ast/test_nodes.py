#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for AST node classes."""

import dataclasses

import pytest

from notemark.ast import (
    NODE_CLASSES,
    BlockQuote,
    Bold,
    Code,
    CodeBlock,
    EmptyLine,
    Heading,
    Image,
    Italic,
    Link,
    ListItem,
    NodeVisitor,
    Paragraph,
    Text,
)
from notemark.constants import BLOCK_NODE_TYPES, INLINE_NODE_TYPES


class RecordingVisitor(NodeVisitor):
    """Visitor that records the order of visited node types."""

    def __init__(self):
        self.visited = []

    def _record(self, node):
        self.visited.append(node.type)
        self.generic_visit(node)

    visit_heading = _record
    visit_paragraph = _record
    visit_code_block = _record
    visit_list_item = _record
    visit_block_quote = _record
    visit_empty_line = _record
    visit_text = _record
    visit_bold = _record
    visit_italic = _record
    visit_code = _record
    visit_link = _record
    visit_image = _record


@pytest.mark.unit
class TestNodeShape:
    """Tests for the uniform content/children/attributes view."""

    @pytest.mark.parametrize(
        "node, content",
        [
            (Text(content="t"), "t"),
            (Code(content="c"), "c"),
            (CodeBlock(content="x = 1"), "x = 1"),
        ],
    )
    def test_leaves_have_content_and_no_children(self, node, content) -> None:
        """Test leaf nodes."""
        assert node.content == content
        assert node.children is None
        assert node.is_leaf

    @pytest.mark.parametrize("cls", [Paragraph, Bold, Italic, ListItem, BlockQuote])
    def test_containers_have_children_and_no_content(self, cls) -> None:
        """Test container nodes."""
        node = cls(children=[Text(content="x")])

        assert node.content is None
        assert node.children == (Text(content="x"),)
        assert not node.is_leaf

    @pytest.mark.parametrize("node", [Image(src="a.png"), EmptyLine()])
    def test_nodes_without_content_or_children(self, node) -> None:
        """Test images and empty lines."""
        assert node.content is None
        assert node.children is None

    def test_type_tags(self) -> None:
        """Test that every class is registered under its tag."""
        assert NODE_CLASSES["codeBlock"] is CodeBlock
        assert NODE_CLASSES["blockquote"] is BlockQuote
        assert NODE_CLASSES["listItem"] is ListItem
        assert NODE_CLASSES["emptyLine"] is EmptyLine
        assert len(NODE_CLASSES) == 12

    def test_block_and_inline_type_sets(self) -> None:
        """Test that the block and inline tag sets partition the node classes."""
        inline_types = {Text.type, Bold.type, Italic.type, Code.type, Link.type, Image.type}

        assert INLINE_NODE_TYPES == inline_types
        assert BLOCK_NODE_TYPES | INLINE_NODE_TYPES == set(NODE_CLASSES)
        assert not BLOCK_NODE_TYPES & INLINE_NODE_TYPES

    def test_attributes(self) -> None:
        """Test attribute maps as strings."""
        assert Heading(level=4).attributes == {"level": "4"}
        assert CodeBlock(content="").attributes == {"language": "text"}
        assert Link(href="u").attributes == {"href": "u"}
        assert Image(src="s", alt="a").attributes == {"src": "s", "alt": "a"}
        assert ListItem(ordered=True).attributes == {"ordered": "true"}
        assert ListItem().attributes == {}
        assert Paragraph().attributes == {}


@pytest.mark.unit
class TestNodeInvariants:
    """Tests for construction-time invariants."""

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_heading_level_out_of_range(self, level) -> None:
        """Test that heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError, match="Heading level"):
            Heading(level=level)

    def test_nodes_are_frozen(self) -> None:
        """Test immutability."""
        node = Text(content="a")

        with pytest.raises(dataclasses.FrozenInstanceError):
            node.content = "b"  # type: ignore[misc]

    def test_children_lists_become_tuples(self) -> None:
        """Test that child lists are copied into tuples."""
        children = [Text(content="a")]
        node = Paragraph(children=children)
        children.append(Text(content="b"))

        assert node.children == (Text(content="a"),)

    def test_none_content_degrades_to_empty_string(self) -> None:
        """Test None content on leaves."""
        assert Text(content=None).content == ""  # type: ignore[arg-type]
        assert CodeBlock(content=None, language="").language == "text"  # type: ignore[arg-type]

    def test_equal_trees_compare_equal(self) -> None:
        """Test structural equality."""
        assert Bold(children=[Text(content="x")]) == Bold(children=(Text(content="x"),))
        assert Bold(children=[Text(content="x")]) != Italic(children=[Text(content="x")])


@pytest.mark.unit
class TestVisitor:
    """Tests for visitor dispatch."""

    def test_dispatch_order(self) -> None:
        """Test that accept dispatches to the matching visit method."""
        visitor = RecordingVisitor()
        nodes = [
            Heading(level=1, children=[Text(content="a")]),
            Paragraph(children=[Link(href="#", children=[Text(content="b")]), Image(src="c")]),
            CodeBlock(content="d"),
            EmptyLine(),
        ]
        for node in nodes:
            node.accept(visitor)

        assert visitor.visited == ["heading", "text", "paragraph", "link", "text", "image", "codeBlock", "emptyLine"]
