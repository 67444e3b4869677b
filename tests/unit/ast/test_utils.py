#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for AST utility functions."""

import pytest

from notemark import parse
from notemark.ast import CodeBlock, Heading, Image, Italic, Paragraph, Text, extract_text, walk


@pytest.mark.unit
class TestExtractText:
    """Tests for extract_text."""

    def test_nested_inline(self) -> None:
        """Test that text is concatenated through inline containers."""
        heading = Heading(level=1, children=[Text(content="Hello "), Italic(children=[Text(content="world")])])

        assert extract_text(heading) == "Hello world"

    def test_images_and_code_blocks(self) -> None:
        """Test that images give alt text and code blocks their body."""
        nodes = [Paragraph(children=[Image(src="x", alt="chart")]), CodeBlock(content="x = 1")]

        assert extract_text(nodes, joiner="\n") == "chart\nx = 1"

    def test_parsed_note(self) -> None:
        """Test extraction from parser output."""
        assert extract_text(parse("a **b** [c](d)")) == "a b c"


@pytest.mark.unit
class TestWalk:
    """Tests for walk."""

    def test_pre_order(self) -> None:
        """Test that parents come before children in document order."""
        nodes = parse("# a *b*\nc")

        assert [node.type for node in walk(nodes)] == ["heading", "text", "italic", "text", "paragraph", "text"]

    def test_single_node(self) -> None:
        """Test walking from one root."""
        assert list(walk(Text(content="x"))) == [Text(content="x")]
