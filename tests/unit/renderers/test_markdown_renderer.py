#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for MarkdownRenderer."""

import pytest

from notemark import parse, to_markdown
from notemark.ast import BlockQuote, CodeBlock, EmptyLine, Heading, ListItem, Paragraph, Text
from notemark.options import MarkdownRendererOptions
from notemark.renderers.markdown import MarkdownRenderer


@pytest.mark.unit
class TestMarkdownRenderer:
    """Tests for writing nodes back to Markdown."""

    def test_blocks_separated_by_blank_line(self) -> None:
        """Test the separator between unrelated blocks."""
        nodes = [Heading(level=2, children=[Text(content="Title")]), Paragraph(children=[Text(content="Body")])]

        assert to_markdown(nodes) == "## Title\n\nBody\n"

    def test_list_runs_use_single_newline(self) -> None:
        """Test that consecutive items are kept together and numbered from 1."""
        markdown = to_markdown(parse("- a\n* b\n7. c\n3. d\n\ntext\n\n5. e"))

        assert markdown == "- a\n- b\n1. c\n2. d\n\ntext\n\n1. e\n"

    def test_quotes_use_single_newline(self) -> None:
        """Test consecutive block quotes."""
        nodes = [BlockQuote(children=[Text(content="a")]), BlockQuote(children=[Text(content="b")])]

        assert to_markdown(nodes) == "> a\n> b\n"

    def test_inline_markup(self) -> None:
        """Test all inline constructs."""
        source = "a **b** *c* `d` [e](f) ![g](h)"

        assert to_markdown(parse(source)) == source + "\n"

    def test_code_block_default_language_omitted(self) -> None:
        """Test that the default language is not written."""
        assert to_markdown([CodeBlock(content="x")]) == "```\nx\n```\n"
        assert to_markdown([CodeBlock(content="x", language="go")]) == "```go\nx\n```\n"

    def test_custom_bullet(self) -> None:
        """Test the bullet option."""
        renderer = MarkdownRenderer(MarkdownRendererOptions(bullet="*"))

        assert renderer.render_to_string([ListItem(children=[Text(content="a")])]) == "* a\n"

    def test_invalid_bullet(self) -> None:
        """Test bullet validation."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions(bullet="+")

    def test_empty_lines_and_empty_input(self) -> None:
        """Test that emptyLine nodes are skipped."""
        assert to_markdown([]) == ""
        assert to_markdown([EmptyLine()]) == ""

    def test_round_trip(self, sample_note) -> None:
        """Test that rendered Markdown parses back to the same nodes."""
        nodes = parse(sample_note)

        assert parse(to_markdown(nodes)) == nodes
