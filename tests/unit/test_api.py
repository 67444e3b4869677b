#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the top-level API functions."""

import json

import pytest

import notemark
from notemark import (
    InputError,
    parse,
    parse_file,
    render,
    render_markdown,
    render_with_components,
    to_html,
    to_json,
    to_markdown,
)
from notemark.ast import Heading, Paragraph, Text
from notemark.options import HtmlRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestParseApi:
    """Tests for parse and parse_file."""

    def test_none_source(self) -> None:
        """Test that None parses like an empty string."""
        assert parse(None) == parse("") == [Paragraph(children=[Text(content="")])]

    def test_parse_with_options(self) -> None:
        """Test that parser options reach the parser."""
        nodes = parse("```\nx\n```", MarkdownParserOptions(default_code_language="plain"))

        assert nodes[0].language == "plain"

    def test_parse_file(self, tmp_path) -> None:
        """Test parsing a file on disk."""
        note = tmp_path / "note.md"
        note.write_text("# Title\r\n\r\nBody", encoding="utf-8")

        assert parse_file(note) == [
            Heading(level=1, children=[Text(content="Title")]),
            Paragraph(children=[Text(content="Body")]),
        ]

    def test_parse_file_missing(self, tmp_path) -> None:
        """Test that a missing file raises InputError."""
        with pytest.raises(InputError):
            parse_file(tmp_path / "absent.md")


@pytest.mark.unit
class TestRenderApi:
    """Tests for the rendering shortcuts."""

    def test_to_html(self) -> None:
        """Test one-call Markdown to HTML."""
        assert to_html("# Tasks\n- write *docs*") == "<h1>Tasks</h1>\n<li>write <em>docs</em></li>\n"

    def test_render_is_deterministic(self, sample_note) -> None:
        """Test that rendering the same nodes twice gives the same string."""
        nodes = parse(sample_note)
        options = HtmlRendererOptions(heading_ids=True)

        assert render(nodes, options) == render(nodes, options)

    def test_render_with_components(self) -> None:
        """Test one output per top-level node."""
        nodes = parse("# A\n\ntext")
        outputs = render_with_components(nodes, {"heading": lambda node, children: ("H", node.level)})

        assert len(outputs) == 2
        assert outputs[0] == ("H", 1)

    def test_render_markdown_wrapper(self) -> None:
        """Test the wrapping div element."""
        element = render_markdown("hi", class_name="note")

        assert element.tag == "div"
        assert element.props == {"class": "note"}
        assert len(element.children) == 1

    def test_to_markdown_and_json(self) -> None:
        """Test the Markdown and JSON shortcuts."""
        nodes = parse("## Done\n\n- **ship** it")

        assert to_markdown(nodes) == "## Done\n\n- **ship** it\n"
        assert json.loads(to_json(nodes))[0] == {
            "type": "heading",
            "children": [{"type": "text", "content": "Done"}],
            "attributes": {"level": "2"},
        }

    def test_version(self) -> None:
        """Test the package exposes a version string."""
        assert isinstance(notemark.__version__, str)
