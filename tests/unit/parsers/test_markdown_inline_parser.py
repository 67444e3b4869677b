#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the Markdown inline scanner."""

import pytest

from notemark import parse
from notemark.ast import Bold, Code, Image, Italic, Link, Paragraph, Text
from notemark.parsers.markdown import MarkdownParser
from notemark.parsers.rules import BLOCK_RULES, INLINE_RULES, match_block_rule


@pytest.fixture
def parser() -> MarkdownParser:
    return MarkdownParser()


@pytest.mark.unit
class TestInlineScanner:
    """Tests for leftmost-match inline tokenization."""

    def test_empty_input(self, parser) -> None:
        """Test that empty text yields no nodes."""
        assert parser.parse_inline("") == []

    def test_plain_text(self, parser) -> None:
        """Test text without markup."""
        assert parser.parse_inline("just words") == [Text(content="just words")]

    def test_mixed_emphasis(self) -> None:
        """Test the ordering of text, italic and bold runs."""
        nodes = parse("a *b* **c** d")

        assert nodes == [
            Paragraph(
                children=[
                    Text(content="a "),
                    Italic(children=[Text(content="b")]),
                    Text(content=" "),
                    Bold(children=[Text(content="c")]),
                    Text(content=" d"),
                ]
            )
        ]

    def test_whitespace_between_matches_is_kept(self, parser) -> None:
        """Test that whitespace-only text runs are emitted."""
        nodes = parser.parse_inline("**a** *b*")

        assert nodes == [Bold(children=[Text(content="a")]), Text(content=" "), Italic(children=[Text(content="b")])]

    def test_code_span(self, parser) -> None:
        """Test that a code span is a leaf holding the inner text."""
        assert parser.parse_inline("run `make test` now") == [
            Text(content="run "),
            Code(content="make test"),
            Text(content=" now"),
        ]

    def test_code_span_hides_emphasis(self, parser) -> None:
        """Test that the earlier-starting code span consumes its markup."""
        assert parser.parse_inline("`**not bold**`") == [Code(content="**not bold**")]

    def test_emphasis_hides_code(self, parser) -> None:
        """Test that an earlier bold span consumes backticks inside it."""
        assert parser.parse_inline("**a `b` c**") == [Bold(children=[Text(content="a `b` c")])]

    def test_image(self) -> None:
        """Test image syntax."""
        nodes = parse("![alt](x.png)")

        assert nodes == [Paragraph(children=[Image(src="x.png", alt="alt")])]
        assert nodes[0].children[0].attributes == {"src": "x.png", "alt": "alt"}

    def test_image_without_alt(self, parser) -> None:
        """Test that alt text may be empty."""
        assert parser.parse_inline("![](a.gif)") == [Image(src="a.gif", alt="")]

    def test_link(self) -> None:
        """Test link syntax."""
        nodes = parse("[text](url)")

        assert nodes == [Paragraph(children=[Link(href="url", children=[Text(content="text")])])]
        assert nodes[0].children[0].attributes == {"href": "url"}

    def test_image_wins_over_link_at_same_span(self, parser) -> None:
        """Test that the image match starts one character before the link match."""
        nodes = parser.parse_inline("see ![a](b) and [c](d)")

        assert nodes == [
            Text(content="see "),
            Image(src="b", alt="a"),
            Text(content=" and "),
            Link(href="d", children=[Text(content="c")]),
        ]

    def test_link_label_is_not_parsed(self, parser) -> None:
        """Test that link labels hold a single text child."""
        nodes = parser.parse_inline("[**x**](y)")

        assert nodes == [Link(href="y", children=[Text(content="**x**")])]

    def test_triple_star_does_not_nest(self, parser) -> None:
        """Test that the earliest-starting rule consumes its span."""
        nodes = parser.parse_inline("***x***")

        assert nodes == [Text(content="*"), Bold(children=[Text(content="x")]), Text(content="*")]

    @pytest.mark.parametrize(
        "text",
        ["unclosed *star", "lonely ` tick", "[label]()", "[label] (url)", "**", "![]("],
    )
    def test_incomplete_markup_is_text(self, parser, text) -> None:
        """Test that unmatched markup degrades to plain text."""
        assert parser.parse_inline(text) == [Text(content=text)]

    def test_unmatched_markers_stay_in_text(self, parser) -> None:
        """Test that unmatched markers join the surrounding text run."""
        nodes = parser.parse_inline("a ** b `d`")

        assert nodes == [Text(content="a ** b "), Code(content="d")]

    def test_emphasis_across_lines(self, parser) -> None:
        """Test that spans may cover joined paragraph lines."""
        assert parser.parse_inline("*one\ntwo*") == [Italic(children=[Text(content="one\ntwo")])]


@pytest.mark.unit
class TestRuleTables:
    """Tests for the rule tables used by the scanners."""

    def test_inline_rule_order(self) -> None:
        """Test the declaration order used for tie breaking."""
        assert [rule.node_type for rule in INLINE_RULES] == ["code", "bold", "italic", "image", "link"]

    def test_heading_rules_most_specific_first(self) -> None:
        """Test that six-hash headings are tried before one-hash headings."""
        heading_levels = [rule.level for rule in BLOCK_RULES if rule.node_type == "heading"]

        assert heading_levels == [6, 5, 4, 3, 2, 1]

    def test_match_block_rule_returns_none_for_paragraph_text(self) -> None:
        """Test that plain lines match no rule."""
        assert match_block_rule("just text") is None

    def test_match_block_rule_blank_line(self) -> None:
        """Test that blank lines match the empty-line rule."""
        rule, _ = match_block_rule("")

        assert rule.node_type == "emptyLine"
