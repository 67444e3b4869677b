#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the pluggable component renderer."""

from dataclasses import dataclass
from typing import Any, ClassVar

import pytest

from notemark import parse, render, render_markdown, render_with_components
from notemark.ast import LeafNode, Text
from notemark.exceptions import ValidationError
from notemark.options import HtmlRendererOptions
from notemark.renderers.components import DEFAULT_COMPONENTS, ComponentRenderer, Element, Fragment, to_html


@dataclass(frozen=True)
class Callout(LeafNode):
    """Node type without a default component."""

    type: ClassVar[str] = "callout"

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.generic_visit(self)


@pytest.mark.unit
class TestDefaultComponents:
    """Tests for the default component table."""

    def test_every_node_type_has_a_default(self) -> None:
        """Test that the defaults cover the closed set of node types."""
        assert set(DEFAULT_COMPONENTS) == {
            "heading",
            "paragraph",
            "bold",
            "italic",
            "code",
            "codeBlock",
            "link",
            "image",
            "listItem",
            "blockquote",
            "text",
            "emptyLine",
        }

    def test_heading_element(self) -> None:
        """Test that defaults build virtual elements."""
        outputs = render_with_components(parse("## Hi"))

        assert outputs == [Element("h2", children=[Fragment(["Hi"])])]
        assert outputs[0].to_html() == "<h2>Hi</h2>"

    def test_one_output_per_top_level_node(self, sample_note) -> None:
        """Test the output list length."""
        nodes = parse(sample_note)

        assert len(render_with_components(nodes)) == len(nodes)

    def test_text_splits_lines_with_br(self) -> None:
        """Test that the text default interleaves br elements."""
        output = render_with_components(parse("one\ntwo"))[0]

        assert output.children[0] == Fragment(["one", Element("br"), "two"])
        assert output.to_html() == "<p>one<br />two</p>"

    def test_line_breaks_match_html_renderer(self) -> None:
        """Test that both renderers write the same line break markup."""
        nodes = parse("one\ntwo")

        assert ComponentRenderer().render_to_string(nodes) == render(nodes, HtmlRendererOptions(block_separator=""))

    def test_defaults_are_read_only(self) -> None:
        """Test that the shared default table cannot be modified."""
        with pytest.raises(TypeError):
            DEFAULT_COMPONENTS["text"] = lambda node, children: "x"  # type: ignore[index]

        assert ComponentRenderer().render_to_string(parse("a")) == "<p>a</p>"

    def test_code_block_element(self) -> None:
        """Test code block markup."""
        output = render_with_components(parse("```sql\nselect 1 < 2\n```"))[0]

        assert output.to_html() == '<pre><code class="language-sql">select 1 &lt; 2</code></pre>'

    def test_link_and_image(self) -> None:
        """Test link and image elements."""
        output = render_with_components(parse("[a](b) ![c](d.png)"))[0]

        assert output.to_html() == '<p><a href="b">a</a> <img src="d.png" alt="c" /></p>'

    @pytest.mark.security
    def test_link_default_sanitizes_urls(self) -> None:
        """Test that script URLs are replaced by '#'."""
        output = render_with_components(parse("[x](javascript:alert(1)"))[0]

        assert 'href="#"' in output.to_html()

    @pytest.mark.security
    def test_text_is_escaped(self) -> None:
        """Test that serialized text is escaped."""
        output = render_with_components(parse("<img src=x onerror=alert(1)>"))[0]

        assert output.to_html() == "<p>&lt;img src=x onerror=alert(1)&gt;</p>"


@pytest.mark.unit
class TestOverrides:
    """Tests for caller-supplied components."""

    def test_override_takes_precedence(self) -> None:
        """Test replacing the heading component."""

        def heading(node, children):
            return Element("div", {"class": f"title-{node.level}"}, children)

        outputs = render_with_components(parse("# Hi\ntext"), {"heading": heading})

        assert outputs[0].to_html() == '<div class="title-1">Hi</div>'
        assert outputs[1].to_html() == "<p>text</p>"

    def test_leaf_receives_none_children(self) -> None:
        """Test that leaves get None and containers get a list."""
        calls = []

        def code(node, children):
            calls.append(("code", children))
            return node.content

        def paragraph(node, children):
            calls.append(("paragraph", children))
            return children

        outputs = render_with_components(parse("`x`"), {"code": code, "paragraph": paragraph})

        assert outputs == [["x"]]
        assert calls == [("code", None), ("paragraph", ["x"])]

    def test_unknown_type_uses_text_component(self) -> None:
        """Test the fallback for node types without a component."""
        renderer = ComponentRenderer({"text": lambda node, children: f"[{node.content}]"})

        assert renderer.render_node(Callout(content="note")) == "[note]"
        assert renderer.render_node(Text(content="t")) == "[t]"

    def test_unknown_type_with_default_text(self) -> None:
        """Test that the default text component handles unknown leaves."""
        assert ComponentRenderer().render_node(Callout(content="a\nb")).to_html() == "a<br />b"

    def test_non_callable_override(self) -> None:
        """Test that overrides must be callable."""
        with pytest.raises(ValidationError):
            ComponentRenderer({"heading": "h1"})  # type: ignore[dict-item]

    def test_plain_string_outputs_are_escaped(self) -> None:
        """Test to_html on non-element outputs."""
        renderer = ComponentRenderer({"text": lambda node, children: node.content})

        assert renderer.render_to_string(parse("a <b>")) == "<p>a &lt;b&gt;</p>"


@pytest.mark.unit
class TestElements:
    """Tests for Element and Fragment serialization."""

    def test_props_are_escaped_and_none_skipped(self) -> None:
        """Test attribute serialization."""
        element = Element("span", {"title": 'a"b', "hidden": None}, ["x"])

        assert element.to_html() == '<span title="a&quot;b">x</span>'

    def test_void_elements(self) -> None:
        """Test self-closing tags."""
        assert Element("br").to_html() == "<br />"

    def test_nested_sequences(self) -> None:
        """Test that lists of outputs are flattened."""
        assert to_html([Fragment(["a", ["b", None]]), 1]) == "ab1"


@pytest.mark.unit
class TestRenderMarkdown:
    """Tests for the div-wrapping convenience function."""

    def test_wraps_in_div_with_class(self) -> None:
        """Test the wrapping element and its class."""
        element = render_markdown("# Hi\n- item", class_name="note-body")

        assert element.to_html() == '<div class="note-body"><h1>Hi</h1><li>item</li></div>'

    def test_without_class(self) -> None:
        """Test that no class attribute is written when class_name is None."""
        assert render_markdown("").to_html() == "<div><p></p></div>"

    def test_components_are_applied(self) -> None:
        """Test that overrides reach the nested renderer."""
        element = render_markdown("**x**", components={"bold": lambda node, children: Element("b", children=children)})

        assert element.to_html() == "<div><p><b>x</b></p></div>"
