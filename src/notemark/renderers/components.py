#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/renderers/components.py
"""Pluggable component rendering.

Instead of producing markup directly, ``ComponentRenderer`` looks up a
render function for each node's type tag and calls it with the node and
its already-rendered children. Callers replace individual node types by
passing their own functions; everything else uses ``DEFAULT_COMPONENTS``.

The default components return lightweight virtual elements (``Element``
and ``Fragment``) that serialize to HTML with ``to_html()``.

Examples
--------
Override how headings render:

    >>> from notemark import parse
    >>> from notemark.renderers.components import ComponentRenderer, Element
    >>> def heading(node, children):
    ...     return Element("div", {"class": f"title-{node.level}"}, children)
    >>> renderer = ComponentRenderer({"heading": heading})
    >>> renderer.render_to_string(parse("# Hi"))
    '<div class="title-1">Hi</div>'

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence

from notemark.ast import Node
from notemark.constants import (
    DEFAULT_LINK_FALLBACK,
    NODE_BLOCKQUOTE,
    NODE_BOLD,
    NODE_CODE,
    NODE_CODE_BLOCK,
    NODE_EMPTY_LINE,
    NODE_HEADING,
    NODE_IMAGE,
    NODE_ITALIC,
    NODE_LINK,
    NODE_LIST_ITEM,
    NODE_PARAGRAPH,
    NODE_TEXT,
)
from notemark.exceptions import ValidationError
from notemark.options.markdown import MarkdownParserOptions
from notemark.parsers.markdown import MarkdownParser
from notemark.renderers.base import BaseRenderer
from notemark.utils.decorators import debug_timer
from notemark.utils.html_utils import escape_html, sanitize_url

logger = logging.getLogger(__name__)

ComponentFunc = Callable[[Node, Optional[list[Any]]], Any]

VOID_TAGS = frozenset({"br", "img", "hr"})


def to_html(value: Any) -> str:
    """Serialize a rendered component output to HTML.

    ``Element`` and ``Fragment`` serialize themselves, sequences are
    concatenated, ``None`` renders nothing and any other value is
    converted to a string and escaped.

    """
    if value is None:
        return ""
    if isinstance(value, (Element, Fragment)):
        return value.to_html()
    if isinstance(value, (list, tuple)):
        return "".join(to_html(item) for item in value)
    return escape_html(str(value))


@dataclass(frozen=True)
class Element:
    """Virtual element: a tag name, string props and child outputs.

    Parameters
    ----------
    tag : str
        Element name, e.g. ``"p"``
    props : mapping, default = empty
        Attributes; ``None`` values are omitted
    children : sequence, default = empty
        Child outputs (elements, fragments, strings)

    """

    tag: str
    props: Mapping[str, Any] = field(default_factory=dict)
    children: Sequence[Any] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", dict(self.props or {}))
        object.__setattr__(self, "children", tuple(self.children or ()))

    def to_html(self) -> str:
        attrs = "".join(
            f' {escape_html(name)}="{escape_html(str(value))}"'
            for name, value in self.props.items()
            if value is not None
        )
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{attrs} />"
        return f"<{self.tag}{attrs}>{to_html(self.children)}</{self.tag}>"


@dataclass(frozen=True)
class Fragment:
    """Group of outputs without a wrapping element."""

    children: Sequence[Any] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children or ()))

    def to_html(self) -> str:
        return to_html(self.children)


# ============================================================================
# Default components
# ============================================================================


def _heading(node: Node, children: Optional[list[Any]]) -> Element:
    level = node.attributes.get("level", "1")
    return Element(f"h{level}", children=children or ())


def _paragraph(node: Node, children: Optional[list[Any]]) -> Element:
    return Element("p", children=children or ())


def _bold(node: Node, children: Optional[list[Any]]) -> Element:
    return Element("strong", children=children or ())


def _italic(node: Node, children: Optional[list[Any]]) -> Element:
    return Element("em", children=children or ())


def _code(node: Node, children: Optional[list[Any]]) -> Element:
    return Element("code", children=(node.content or "",))


def _code_block(node: Node, children: Optional[list[Any]]) -> Element:
    language = node.attributes.get("language", "")
    code = Element("code", {"class": f"language-{language}"}, (node.content or "",))
    return Element("pre", children=(code,))


def _link(node: Node, children: Optional[list[Any]]) -> Element:
    href = sanitize_url(node.attributes.get("href", ""), fallback=DEFAULT_LINK_FALLBACK) or DEFAULT_LINK_FALLBACK
    return Element("a", {"href": href}, children or ())


def _image(node: Node, children: Optional[list[Any]]) -> Element:
    attributes = node.attributes
    return Element("img", {"src": sanitize_url(attributes.get("src", "")), "alt": attributes.get("alt", "")})


def _list_item(node: Node, children: Optional[list[Any]]) -> Element:
    return Element("li", children=children or ())


def _blockquote(node: Node, children: Optional[list[Any]]) -> Element:
    return Element("blockquote", children=children or ())


def _text(node: Node, children: Optional[list[Any]]) -> Fragment:
    lines = node.content.split("\n") if node.content else []
    parts: list[Any] = []
    for i, line in enumerate(lines):
        if i:
            parts.append(Element("br"))
        parts.append(line)
    return Fragment(parts)


def _empty_line(node: Node, children: Optional[list[Any]]) -> Fragment:
    return Fragment()


DEFAULT_COMPONENTS: Mapping[str, ComponentFunc] = MappingProxyType(
    {
        NODE_HEADING: _heading,
        NODE_PARAGRAPH: _paragraph,
        NODE_BOLD: _bold,
        NODE_ITALIC: _italic,
        NODE_CODE: _code,
        NODE_CODE_BLOCK: _code_block,
        NODE_LINK: _link,
        NODE_IMAGE: _image,
        NODE_LIST_ITEM: _list_item,
        NODE_BLOCKQUOTE: _blockquote,
        NODE_TEXT: _text,
        NODE_EMPTY_LINE: _empty_line,
    }
)


class ComponentRenderer(BaseRenderer):
    """Render nodes through a table of per-type component functions.

    Parameters
    ----------
    components : mapping or None, default = None
        Overrides keyed by node type tag. Each value is called as
        ``func(node, rendered_children)`` where ``rendered_children`` is a
        list for container nodes and ``None`` for leaves.

    Raises
    ------
    ValidationError
        If an override is not callable

    """

    def __init__(self, components: Mapping[str, ComponentFunc] | None = None):
        super().__init__(None)
        overrides = dict(components or {})
        for node_type, func in overrides.items():
            if not callable(func):
                raise ValidationError(
                    f"Component for '{node_type}' must be callable, got {type(func).__name__}",
                    parameter_name="components",
                    parameter_value=func,
                )
        self.components: dict[str, ComponentFunc] = {**DEFAULT_COMPONENTS, **overrides}

    def render_node(self, node: Node) -> Any:
        """Render one node and its subtree.

        Types without a component use the ``text`` component.

        """
        component = self.components.get(node.type) or self.components[NODE_TEXT]
        children = None if node.children is None else [self.render_node(child) for child in node.children]
        return component(node, children)

    def render_nodes(self, nodes: Sequence[Node]) -> list[Any]:
        """Render each top-level node, returning one output per node."""
        with debug_timer(logger, "Rendering (components)"):
            return [self.render_node(node) for node in nodes]

    def render_to_string(self, nodes: Sequence[Node]) -> str:
        """Render nodes and serialize the outputs with ``to_html``."""
        return to_html(self.render_nodes(nodes))


def render_markdown(
    source: Optional[str],
    components: Mapping[str, ComponentFunc] | None = None,
    class_name: Optional[str] = None,
    parser_options: MarkdownParserOptions | None = None,
) -> Element:
    """Parse Markdown and render it with components inside a ``div``.

    Parameters
    ----------
    source : str or None
        Markdown text
    components : mapping or None, default = None
        Component overrides keyed by node type tag
    class_name : str or None, default = None
        Value of the wrapping div's ``class`` attribute
    parser_options : MarkdownParserOptions or None, default = None
        Options for the Markdown parser

    Returns
    -------
    Element
        ``div`` element holding one output per top-level node

    """
    nodes = MarkdownParser(parser_options).parse(source)
    outputs = ComponentRenderer(components).render_nodes(nodes)
    return Element("div", {"class": class_name}, outputs)


__all__ = [
    "ComponentFunc",
    "ComponentRenderer",
    "DEFAULT_COMPONENTS",
    "Element",
    "Fragment",
    "render_markdown",
    "to_html",
]
