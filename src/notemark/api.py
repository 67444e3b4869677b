#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/api.py
"""High-level parsing and rendering functions.

These wrap ``MarkdownParser`` and the renderers for the common one-call
cases. Every function builds fresh parser and renderer instances, so calls
never share state.

Examples
--------
    >>> from notemark import parse, render
    >>> nodes = parse("# Tasks\\n- [ ] write *docs*")
    >>> render(nodes)
    '<h1>Tasks</h1>\\n<li>[ ] write <em>docs</em></li>\\n'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Mapping, Optional, Sequence, Union

from notemark.ast import Node
from notemark.options.html import HtmlRendererOptions
from notemark.options.json import JsonRendererOptions
from notemark.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from notemark.parsers.markdown import MarkdownParser
from notemark.renderers.components import ComponentFunc, ComponentRenderer, Element
from notemark.renderers.components import render_markdown as _render_markdown
from notemark.renderers.html import HtmlRenderer
from notemark.renderers.json import JsonRenderer
from notemark.renderers.markdown import MarkdownRenderer
from notemark.utils.io_utils import read_text_source

logger = logging.getLogger(__name__)


def parse(source: Optional[str], options: MarkdownParserOptions | None = None) -> list[Node]:
    """Parse Markdown source into top-level block nodes.

    Never raises for malformed Markdown and never returns an empty list.

    Parameters
    ----------
    source : str or None
        Markdown text; ``None`` is treated as ``""``
    options : MarkdownParserOptions or None, default = None
        Parser options

    Returns
    -------
    list[Node]
        Block nodes in document order

    """
    return MarkdownParser(options).parse(source)


def parse_file(path: Union[str, Path, IO[str], IO[bytes]], options: MarkdownParserOptions | None = None) -> list[Node]:
    """Read a UTF-8 Markdown file (or ``"-"`` for stdin) and parse it.

    Raises
    ------
    InputError
        If the input cannot be read or decoded

    """
    source = read_text_source(path)
    logger.debug("Read %d characters from %s", len(source), path)
    return parse(source, options)


def render(nodes: Sequence[Node], options: HtmlRendererOptions | None = None) -> str:
    """Render nodes to an escaped HTML string.

    Parameters
    ----------
    nodes : sequence of Node
        Nodes returned by ``parse``
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Returns
    -------
    str
        HTML; the same nodes always produce the same string

    """
    return HtmlRenderer(options).render_to_string(nodes)


def render_with_components(
    nodes: Sequence[Node],
    components: Mapping[str, ComponentFunc] | None = None,
) -> list[Any]:
    """Render each top-level node with per-type component functions.

    Parameters
    ----------
    nodes : sequence of Node
        Nodes returned by ``parse``
    components : mapping or None, default = None
        Overrides keyed by node type tag, taking precedence over the
        default components

    Returns
    -------
    list
        One rendered output per top-level node

    """
    return ComponentRenderer(components).render_nodes(nodes)


def to_html(source: Optional[str], options: HtmlRendererOptions | None = None) -> str:
    """Parse Markdown source and render it to HTML in one call."""
    return render(parse(source), options)


def to_markdown(nodes: Sequence[Node], options: MarkdownRendererOptions | None = None) -> str:
    """Render nodes back to Markdown text."""
    return MarkdownRenderer(options).render_to_string(nodes)


def to_json(nodes: Sequence[Node], indent: Optional[int] = None) -> str:
    """Render nodes to a JSON array of node objects."""
    return JsonRenderer(JsonRendererOptions(indent=indent)).render_to_string(nodes)


def render_markdown(
    source: Optional[str],
    components: Mapping[str, ComponentFunc] | None = None,
    class_name: Optional[str] = None,
) -> Element:
    """Parse and component-render Markdown inside a wrapping ``div`` element."""
    return _render_markdown(source, components=components, class_name=class_name)
