#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/options/html.py
"""Configuration options for HTML rendering.

This module defines options for rendering note trees to HTML fragments or
standalone HTML documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from notemark.constants import (
    ALL_NODE_TYPES,
    DEFAULT_BLOCK_SEPARATOR,
    DEFAULT_DOCUMENT_TITLE,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_LINE_BREAK,
)
from notemark.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    r"""Configuration options for AST-to-HTML rendering.

    Escaping of text, code, URLs and alt text is always applied and cannot be
    turned off.

    Parameters
    ----------
    block_separator : str, default "\n"
        String appended after every block-level element.
    line_break : str, default "<br />"
        Markup substituted for newlines inside text runs.
    sanitize_urls : bool, default True
        Replace link/image URLs using dangerous schemes (``javascript:`` etc.).
    heading_ids : bool, default False
        Add slug ``id`` attributes to headings, unique within one render.
    wrap_list_items : bool, default False
        Group consecutive list items into ``<ul>``/``<ol>`` elements.
    css_class_map : dict or None, default None
        Map of node type tag (e.g. ``"heading"``) to CSS class name(s).
    standalone : bool, default False
        Wrap the fragment in a complete HTML document.
    title : str, default "Document"
        Document title for standalone output.
    language : str, default "en"
        ``lang`` attribute for standalone output.
    template_file : str or None, default None
        Jinja2 template used for standalone output instead of the built-in
        document shell. Requires ``jinja2``.

    """

    block_separator: str = field(
        default=DEFAULT_BLOCK_SEPARATOR,
        metadata={"help": "String appended after each block element"},
    )
    line_break: str = field(
        default=DEFAULT_LINE_BREAK,
        metadata={"help": "Markup used for newlines inside text"},
    )
    sanitize_urls: bool = field(
        default=True,
        metadata={"help": "Drop link and image URLs with dangerous schemes"},
    )
    heading_ids: bool = field(
        default=False,
        metadata={"help": "Add slug id attributes to headings"},
    )
    wrap_list_items: bool = field(
        default=False,
        metadata={"help": "Group consecutive list items into <ul>/<ol> elements"},
    )
    css_class_map: Optional[dict[str, Union[str, list[str]]]] = field(
        default=None,
        metadata={"help": "Map of node type to CSS class name(s)"},
    )
    standalone: bool = field(
        default=False,
        metadata={"help": "Wrap output in a complete HTML document"},
    )
    title: str = field(
        default=DEFAULT_DOCUMENT_TITLE,
        metadata={"help": "Document title for standalone output"},
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language for standalone output"},
    )
    template_file: Optional[str] = field(
        default=None,
        metadata={"help": "Jinja2 template file for standalone output"},
    )

    def __post_init__(self) -> None:
        """Validate CSS class map keys.

        Raises
        ------
        ValueError
            If css_class_map names an unknown node type.

        """
        super().__post_init__()
        if self.css_class_map:
            unknown = sorted(set(self.css_class_map) - ALL_NODE_TYPES)
            if unknown:
                raise ValueError(f"css_class_map has unknown node types: {', '.join(unknown)}")
