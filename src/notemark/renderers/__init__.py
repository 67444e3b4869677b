#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/renderers/__init__.py
"""Renderers projecting notemark AST nodes to output formats.

- HtmlRenderer: escaped HTML fragments or documents
- ComponentRenderer: per-type pluggable render functions
- MarkdownRenderer: Markdown text in the parser's dialect
- JsonRenderer: JSON node arrays

"""

from notemark.renderers.base import BaseRenderer
from notemark.renderers.components import ComponentRenderer, Element, Fragment, render_markdown
from notemark.renderers.html import HtmlRenderer
from notemark.renderers.json import JsonRenderer
from notemark.renderers.markdown import MarkdownRenderer

__all__ = [
    "BaseRenderer",
    "ComponentRenderer",
    "Element",
    "Fragment",
    "HtmlRenderer",
    "JsonRenderer",
    "MarkdownRenderer",
    "render_markdown",
]
