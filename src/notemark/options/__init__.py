#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/options/__init__.py
"""Frozen option dataclasses for notemark parsers and renderers."""

from notemark.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from notemark.options.html import HtmlRendererOptions
from notemark.options.json import JsonRendererOptions
from notemark.options.markdown import MarkdownParserOptions, MarkdownRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "HtmlRendererOptions",
    "JsonRendererOptions",
]
