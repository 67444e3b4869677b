#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/parsers/__init__.py
"""Parsers producing notemark AST nodes."""

from notemark.parsers.base import BaseParser
from notemark.parsers.markdown import MarkdownParser

__all__ = ["BaseParser", "MarkdownParser"]
