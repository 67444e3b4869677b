#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/constants.py
"""Constants and defaults for notemark parsing and rendering.

This module centralizes the node type tags, parser defaults, HTML rendering
defaults and security constants shared across the package.

"""

from __future__ import annotations

from typing import Final, Literal

# =============================================================================
# Node type tags
# =============================================================================

NODE_HEADING: Final = "heading"
NODE_PARAGRAPH: Final = "paragraph"
NODE_BOLD: Final = "bold"
NODE_ITALIC: Final = "italic"
NODE_CODE: Final = "code"
NODE_CODE_BLOCK: Final = "codeBlock"
NODE_LINK: Final = "link"
NODE_IMAGE: Final = "image"
NODE_LIST_ITEM: Final = "listItem"
NODE_BLOCKQUOTE: Final = "blockquote"
NODE_TEXT: Final = "text"
NODE_EMPTY_LINE: Final = "emptyLine"

NodeType = Literal[
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
]

BLOCK_NODE_TYPES: Final = frozenset(
    {NODE_HEADING, NODE_PARAGRAPH, NODE_CODE_BLOCK, NODE_LIST_ITEM, NODE_BLOCKQUOTE, NODE_EMPTY_LINE}
)
INLINE_NODE_TYPES: Final = frozenset({NODE_TEXT, NODE_BOLD, NODE_ITALIC, NODE_CODE, NODE_LINK, NODE_IMAGE})
ALL_NODE_TYPES: Final = BLOCK_NODE_TYPES | INLINE_NODE_TYPES

# =============================================================================
# Parser defaults
# =============================================================================

MIN_HEADING_LEVEL: Final = 1
MAX_HEADING_LEVEL: Final = 6

DEFAULT_CODE_LANGUAGE: Final = "text"
CODE_FENCE: Final = "```"

# =============================================================================
# Renderer defaults
# =============================================================================

DEFAULT_BLOCK_SEPARATOR: Final = "\n"
DEFAULT_LINE_BREAK: Final = "<br />"
DEFAULT_HTML_LANGUAGE: Final = "en"
DEFAULT_DOCUMENT_TITLE: Final = "Document"
DEFAULT_LINK_FALLBACK: Final = "#"
DEFAULT_SLUG_MAX_LENGTH: Final = 50

DEFAULT_LIST_BULLET: Final = "-"
DEFAULT_JSON_INDENT: Final = None

# =============================================================================
# Security
# =============================================================================

# URL schemes that must never be emitted into href/src attributes
DANGEROUS_SCHEMES: Final = frozenset(
    {
        "javascript:",
        "vbscript:",
        "data:text/html",
        "data:text/javascript",
        "data:application/javascript",
        "data:application/x-javascript",
    }
)

# =============================================================================
# Optional dependencies
# =============================================================================

DEPS_JINJA: Final = [("jinja2", "jinja2", ">=3.1.0")]

# =============================================================================
# Environment
# =============================================================================

ENV_PREFIX: Final = "NOTEMARK_"
