#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/options/markdown.py
"""Configuration options for Markdown parsing and Markdown rendering.

This module defines options for reading note Markdown into the AST and for
writing an AST back out as Markdown source.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from notemark.constants import DEFAULT_CODE_LANGUAGE, DEFAULT_LIST_BULLET
from notemark.options.base import BaseParserOptions, BaseRendererOptions

_LANGUAGE_TAG = re.compile(r"^[\w+#.-]+$")


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    default_code_language : str, default "text"
        Language assigned to fenced code blocks whose opening fence has no tag.

    """

    default_code_language: str = field(
        default=DEFAULT_CODE_LANGUAGE,
        metadata={"help": "Language assigned to fenced code blocks without a language tag"},
    )

    def __post_init__(self) -> None:
        """Validate the default code language tag."""
        super().__post_init__()
        if not _LANGUAGE_TAG.match(self.default_code_language):
            raise ValueError(f"default_code_language must be a non-empty tag, got {self.default_code_language!r}")


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Markdown rendering.

    Parameters
    ----------
    bullet : {"-", "*"}, default "-"
        Marker written before unordered list items.
    default_code_language : str, default "text"
        Code blocks in this language are written with a bare opening fence.

    """

    bullet: str = field(
        default=DEFAULT_LIST_BULLET,
        metadata={"help": "Marker for unordered list items", "choices": ["-", "*"]},
    )
    default_code_language: str = field(
        default=DEFAULT_CODE_LANGUAGE,
        metadata={"help": "Code block language written without a fence tag"},
    )

    def __post_init__(self) -> None:
        """Validate the list bullet."""
        super().__post_init__()
        if self.bullet not in ("-", "*"):
            raise ValueError(f"bullet must be '-' or '*', got {self.bullet!r}")
