#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/parsers/rules.py
"""Ordered rule tables for the Markdown block and inline scanners.

Both tables are immutable module-level tuples. The block scanner tries the
block rules against each trimmed line in order and the first match wins;
lines matching no rule start a paragraph. The inline scanner searches every
inline rule and keeps the match that starts earliest, with ties going to
the rule listed first.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from notemark.constants import (
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
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
)


@dataclass(frozen=True)
class BlockRule:
    """A line pattern producing one kind of block node.

    Parameters
    ----------
    node_type : str
        Type tag of the node the rule produces
    pattern : re.Pattern
        Pattern matched against a trimmed line
    level : int, default 0
        Heading level for heading rules
    ordered : bool, default False
        Ordering flag for list item rules

    """

    node_type: str
    pattern: re.Pattern[str]
    level: int = 0
    ordered: bool = False

    def match(self, line: str) -> re.Match[str] | None:
        return self.pattern.match(line)


@dataclass(frozen=True)
class InlineRule:
    """A span pattern producing one kind of inline node."""

    node_type: str
    pattern: re.Pattern[str]

    def search(self, text: str, pos: int = 0) -> re.Match[str] | None:
        return self.pattern.search(text, pos)


# Most specific heading first: "## x" must not be read as level 1
HEADING_RULES: tuple[BlockRule, ...] = tuple(
    BlockRule(NODE_HEADING, re.compile(rf"^#{{{level}}}\s+(.+)$"), level=level)
    for level in range(MAX_HEADING_LEVEL, MIN_HEADING_LEVEL - 1, -1)
)

CODE_FENCE_OPEN_PATTERN = re.compile(r"^```\s*([\w+#.-]*)\s*$")
CODE_FENCE_CLOSE_PATTERN = re.compile(r"^```\s*$")

UNORDERED_LIST_PATTERN = re.compile(r"^[-*]\s+(.*)$")
ORDERED_LIST_PATTERN = re.compile(r"^\d+\.\s+(.*)$")
BLOCKQUOTE_PATTERN = re.compile(r"^>\s+(.*)$")
EMPTY_LINE_PATTERN = re.compile(r"^$")

BLOCK_RULES: tuple[BlockRule, ...] = HEADING_RULES + (
    BlockRule(NODE_CODE_BLOCK, CODE_FENCE_OPEN_PATTERN),
    BlockRule(NODE_LIST_ITEM, UNORDERED_LIST_PATTERN),
    BlockRule(NODE_LIST_ITEM, ORDERED_LIST_PATTERN, ordered=True),
    BlockRule(NODE_BLOCKQUOTE, BLOCKQUOTE_PATTERN),
    BlockRule(NODE_EMPTY_LINE, EMPTY_LINE_PATTERN),
)

CODE_SPAN_PATTERN = re.compile(r"`([^`]+)`")
BOLD_PATTERN = re.compile(r"\*\*([^*]+)\*\*")
ITALIC_PATTERN = re.compile(r"\*([^*]+)\*")
IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

INLINE_RULES: tuple[InlineRule, ...] = (
    InlineRule(NODE_CODE, CODE_SPAN_PATTERN),
    InlineRule(NODE_BOLD, BOLD_PATTERN),
    InlineRule(NODE_ITALIC, ITALIC_PATTERN),
    InlineRule(NODE_IMAGE, IMAGE_PATTERN),
    InlineRule(NODE_LINK, LINK_PATTERN),
)


def match_block_rule(line: str) -> tuple[BlockRule, re.Match[str]] | None:
    """Return the first block rule matching a trimmed line, with its match."""
    for rule in BLOCK_RULES:
        match = rule.match(line)
        if match:
            return rule, match
    return None


__all__ = [
    "BlockRule",
    "InlineRule",
    "BLOCK_RULES",
    "INLINE_RULES",
    "CODE_FENCE_CLOSE_PATTERN",
    "match_block_rule",
]
