#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/parsers/markdown.py
"""Markdown to AST parser.

This module implements the line-oriented block scanner and the
leftmost-match inline scanner for the Markdown dialect used in notes.

Block syntax (one construct per line):

- Headings: one to six ``#`` followed by whitespace
- Fenced code blocks: a line of three backticks with an optional language
- List items: ``- item``, ``* item``, ``1. item``
- Block quotes: ``> quote``
- Paragraphs: runs of other non-blank lines

Inline syntax: backtick code spans, ``**bold**``, ``*italic*``,
``![alt](src)``, ``[label](href)``.

Malformed markup never raises; anything that is not recognized is kept as
plain text.

"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from notemark.ast import (
    BlockQuote,
    Bold,
    Code,
    CodeBlock,
    Heading,
    Image,
    Italic,
    Link,
    ListItem,
    Node,
    Paragraph,
    Text,
)
from notemark.constants import (
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
from notemark.options.markdown import MarkdownParserOptions
from notemark.parsers.base import BaseParser
from notemark.parsers.rules import CODE_FENCE_CLOSE_PATTERN, INLINE_RULES, BlockRule, match_block_rule
from notemark.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class MarkdownParser(BaseParser):
    """Parse note Markdown into a list of block nodes.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> nodes = parser.parse("# Hello\\n\\nSome *text*")
        >>> [node.type for node in nodes]
        ['heading', 'paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

        self._inline_handlers: dict[str, Callable[[re.Match[str]], Node]] = {
            NODE_CODE: self._handle_code_span,
            NODE_BOLD: self._handle_bold,
            NODE_ITALIC: self._handle_italic,
            NODE_IMAGE: self._handle_image,
            NODE_LINK: self._handle_link,
        }

    def parse(self, source: Optional[str]) -> list[Node]:
        """Parse Markdown source into top-level block nodes.

        Parameters
        ----------
        source : str or None
            Markdown text. ``None`` is treated as ``""``.

        Returns
        -------
        list[Node]
            Block nodes in document order. Never empty: a document with no
            content yields a single paragraph holding an empty text node.

        """
        text = self._normalize_source(source)

        with debug_timer(logger, "Parsing (markdown)"):
            nodes = self._parse_blocks(text.split("\n")) if text.strip() else []

        if not nodes:
            return [Paragraph(children=[Text(content="")])]

        logger.debug("Parsed %d block nodes", len(nodes))
        return nodes

    def _parse_blocks(self, lines: list[str]) -> list[Node]:
        result: list[Node] = []
        i = 0

        while i < len(lines):
            line = lines[i].strip()
            matched = match_block_rule(line)

            if matched is None:
                paragraph, i = self._parse_paragraph(lines, i)
                result.append(paragraph)
                continue

            rule, match = matched
            if rule.node_type == NODE_EMPTY_LINE:
                i += 1
            elif rule.node_type == NODE_CODE_BLOCK:
                code_block, i = self._parse_code_block(lines, i, match)
                result.append(code_block)
            else:
                result.append(self._build_line_block(rule, match))
                i += 1

        return result

    def _build_line_block(self, rule: BlockRule, match: re.Match[str]) -> Node:
        """Create the node for a single-line block rule."""
        children = self.parse_inline(match.group(1))

        if rule.node_type == NODE_HEADING:
            return Heading(level=rule.level, children=children)
        if rule.node_type == NODE_LIST_ITEM:
            return ListItem(children=children, ordered=rule.ordered)
        if rule.node_type == NODE_BLOCKQUOTE:
            return BlockQuote(children=children)

        raise AssertionError(f"Unhandled block rule: {rule.node_type}")

    def _parse_paragraph(self, lines: list[str], start_idx: int) -> tuple[Paragraph, int]:
        """Collect trimmed lines until a blank line or a line starting another block.

        Returns
        -------
        tuple[Paragraph, int]
            The paragraph and the index of the first unconsumed line

        """
        paragraph_lines = [lines[start_idx].strip()]
        i = start_idx + 1

        while i < len(lines):
            line = lines[i].strip()
            # The empty-line rule covers blank lines
            if match_block_rule(line) is not None:
                break
            paragraph_lines.append(line)
            i += 1

        return Paragraph(children=self.parse_inline("\n".join(paragraph_lines))), i

    def _parse_code_block(self, lines: list[str], start_idx: int, fence: re.Match[str]) -> tuple[CodeBlock, int]:
        """Consume a fenced code block starting at ``start_idx``.

        Body lines are kept verbatim. Without a closing fence the block runs
        to the end of the input.

        """
        language = fence.group(1) or self.options.default_code_language
        body: list[str] = []
        i = start_idx + 1

        while i < len(lines):
            if CODE_FENCE_CLOSE_PATTERN.match(lines[i].strip()):
                i += 1
                break
            body.append(lines[i])
            i += 1
        else:
            logger.debug("Unclosed code fence at line %d; consumed to end of input", start_idx + 1)

        return CodeBlock(content="\n".join(body), language=language), i

    def parse_inline(self, text: str) -> list[Node]:
        """Tokenize inline Markdown into inline nodes.

        Every inline rule is searched from the current position and the
        match starting earliest wins; on equal starts the rule declared
        first wins. Text before the match becomes a ``Text`` node.

        Parameters
        ----------
        text : str
            Inline source

        Returns
        -------
        list[Node]
            Inline nodes; empty for empty input

        """
        result: list[Node] = []
        pos = 0
        pending = ""

        while pos < len(text):
            earliest_match: re.Match[str] | None = None
            earliest_type = ""

            for rule in INLINE_RULES:
                match = rule.search(text, pos)
                if match and (earliest_match is None or match.start() < earliest_match.start()):
                    earliest_match = match
                    earliest_type = rule.node_type

            if earliest_match is None:
                pending += text[pos:]
                break

            pending += text[pos : earliest_match.start()]

            if earliest_match.end() == earliest_match.start():
                # Guarantee progress on an empty match
                pending += text[earliest_match.start()]
                pos = earliest_match.start() + 1
                continue

            if pending:
                result.append(Text(content=pending))
                pending = ""
            result.append(self._inline_handlers[earliest_type](earliest_match))
            pos = earliest_match.end()

        if pending:
            result.append(Text(content=pending))

        return result

    @staticmethod
    def _handle_code_span(match: re.Match[str]) -> Node:
        return Code(content=match.group(1))

    @staticmethod
    def _handle_bold(match: re.Match[str]) -> Node:
        return Bold(children=[Text(content=match.group(1))])

    @staticmethod
    def _handle_italic(match: re.Match[str]) -> Node:
        return Italic(children=[Text(content=match.group(1))])

    @staticmethod
    def _handle_image(match: re.Match[str]) -> Node:
        return Image(src=match.group(2), alt=match.group(1))

    @staticmethod
    def _handle_link(match: re.Match[str]) -> Node:
        return Link(href=match.group(2), children=[Text(content=match.group(1))])
