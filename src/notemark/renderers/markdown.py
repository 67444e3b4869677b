#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/renderers/markdown.py
"""Markdown rendering from AST.

Writes a node list back to the Markdown dialect accepted by
``notemark.parsers.markdown.MarkdownParser``. For documents written in
that dialect, parsing the rendered output reproduces the original nodes.

"""

from __future__ import annotations

import logging
from typing import Sequence

from notemark.ast import (
    BlockQuote,
    Bold,
    Code,
    CodeBlock,
    EmptyLine,
    Heading,
    Image,
    Italic,
    Link,
    ListItem,
    Node,
    Paragraph,
    Text,
)
from notemark.ast.visitors import NodeVisitor
from notemark.constants import CODE_FENCE
from notemark.options.markdown import MarkdownRendererOptions
from notemark.renderers.base import BaseRenderer, InlineContentMixin
from notemark.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class MarkdownRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to Markdown text.

    Consecutive list items and consecutive block quotes are separated by a
    single newline; all other blocks by a blank line. Ordered list items
    are numbered from 1 within each run.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options

    Examples
    --------
        >>> from notemark.ast import ListItem, Text
        >>> nodes = [ListItem(children=[Text(content="a")], ordered=True),
        ...          ListItem(children=[Text(content="b")], ordered=True)]
        >>> MarkdownRenderer().render_to_string(nodes)
        '1. a\\n2. b\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._ordered_index = 0

    def render_to_string(self, nodes: Sequence[Node]) -> str:
        """Render nodes to Markdown text ending in a newline (empty for no blocks)."""
        self._output = []
        self._ordered_index = 0

        blocks: list[str] = []
        previous: Node | None = None

        with debug_timer(logger, "Rendering (markdown)"):
            for node in nodes:
                if isinstance(node, EmptyLine):
                    continue

                if not (isinstance(node, ListItem) and node.ordered):
                    self._ordered_index = 0

                rendered = self._render_block(node)
                if blocks:
                    blocks.append(self._separator(previous, node))
                blocks.append(rendered)
                previous = node

        return "".join(blocks) + "\n" if blocks else ""

    def _render_block(self, node: Node) -> str:
        self._output = []
        node.accept(self)
        return "".join(self._output)

    @staticmethod
    def _separator(previous: Node | None, current: Node) -> str:
        if isinstance(previous, ListItem) and isinstance(current, ListItem):
            return "\n"
        if isinstance(previous, BlockQuote) and isinstance(current, BlockQuote):
            return "\n"
        return "\n\n"

    def visit_heading(self, node: Heading) -> None:
        content = self._render_inline_content(node.children)
        self._output.append(f"{'#' * node.level} {content}")

    def visit_paragraph(self, node: Paragraph) -> None:
        self._output.append(self._render_inline_content(node.children))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a fenced code block, omitting the default language tag."""
        language = "" if node.language == self.options.default_code_language else node.language
        self._output.append(f"{CODE_FENCE}{language}\n{node.content}\n{CODE_FENCE}")

    def visit_list_item(self, node: ListItem) -> None:
        content = self._render_inline_content(node.children)
        if node.ordered:
            self._ordered_index += 1
            marker = f"{self._ordered_index}."
        else:
            marker = self.options.bullet
        self._output.append(f"{marker} {content}")

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._output.append(f"> {self._render_inline_content(node.children)}")

    def visit_empty_line(self, node: EmptyLine) -> None:
        pass

    def visit_text(self, node: Text) -> None:
        self._output.append(node.content)

    def visit_bold(self, node: Bold) -> None:
        self._output.append(f"**{self._render_inline_content(node.children)}**")

    def visit_italic(self, node: Italic) -> None:
        self._output.append(f"*{self._render_inline_content(node.children)}*")

    def visit_code(self, node: Code) -> None:
        self._output.append(f"`{node.content}`")

    def visit_link(self, node: Link) -> None:
        self._output.append(f"[{self._render_inline_content(node.children)}]({node.href})")

    def visit_image(self, node: Image) -> None:
        self._output.append(f"![{node.alt}]({node.src})")
