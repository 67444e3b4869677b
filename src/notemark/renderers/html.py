#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which walks the node list
produced by the Markdown parser and writes HTML. Every user-controlled
string (text, code, URLs, alt text, code languages) is escaped; escaping
cannot be turned off.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence

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
    extract_text,
)
from notemark.ast.visitors import NodeVisitor
from notemark.constants import (
    DEFAULT_LINK_FALLBACK,
    DEFAULT_SLUG_MAX_LENGTH,
    DEPS_JINJA,
    NODE_BLOCKQUOTE,
    NODE_BOLD,
    NODE_CODE,
    NODE_CODE_BLOCK,
    NODE_HEADING,
    NODE_IMAGE,
    NODE_ITALIC,
    NODE_LINK,
    NODE_LIST_ITEM,
    NODE_PARAGRAPH,
)
from notemark.exceptions import FileError, RenderingError
from notemark.options.html import HtmlRendererOptions
from notemark.renderers.base import BaseRenderer, InlineContentMixin
from notemark.utils.decorators import debug_timer, requires_dependencies
from notemark.utils.html_utils import escape_html, sanitize_url
from notemark.utils.text import slugify

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from notemark.ast import Paragraph, Bold, Text
        >>> nodes = [Paragraph(children=[Text(content="a "), Bold(children=[Text(content="b")])])]
        >>> HtmlRenderer().render_to_string(nodes)
        '<p>a <strong>b</strong></p>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []
        self._headings: list[dict[str, Any]] = []
        self._seen_slugs: set[str] = set()

    def render_to_string(self, nodes: Sequence[Node]) -> str:
        """Render nodes to an HTML fragment or document.

        Parameters
        ----------
        nodes : sequence of Node
            Top-level block nodes

        Returns
        -------
        str
            HTML text. A fragment unless ``standalone`` or ``template_file``
            is set.

        """
        self._output = []
        self._headings = []
        self._seen_slugs = set()

        with debug_timer(logger, "Rendering (html)"):
            self._render_blocks(nodes)
            content = "".join(self._output)

            if self.options.template_file:
                return self._apply_jinja_template(nodes, content, self.options.template_file)
            if self.options.standalone:
                return self._wrap_in_document(content)

        return content

    def _render_blocks(self, nodes: Sequence[Node]) -> None:
        """Render top-level nodes, grouping list item runs when configured."""
        i = 0
        while i < len(nodes):
            node = nodes[i]
            if not (self.options.wrap_list_items and isinstance(node, ListItem)):
                node.accept(self)
                i += 1
                continue

            run_end = i
            while (
                run_end < len(nodes)
                and isinstance(nodes[run_end], ListItem)
                and nodes[run_end].ordered == node.ordered  # type: ignore[attr-defined]
            ):
                run_end += 1

            tag = "ol" if node.ordered else "ul"
            self._output.append(f"<{tag}>{self.options.block_separator}")
            for item in nodes[i:run_end]:
                item.accept(self)
            self._output.append(f"</{tag}>{self.options.block_separator}")
            i = run_end

    def _wrap_in_document(self, content: str) -> str:
        """Wrap a rendered fragment in a complete HTML5 document."""
        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{escape_html(self.options.language)}">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_html(self.options.title)}</title>",
            "</head>",
            "<body>",
            content.rstrip("\n"),
            "</body>",
            "</html>",
        ]
        return "\n".join(parts) + "\n"

    @requires_dependencies("html templates", DEPS_JINJA)
    def _apply_jinja_template(self, nodes: Sequence[Node], content: str, template_file: str) -> str:
        """Render the fragment through the configured Jinja2 template.

        The template receives ``content`` (the rendered fragment, marked
        safe), ``title``, ``language``, ``headings`` (dicts with ``level``,
        ``id`` and ``text``) and ``nodes``. Autoescaping is on for every
        other value.

        Raises
        ------
        FileError
            If the template file does not exist
        RenderingError
            If the template cannot be compiled or rendered
        DependencyError
            If jinja2 is not installed

        """
        from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
        from markupsafe import Markup

        template_path = Path(template_file)
        if not template_path.is_file():
            raise FileError(f"Template file not found: {template_path}", file_path=str(template_path))

        env = Environment(
            loader=FileSystemLoader(str(template_path.parent)),
            autoescape=select_autoescape(["html", "htm", "xml", "j2", "jinja"], default_for_string=True, default=True),
        )
        logger.debug("Applying template %s", template_path)

        try:
            template = env.get_template(template_path.name)
            return template.render(
                content=Markup(content),
                title=self.options.title,
                language=self.options.language,
                headings=self._headings,
                nodes=list(nodes),
            )
        except TemplateError as e:
            raise RenderingError(
                f"Failed to render template {template_path}: {e}",
                rendering_stage="template",
                original_error=e,
            ) from e

    def _get_custom_css_class(self, node_type: str) -> str:
        """Get the class attribute for a node type from css_class_map.

        Returns
        -------
        str
            Class attribute string (e.g. ``' class="note-title"'``) or ``""``

        """
        if not self.options.css_class_map:
            return ""

        classes = self.options.css_class_map.get(node_type)
        if not classes:
            return ""

        class_str = classes if isinstance(classes, str) else " ".join(classes)
        return f' class="{escape_html(class_str)}"' if class_str else ""

    def _block(self, markup: str) -> None:
        self._output.append(markup + self.options.block_separator)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node as ``<hN>``."""
        content = self._render_inline_content(node.children)
        text = extract_text(node)
        heading_id = ""
        id_attr = ""

        if self.options.heading_ids:
            heading_id = slugify(text, seen_slugs=self._seen_slugs, max_length=DEFAULT_SLUG_MAX_LENGTH)
            id_attr = f' id="{escape_html(heading_id)}"'

        self._headings.append({"level": node.level, "id": heading_id, "text": text})

        css_class = self._get_custom_css_class(NODE_HEADING)
        self._block(f"<h{node.level}{id_attr}{css_class}>{content}</h{node.level}>")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node as ``<p>``."""
        content = self._render_inline_content(node.children)
        css_class = self._get_custom_css_class(NODE_PARAGRAPH)
        self._block(f"<p{css_class}>{content}</p>")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        The language tag goes into a ``language-*`` class on the inner
        ``<code>`` element; the body is escaped but not otherwise changed.

        """
        css_class = self._get_custom_css_class(NODE_CODE_BLOCK)
        language = escape_html(node.language)
        code = escape_html(node.content)
        self._block(f'<pre{css_class}><code class="language-{language}">{code}</code></pre>')

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node as ``<li>``."""
        content = self._render_inline_content(node.children)
        css_class = self._get_custom_css_class(NODE_LIST_ITEM)
        self._block(f"<li{css_class}>{content}</li>")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node as ``<blockquote>``."""
        content = self._render_inline_content(node.children)
        css_class = self._get_custom_css_class(NODE_BLOCKQUOTE)
        self._block(f"<blockquote{css_class}>{content}</blockquote>")

    def visit_empty_line(self, node: EmptyLine) -> None:
        """Empty lines produce no output."""
        pass

    def visit_text(self, node: Text) -> None:
        """Render a Text node, turning newlines into line breaks."""
        self._output.append(escape_html(node.content).replace("\n", self.options.line_break))

    def visit_bold(self, node: Bold) -> None:
        content = self._render_inline_content(node.children)
        css_class = self._get_custom_css_class(NODE_BOLD)
        self._output.append(f"<strong{css_class}>{content}</strong>")

    def visit_italic(self, node: Italic) -> None:
        content = self._render_inline_content(node.children)
        css_class = self._get_custom_css_class(NODE_ITALIC)
        self._output.append(f"<em{css_class}>{content}</em>")

    def visit_code(self, node: Code) -> None:
        css_class = self._get_custom_css_class(NODE_CODE)
        self._output.append(f"<code{css_class}>{escape_html(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        An empty href, or one removed by URL sanitization, becomes ``#``.

        """
        content = self._render_inline_content(node.children)
        href = node.href
        if self.options.sanitize_urls:
            href = sanitize_url(href, fallback=DEFAULT_LINK_FALLBACK)
        href = href or DEFAULT_LINK_FALLBACK

        css_class = self._get_custom_css_class(NODE_LINK)
        self._output.append(f'<a href="{escape_html(href)}"{css_class}>{content}</a>')

    def visit_image(self, node: Image) -> None:
        src = node.src
        if self.options.sanitize_urls:
            src = sanitize_url(src)

        css_class = self._get_custom_css_class(NODE_IMAGE)
        self._output.append(f'<img src="{escape_html(src)}" alt="{escape_html(node.alt)}"{css_class} />')
