"""notemark - Markdown parsing and rendering for notes, tasks and pages.

notemark turns note Markdown into a list of immutable AST nodes and renders
that list to escaped HTML, to pluggable per-type components, back to
Markdown, or to JSON.

Supported Syntax
----------------
- Headings (``#`` to ``######``), fenced code blocks, list items
  (``-``, ``*``, ``1.``), block quotes and paragraphs
- Inline code, ``**bold**``, ``*italic*``, images and links

Requirements
------------
- Python 3.10+
- Optional: jinja2 for templated standalone HTML

Examples
--------
Parse and render:

    >>> from notemark import parse, render
    >>> render(parse("a *b* **c** d"))
    '<p>a <em>b</em> <strong>c</strong> d</p>\\n'

Swap out a component:

    >>> from notemark import parse, render_with_components
    >>> from notemark.renderers.components import Element
    >>> outputs = render_with_components(
    ...     parse("# Title"),
    ...     {"heading": lambda node, children: Element("div", {"class": "title"}, children)},
    ... )
    >>> outputs[0].to_html()
    '<div class="title">Title</div>'

"""

import sys

# Check Python version before any imports
if sys.version_info < (3, 10):
    raise ImportError(
        "notemark requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from notemark.api import (  # noqa: E402
    parse,
    parse_file,
    render,
    render_markdown,
    render_with_components,
    to_html,
    to_json,
    to_markdown,
)
from notemark.ast import Node  # noqa: E402
from notemark.exceptions import (  # noqa: E402
    DependencyError,
    FileError,
    InputError,
    InvalidOptionsError,
    NotemarkError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from notemark.options import (  # noqa: E402
    HtmlRendererOptions,
    JsonRendererOptions,
    MarkdownParserOptions,
    MarkdownRendererOptions,
)

__all__ = [
    "__version__",
    # Core API
    "parse",
    "parse_file",
    "render",
    "render_with_components",
    "render_markdown",
    "to_html",
    "to_markdown",
    "to_json",
    "Node",
    # Options
    "MarkdownParserOptions",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
    "JsonRendererOptions",
    # Exceptions
    "NotemarkError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "InputError",
    "RenderingError",
    "OutputWriteError",
    "DependencyError",
]
