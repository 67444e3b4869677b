#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/ast/__init__.py
"""Abstract Syntax Tree (AST) module for note content.

The parser produces an ordered list of block nodes; renderers walk that list.
Keeping the tree separate from any output format allows:

1. Rendering the same parsed note to HTML, components, Markdown or JSON
2. Storing parsed trees and re-rendering them later
3. Testing parsing and rendering independently

The module consists of:

- nodes: AST node classes (a closed set of frozen dataclasses)
- visitors: Visitor base class for tree traversal
- serialization: JSON serialization of node trees
- utils: text extraction and tree walking helpers

Examples
--------
Basic usage:

    >>> from notemark.ast import Heading, Paragraph, Text
    >>> from notemark.renderers.html import HtmlRenderer
    >>>
    >>> nodes = [
    ...     Heading(level=1, children=[Text(content="Title")]),
    ...     Paragraph(children=[Text(content="Hello world")]),
    ... ]
    >>> HtmlRenderer().render_to_string(nodes)
    '<h1>Title</h1>\\n<p>Hello world</p>\\n'

"""

from __future__ import annotations

from notemark.ast.nodes import (
    NODE_CLASSES,
    BlockNode,
    BlockQuote,
    Bold,
    Code,
    CodeBlock,
    ContainerNode,
    EmptyLine,
    Heading,
    Image,
    InlineNode,
    Italic,
    LeafNode,
    Link,
    ListItem,
    Node,
    Paragraph,
    Text,
)
from notemark.ast.serialization import (
    dict_to_node,
    dicts_to_nodes,
    json_to_nodes,
    node_to_dict,
    nodes_to_dicts,
    nodes_to_json,
)
from notemark.ast.utils import extract_text, walk
from notemark.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "LeafNode",
    "ContainerNode",
    "BlockNode",
    "InlineNode",
    "NODE_CLASSES",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "ListItem",
    "BlockQuote",
    "EmptyLine",
    "Text",
    "Bold",
    "Italic",
    "Code",
    "Link",
    "Image",
    # Visitors
    "NodeVisitor",
    # Serialization
    "node_to_dict",
    "nodes_to_dicts",
    "dict_to_node",
    "dicts_to_nodes",
    "nodes_to_json",
    "json_to_nodes",
    # Utilities
    "extract_text",
    "walk",
]
