#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Extract plain text from a node or sequence of nodes
walk : Iterate over every node of a tree in document order

Examples
--------
Extract text from a heading:

    >>> from notemark.ast import Heading, Italic, Text
    >>> from notemark.ast.utils import extract_text
    >>>
    >>> heading = Heading(level=1, children=[
    ...     Text(content="Hello "),
    ...     Italic(children=[Text(content="world")])
    ... ])
    >>> extract_text(heading)
    'Hello world'

"""

from __future__ import annotations

from typing import Iterator, Sequence, Union

from notemark.ast.nodes import CodeBlock, Image, Node


def extract_text(node_or_nodes: Union[Node, Sequence[Node]], joiner: str = "") -> str:
    """Extract plain text from a node or sequence of nodes.

    Leaf content is concatenated in document order. Images contribute their
    alt text; code blocks contribute their raw content.

    Parameters
    ----------
    node_or_nodes : Node or sequence of Node
        A single node or a sequence of nodes to extract text from
    joiner : str, default = ""
        String used between sibling parts. Text runs already carry their own
        whitespace, so the default joins them directly.

    Returns
    -------
    str
        Concatenated text content

    """
    if isinstance(node_or_nodes, Node):
        return _extract_node_text(node_or_nodes, joiner)
    return joiner.join(_extract_node_text(node, joiner) for node in node_or_nodes)


def _extract_node_text(node: Node, joiner: str) -> str:
    if isinstance(node, Image):
        return node.alt
    if isinstance(node, CodeBlock):
        return node.content
    children = node.children  # type: ignore[attr-defined]
    if children is None:
        return node.content or ""  # type: ignore[attr-defined]
    return joiner.join(_extract_node_text(child, joiner) for child in children)


def walk(node_or_nodes: Union[Node, Sequence[Node]]) -> Iterator[Node]:
    """Yield every node of a tree in pre-order (document order).

    Parameters
    ----------
    node_or_nodes : Node or sequence of Node
        Root node or sequence of top-level nodes

    Yields
    ------
    Node
        Each node, parents before their children

    """
    stack: list[Node] = [node_or_nodes] if isinstance(node_or_nodes, Node) else list(reversed(node_or_nodes))
    while stack:
        node = stack.pop()
        yield node
        children = node.children  # type: ignore[attr-defined]
        if children:
            stack.extend(reversed(children))
