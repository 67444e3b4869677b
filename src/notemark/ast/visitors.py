#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Visitors separate algorithms (HTML rendering, Markdown rendering, text
extraction) from the node classes. Each node's ``accept`` method calls the
matching ``visit_*`` method on the visitor.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from notemark.ast.nodes import (
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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node class. Visit methods
    return Any: ``None`` for side-effect visitors that accumulate output, or
    a value for transforming visitors.

    Examples
    --------
    Visitor that counts text nodes:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...
        ...     def generic_visit(self, node):
        ...         for child in node.children or ():
        ...             child.accept(self)

    """

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The heading node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_empty_line(self, node: EmptyLine) -> Any:
        """Visit an EmptyLine node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold node."""
        pass

    @abstractmethod
    def visit_italic(self, node: Italic) -> Any:
        """Visit an Italic node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    def generic_visit(self, node: Node) -> Any:
        """Visit the children of a container node in order.

        Parameters
        ----------
        node : Node
            Node whose children should be visited

        """
        for child in node.children or ():  # type: ignore[attr-defined]
            child.accept(self)
