#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/ast/nodes.py
"""AST node classes for note content.

This module defines the closed set of node classes produced by the Markdown
parser. Each class corresponds to exactly one type tag, so the leaf/container
distinction is enforced by the class itself rather than by optional fields.

Every node exposes the same read-only view regardless of its class:

- ``type``: the type tag (``"heading"``, ``"paragraph"``, ...)
- ``content``: raw string payload for leaves, ``None`` for containers
- ``children``: tuple of child nodes for containers, ``None`` for leaves
- ``attributes``: ``dict[str, str]`` of node-specific metadata

Node Hierarchy
--------------
Block-level nodes:
    - Heading, Paragraph, CodeBlock, ListItem, BlockQuote, EmptyLine

Inline nodes:
    - Text, Bold, Italic, Code, Link, Image

Nodes are frozen dataclasses. Child sequences passed as lists are stored as
tuples so a parsed tree can be shared and rendered repeatedly.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Sequence, Union

from notemark.constants import (
    DEFAULT_CODE_LANGUAGE,
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
    NODE_PARAGRAPH,
    NODE_TEXT,
)


def _freeze_children(node: Node, children: Optional[Sequence[Node]]) -> None:
    object.__setattr__(node, "children", tuple(children or ()))


def _coerce_content(node: Node, content: Optional[str]) -> None:
    object.__setattr__(node, "content", "" if content is None else str(content))


class Node(ABC):
    """Base class for all AST nodes.

    Subclasses set the ``type`` class variable to their type tag and
    implement ``accept`` for the visitor pattern. Concrete classes derive
    from either ``LeafNode`` or ``ContainerNode``.

    """

    type: ClassVar[str]

    @property
    def is_leaf(self) -> bool:
        """Return True when this node carries no children."""
        return getattr(self, "children", None) is None

    @property
    def attributes(self) -> dict[str, str]:
        """Node-specific metadata as string key/value pairs."""
        return {}

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


class LeafNode(Node):
    """Node without children."""

    @property
    def children(self) -> None:
        return None


class ContainerNode(Node):
    """Node holding an ordered tuple of child nodes and no raw content."""

    @property
    def content(self) -> None:
        return None


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Heading(ContainerNode):
    """Heading node (h1-h6).

    Represents a heading with a level from 1 to 6 and inline content.

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : sequence of Node, default = empty
        Inline nodes representing heading text

    """

    type: ClassVar[str] = NODE_HEADING

    level: int
    children: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not MIN_HEADING_LEVEL <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        _freeze_children(self, self.children)

    @property
    def attributes(self) -> dict[str, str]:
        return {"level": str(self.level)}

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_heading method

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass(frozen=True)
class Paragraph(ContainerNode):
    """Paragraph node containing inline content.

    Parameters
    ----------
    children : sequence of Node, default = empty
        Inline nodes representing paragraph content

    """

    type: ClassVar[str] = NODE_PARAGRAPH

    children: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass(frozen=True)
class CodeBlock(LeafNode):
    """Fenced code block with a language tag.

    Parameters
    ----------
    content : str
        Raw code between the fences (not parsed as markdown)
    language : str, default = "text"
        Language tag from the opening fence

    """

    type: ClassVar[str] = NODE_CODE_BLOCK

    content: str
    language: str = DEFAULT_CODE_LANGUAGE

    def __post_init__(self) -> None:
        _coerce_content(self, self.content)
        if not self.language:
            object.__setattr__(self, "language", DEFAULT_CODE_LANGUAGE)

    @property
    def attributes(self) -> dict[str, str]:
        return {"language": self.language}

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass(frozen=True)
class ListItem(ContainerNode):
    """List item node.

    List items are not grouped into list containers by the parser; each
    item line becomes one top-level ListItem.

    Parameters
    ----------
    children : sequence of Node, default = empty
        Inline nodes of the item
    ordered : bool, default = False
        Whether the item came from a numbered (``1.``) marker

    """

    type: ClassVar[str] = NODE_LIST_ITEM

    children: tuple[Node, ...] = field(default_factory=tuple)
    ordered: bool = False

    def __post_init__(self) -> None:
        _freeze_children(self, self.children)

    @property
    def attributes(self) -> dict[str, str]:
        return {"ordered": "true"} if self.ordered else {}

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass(frozen=True)
class BlockQuote(ContainerNode):
    """Single-line block quote containing inline content."""

    type: ClassVar[str] = NODE_BLOCKQUOTE

    children: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass(frozen=True)
class EmptyLine(LeafNode):
    """Blank line marker.

    The parser consumes blank lines without emitting this node; it exists
    so hand-built trees and deserialized payloads can still carry one.

    """

    type: ClassVar[str] = NODE_EMPTY_LINE

    @property
    def content(self) -> None:
        return None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this empty line."""
        return visitor.visit_empty_line(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(LeafNode):
    """Plain text run.

    Parameters
    ----------
    content : str
        Text content; embedded newlines are rendered as line breaks

    """

    type: ClassVar[str] = NODE_TEXT

    content: str

    def __post_init__(self) -> None:
        _coerce_content(self, self.content)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass(frozen=True)
class Bold(ContainerNode):
    """Strong emphasis (``**text**``)."""

    type: ClassVar[str] = NODE_BOLD

    children: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bold span."""
        return visitor.visit_bold(self)


@dataclass(frozen=True)
class Italic(ContainerNode):
    """Emphasis (``*text*``)."""

    type: ClassVar[str] = NODE_ITALIC

    children: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this italic span."""
        return visitor.visit_italic(self)


@dataclass(frozen=True)
class Code(LeafNode):
    """Inline code span (`` `code` ``)."""

    type: ClassVar[str] = NODE_CODE

    content: str

    def __post_init__(self) -> None:
        _coerce_content(self, self.content)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_code(self)


@dataclass(frozen=True)
class Link(ContainerNode):
    """Hyperlink node.

    Parameters
    ----------
    href : str
        Link target, unvalidated
    children : sequence of Node, default = empty
        Link label, a single Text node when produced by the parser

    """

    type: ClassVar[str] = NODE_LINK

    href: str
    children: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "href", self.href or "")
        _freeze_children(self, self.children)

    @property
    def attributes(self) -> dict[str, str]:
        return {"href": self.href}

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass(frozen=True)
class Image(LeafNode):
    """Image node.

    Images carry neither content nor children; everything lives in the
    ``src`` and ``alt`` attributes.

    Parameters
    ----------
    src : str
        Image URL
    alt : str, default = ""
        Alternative text

    """

    type: ClassVar[str] = NODE_IMAGE

    src: str
    alt: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "src", self.src or "")
        object.__setattr__(self, "alt", self.alt or "")

    @property
    def content(self) -> None:
        return None

    @property
    def attributes(self) -> dict[str, str]:
        return {"src": self.src, "alt": self.alt}

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


BlockNode = Union[Heading, Paragraph, CodeBlock, ListItem, BlockQuote, EmptyLine]
InlineNode = Union[Text, Bold, Italic, Code, Link, Image]

NODE_CLASSES: dict[str, type[Node]] = {
    cls.type: cls
    for cls in (
        Heading,
        Paragraph,
        CodeBlock,
        ListItem,
        BlockQuote,
        EmptyLine,
        Text,
        Bold,
        Italic,
        Code,
        Link,
        Image,
    )
}
