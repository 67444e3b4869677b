#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

Trees are serialized to the node shape stored alongside notes::

    {"type": "heading", "attributes": {"level": "2"},
     "children": [{"type": "text", "content": "Title"}]}

Leaves carry ``content``, containers carry ``children``, and ``attributes``
is present only when non-empty. The format round-trips: deserializing a
serialized tree yields an equal tree.

Examples
--------
Serialize a parsed note to JSON:

    >>> from notemark import parse
    >>> from notemark.ast.serialization import nodes_to_json, json_to_nodes
    >>> payload = nodes_to_json(parse("# Title"))
    >>> json_to_nodes(payload)[0].level
    1

"""

from __future__ import annotations

import json
from typing import Any, Callable, Sequence

from notemark.ast.nodes import (
    NODE_CLASSES,
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
from notemark.constants import DEFAULT_CODE_LANGUAGE
from notemark.exceptions import ValidationError


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node (and its subtree) to a JSON-compatible dictionary.

    Parameters
    ----------
    node : Node
        Node to serialize

    Returns
    -------
    dict
        Dictionary with ``type`` and, as applicable, ``content``,
        ``children`` and ``attributes``

    """
    result: dict[str, Any] = {"type": node.type}
    content = node.content  # type: ignore[attr-defined]
    if content is not None:
        result["content"] = content
    children = node.children  # type: ignore[attr-defined]
    if children is not None:
        result["children"] = [node_to_dict(child) for child in children]
    attributes = node.attributes
    if attributes:
        result["attributes"] = dict(attributes)
    return result


def nodes_to_dicts(nodes: Sequence[Node]) -> list[dict[str, Any]]:
    """Serialize a sequence of top-level nodes."""
    return [node_to_dict(node) for node in nodes]


def _children(data: dict[str, Any]) -> list[Node]:
    children_data = data.get("children") or []
    if not isinstance(children_data, list):
        raise ValidationError(
            f"'children' of {data.get('type')!r} node must be a list",
            parameter_name="children",
            parameter_value=children_data,
        )
    return [dict_to_node(child) for child in children_data]


def _attributes(data: dict[str, Any]) -> dict[str, str]:
    attributes = data.get("attributes") or {}
    if not isinstance(attributes, dict):
        raise ValidationError(
            f"'attributes' of {data.get('type')!r} node must be an object",
            parameter_name="attributes",
            parameter_value=attributes,
        )
    return {str(key): "" if value is None else str(value) for key, value in attributes.items()}


def _deserialize_heading(data: dict[str, Any]) -> Heading:
    raw_level = _attributes(data).get("level", "1")
    try:
        level = int(raw_level)
    except ValueError as e:
        raise ValidationError(
            f"Invalid heading level: {raw_level!r}", parameter_name="level", parameter_value=raw_level, original_error=e
        ) from e
    try:
        return Heading(level=level, children=_children(data))
    except ValueError as e:
        raise ValidationError(str(e), parameter_name="level", parameter_value=level, original_error=e) from e


def _deserialize_code_block(data: dict[str, Any]) -> CodeBlock:
    language = _attributes(data).get("language") or DEFAULT_CODE_LANGUAGE
    return CodeBlock(content=data.get("content") or "", language=language)


def _deserialize_list_item(data: dict[str, Any]) -> ListItem:
    ordered = _attributes(data).get("ordered", "").lower() == "true"
    return ListItem(children=_children(data), ordered=ordered)


def _deserialize_link(data: dict[str, Any]) -> Link:
    return Link(href=_attributes(data).get("href", ""), children=_children(data))


def _deserialize_image(data: dict[str, Any]) -> Image:
    attributes = _attributes(data)
    return Image(src=attributes.get("src", ""), alt=attributes.get("alt", ""))


_DESERIALIZERS: dict[str, Callable[[dict[str, Any]], Node]] = {
    Heading.type: _deserialize_heading,
    Paragraph.type: lambda data: Paragraph(children=_children(data)),
    CodeBlock.type: _deserialize_code_block,
    ListItem.type: _deserialize_list_item,
    BlockQuote.type: lambda data: BlockQuote(children=_children(data)),
    EmptyLine.type: lambda data: EmptyLine(),
    Text.type: lambda data: Text(content=data.get("content") or ""),
    Bold.type: lambda data: Bold(children=_children(data)),
    Italic.type: lambda data: Italic(children=_children(data)),
    Code.type: lambda data: Code(content=data.get("content") or ""),
    Link.type: _deserialize_link,
    Image.type: _deserialize_image,
}


def dict_to_node(data: dict[str, Any]) -> Node:
    """Reconstruct a node from its dictionary form.

    Parameters
    ----------
    data : dict
        Dictionary produced by ``node_to_dict`` or stored by the application

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    ValidationError
        If the payload is not an object, has an unknown ``type`` or carries
        malformed attributes

    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Node payload must be an object, got {type(data).__name__}", parameter_name="node", parameter_value=data
        )
    node_type = data.get("type")
    if node_type not in NODE_CLASSES:
        raise ValidationError(f"Unknown node type: {node_type!r}", parameter_name="type", parameter_value=node_type)
    return _DESERIALIZERS[node_type](data)


def dicts_to_nodes(data: Sequence[dict[str, Any]]) -> list[Node]:
    """Reconstruct a sequence of top-level nodes."""
    if not isinstance(data, (list, tuple)):
        raise ValidationError(
            f"Document payload must be a list of nodes, got {type(data).__name__}",
            parameter_name="nodes",
            parameter_value=data,
        )
    return [dict_to_node(item) for item in data]


def nodes_to_json(nodes: Sequence[Node], indent: int | None = None) -> str:
    """Serialize top-level nodes to a JSON string.

    Parameters
    ----------
    nodes : sequence of Node
        Nodes to serialize
    indent : int or None, default = None
        Indentation for pretty printing; compact output when None

    Returns
    -------
    str
        JSON array of node objects

    """
    return json.dumps(nodes_to_dicts(nodes), indent=indent, ensure_ascii=False)


def json_to_nodes(json_str: str) -> list[Node]:
    """Deserialize top-level nodes from a JSON string.

    Raises
    ------
    ValidationError
        If the string is not valid JSON or does not describe a node list

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", parameter_name="json_str", original_error=e) from e
    return dicts_to_nodes(data)
