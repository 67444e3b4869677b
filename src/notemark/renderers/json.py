#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/renderers/json.py
"""JSON rendering of node lists using the node dict shape of ``notemark.ast.serialization``."""

from __future__ import annotations

from typing import Sequence

from notemark.ast import Node, nodes_to_json
from notemark.options.json import JsonRendererOptions
from notemark.renderers.base import BaseRenderer


class JsonRenderer(BaseRenderer):
    """Render nodes as a JSON array of node objects.

    Parameters
    ----------
    options : JsonRendererOptions or None, default = None
        JSON rendering options

    """

    def __init__(self, options: JsonRendererOptions | None = None):
        BaseRenderer._validate_options_type(options, JsonRendererOptions, "json")
        options = options or JsonRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JsonRendererOptions = options

    def render_to_string(self, nodes: Sequence[Node]) -> str:
        return nodes_to_json(nodes, indent=self.options.indent)
