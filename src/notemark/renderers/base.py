#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/renderers/base.py
"""Base classes for AST renderers.

A renderer projects the list of top-level block nodes returned by a parser
into an output format. Renderers reset their per-call state at the start of
every ``render_to_string`` call, so rendering the same nodes twice yields the
same result.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Sequence, Union

from notemark.ast import Node
from notemark.exceptions import InvalidOptionsError
from notemark.options.base import BaseRendererOptions
from notemark.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from notemark.ast import extract_text
        >>> from notemark.renderers.base import BaseRenderer
        >>>
        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render_to_string(self, nodes):
        ...         return extract_text(nodes, joiner="\\n")

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options

    @abstractmethod
    def render_to_string(self, nodes: Sequence[Node]) -> str:
        """Render nodes to a string.

        Parameters
        ----------
        nodes : sequence of Node
            Top-level block nodes to render

        Returns
        -------
        str
            Rendered output

        """
        raise NotImplementedError

    def render(self, nodes: Sequence[Node], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render nodes and write the result to a file path or stream.

        Parameters
        ----------
        nodes : sequence of Node
            Top-level block nodes to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the output file cannot be written

        """
        self.write_text_output(self.render_to_string(nodes), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write rendered text to a file path, or a text or binary stream."""
        write_content(text, output)


class InlineContentMixin:
    """Mixin rendering child nodes to a string by capturing ``_output``.

    The implementing class must keep an ``_output`` list that its visitor
    methods append to.

    """

    _output: list[str]

    def _render_inline_content(self, content: Sequence[Node] | None) -> str:
        """Render child nodes and return their output without keeping it.

        Parameters
        ----------
        content : sequence of Node or None
            Child nodes; ``None`` renders as an empty string

        Returns
        -------
        str
            Concatenated output of the children

        """
        saved_output = self._output
        self._output = []

        for node in content or ():
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
