#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/parsers/base.py
"""Base class for note source parsers.

A parser turns source text into the ordered list of top-level block nodes
defined in ``notemark.ast``. Parsers keep no state between calls, so one
instance can be shared.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from notemark.ast import Node
from notemark.exceptions import InvalidOptionsError
from notemark.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from notemark.ast import Paragraph, Text
        >>> from notemark.parsers.base import BaseParser
        >>>
        >>> class PlainParser(BaseParser):
        ...     def parse(self, source):
        ...         return [Paragraph(children=[Text(content=source or "")])]

    """

    def __init__(self, options: BaseParserOptions | None = None):
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _normalize_source(source: Optional[str]) -> str:
        """Coerce a missing source to ``""`` and normalize line endings to ``\\n``."""
        if source is None:
            return ""
        return str(source).replace("\r\n", "\n").replace("\r", "\n")

    @abstractmethod
    def parse(self, source: Optional[str]) -> list[Node]:
        """Parse source text into top-level block nodes.

        Parameters
        ----------
        source : str or None
            Source text; None is treated as an empty document

        Returns
        -------
        list[Node]
            Block nodes in document order

        """
        raise NotImplementedError
