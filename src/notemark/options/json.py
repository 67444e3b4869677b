#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/options/json.py
"""Configuration options for JSON rendering of node trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from notemark.constants import DEFAULT_JSON_INDENT
from notemark.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JsonRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-JSON rendering.

    Parameters
    ----------
    indent : int or None, default None
        Indentation for pretty-printed output; compact when None.

    """

    indent: Optional[int] = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation (compact when omitted)", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate indentation.

        Raises
        ------
        ValueError
            If indent is negative.

        """
        super().__post_init__()
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
