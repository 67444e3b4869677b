#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/utils/__init__.py
"""Utility helpers for notemark."""

from notemark.utils.html_utils import escape_html, is_url_safe, sanitize_url
from notemark.utils.text import slugify

__all__ = ["escape_html", "is_url_safe", "sanitize_url", "slugify"]
