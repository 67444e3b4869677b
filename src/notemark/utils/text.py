#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/utils/text.py
"""Text processing utilities.

This module provides slugification for heading IDs.

Functions
---------
slugify : Convert text to URL-safe slug

Examples
--------
Basic slugification:

    >>> from notemark.utils.text import slugify
    >>> slugify("My Heading Title")
    'my-heading-title'

Unique slug generation:

    >>> seen = set()
    >>> slugify("Tasks", seen_slugs=seen)
    'tasks'
    >>> slugify("Tasks", seen_slugs=seen)
    'tasks-2'

"""

from __future__ import annotations

import re
import unicodedata
from typing import Set


def slugify(text: str, *, seen_slugs: Set[str] | None = None, max_length: int = 100, separator: str = "-") -> str:
    """Create a URL-safe slug from text with collision avoidance.

    Parameters
    ----------
    text : str
        Text to slugify (e.g., heading text)
    seen_slugs : Set[str] or None, default = None
        Set of previously generated slugs for collision detection.
        If provided and the generated slug already exists, a numeric
        suffix will be appended (-2, -3, etc.). The new slug is added
        to this set.
    max_length : int, default = 100
        Maximum length of the slug before collision suffixes
    separator : str, default = "-"
        The separator between words in the slug

    Returns
    -------
    str
        URL-safe slug, unique if seen_slugs is provided

    Examples
    --------
    >>> slugify("API Reference (v2.0)")
    'api-reference-v20'
    >>> slugify("Café résumé")
    'cafe-resume'

    """
    normalized = unicodedata.normalize("NFD", text)
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")

    slug = normalized.lower()
    slug = re.sub(r"[\s_]+", separator, slug)
    slug = re.sub(rf"[^a-z0-9\-{re.escape(separator)}]", "", slug)
    slug = re.sub(rf"(?:{re.escape(separator)})+", separator, slug)
    slug = slug.strip(separator)

    if not slug:
        slug = "section"

    if len(slug) > max_length:
        slug = slug[:max_length].rstrip(separator)

    if seen_slugs is not None:
        if slug not in seen_slugs:
            seen_slugs.add(slug)
            return slug

        counter = 2
        while f"{slug}{separator}{counter}" in seen_slugs:
            counter += 1

        unique_slug = f"{slug}{separator}{counter}"
        seen_slugs.add(unique_slug)
        return unique_slug

    return slug


__all__ = ["slugify"]
