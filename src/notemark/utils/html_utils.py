"""HTML-related utility helpers.

All user-controlled strings (text, code, URLs, alt text) pass through
``escape_html`` before they are embedded in markup.
"""

from __future__ import annotations

import re
from html import escape as _html_escape
from typing import Optional
from urllib.parse import urlparse

from notemark.constants import DANGEROUS_SCHEMES

_URL_NOISE = re.compile(r"[\x00-\x20\x7f]+")


def escape_html(text: Optional[str]) -> str:
    """Escape HTML special characters.

    Escapes ``&``, ``<``, ``>``, ``"`` and ``'``. A missing value is treated
    as an empty string rather than raising.

    Parameters
    ----------
    text : str or None
        Raw text

    Returns
    -------
    str
        Text safe to embed in element content and quoted attributes

    """
    if text is None:
        return ""
    return _html_escape(str(text), quote=True)


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a dangerous scheme.

    Whitespace and control characters are removed before checking, since
    browsers ignore them inside a scheme (``java\\tscript:``).

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True
    >>> is_url_scheme_dangerous("/relative/path")
    False

    """
    if not url or not url.strip():
        return False

    url_lower = _URL_NOISE.sub("", url).lower()

    if url_lower.startswith(("#", "/", "./", "../", "?")):
        return False

    for dangerous_scheme in DANGEROUS_SCHEMES:
        if url_lower.startswith(dangerous_scheme):
            return True

    try:
        scheme = urlparse(url_lower).scheme
    except ValueError:
        # Unparseable URLs are treated as dangerous
        return True

    return scheme in ("javascript", "vbscript", "about")


def is_url_safe(url: str) -> bool:
    """Check if a URL is safe (no dangerous schemes)."""
    return not is_url_scheme_dangerous(url)


def sanitize_url(url: Optional[str], fallback: str = "") -> str:
    """Sanitize a URL by replacing dangerous ones with a fallback.

    Parameters
    ----------
    url : str or None
        URL to sanitize
    fallback : str, default ""
        Value returned when the URL is dangerous

    Returns
    -------
    str
        The original URL, or ``fallback`` if the URL is dangerous

    Examples
    --------
    >>> sanitize_url("https://example.com")
    'https://example.com'
    >>> sanitize_url("javascript:alert('xss')", fallback="#")
    '#'

    """
    if url is None:
        return fallback
    if is_url_scheme_dangerous(url):
        return fallback
    return url


__all__ = [
    "escape_html",
    "is_url_scheme_dangerous",
    "is_url_safe",
    "sanitize_url",
]
