#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for HTML escaping and URL sanitization."""

import pytest

from notemark.utils.html_utils import escape_html, is_url_safe, sanitize_url


@pytest.mark.unit
@pytest.mark.security
class TestEscapeHtml:
    """Tests for escape_html."""

    def test_special_characters(self) -> None:
        """Test the five escaped characters."""
        assert escape_html("<a href=\"x\">'&'</a>") == "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;&#x27;&lt;/a&gt;"

    def test_none_is_empty(self) -> None:
        """Test that None degrades to an empty string."""
        assert escape_html(None) == ""

    def test_plain_text_unchanged(self) -> None:
        """Test text without special characters."""
        assert escape_html("plain text 123") == "plain text 123"


@pytest.mark.unit
@pytest.mark.security
class TestUrlSafety:
    """Tests for is_url_safe and sanitize_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "mailto:me@example.com",
            "/relative/path",
            "../up",
            "#anchor",
            "?q=1",
            "",
            "notes/today.md",
            "data:image/png;base64,iVBORw0KGgo=",
        ],
    )
    def test_safe_urls(self, url) -> None:
        """Test URLs that pass through unchanged."""
        assert is_url_safe(url)
        assert sanitize_url(url, fallback="#") == url

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "JAVASCRIPT:alert(1)",
            "  javascript:alert(1)",
            "java\nscript:alert(1)",
            "vbscript:msgbox",
            "data:text/html,<script>",
            "data:application/javascript,x",
            "about:blank",
        ],
    )
    def test_dangerous_urls(self, url) -> None:
        """Test URLs replaced by the fallback."""
        assert not is_url_safe(url)
        assert sanitize_url(url, fallback="#") == "#"

    def test_none_uses_fallback(self) -> None:
        """Test a missing URL."""
        assert sanitize_url(None, fallback="#") == "#"
