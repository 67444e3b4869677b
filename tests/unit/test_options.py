#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the frozen option dataclasses."""

from dataclasses import FrozenInstanceError

import pytest

from notemark.options import (
    HtmlRendererOptions,
    JsonRendererOptions,
    MarkdownParserOptions,
    MarkdownRendererOptions,
)


@pytest.mark.unit
class TestOptionsCloning:
    """Tests for create_updated and from_dict."""

    def test_options_are_frozen(self) -> None:
        """Test that fields cannot be reassigned."""
        options = HtmlRendererOptions()

        with pytest.raises(FrozenInstanceError):
            options.standalone = True  # type: ignore[misc]

    def test_create_updated_returns_copy(self) -> None:
        """Test that create_updated leaves the original untouched."""
        options = HtmlRendererOptions()
        updated = options.create_updated(standalone=True, title="Notes")

        assert updated.standalone is True
        assert updated.title == "Notes"
        assert options.standalone is False
        assert options.title == "Document"

    def test_from_dict_ignores_unknown_keys(self) -> None:
        """Test that keys for other formats are skipped."""
        data = {"heading_ids": True, "indent": 2, "bullet": "*"}

        assert HtmlRendererOptions.from_dict(data).heading_ids is True
        assert JsonRendererOptions.from_dict(data).indent == 2
        assert MarkdownRendererOptions.from_dict(data).bullet == "*"
        assert MarkdownParserOptions.from_dict(data) == MarkdownParserOptions()


@pytest.mark.unit
class TestOptionsValidation:
    """Tests for __post_init__ validation."""

    def test_unknown_css_class_key(self) -> None:
        """Test that css_class_map keys must be node types."""
        with pytest.raises(ValueError, match="unknown node types: table"):
            HtmlRendererOptions(css_class_map={"table": "tbl"})

    def test_known_css_class_keys(self) -> None:
        """Test a valid css_class_map."""
        options = HtmlRendererOptions(css_class_map={"heading": "title", "codeBlock": ["code", "block"]})

        assert options.css_class_map["codeBlock"] == ["code", "block"]

    @pytest.mark.parametrize("language", ["", "two words", "a/b"])
    def test_invalid_default_language(self, language) -> None:
        """Test the default code language must be a tag."""
        with pytest.raises(ValueError):
            MarkdownParserOptions(default_code_language=language)

    def test_invalid_bullet(self) -> None:
        """Test that only '-' and '*' bullets are accepted."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions(bullet="+")

    def test_negative_indent(self) -> None:
        """Test that JSON indent must not be negative."""
        with pytest.raises(ValueError):
            JsonRendererOptions(indent=-1)
