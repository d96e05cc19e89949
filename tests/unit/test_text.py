"""Unit tests for string and path helpers."""

from __future__ import annotations

from feedstamp.core.text import (
    build_categories_xml,
    build_content_encoded,
    escape_text,
    normalize_path,
    parse_path_list,
)


class TestNormalizePath:
    """Tests for normalize_path function."""

    def test_strips_leading_slashes(self) -> None:
        """Test that leading slashes are removed."""
        assert normalize_path("//blog/post") == "blog/post"

    def test_keeps_trailing_slash(self) -> None:
        """Test that trailing slashes are preserved."""
        assert normalize_path("/page/") == "page/"
        assert normalize_path("page/") != normalize_path("page")

    def test_empty(self) -> None:
        """Test empty and None input."""
        assert normalize_path("") == ""
        assert normalize_path(None) == ""


class TestParsePathList:
    """Tests for parse_path_list function."""

    def test_comma_and_semicolon(self) -> None:
        """Test splitting on both separators."""
        assert parse_path_list("blog, /news/;docs") == ["blog", "news/", "docs"]

    def test_discards_empty_pieces(self) -> None:
        """Test that blank and slash-only pieces are dropped."""
        assert parse_path_list(" , ; / ,blog") == ["blog"]

    def test_blank_input(self) -> None:
        """Test blank input yields no paths."""
        assert parse_path_list("   ") == []
        assert parse_path_list(None) == []


class TestEscapeText:
    """Tests for escape_text function."""

    def test_markup_characters(self) -> None:
        """Test escaping of markup-significant characters."""
        assert escape_text('Tom & "Jerry" <3') == "Tom &amp; &quot;Jerry&quot; &lt;3"


class TestBuildCategoriesXml:
    """Tests for build_categories_xml function."""

    def test_joins_with_indent(self) -> None:
        """Test categories are joined with newline and indent."""
        result = build_categories_xml(["python", "rss"])
        assert result == "<category>python</category>\n        <category>rss</category>"

    def test_escapes_tags(self) -> None:
        """Test tags are escaped."""
        assert build_categories_xml(["a&b"]) == "<category>a&amp;b</category>"

    def test_no_tags(self) -> None:
        """Test empty tag list gives empty string."""
        assert build_categories_xml([]) == ""
        assert build_categories_xml(None) == ""


class TestBuildContentEncoded:
    """Tests for build_content_encoded function."""

    def test_wraps_in_cdata(self) -> None:
        """Test HTML is wrapped raw in a CDATA section."""
        result = build_content_encoded("<p>Hi</p>")
        assert result == "<content:encoded><![CDATA[<p>Hi</p>]]></content:encoded>"

    def test_splits_cdata_terminator(self) -> None:
        """Test a literal ]]> cannot close the section early."""
        result = build_content_encoded("a]]>b")
        assert result.count("<![CDATA[") == 2
        assert "a]]]]><![CDATA[>b" in result

    def test_empty(self) -> None:
        """Test empty body gives empty string."""
        assert build_content_encoded("") == ""
        assert build_content_encoded(None) == ""
