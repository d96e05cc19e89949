"""String and path helpers for feed rendering."""

from __future__ import annotations

import html
import re
from collections.abc import Iterable

PATH_SEPARATORS = re.compile(r"[,;]")

# Joins consecutive <category> elements inside the default item stamp
CATEGORY_SEPARATOR = "\n        "


def normalize_path(path: str | None) -> str:
    """Trim leading slashes, preserving trailing ones.

    ``"page/"`` and ``"page"`` stay distinct prefixes.

    Args:
        path: Path or slug to normalize.

    Returns:
        The normalized path, or an empty string.
    """
    if not path:
        return ""
    return path.lstrip("/")


def parse_path_list(value: str | None) -> list[str]:
    """Parse a comma or semicolon separated list of paths.

    Args:
        value: Raw list, e.g. ``"blog; /news/, docs"``.

    Returns:
        Normalized, non-empty paths in input order.
    """
    if not value or not value.strip():
        return []

    paths = []
    for piece in PATH_SEPARATORS.split(value):
        normalized = normalize_path(piece.strip())
        if normalized:
            paths.append(normalized)
    return paths


def escape_text(value: str) -> str:
    """Escape text for safe embedding in XML/HTML markup."""
    return html.escape(value, quote=True)


def build_categories_xml(tags: Iterable[str] | None) -> str:
    """Wrap each tag in an escaped ``<category>`` element.

    Args:
        tags: Tag strings, in order.

    Returns:
        The joined elements, or an empty string for no tags.
    """
    if not tags:
        return ""
    return CATEGORY_SEPARATOR.join(f"<category>{escape_text(tag)}</category>" for tag in tags)


def build_content_encoded(body: str | None) -> str:
    """Wrap rendered HTML in a ``<content:encoded>`` CDATA section.

    A literal ``]]>`` inside the body is split across two CDATA sections.

    Args:
        body: Rendered HTML.

    Returns:
        The element, or an empty string when there is no content.
    """
    if not body:
        return ""
    safe = body.replace("]]>", "]]]]><![CDATA[>")
    return f"<content:encoded><![CDATA[{safe}]]></content:encoded>"
