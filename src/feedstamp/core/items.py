"""Expansion of the ``<Items>`` block into one feed item per content entry.

The block between ``<Items>`` and ``</Items>`` is an item stamp. Each
selected entry gets its own copy of the stamp with ``{{Item.*}}`` tokens
resolved. Errors are collected across all entries and reported together;
no item is emitted unless every entry resolved cleanly.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from feedstamp.core.content_filter import should_include
from feedstamp.core.dates import EARLIEST, format_rfc1123, to_utc
from feedstamp.core.lookup import FoldedMapping, as_folded, fold_key
from feedstamp.core.problems import ProblemReport
from feedstamp.core.text import build_categories_xml, build_content_encoded, escape_text
from feedstamp.core.tokens import item_fields, render, scan_tokens
from feedstamp.exceptions import ItemResolutionError

if TYPE_CHECKING:
    from datetime import datetime

    from feedstamp.core.entries import ContentEntry

ITEMS_OPEN = "<Items>"
ITEMS_CLOSE = "</Items>"

MAX_ITEMS_KEY = "max-items"
DEFAULT_MAX_ITEMS = 20

ITEM_TITLE = "item.title"
ITEM_DESCRIPTION = "item.description"
ITEM_LINK = "item.link"
ITEM_GUID = "item.guid"
ITEM_PUBDATE = "item.pubdate"
ITEM_CATEGORIES = "item.categoriesxml"
ITEM_CONTENT = "item.contentencoded"
ITEM_IMAGE = "item.image"

STANDARD_ITEM_KEYS = frozenset(
    {
        ITEM_TITLE,
        ITEM_DESCRIPTION,
        ITEM_LINK,
        ITEM_GUID,
        ITEM_PUBDATE,
        ITEM_CATEGORIES,
        ITEM_CONTENT,
        ITEM_IMAGE,
    }
)

_OPEN_PATTERN = re.compile(re.escape(ITEMS_OPEN), re.IGNORECASE)
_CLOSE_PATTERN = re.compile(re.escape(ITEMS_CLOSE), re.IGNORECASE)


@dataclass(frozen=True)
class ItemsBlock:
    """Location of the item block within a document."""

    before: str
    stamp: str
    after: str


def find_items_block(content: str) -> ItemsBlock | None:
    """Locate the first ``<Items>...</Items>`` region (case-insensitive).

    Returns:
        The text around the block and the trimmed stamp, or None if either
        marker is missing.
    """
    opening = _OPEN_PATTERN.search(content)
    if opening is None:
        return None
    closing = _CLOSE_PATTERN.search(content, opening.end())
    if closing is None:
        return None

    return ItemsBlock(
        before=content[: opening.start()],
        stamp=content[opening.end() : closing.start()].strip(),
        after=content[closing.end() :],
    )


def parse_max_items(overrides: Mapping[str, str] | None) -> int:
    """Read the ``max-items`` cap, keeping the default when absent or non-numeric."""
    raw = as_folded(overrides).get(MAX_ITEMS_KEY)
    if raw is None:
        return DEFAULT_MAX_ITEMS
    try:
        return max(int(raw.strip()), 0)
    except ValueError:
        return DEFAULT_MAX_ITEMS


def _sort_key(entry: ContentEntry) -> datetime:
    return to_utc(entry.published) if entry.published is not None else EARLIEST


def select_entries(
    entries: Sequence[ContentEntry],
    overrides: Mapping[str, str] | None,
) -> list[ContentEntry]:
    """Filter, order newest first and cap the entries.

    Undated entries sort last; ties keep their input order.

    Args:
        entries: Entries from the content index.
        overrides: Override set with path filters and ``max-items``.

    Returns:
        At most ``max-items`` entries.
    """
    eligible = [e for e in entries if should_include(e.slug, overrides)]
    ordered = sorted(eligible, key=_sort_key, reverse=True)
    return ordered[: parse_max_items(overrides)]


class ItemResolver:
    """Resolves the ``{{Item.*}}`` tokens of one stamp for single entries."""

    def __init__(
        self,
        stamp: str,
        overrides: Mapping[str, str] | None,
        base_url: str | None,
    ) -> None:
        self.stamp = stamp
        self.tokens = scan_tokens(stamp)
        self.fields = item_fields(self.tokens)
        self.overrides = as_folded(overrides)
        self.base_url = base_url

    def references(self, key: str) -> bool:
        """Check if the stamp uses the item token with this folded key."""
        return key in self.fields

    def _display(self, key: str) -> str:
        return f"{{{{Item.{self.fields[key]}}}}}"

    def _put(
        self,
        key: str,
        value: str | None,
        values: dict[str, str],
        report: ProblemReport,
        title: str,
        missing: str | None = None,
    ) -> None:
        if not self.references(key):
            return
        if value:
            values[key] = escape_text(value)
            return
        message = missing or f"Missing value for {self._display(key)}"
        report.add(title, self.fields[key], f"Page '{title}': {message}")

    def link_for(self, entry: ContentEntry) -> str | None:
        """Absolute link of an entry, if a base URL and slug are known."""
        if not self.base_url or not entry.slug:
            return None
        return f"{self.base_url}/{entry.slug.lstrip('/')}"

    def resolve(self, entry: ContentEntry) -> tuple[str, ProblemReport]:
        """Render the stamp for one entry.

        Args:
            entry: Content entry.

        Returns:
            Tuple of (rendered item, problems found for this entry).
        """
        title = entry.title
        values: dict[str, str] = {}
        report = ProblemReport()

        self._put(ITEM_TITLE, entry.title, values, report, title)
        self._put(ITEM_DESCRIPTION, entry.description, values, report, title)

        link = self.link_for(entry)
        self._put(
            ITEM_LINK,
            link,
            values,
            report,
            title,
            "Cannot generate Item.Link - missing base URL or page slug",
        )
        self._put(
            ITEM_GUID, link, values, report, title, "Cannot generate Item.Guid - missing Item.Link"
        )

        pub_date = format_rfc1123(entry.published) if entry.published is not None else None
        self._put(
            ITEM_PUBDATE, pub_date, values, report, title, "Missing Date property for Item.PubDate"
        )

        if self.references(ITEM_CATEGORIES):
            values[ITEM_CATEGORIES] = build_categories_xml(entry.tags)
        if self.references(ITEM_CONTENT):
            values[ITEM_CONTENT] = build_content_encoded(entry.body or entry.description)

        self._put(ITEM_IMAGE, entry.image, values, report, title)

        self._resolve_custom(entry, values, report)

        return render(self.stamp, self.tokens, values), report

    def _resolve_custom(
        self,
        entry: ContentEntry,
        values: dict[str, str],
        report: ProblemReport,
    ) -> None:
        metadata = FoldedMapping(entry.metadata)
        for key, field in self.fields.items():
            if key in STANDARD_ITEM_KEYS:
                continue

            override_key = fold_key(field)
            value = self.overrides.get(override_key)
            if value is None:
                value = metadata.get(field)

            if value:
                values[key] = escape_text(value)
            else:
                report.add(
                    entry.title,
                    field,
                    f"Page '{entry.title}': Missing value for {self._display(key)}. "
                    f'Checked CLI (--rss:{override_key}), then metadata["{field}"] '
                    "(case insensitive).",
                )


def remove_items_block(block: ItemsBlock) -> str:
    """Drop an empty item block, leaving a blank line in its place."""
    return block.before.rstrip() + "\n\n" + block.after.lstrip()


def expand_items(
    content: str,
    entries: Sequence[ContentEntry],
    overrides: Mapping[str, str] | None,
    base_url: str | None,
) -> str:
    """Replace the item block with one rendered stamp per selected entry.

    Args:
        content: Document after channel resolution.
        entries: Entries from the content index, in any order.
        overrides: Override set.
        base_url: Site base URL for ``{{Item.Link}}``.

    Returns:
        The document with items in place of the block. Unchanged if there
        is no block.

    Raises:
        ItemResolutionError: Listing every entry and field that could not
            be resolved.
    """
    block = find_items_block(content)
    if block is None:
        return content

    if not block.stamp:
        return remove_items_block(block)

    resolver = ItemResolver(block.stamp, overrides, base_url)
    report = ProblemReport()
    items = []

    for entry in select_entries(entries, overrides):
        item, problems = resolver.resolve(entry)
        report.extend(problems)
        items.append(item)

    report.raise_if_failed(ItemResolutionError, "Missing required item values:")

    generated = "\n" + "\n".join(items) + "\n" if items else "\n"
    return block.before.rstrip() + generated + block.after.lstrip()
