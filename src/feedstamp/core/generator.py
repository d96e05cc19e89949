"""Feed generation pipeline: channel, structure check, items."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from feedstamp.core.channel import resolve_channel
from feedstamp.core.items import expand_items
from feedstamp.core.lookup import as_folded
from feedstamp.core.structure import validate_structure

if TYPE_CHECKING:
    from datetime import datetime

    from feedstamp.core.entries import ContentEntry


def generate_feed(
    template: str,
    overrides: Mapping[str, str] | None,
    entries: Sequence[ContentEntry],
    now: datetime | None = None,
) -> str:
    """Turn a feed template into a complete feed document.

    Args:
        template: Template text.
        overrides: Override set (case-insensitive keys).
        entries: Content entries.
        now: Build time, defaults to the current UTC time.

    Returns:
        The feed document.

    Raises:
        ConfigurationError: Missing channel value or invalid link.
        StructuralError: Required channel elements missing or empty.
        ItemResolutionError: Item placeholders that could not be resolved.
    """
    options = as_folded(overrides)
    channel = resolve_channel(template, options, now=now)
    validate_structure(channel.content)
    return expand_items(channel.content, entries, options, channel.base_url)
