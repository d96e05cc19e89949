"""Timestamp parsing and RFC 1123 formatting for feedstamp."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, time
from email.utils import format_datetime

from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

# Sorts before every real timestamp
EARLIEST = datetime.min.replace(tzinfo=UTC)


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(UTC)


def to_utc(value: datetime | date) -> datetime:
    """Convert a date or datetime to an aware UTC datetime.

    Naive values are taken to already be in UTC; plain dates mean midnight.

    Args:
        value: Date or datetime.

    Returns:
        Timezone-aware datetime in UTC.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_rfc1123(value: datetime | date) -> str:
    """Format a timestamp as ``Mon, 01 Jan 2024 00:00:00 GMT``."""
    return format_datetime(to_utc(value), usegmt=True)


def parse_timestamp(
    value: object,
    input_formats: list[str] | None = None,
) -> datetime | None:
    """Parse a frontmatter timestamp.

    YAML may already have produced a ``date`` or ``datetime``; strings are
    tried against the explicit formats first, then dateutil.

    Args:
        value: Raw frontmatter value.
        input_formats: List of strptime formats to try.

    Returns:
        Aware UTC datetime, or None if the value is empty or unparseable.
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime | date):
        return to_utc(value)

    date_str = str(value).strip()
    if not date_str:
        return None

    # Try explicit formats first
    if input_formats:
        for fmt in input_formats:
            try:
                return to_utc(datetime.strptime(date_str, fmt))
            except ValueError:
                continue

    # Fall back to dateutil parser
    try:
        return to_utc(dateutil_parser.parse(date_str, fuzzy=False))
    except (ValueError, TypeError, OverflowError):
        logger.warning("Unrecognized date %r, treating the page as undated", date_str)
        return None
