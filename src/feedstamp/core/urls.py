"""Validation of the channel link URL."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from feedstamp.core.problems import Problem
from feedstamp.exceptions import ConfigurationError

ALLOWED_SCHEMES = ("http", "https")

# RFC 3986 host characters: reg-name, IPv4 and bracket-stripped IPv6
HOST_PATTERN = re.compile(r"[A-Za-z0-9\-._~%!$&'()*+,;=:]+")


def _invalid(message: str) -> ConfigurationError:
    return ConfigurationError(message, [Problem("channel", "Link", message)])


def validate_url(url: str | None) -> None:
    """Validate that a URL is absolute and uses http or https.

    Args:
        url: The channel link.

    Raises:
        ConfigurationError: If the URL is empty, points at localhost, is
            relative, cannot be parsed, or uses another scheme.
    """
    if url is None or not url.strip():
        raise _invalid("Link URL cannot be empty.")

    if url.lower().startswith("localhost"):
        raise _invalid("Link URL cannot be 'localhost'.")

    if "://" not in url:
        raise _invalid("Link URL must be absolute (include http:// or https://).")

    try:
        parsed = urlparse(url.strip())
        # Accessing the port validates it
        parsed.port  # noqa: B018
    except ValueError as e:
        raise _invalid(f"Link URL '{url}' is not a valid URL format.") from e

    if not parsed.scheme or not parsed.hostname or not HOST_PATTERN.fullmatch(parsed.hostname):
        raise _invalid(f"Link URL '{url}' is not a valid URL format.")

    if parsed.scheme not in ALLOWED_SCHEMES:
        raise _invalid(f"Link URL must use http or https scheme, got '{parsed.scheme}'.")
