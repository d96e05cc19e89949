"""Resolution of channel-level placeholders."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from feedstamp.core.dates import format_rfc1123, utc_now
from feedstamp.core.lookup import as_folded
from feedstamp.core.problems import Problem
from feedstamp.core.tokens import has_channel_token, render, scan_tokens
from feedstamp.core.urls import validate_url
from feedstamp.exceptions import ConfigurationError

MANDATORY_FIELDS = ("Title", "Description", "Link")

BUILD_DATE_TOKEN = "LastBuildDate"

# First <link>...</link> with text content
CHANNEL_LINK_PATTERN = re.compile(r"<link>([^<]+)</link>", re.IGNORECASE)


@dataclass(frozen=True)
class ChannelResult:
    """Channel text after substitution, and the site base URL if known."""

    content: str
    base_url: str | None


def resolve_channel(
    template: str,
    overrides: Mapping[str, str] | None,
    now: datetime | None = None,
) -> ChannelResult:
    """Resolve ``{{Title}}``, ``{{Description}}``, ``{{Link}}`` and ``{{LastBuildDate}}``.

    Mandatory fields are taken from the overrides. A field without an
    override is only an error if its token is still in the template;
    otherwise the template carries its own value.

    Args:
        template: Template text.
        overrides: Override set.
        now: Build time, defaults to the current UTC time.

    Returns:
        ChannelResult with substituted content and base URL.

    Raises:
        ConfigurationError: On the first missing field or an invalid link.
    """
    options = as_folded(overrides)
    tokens = scan_tokens(template)

    values = {BUILD_DATE_TOKEN: format_rfc1123(now or utc_now())}

    for name in MANDATORY_FIELDS:
        if name in options:
            values[name] = options[name]
        elif has_channel_token(tokens, name):
            message = (
                f"Missing value for {{{{{name}}}}}.\n"
                f"Checked CLI (--rss:{name}), but no value found.\n"
                "Provide a CLI argument or replace the placeholder with a value in the template."
            )
            raise ConfigurationError(message, [Problem("channel", name, message)])

    base_url = None
    if "Link" in values:
        validate_url(values["Link"])
        base_url = values["Link"].rstrip("/")

    content = render(template, tokens, values)

    if base_url is None:
        match = CHANNEL_LINK_PATTERN.search(content)
        if match:
            base_url = match.group(1).rstrip("/")

    return ChannelResult(content=content, base_url=base_url)
