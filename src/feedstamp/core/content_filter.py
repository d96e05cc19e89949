"""Include/ignore path filtering of content entries."""

from __future__ import annotations

from collections.abc import Mapping

from feedstamp.core.lookup import as_folded
from feedstamp.core.text import normalize_path, parse_path_list

INCLUDE_PATHS_KEY = "include-paths"
IGNORE_PATHS_KEY = "ignore-paths"
LEGACY_IGNORE_PATH_KEY = "ignore-path"


def _matches_any(slug: str, prefixes: list[str]) -> bool:
    folded = slug.casefold()
    return any(folded.startswith(prefix.casefold()) for prefix in prefixes)


def should_include(slug: str | None, overrides: Mapping[str, str] | None) -> bool:
    """Decide whether an entry with this slug belongs in the feed.

    Criteria:
    1. If ``include-paths`` lists any prefix, the slug must start with one.
    2. If ``ignore-paths`` (or legacy ``ignore-path``) lists a prefix the slug
       starts with, it is excluded, even when it was included by step 1.

    Prefix matching is case-insensitive.

    Args:
        slug: Entry slug.
        overrides: Override set.

    Returns:
        True if the entry should be included.
    """
    options = as_folded(overrides)
    normalized = normalize_path(slug)

    include_paths = parse_path_list(options.get(INCLUDE_PATHS_KEY))
    if include_paths and not _matches_any(normalized, include_paths):
        return False

    if IGNORE_PATHS_KEY in options:
        ignore_value = options[IGNORE_PATHS_KEY]
    else:
        ignore_value = options.get(LEGACY_IGNORE_PATH_KEY)

    ignore_paths = parse_path_list(ignore_value)
    return not _matches_any(normalized, ignore_paths)
