"""Lexing command-line style overrides into an override set."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from feedstamp.core.lookup import FoldedMapping
from feedstamp.exceptions import ValidationError

RSS_PREFIX = "--rss:"
TEMPLATE_KEY = "template"


def _split_pair(text: str) -> tuple[str, str] | None:
    key, sep, value = text.partition("=")
    if not sep or not key:
        return None
    return key, value


def extract_rss_arguments(args: Iterable[str]) -> dict[str, str]:
    """Collect ``--rss:key=value`` arguments.

    Arguments without the prefix, or without a key before ``=``, are skipped.
    A repeated key keeps its last value.

    Args:
        args: Raw command-line arguments.

    Returns:
        Key/value pairs in first-seen order.
    """
    pairs: dict[str, str] = {}
    for arg in args:
        if not arg.lower().startswith(RSS_PREFIX):
            continue
        pair = _split_pair(arg[len(RSS_PREFIX) :])
        if pair is not None:
            pairs[pair[0]] = pair[1]
    return pairs


def get_template_argument(args: Iterable[str]) -> str | None:
    """Return the first ``--rss:template=PATH`` value, if any."""
    prefix = f"{RSS_PREFIX}{TEMPLATE_KEY}="
    for arg in args:
        if arg.lower().startswith(prefix):
            return arg[len(prefix) :]
    return None


def parse_pairs(pairs: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings.

    Raises:
        ValidationError: If a pair has no ``=`` or an empty key.
    """
    result: dict[str, str] = {}
    for text in pairs:
        pair = _split_pair(text)
        if pair is None:
            raise ValidationError(f"Invalid override '{text}': expected KEY=VALUE")
        result[pair[0]] = pair[1]
    return result


def build_overrides(*layers: Mapping[str, str]) -> FoldedMapping:
    """Merge override layers; later layers win, keys compare case-insensitively."""
    merged = FoldedMapping()
    for layer in layers:
        merged = merged.merged(layer)
    return merged


def gather_overrides(
    defaults: Mapping[str, str],
    pairs: Iterable[str],
    extra_args: Iterable[str],
) -> FoldedMapping:
    """Build the override set for one run.

    Precedence, lowest first: config file defaults, ``--set KEY=VALUE``,
    ``--rss:KEY=VALUE``. The ``template`` key is not an override.

    Raises:
        ValidationError: On malformed pairs or unrecognized arguments.
    """
    extra_args = list(extra_args)
    unknown = [arg for arg in extra_args if not arg.lower().startswith(RSS_PREFIX)]
    if unknown:
        raise ValidationError(f"Unrecognized arguments: {' '.join(unknown)}")

    rss_args = extract_rss_arguments(extra_args)
    rss_args = {k: v for k, v in rss_args.items() if k.lower() != TEMPLATE_KEY}
    return build_overrides(defaults, parse_pairs(pairs), rss_args)
