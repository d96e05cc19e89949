"""Placeholder scanning and substitution.

Templates use ``{{Name}}`` for channel tokens and ``{{Item.Name}}`` for item
tokens. All occurrences are scanned in one pass before anything is replaced;
rendering then applies an explicit token-to-value map, so a value inserted
for one token is never rescanned for another.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Literal

from feedstamp.core.lookup import fold_key

TOKEN_PATTERN = re.compile(r"\{\{([A-Za-z][A-Za-z0-9_]*(?:\.[A-Za-z][A-Za-z0-9_]*)?)\}\}")

ITEM_PREFIX = "item."

Scope = Literal["channel", "item"]


@dataclass(frozen=True)
class Token:
    """One placeholder occurrence in a template."""

    name: str
    scope: Scope
    start: int
    end: int

    @property
    def key(self) -> str:
        """Resolution key: exact for channel tokens, case-folded for item tokens."""
        return fold_key(self.name) if self.scope == "item" else self.name

    @property
    def field(self) -> str:
        """Name without the ``Item.`` prefix."""
        if self.scope == "item":
            return self.name[len(ITEM_PREFIX) :]
        return self.name


def scan_tokens(template: str) -> list[Token]:
    """Find every placeholder in a template, in document order.

    Args:
        template: Template text.

    Returns:
        Tokens with their scope and span.
    """
    tokens = []
    for match in TOKEN_PATTERN.finditer(template):
        name = match.group(1)
        if "." in name:
            if not name.lower().startswith(ITEM_PREFIX):
                continue
            scope: Scope = "item"
        else:
            scope = "channel"
        tokens.append(Token(name=name, scope=scope, start=match.start(), end=match.end()))
    return tokens


def item_fields(tokens: Iterable[Token]) -> dict[str, str]:
    """Collapse item tokens to one entry per key.

    Returns:
        Mapping of folded key to the field name as first spelled.
    """
    fields: dict[str, str] = {}
    for token in tokens:
        if token.scope == "item" and token.key not in fields:
            fields[token.key] = token.field
    return fields


def has_channel_token(tokens: Iterable[Token], name: str) -> bool:
    """Check if a channel token with exactly this name occurs."""
    return any(t.scope == "channel" and t.name == name for t in tokens)


def render(template: str, tokens: Iterable[Token], values: Mapping[str, str]) -> str:
    """Substitute resolved values into a template.

    Tokens whose key has no value are left untouched.

    Args:
        template: Template text the tokens were scanned from.
        tokens: Tokens from :func:`scan_tokens`, in document order.
        values: Token key to replacement text.

    Returns:
        The rendered text.
    """
    parts = []
    position = 0
    for token in tokens:
        if token.key not in values:
            continue
        parts.append(template[position : token.start])
        parts.append(values[token.key])
        position = token.end
    parts.append(template[position:])
    return "".join(parts)
