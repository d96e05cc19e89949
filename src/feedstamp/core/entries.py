"""Content entries and loading them from markdown files with frontmatter."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import frontmatter as fm
import markdown
import yaml
from pydantic import BaseModel, ConfigDict, Field

from feedstamp.core.dates import parse_timestamp
from feedstamp.core.discovery import discover_markdown_files
from feedstamp.exceptions import ParseError

if TYPE_CHECKING:
    from feedstamp.config import Config

logger = logging.getLogger(__name__)


class ContentEntry(BaseModel):
    """One page or post offered to the feed."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    slug: str = ""
    published: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    body: str | None = None
    image: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)


def extract_field(data: dict[str, Any], field_names: list[str], default: Any = None) -> Any:
    """Extract a field using the first of several possible names that is present."""
    for name in field_names:
        if name in data:
            return data[name]
    return default


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime | date):
        return value.isoformat()
    return str(value)


def _as_tags(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    if isinstance(value, list | tuple):
        return [_as_text(tag).strip() for tag in value if _as_text(tag).strip()]
    return [_as_text(value)]


def slug_from_path(path: Path, root: Path) -> str:
    """Derive a slug from a file's location below the content root.

    ``blog/hello.md`` becomes ``blog/hello``; ``blog/index.md`` becomes
    ``blog``.
    """
    relative = path.relative_to(root).with_suffix("")
    if relative.name.lower() == "index":
        relative = relative.parent
    slug = relative.as_posix()
    return "" if slug == "." else slug


def render_body(text: str, config: Config) -> str | None:
    """Render a markdown body to HTML, if rendering is enabled."""
    if not config.render.enabled or not text.strip():
        return None
    return markdown.markdown(text, extensions=config.render.extensions)


def parse_entry(text: str, slug: str, config: Config) -> ContentEntry | None:
    """Build a content entry from markdown text with YAML frontmatter.

    Args:
        text: Full file content.
        slug: Slug to use when the frontmatter has none.
        config: Application configuration.

    Returns:
        The entry, or None for drafts.

    Raises:
        ParseError: If the frontmatter is not valid YAML.
    """
    try:
        post = fm.loads(text)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid frontmatter YAML: {e}") from e

    data = post.metadata
    mapping = config.frontmatter
    if extract_field(data, mapping.draft) is True:
        return None

    metadata = {
        str(key): _as_text(value)
        for key, value in data.items()
        if not isinstance(value, list | dict)
    }

    return ContentEntry(
        title=_as_text(extract_field(data, mapping.title)),
        description=_as_text(extract_field(data, mapping.description)),
        slug=_as_text(extract_field(data, mapping.slug, slug)),
        published=parse_timestamp(
            extract_field(data, mapping.published_date), config.dates.input_formats
        ),
        tags=_as_tags(extract_field(data, mapping.tags)),
        body=render_body(post.content, config),
        image=_as_text(extract_field(data, mapping.image)) or None,
        metadata=metadata,
    )


def load_entry(path: Path, root: Path, config: Config) -> ContentEntry | None:
    """Load a content entry from a markdown file.

    Raises:
        ParseError: If the file's frontmatter is invalid.
    """
    text = path.read_text(encoding="utf-8")
    try:
        return parse_entry(text, slug_from_path(path, root), config)
    except ParseError as e:
        raise ParseError(f"{path}: {e}") from e


def collect_entries(root: Path, config: Config) -> list[ContentEntry]:
    """Load every markdown file below ``root`` as a content entry.

    Args:
        root: Content directory.
        config: Application configuration.

    Returns:
        Entries in discovery order, drafts excluded.
    """
    entries = []
    for path in discover_markdown_files(root, config):
        entry = load_entry(path, root, config)
        if entry is None:
            logger.debug("Skipping draft: %s", path)
            continue
        entries.append(entry)
    logger.info("Collected %d content entries from %s", len(entries), root)
    return entries
