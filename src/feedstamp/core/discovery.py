"""Markdown content discovery for feedstamp."""

from __future__ import annotations

import fnmatch
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from feedstamp.config import Config


def should_ignore_file(path: Path, config: Config) -> bool:
    """Check if a file should be ignored (hidden, or listed in ignore_files)."""
    if path.name.startswith("."):
        return True
    return path.name in config.special_folders.ignore_files


def should_exclude_folder(name: str, config: Config) -> bool:
    """Check if a folder name matches one of the exclude patterns."""
    return any(
        fnmatch.fnmatch(name, pattern) for pattern in config.special_folders.exclude_patterns
    )


def discover_markdown_files(root: Path, config: Config) -> Iterator[Path]:
    """Discover markdown files below a content directory, in sorted order.

    Args:
        root: Content directory.
        config: Application configuration.

    Yields:
        Paths to markdown files.
    """
    for path in sorted(root.glob("**/*.md")):
        if should_ignore_file(path, config):
            continue

        relative = path.relative_to(root)
        if any(should_exclude_folder(part, config) for part in relative.parts[:-1]):
            continue

        yield path
