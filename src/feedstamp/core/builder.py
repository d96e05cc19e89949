"""Reading a template, generating the feed and writing it to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from feedstamp.core.entries import collect_entries
from feedstamp.core.generator import generate_feed
from feedstamp.core.template import create_default_template
from feedstamp.exceptions import TemplateCreatedError, TemplateNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from feedstamp.config import Config
    from feedstamp.core.entries import ContentEntry

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of building a feed file."""

    template_path: Path
    output_path: Path
    entry_count: int


def locate_template(
    config: Config,
    custom_template: Path | None = None,
    create_missing: bool = True,
) -> Path:
    """Find the template to render.

    A custom template must exist. A missing default template is created
    from the built-in one so the operator can fill it in, unless
    ``create_missing`` is False.

    Args:
        config: Application configuration.
        custom_template: Explicit template path, relative to the project root.
        create_missing: Write the default template when it is absent.

    Returns:
        Path to an existing template.

    Raises:
        TemplateNotFoundError: If the custom template does not exist, or the
            default template does not exist and ``create_missing`` is False.
        TemplateCreatedError: If the default template had to be created.
    """
    if custom_template is not None:
        path = config.resolve_path(custom_template)
        if not path.exists():
            raise TemplateNotFoundError(f"The specified RSS template file was not found: {path}")
        return path

    path = config.resolve_path(config.paths.template)
    if not path.exists():
        if not create_missing:
            raise TemplateNotFoundError(
                f"RSS template not found: {path}. Run 'feedstamp init' to create it."
            )
        create_default_template(path)
        raise TemplateCreatedError(
            f"Required RSS template wasn't found and has been created at {path}. "
            "Please fill in the missing details before running again."
        )
    return path


def build_feed(
    config: Config,
    overrides: Mapping[str, str],
    *,
    template: Path | None = None,
    output: Path | None = None,
    entries: list[ContentEntry] | None = None,
    now: datetime | None = None,
) -> BuildResult:
    """Render the feed template and write the result.

    Args:
        config: Application configuration.
        overrides: Merged override set.
        template: Explicit template path.
        output: Output path, defaults to ``paths.output``.
        entries: Entries to use instead of scanning ``paths.content``.
        now: Build time.

    Returns:
        BuildResult with the paths used.
    """
    template_path = locate_template(config, template)
    logger.info("Processing RSS template from: %s", template_path)
    template_text = template_path.read_text(encoding="utf-8")

    if entries is None:
        content_root = config.resolve_path(config.paths.content)
        if content_root.is_dir():
            entries = collect_entries(content_root, config)
        else:
            logger.warning("Content directory not found: %s", content_root)
            entries = []

    document = generate_feed(template_text, overrides, entries, now=now)

    output_path = config.resolve_path(output or config.paths.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document, encoding="utf-8")
    logger.info("RSS feed generated at: %s", output_path)

    return BuildResult(
        template_path=template_path,
        output_path=output_path,
        entry_count=len(entries),
    )
