"""Shared fixtures for feedstamp tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from feedstamp.core.entries import ContentEntry
from feedstamp.core.template import get_default_template


@pytest.fixture(autouse=True)
def isolate_xdg_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate XDG_CONFIG_HOME for all tests to avoid interference from real config."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".xdg-config"))
    monkeypatch.delenv("FEEDSTAMP_CONFIG", raising=False)


@pytest.fixture
def fixed_now() -> datetime:
    """Return a fixed build time."""
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def default_template() -> str:
    """Return the built-in feed template."""
    return get_default_template()


@pytest.fixture
def channel_overrides() -> dict[str, str]:
    """Return overrides for all mandatory channel fields."""
    return {
        "Title": "Example Blog",
        "Link": "https://example.com/",
        "Description": "Posts about things",
    }


@pytest.fixture
def make_entry():
    """Return a factory for content entries with sensible defaults."""

    def factory(**kwargs: object) -> ContentEntry:
        values: dict[str, object] = {
            "title": "A post",
            "description": "About the post",
            "slug": "blog/a-post",
            "published": datetime(2024, 1, 1, tzinfo=UTC),
        }
        values.update(kwargs)
        return ContentEntry(**values)

    return factory


@pytest.fixture
def sample_content(tmp_path: Path) -> Path:
    """Create a small content directory of markdown pages."""
    content = tmp_path / "content"
    (content / "blog").mkdir(parents=True)
    (content / "pages").mkdir()

    (content / "blog" / "first.md").write_text(
        "---\n"
        "title: First post\n"
        "description: The first one\n"
        "date: 2024-01-01\n"
        "tags: [python, rss]\n"
        "author: Sam\n"
        "---\n"
        "Hello **world**.\n",
        encoding="utf-8",
    )
    (content / "blog" / "second.md").write_text(
        "---\n"
        "title: Second post\n"
        "description: The second one\n"
        "date: 2024-02-01\n"
        "author: Alex\n"
        "---\n"
        "More text.\n",
        encoding="utf-8",
    )
    (content / "pages" / "about.md").write_text(
        "---\ntitle: About\ndescription: About this site\n---\nAbout us.\n",
        encoding="utf-8",
    )
    return content
