"""Configuration loading and validation for feedstamp."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from feedstamp.core.template import DEFAULT_TEMPLATE_FILENAME
from feedstamp.exceptions import ConfigError

CONFIG_FILENAME = "feedstamp.yaml"


class PathsConfig(BaseModel):
    """Configuration for file paths (relative to the project root)."""

    root: Path = Path(".")
    content: Path = Path("content")
    template: Path = Path("wwwroot") / DEFAULT_TEMPLATE_FILENAME
    output: Path = Path("wwwroot/feed.xml")


class SpecialFoldersConfig(BaseModel):
    """Configuration for content discovery."""

    exclude_patterns: list[str] = Field(default_factory=lambda: [".*", "_*"])
    ignore_files: list[str] = Field(default_factory=lambda: ["README.md"])


class FrontmatterConfig(BaseModel):
    """Configuration for frontmatter field mapping."""

    title: list[str] = Field(default_factory=lambda: ["title", "name"])
    description: list[str] = Field(
        default_factory=lambda: ["description", "summary", "excerpt"]
    )
    published_date: list[str] = Field(default_factory=lambda: ["date", "published", "pubdate"])
    tags: list[str] = Field(default_factory=lambda: ["tags", "categories", "keywords"])
    image: list[str] = Field(default_factory=lambda: ["image", "cover", "thumbnail"])
    slug: list[str] = Field(default_factory=lambda: ["slug", "permalink"])
    draft: list[str] = Field(default_factory=lambda: ["draft"])


class DatesConfig(BaseModel):
    """Configuration for date handling."""

    input_formats: list[str] = Field(
        default_factory=lambda: [
            "%Y-%m-%d",
            "%Y-%m-%dT%H:%M:%S",
            "%Y-%m-%d %H:%M",
            "%d/%m/%Y",
            "%B %d, %Y",
        ]
    )


class RenderConfig(BaseModel):
    """Configuration for rendering markdown bodies to HTML."""

    enabled: bool = True
    extensions: list[str] = Field(default_factory=lambda: ["fenced_code", "tables"])


class FeedConfig(BaseModel):
    """Default override values, applied beneath command-line overrides."""

    overrides: dict[str, str] = Field(default_factory=dict)


class Config(BaseModel):
    """Main configuration for feedstamp."""

    version: int = 1
    paths: PathsConfig = Field(default_factory=PathsConfig)
    special_folders: SpecialFoldersConfig = Field(default_factory=SpecialFoldersConfig)
    frontmatter: FrontmatterConfig = Field(default_factory=FrontmatterConfig)
    dates: DatesConfig = Field(default_factory=DatesConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)

    def resolve_path(self, path: Path) -> Path:
        """Resolve a configured path against the project root."""
        if path.is_absolute():
            return path
        return self.paths.root / path


def get_xdg_config_home() -> Path:
    """Get the XDG config home directory.

    Returns:
        Path to the XDG config home (respects XDG_CONFIG_HOME env var).
    """
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def find_config_file(config_path: Path | None = None) -> Path | None:
    """Find the configuration file using XDG conventions.

    Search order (first found wins):
    1. --config PATH (command line override)
    2. ./feedstamp.yaml (current directory)
    3. ./.feedstamp/config.yaml (project directory)
    4. $XDG_CONFIG_HOME/feedstamp/config.yaml

    Args:
        config_path: Optional explicit config path from command line.

    Returns:
        Path to config file if found, None otherwise.
    """
    if config_path is not None:
        if config_path.exists():
            return config_path
        raise ConfigError(f"Config file not found: {config_path}")

    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return cwd_config

    project_config = Path(".feedstamp/config.yaml")
    if project_config.exists():
        return project_config

    xdg_config = get_xdg_config_home() / "feedstamp" / "config.yaml"
    if xdg_config.exists():
        return xdg_config

    return None


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return defaults.

    Args:
        config_path: Optional explicit config path.

    Returns:
        Config object with loaded or default values.

    Raises:
        ConfigError: If config file exists but is invalid.
    """
    found_path = find_config_file(config_path)

    if found_path is None:
        return Config()

    try:
        with found_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read config file: {e}") from e

    if data is None:
        return Config()

    try:
        return Config.model_validate(data)
    except ValueError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
