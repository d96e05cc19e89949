"""Unit tests for configuration loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from feedstamp.config import (
    Config,
    FrontmatterConfig,
    PathsConfig,
    RenderConfig,
    SpecialFoldersConfig,
    find_config_file,
    load_config,
)
from feedstamp.core.template import DEFAULT_TEMPLATE_FILENAME
from feedstamp.exceptions import ConfigError


class TestPathsConfig:
    """Tests for PathsConfig."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = PathsConfig()
        assert config.root == Path(".")
        assert config.content == Path("content")
        assert config.template == Path("wwwroot/feed.template.xml")
        assert config.template.name == DEFAULT_TEMPLATE_FILENAME
        assert config.output == Path("wwwroot/feed.xml")


class TestSpecialFoldersConfig:
    """Tests for SpecialFoldersConfig."""

    def test_defaults(self) -> None:
        """Test default exclude patterns."""
        config = SpecialFoldersConfig()
        assert ".*" in config.exclude_patterns
        assert "_*" in config.exclude_patterns
        assert "README.md" in config.ignore_files


class TestFrontmatterConfig:
    """Tests for FrontmatterConfig."""

    def test_defaults(self) -> None:
        """Test default field mappings."""
        config = FrontmatterConfig()
        assert "title" in config.title
        assert "summary" in config.description
        assert "date" in config.published_date


class TestRenderConfig:
    """Tests for RenderConfig."""

    def test_defaults(self) -> None:
        """Test rendering is on with common extensions."""
        config = RenderConfig()
        assert config.enabled is True
        assert "fenced_code" in config.extensions


class TestConfig:
    """Tests for the main Config model."""

    def test_defaults(self) -> None:
        """Test a default config has empty feed overrides."""
        config = Config()
        assert config.version == 1
        assert config.feed.overrides == {}

    def test_resolve_relative_path(self, tmp_path: Path) -> None:
        """Test relative paths resolve against the root."""
        config = Config(paths=PathsConfig(root=tmp_path))
        assert config.resolve_path(Path("a/b.xml")) == tmp_path / "a" / "b.xml"

    def test_resolve_absolute_path(self, tmp_path: Path) -> None:
        """Test absolute paths are returned unchanged."""
        config = Config(paths=PathsConfig(root=Path("elsewhere")))
        assert config.resolve_path(tmp_path) == tmp_path


class TestFindConfigFile:
    """Tests for find_config_file function."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test an explicit path is used."""
        path = tmp_path / "custom.yaml"
        path.write_text("version: 1\n")
        assert find_config_file(path) == path

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        """Test a missing explicit path raises ConfigError."""
        with pytest.raises(ConfigError, match="Config file not found"):
            find_config_file(tmp_path / "missing.yaml")

    def test_current_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test feedstamp.yaml in the working directory is found."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "feedstamp.yaml").write_text("version: 1\n")
        assert find_config_file() == Path("feedstamp.yaml")

    def test_project_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test .feedstamp/config.yaml is found."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".feedstamp").mkdir()
        (tmp_path / ".feedstamp" / "config.yaml").write_text("version: 1\n")
        assert find_config_file() == Path(".feedstamp/config.yaml")

    def test_xdg_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the XDG config location is searched last."""
        monkeypatch.chdir(tmp_path)
        xdg = Path(os.environ["XDG_CONFIG_HOME"]) / "feedstamp"
        xdg.mkdir(parents=True)
        (xdg / "config.yaml").write_text("version: 1\n")
        assert find_config_file() == xdg / "config.yaml"

    def test_not_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test None when no config exists."""
        monkeypatch.chdir(tmp_path)
        assert find_config_file() is None


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test defaults are returned when no file exists."""
        monkeypatch.chdir(tmp_path)
        assert load_config() == Config()

    def test_load_values(self, tmp_path: Path) -> None:
        """Test values are read from YAML."""
        path = tmp_path / "feedstamp.yaml"
        path.write_text(
            "version: 1\n"
            "paths:\n"
            "  content: pages\n"
            "feed:\n"
            "  overrides:\n"
            "    Title: From config\n"
            "    max-items: '5'\n"
        )
        config = load_config(path)
        assert config.paths.content == Path("pages")
        assert config.feed.overrides == {"Title": "From config", "max-items": "5"}

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file gives defaults."""
        path = tmp_path / "feedstamp.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test broken YAML raises ConfigError."""
        path = tmp_path / "feedstamp.yaml"
        path.write_text("paths: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Test schema violations raise ConfigError."""
        path = tmp_path / "feedstamp.yaml"
        path.write_text("render:\n  enabled: [1, 2]\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)
