"""CLI tests for check command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from feedstamp.cli import main
from feedstamp.core.template import get_default_template


def write_template(root: Path, text: str) -> Path:
    """Write a template at the default location."""
    path = root / "wwwroot" / "feed.template.xml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestCheckCommand:
    """Tests for the check command."""

    def test_help(self) -> None:
        """Test --help option."""
        runner = CliRunner()
        result = runner.invoke(main, ["check", "--help"])
        assert result.exit_code == 0
        assert "--template" in result.output

    def test_passes(self, tmp_path: Path) -> None:
        """Test a filled-in default template passes."""
        write_template(tmp_path, get_default_template())
        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "--root",
                str(tmp_path),
                "check",
                "--rss:Title=T",
                "--rss:Link=https://example.com",
                "--rss:Description=D",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Check passed" in result.output
        assert "Channel placeholders resolved" in result.output

    def test_missing_value_fails(self, tmp_path: Path) -> None:
        """Test missing overrides fail the check."""
        write_template(tmp_path, get_default_template())
        runner = CliRunner()
        result = runner.invoke(main, ["--root", str(tmp_path), "check"])
        assert result.exit_code == 1
        assert "Check failed" in result.output

    def test_empty_element_fails(self, tmp_path: Path) -> None:
        """Test an empty required element fails the check."""
        write_template(tmp_path, "<title>T</title><link>https://a.com</link><description/>")
        runner = CliRunner()
        result = runner.invoke(main, ["--root", str(tmp_path), "check"])
        assert result.exit_code == 1
        assert "<description> missing" in result.output

    def test_does_not_write_output(self, tmp_path: Path) -> None:
        """Test check leaves no feed behind."""
        write_template(
            tmp_path, "<title>T</title><link>https://a.com</link><description>D</description>"
        )
        runner = CliRunner()
        result = runner.invoke(main, ["--root", str(tmp_path), "check"])
        assert result.exit_code == 0, result.output
        assert not (tmp_path / "wwwroot" / "feed.xml").exists()

    def test_missing_custom_template(self, tmp_path: Path) -> None:
        """Test a missing custom template is an error."""
        runner = CliRunner()
        result = runner.invoke(main, ["--root", str(tmp_path), "check", "--template", "x.xml"])
        assert result.exit_code == 1
        assert "was not found" in result.output

    def test_missing_default_template_not_created(self, tmp_path: Path) -> None:
        """Test check on an empty project reports the template and writes nothing."""
        runner = CliRunner()
        result = runner.invoke(main, ["--root", str(tmp_path), "check"])
        assert result.exit_code == 1
        assert "RSS template not found" in result.output
        assert list(tmp_path.rglob("*")) == []
