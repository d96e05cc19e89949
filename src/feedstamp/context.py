"""Per-invocation state shared by the feedstamp commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from feedstamp.config import load_config

if TYPE_CHECKING:
    from feedstamp.config import Config


class Context:
    """Configuration and global flags for one CLI run."""

    def __init__(self) -> None:
        self.config: Config | None = None
        self.config_path: Path | None = None
        self.verbose: int = 0
        self.quiet: bool = False
        self.no_color: bool = False
        self.root_override: Path | None = None

    def load_config(self, config_path: Path | None = None) -> Config:
        """Load configuration once; later calls return the cached config."""
        if self.config is None:
            self.config = load_config(config_path)
            self.config_path = config_path
        return self.config

    def get_project_root(self) -> Path:
        """Get the resolved project root directory.

        Priority: --root option, absolute ``paths.root``, then ``paths.root``
        relative to the current directory.
        """
        if self.root_override is not None:
            return self.root_override.resolve()

        root = self.load_config().paths.root
        if root.is_absolute():
            return root
        return (Path.cwd() / root).resolve()

    def pin_project_root(self) -> None:
        """Make ``paths.root`` absolute so later path lookups ignore the cwd."""
        config = self.load_config()
        config.paths.root = self.get_project_root()
