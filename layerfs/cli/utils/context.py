"""CLI context management."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from layerfs.cli.utils.output import OutputFormatter
from layerfs.core.config import Settings
from layerfs.core.fs import FS
from layerfs.infrastructure.filesystem import FolderFS, LayeredFS
from layerfs.infrastructure.logging import bind_context


@dataclass
class CLIContext:
    """Context object passed through CLI commands."""

    debug: bool
    settings: Settings
    formatter: OutputFormatter
    console: Console

    def build_fs(self, roots: Optional[List[Path]] = None) -> FS:
        """
        Build the filesystem a command operates on.

        Args:
            roots: Host folders, highest priority first; settings.default_roots if empty

        Returns:
            A FolderFS for a single root, a LayeredFS of FolderFS otherwise
        """
        paths = [str(root) for root in roots] if roots else list(self.settings.default_roots)
        bind_context(roots=paths)

        layers = [FolderFS(path) for path in paths]
        if len(layers) == 1:
            return layers[0]

        return LayeredFS(*layers)
