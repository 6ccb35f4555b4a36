"""Enumerate cheatsheet sources stored under a root directory."""

from __future__ import annotations

from pathlib import Path

from ._constants import ASSETS_DIRNAME, CONFIG_FILENAME, MARKDOWN_FILENAME


class CheatsheetRepository:
    """Read-only view over ``<root>/<slug>/`` cheatsheet directories."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def list(self) -> list[str]:
        """Return the slug of every immediate sub-directory of the root.

        Slugs are sorted by name so repeated builds process cheatsheets in the
        same order.

        Raises
        ------
        FileNotFoundError
            If the cheatsheet root does not exist.
        """
        if not self.root.exists():
            msg = f"Cheatsheet directory '{self.root}' not found."
            raise FileNotFoundError(msg)
        return sorted(entry.name for entry in self.root.iterdir() if entry.is_dir())

    def source_dir(self, slug: str) -> Path:
        return self.root / slug

    def config_path(self, slug: str) -> Path:
        return self.source_dir(slug) / CONFIG_FILENAME

    def markdown_path(self, slug: str) -> Path:
        return self.source_dir(slug) / MARKDOWN_FILENAME

    def assets_dir(self, slug: str) -> Path:
        return self.source_dir(slug) / ASSETS_DIRNAME


__all__ = ["CheatsheetRepository"]
