"""Manage the lifecycle of the build output directory.

``OutputLifecycle.clear`` gives every build a clean slate, and
``OutputLifecycle.prune`` bounds the number of ``generated-`` entries that
accumulate in the output root when other tooling drops one-off pages there.
Pruning is never part of a normal build; callers invoke it explicitly (the
``cheatsheets prune`` command does).

Examples
--------
>>> from pathlib import Path
>>> lifecycle = OutputLifecycle(Path("dist"))  # doctest: +SKIP
>>> lifecycle.clear()  # doctest: +SKIP
PosixPath('dist')
>>> lifecycle.prune(10)  # doctest: +SKIP
[]
"""

from __future__ import annotations

import shutil
import typing as typ
from pathlib import Path

from ._constants import GENERATED_PREFIX


def creation_time(path: Path) -> float:
    """Return the creation timestamp of ``path``.

    Uses ``st_birthtime`` where the platform records it (macOS, BSD, Windows
    on Python 3.12+) and falls back to ``st_ctime`` elsewhere. On Linux
    ``st_ctime`` is the inode change time, so writing into an old entry makes
    it look new; name entries with a sortable timestamp and prune with
    :func:`entry_name` ordering when that matters.
    """
    stat = path.stat()
    birthtime = getattr(stat, "st_birthtime", None)
    return stat.st_ctime if birthtime is None else birthtime


def entry_name(path: Path) -> str:
    """Order entries by name, e.g. ``generated-20240102T0900``."""
    return path.name


PRUNE_ORDERINGS: dict[str, typ.Callable[[Path], typ.Any]] = {
    "created": creation_time,
    "name": entry_name,
}


class OutputLifecycle:
    """Wipe, recreate, and prune the output root."""

    def __init__(
        self,
        output_dir: Path,
        *,
        order_key: typ.Callable[[Path], typ.Any] = creation_time,
    ) -> None:
        self.output_dir = output_dir
        self._order_key = order_key

    def clear(self) -> Path:
        """Delete the output root recursively and recreate it empty."""
        if self.output_dir.is_dir() and not self.output_dir.is_symlink():
            shutil.rmtree(self.output_dir)
        elif self.output_dir.exists() or self.output_dir.is_symlink():
            self.output_dir.unlink()
        self.output_dir.mkdir(parents=True)
        return self.output_dir

    def generated_entries(self) -> list[Path]:
        """Return ``generated-`` entries ordered oldest first."""
        if not self.output_dir.is_dir():
            return []
        entries = [
            entry
            for entry in self.output_dir.iterdir()
            if entry.name.startswith(GENERATED_PREFIX)
        ]
        return sorted(entries, key=lambda entry: (self._order_key(entry), entry.name))

    def prune(self, max_kept: int) -> list[Path]:
        """Remove the oldest ``generated-`` entries beyond ``max_kept``.

        Age follows the ``order_key`` given at construction, creation time by
        default; see :func:`creation_time` for its limits on Linux.

        Parameters
        ----------
        max_kept : int
            Number of prefixed entries allowed to remain.

        Returns
        -------
        list[Path]
            Entries that were removed, oldest first.

        Raises
        ------
        ValueError
            If ``max_kept`` is negative.
        """
        if max_kept < 0:
            msg = f"max_kept must be non-negative, got {max_kept}."
            raise ValueError(msg)
        entries = self.generated_entries()
        removed: list[Path] = []
        while len(entries) > max_kept:
            oldest = entries.pop(0)
            _remove(oldest)
            removed.append(oldest)
        return removed


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


__all__ = ["PRUNE_ORDERINGS", "OutputLifecycle", "creation_time", "entry_name"]
