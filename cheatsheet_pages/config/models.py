"""Typed dataclasses describing cheatsheet build configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from cheatsheet_pages._constants import DEFAULT_MAX_GENERATED


class BuildConfigError(ValueError):
    """Raised when the build configuration file is invalid."""


class CheatsheetConfigError(ValueError):
    """Raised when a cheatsheet ``config.json`` is malformed or incomplete."""


@dc.dataclass(slots=True)
class BuildConfig:
    """Filesystem roots and retention policy used by a build run.

    Attributes
    ----------
    cheatsheets_dir : Path
        Directory holding one sub-directory per cheatsheet.
    templates_dir : Path
        Directory holding one sub-directory per template plus the reserved
        ``main`` and ``partials`` areas and the shared ``common.css``.
    output_dir : Path
        Destination directory; wiped and recreated at the start of a build.
    max_generated : int
        Number of ``generated-`` entries kept by ``prune``.
    """

    cheatsheets_dir: Path = Path("cheatsheets")
    templates_dir: Path = Path("templates")
    output_dir: Path = Path("dist")
    max_generated: int = DEFAULT_MAX_GENERATED

    def with_overrides(
        self,
        *,
        cheatsheets_dir: Path | None = None,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
        max_generated: int | None = None,
    ) -> BuildConfig:
        """Return a copy with every non-``None`` override applied."""
        return BuildConfig(
            cheatsheets_dir=cheatsheets_dir or self.cheatsheets_dir,
            templates_dir=templates_dir or self.templates_dir,
            output_dir=output_dir or self.output_dir,
            max_generated=(
                self.max_generated if max_generated is None else max_generated
            ),
        )


@dc.dataclass(slots=True)
class CheatsheetConfig:
    """Parsed ``config.json`` for a single cheatsheet."""

    template: str
    name: str
    description: str = ""
    main_color: str | None = None
    secondary_color: str | None = None
    icon: str | None = None
    template_params: dict[str, typ.Any] = dc.field(default_factory=dict)


__all__ = [
    "BuildConfig",
    "BuildConfigError",
    "CheatsheetConfig",
    "CheatsheetConfigError",
]
