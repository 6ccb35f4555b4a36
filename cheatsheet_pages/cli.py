"""Cyclopts CLI entrypoint for building cheatsheet sites.

The ``cheatsheets`` console script defined here rebuilds the output folder
from the cheatsheet and template directories, prunes accumulated
``generated-`` entries, and lists the cheatsheets it would build. Every option
can also be supplied through ``INPUT_*`` environment variables so CI jobs can
drive the build without flags.

Examples
--------
Build the site with the defaults (``cheatsheets/`` → ``dist/``):

>>> from cheatsheet_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory and stop on the first broken cheatsheet:

>>> from cheatsheet_pages.cli import app
>>> app(["build", "--output-dir", "public", "--fail-fast"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import BuildConfig, load_build_config
from .output import PRUNE_ORDERINGS, OutputLifecycle
from .repository import CheatsheetRepository
from .site import SiteBuilder

app = App(name="cheatsheets", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to cheatsheets.yaml", env_var="INPUT_CONFIG"),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(
    config: Path | None,
    *,
    cheatsheets_dir: Path | None = None,
    templates_dir: Path | None = None,
    output_dir: Path | None = None,
    max_generated: int | None = None,
) -> BuildConfig:
    return load_build_config(config).with_overrides(
        cheatsheets_dir=cheatsheets_dir,
        templates_dir=templates_dir,
        output_dir=output_dir,
        max_generated=max_generated,
    )


@app.command(help="Build every cheatsheet page and the index into the output folder.")
def build(
    *,
    config: ConfigOption = None,
    cheatsheets_dir: typ.Annotated[
        Path | None,
        Parameter(help="Directory of cheatsheet sources", env_var="INPUT_CHEATSHEETS_DIR"),
    ] = None,
    templates_dir: typ.Annotated[
        Path | None,
        Parameter(help="Directory of templates", env_var="INPUT_TEMPLATES_DIR"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Output folder (wiped first)", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    fail_fast: typ.Annotated[
        bool,
        Parameter(help="Abort on the first broken cheatsheet", env_var="INPUT_FAIL_FAST"),
    ] = False,
) -> None:
    """Run the full build and report written files and failures.

    Parameters
    ----------
    config : Path or None, optional
        Build configuration file; defaults to ``cheatsheets.yaml`` when present.
    cheatsheets_dir, templates_dir, output_dir : Path or None, optional
        Overrides for the directories named in the configuration.
    fail_fast : bool, optional
        Re-raise the first per-cheatsheet error instead of skipping it.

    Raises
    ------
    SystemExit
        With status 1 when at least one cheatsheet failed to build.
    """
    build_config = _resolve_config(
        config,
        cheatsheets_dir=cheatsheets_dir,
        templates_dir=templates_dir,
        output_dir=output_dir,
    )
    report = SiteBuilder(build_config, fail_fast=fail_fast).run()
    for path in report.written:
        print(f"wrote {_format_path(path)}")
    for failure in report.failures:
        print(f"failed {failure}", file=sys.stderr)
    if not report.ok:
        raise SystemExit(1)


@app.command(help="Remove the oldest generated- entries from the output folder.")
def prune(
    *,
    config: ConfigOption = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Output folder to prune", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    max_kept: typ.Annotated[
        int | None,
        Parameter(help="Number of generated- entries to keep", env_var="INPUT_MAX_KEPT"),
    ] = None,
    order: typ.Annotated[
        typ.Literal["created", "name"],
        Parameter(
            help="Age entries by creation time or by their (timestamped) name",
            env_var="INPUT_PRUNE_ORDER",
        ),
    ] = "created",
) -> None:
    """Apply the generated-artifact retention policy to the output folder.

    ``--order name`` suits entries named with a sortable timestamp, and avoids
    relying on creation times that Linux filesystems do not report.
    """
    build_config = _resolve_config(
        config, output_dir=output_dir, max_generated=max_kept
    )
    lifecycle = OutputLifecycle(
        build_config.output_dir, order_key=PRUNE_ORDERINGS[order]
    )
    removed = lifecycle.prune(build_config.max_generated)
    for path in removed:
        print(f"removed {_format_path(path)}")


@app.command(name="list", help="List the cheatsheets that a build would compile.")
def list_cheatsheets(
    *,
    config: ConfigOption = None,
    cheatsheets_dir: typ.Annotated[
        Path | None,
        Parameter(help="Directory of cheatsheet sources", env_var="INPUT_CHEATSHEETS_DIR"),
    ] = None,
) -> None:
    """Print one cheatsheet slug per line."""
    build_config = _resolve_config(config, cheatsheets_dir=cheatsheets_dir)
    for slug in CheatsheetRepository(build_config.cheatsheets_dir).list():
        print(slug)


def main() -> None:
    """Invoke the Cyclopts application that powers the `cheatsheets` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
