"""Build static HTML cheatsheet sites from markdown and JSON sources.

This package exposes the CLI entry point used by the ``cheatsheets`` console
script together with the :class:`SiteBuilder` pipeline for programmatic use.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``SiteBuilder``: Clear, compile, and index pipeline.

Examples
--------
>>> from cheatsheet_pages import main
>>> main()  # doctest: +SKIP
>>> from cheatsheet_pages import SiteBuilder
>>> callable(SiteBuilder.run)
True
"""

from __future__ import annotations

from .cli import app, main
from .site import SiteBuilder

__all__ = ["SiteBuilder", "app", "main"]
