"""Hooks for the ``basic`` cheatsheet template."""

from __future__ import annotations

import typing as typ

from cheatsheet_pages.generator.extensions import ExternalLinkExtension

if typ.TYPE_CHECKING:
    from markdown import Markdown

DEFAULT_PARAMS: dict[str, typ.Any] = {
    "columns": 3,
    "footer": "",
    "pygments_style": "monokai",
}


def initialize_template(md: Markdown) -> None:
    """Open off-site links in a new tab."""
    md.registerExtensions([ExternalLinkExtension()], {})
