"""Markdown extensions that template initializers can opt into."""

from __future__ import annotations

import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


class ExternalLinkExtension(Extension):
    """Open absolute ``http(s)`` links from a cheatsheet in a new tab.

    Register it from a template's ``initialize_template`` hook:

    >>> def initialize_template(md):  # doctest: +SKIP
    ...     md.registerExtensions([ExternalLinkExtension()], {})
    """

    def __init__(self, rel: str = "noopener noreferrer") -> None:
        super().__init__()
        self.rel = rel

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the external-link treeprocessor on the Markdown instance."""
        processor = ExternalLinkTreeprocessor(md, self.rel)
        md.treeprocessors.register(processor, "cheatsheet_external_links", 15)


class ExternalLinkTreeprocessor(Treeprocessor):
    """Mark anchors pointing off-site with ``target`` and ``rel`` attributes."""

    def __init__(self, md: Markdown, rel: str) -> None:
        super().__init__(md)
        self.rel = rel

    def run(self, root: Element) -> Element:
        """Tag every external anchor in the parsed markdown tree."""
        for element in root.iter("a"):
            if is_external(element.get("href")):
                element.set("target", "_blank")
                element.set("rel", self.rel)
        return root


def is_external(target: str | None) -> bool:
    """Return True when ``target`` is an absolute http(s) URL."""
    if not target:
        return False
    parsed = urlsplit(target)
    return parsed.scheme.lower() in {"http", "https"} and bool(parsed.netloc)


__all__ = ["ExternalLinkExtension", "ExternalLinkTreeprocessor", "is_external"]
