"""Markdown engines with syntax-highlighted fenced code for cheatsheets."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from cheatsheet_pages._constants import DEFAULT_PYGMENTS_STYLE

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from cheatsheet_pages.templates import TemplateRegistry

# Opening or closing fence line, possibly indented by up to three spaces and
# carrying an info string such as ``rust,no_run``.
FENCE_LINE_PATTERN = re.compile(
    r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})(?P<info>[^\r\n]*)$", re.MULTILINE
)
BASE_EXTENSIONS: tuple[str, ...] = ("fenced_code", "codehilite", "tables", "sane_lists")


class LanguageTaggedHtmlFormatter(HtmlFormatter):
    """Pygments HTML formatter that stamps ``data-language`` on its wrapper.

    ``codehilite`` instantiates the formatter once per code block and passes
    the block language as ``lang_str``, so fenced (backtick or tilde) and
    indented blocks are each tagged with their own language. Blocks without
    one are tagged ``text``.
    """

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.language = lang_str or "text"

    def _wrap_div(
        self, inner: cabc.Iterable[tuple[int, str]]
    ) -> cabc.Iterator[tuple[int, str]]:
        wrapped = super()._wrap_div(inner)
        _is_code, opening = next(wrapped)
        attribute = f' data-language="{escape(self.language, quote=True)}"'
        yield 0, f"{opening.removesuffix('>')}{attribute}>"
        yield from wrapped


class MarkdownEngine:
    """Render cheatsheet markdown through a configured ``Markdown`` instance."""

    def __init__(self, md: Markdown, pygments_style: str) -> None:
        self.md = md
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(self, text: str) -> str:
        """Render markdown into an HTML fragment.

        Code blocks are highlighted by Pygments and their wrapper ``div``
        carries a ``data-language`` attribute naming the block language.
        """
        source = tidy_fences(text)
        if not source.strip():
            return ""
        return self.md.reset().convert(source)


def tidy_fences(text: str) -> str:
    """Dedent fence lines and drop comma-separated extras from info strings.

    >>> tidy_fences("   ```rust,no_run\\n   fn main() {}\\n   ```")
    '```rust\\n   fn main() {}\\n```'
    """

    def _tidy(match: re.Match[str]) -> str:
        language = match["info"].split(",", 1)[0].strip()
        return f"{match['fence']}{language}"

    return FENCE_LINE_PATTERN.sub(_tidy, text)


class MarkdownEngineFactory:
    """Build a fresh markdown engine per template, applying its initializer."""

    def __init__(self, registry: TemplateRegistry) -> None:
        self.registry = registry

    def create(
        self, template_name: str, *, pygments_style: str | None = None
    ) -> MarkdownEngine:
        """Return a new engine customised by the ``template_name`` initializer.

        Parameters
        ----------
        template_name : str
            Template whose ``initialize_template`` hook receives the engine.
        pygments_style : str, optional
            Pygments style for highlighted code; defaults to ``"monokai"``.

        Raises
        ------
        TemplateNotFoundError
            If the template does not exist.
        TemplateLoadError
            If the template module cannot be imported.
        """
        template = self.registry.get(template_name)
        style = pygments_style or DEFAULT_PYGMENTS_STYLE
        md = Markdown(
            extensions=list(BASE_EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "lang_prefix": "",
                    "pygments_formatter": LanguageTaggedHtmlFormatter,
                    "pygments_style": style,
                }
            },
            output_format="html",
        )
        template.initializer(md)
        return MarkdownEngine(md, style)


__all__ = [
    "LanguageTaggedHtmlFormatter",
    "MarkdownEngine",
    "MarkdownEngineFactory",
    "tidy_fences",
]
