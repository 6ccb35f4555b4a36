"""Unit tests for the site-level index pages."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from cheatsheet_pages.generator.models import CheatsheetContext
from cheatsheet_pages.index_builder import IndexBuilder, output_name
from cheatsheet_pages.templates import TemplateRegistry

if typ.TYPE_CHECKING:
    from cheatsheet_pages.config import BuildConfig


def _context(slug: str) -> CheatsheetContext:
    return CheatsheetContext(
        cheatsheet=slug,
        title=slug.upper(),
        description="",
        main_color=None,
        secondary_color=None,
        content="",
        icon=None,
        template="basic",
    )


def _builder(site_config: BuildConfig) -> IndexBuilder:
    return IndexBuilder(site_config, registry=TemplateRegistry(site_config.templates_dir))


@pytest.mark.parametrize(
    ("layout", "expected"),
    [
        ("index.jinja", "index.html"),
        ("gallery.jinja", "gallery.html"),
        ("feed.xml.jinja", "feed.xml"),
    ],
)
def test_output_name(layout: str, expected: str) -> None:
    assert output_name(layout) == expected


def test_build_renders_layouts_and_copies_statics(site_config: BuildConfig) -> None:
    main = site_config.templates_dir / "main"
    (main / "feed.xml.jinja").write_text(
        "<feed>{% for s in cheatsheetsContext %}<id>{{ s.cheatsheet }}</id>"
        "{% endfor %}</feed>\n",
        encoding="utf-8",
    )
    (main / "js").mkdir()
    (main / "js" / "app.js").write_text("console.log(1);\n", encoding="utf-8")

    written = _builder(site_config).build([_context("alpha"), _context("beta")])
    out = site_config.output_dir
    assert written == [
        out / "feed.xml",
        out / "index.html",
        out / "js",
        out / "robots.txt",
    ]
    assert (out / "feed.xml").read_text(encoding="utf-8") == (
        "<feed><id>alpha</id><id>beta</id></feed>\n"
    )
    assert (out / "robots.txt").read_text(encoding="utf-8") == "User-agent: *\n"
    assert (out / "js" / "app.js").exists()
    assert not (out / "index.jinja").exists()


def test_rendered_pages_end_with_newline(site_config: BuildConfig) -> None:
    """Layouts without a trailing newline still produce newline-terminated pages."""
    main = site_config.templates_dir / "main"
    (main / "sitemap.txt.jinja").write_text(
        "{% for s in cheatsheets %}{{ s.cheatsheet }} {% endfor %}", encoding="utf-8"
    )
    _builder(site_config).build([_context("alpha")])
    text = (site_config.output_dir / "sitemap.txt").read_text(encoding="utf-8")
    assert text == "alpha \n"


def test_index_lists_cheatsheets_and_templates(site_config: BuildConfig) -> None:
    (site_config.templates_dir / "dark").mkdir()
    _builder(site_config).build([_context("alpha"), _context("beta")])
    html = (site_config.output_dir / "index.html").read_text(encoding="utf-8")
    soup = BeautifulSoup(html, "html.parser")
    hrefs = [link["href"] for link in soup.select(".cheatsheets a")]
    assert hrefs == ["alpha/cheatsheet.html", "beta/cheatsheet.html"]
    templates = [item.get_text() for item in soup.select(".templates li")]
    assert templates == ["basic", "dark"]


def test_build_requires_main_area(site_config: BuildConfig) -> None:
    for entry in (site_config.templates_dir / "main").iterdir():
        entry.unlink()
    (site_config.templates_dir / "main").rmdir()
    with pytest.raises(FileNotFoundError):
        _builder(site_config).build([])
