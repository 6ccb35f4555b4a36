"""Unit tests for writing individual cheatsheet bundles."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from cheatsheet_pages.generator.models import CheatsheetContext
from cheatsheet_pages.generator.page_generator import PageGenerator
from cheatsheet_pages.templates import TemplateNotFoundError, TemplateRegistry

if typ.TYPE_CHECKING:
    from cheatsheet_pages.config import BuildConfig


def _context(slug: str, **overrides: typ.Any) -> CheatsheetContext:
    values: dict[str, typ.Any] = {
        "cheatsheet": slug,
        "title": slug.title(),
        "description": f"{slug} description",
        "main_color": "#000000",
        "secondary_color": "#ffffff",
        "content": "<p>Body &amp; soul</p>",
        "icon": None,
        "template": "basic",
        "template_params": {"columns": 3},
    }
    values.update(overrides)
    return CheatsheetContext(**values)


def _generator(site_config: BuildConfig) -> PageGenerator:
    site_config.output_dir.mkdir(parents=True, exist_ok=True)
    return PageGenerator(
        site_config, registry=TemplateRegistry(site_config.templates_dir)
    )


def test_generate_writes_page_and_stylesheets(site_config: BuildConfig) -> None:
    written = _generator(site_config).generate("basic", "alpha", _context("alpha"))
    out = site_config.output_dir
    assert written == [
        out / "alpha" / "cheatsheet.html",
        out / "alpha" / "style.css",
        out / "common.css",
    ]
    assert (out / "alpha" / "style.css").read_text(encoding="utf-8") == (
        ".title { color: red; }\n"
    )
    assert (out / "common.css").read_text(encoding="utf-8") == "body { margin: 0; }\n"
    assert not (out / "alpha" / "assets").exists()


def test_generate_renders_context(site_config: BuildConfig) -> None:
    _generator(site_config).generate("basic", "alpha", _context("alpha"))
    html = (site_config.output_dir / "alpha" / "cheatsheet.html").read_text(
        encoding="utf-8"
    )
    soup = BeautifulSoup(html, "html.parser")
    assert soup.title is not None and soup.title.get_text() == "Alpha"
    assert soup.body is not None
    assert soup.body["data-slug"] == "alpha"
    assert soup.body["data-main-color"] == "#000000"
    assert soup.select_one("main p").get_text() == "Body & soul"
    assert soup.select_one(".params li")["data-key"] == "columns"


def test_generate_copies_assets_tree(
    site_config: BuildConfig, logo_bytes: bytes
) -> None:
    nested = site_config.cheatsheets_dir / "beta" / "assets" / "img" / "diagram.svg"
    nested.parent.mkdir(parents=True)
    nested.write_text("<svg/>", encoding="utf-8")

    _generator(site_config).generate("basic", "beta", _context("beta"))
    assets = site_config.output_dir / "beta" / "assets"
    assert (assets / "logo.png").read_bytes() == logo_bytes
    assert (assets / "img" / "diagram.svg").read_text(encoding="utf-8") == "<svg/>"


def test_generate_refuses_existing_output(site_config: BuildConfig) -> None:
    generator = _generator(site_config)
    (site_config.output_dir / "alpha").mkdir()
    with pytest.raises(FileExistsError):
        generator.generate("basic", "alpha", _context("alpha"))


def test_generate_missing_stylesheet(site_config: BuildConfig) -> None:
    (site_config.templates_dir / "basic" / "style.css").unlink()
    with pytest.raises(FileNotFoundError):
        _generator(site_config).generate("basic", "alpha", _context("alpha"))


def test_generate_unknown_template(site_config: BuildConfig) -> None:
    with pytest.raises(TemplateNotFoundError):
        _generator(site_config).generate("nope", "alpha", _context("alpha"))
    assert not (site_config.output_dir / "alpha").exists()
