"""Shared fixtures that lay out a throwaway cheatsheet site on disk.

``site_config`` builds the two-cheatsheet tree used across the suite:

* ``alpha`` uses the ``basic`` template, renders ``# Hi``, and has no assets.
* ``beta`` uses the ``basic`` template, contains a fenced Python block, and
  ships ``assets/logo.png``.

The ``basic`` template defines ``DEFAULT_PARAMS`` and an initializer that
registers :class:`~cheatsheet_pages.generator.extensions.ExternalLinkExtension`.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest

from cheatsheet_pages.config import BuildConfig

LOGO_BYTES = b"\x89PNG\r\n\x1a\nfixture-logo"

BASIC_LAYOUT = dedent(
    """\
    <!DOCTYPE html>
    <html>
    <head>
    {% include "partials/head.jinja" %}
    <link rel="stylesheet" href="style.css">
    </head>
    <body data-slug="{{ cheatsheet }}" data-main-color="{{ mainColor }}">
    <h1 class="title">{{ title }}</h1>
    <p class="description">{{ description }}</p>
    <ul class="params">
    {% for key, value in template_params | dictsort %}
    <li data-key="{{ key }}">{{ value }}</li>
    {% endfor %}
    </ul>
    <main>{{ content | safe }}</main>
    </body>
    </html>
    """
)

BASIC_MODULE = dedent(
    """\
    from cheatsheet_pages.generator.extensions import ExternalLinkExtension

    DEFAULT_PARAMS = {"columns": 3, "accent": "teal"}


    def initialize_template(md):
        md.registerExtensions([ExternalLinkExtension()], {})
    """
)

INDEX_LAYOUT = dedent(
    """\
    <!DOCTYPE html>
    <html>
    <body>
    <ul class="cheatsheets">
    {% for sheet in cheatsheets %}
    <li><a href="{{ sheet.cheatsheet }}/cheatsheet.html">{{ sheet.title }}</a></li>
    {% endfor %}
    </ul>
    <ul class="templates">
    {% for name in templates %}
    <li>{{ name }}</li>
    {% endfor %}
    </ul>
    </body>
    </html>
    """
)


def write_cheatsheet(
    root: Path,
    slug: str,
    *,
    config: dict[str, typ.Any] | str,
    markdown: str,
    assets: dict[str, bytes] | None = None,
) -> Path:
    """Create ``root/slug`` with a config, markdown body, and optional assets."""
    source = root / slug
    source.mkdir(parents=True)
    payload = config if isinstance(config, str) else json.dumps(config)
    (source / "config.json").write_text(payload, encoding="utf-8")
    (source / "index.md").write_text(markdown, encoding="utf-8")
    for relative, data in (assets or {}).items():
        target = source / "assets" / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    return source


def write_templates(root: Path) -> Path:
    """Create the ``basic`` template plus ``main``, ``partials``, and common.css."""
    basic = root / "basic"
    basic.mkdir(parents=True)
    (basic / "index.jinja").write_text(BASIC_LAYOUT, encoding="utf-8")
    (basic / "style.css").write_text(".title { color: red; }\n", encoding="utf-8")
    (basic / "template.py").write_text(BASIC_MODULE, encoding="utf-8")

    partials = root / "partials"
    partials.mkdir()
    (partials / "head.jinja").write_text(
        '<meta charset="utf-8">\n<title>{{ title }}</title>\n', encoding="utf-8"
    )

    main = root / "main"
    main.mkdir()
    (main / "index.jinja").write_text(INDEX_LAYOUT, encoding="utf-8")
    (main / "robots.txt").write_text("User-agent: *\n", encoding="utf-8")

    (root / "common.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    return root


@pytest.fixture
def site_config(tmp_path: Path) -> BuildConfig:
    """Return a BuildConfig pointing at a freshly written alpha/beta site."""
    cheatsheets = tmp_path / "cheatsheets"
    write_cheatsheet(
        cheatsheets,
        "alpha",
        config={
            "template": "basic",
            "name": "Alpha",
            "description": "First sheet",
            "mainColor": "#112233",
            "secondaryColor": "#445566",
            "icon": "alpha.svg",
        },
        markdown="# Hi\n",
    )
    write_cheatsheet(
        cheatsheets,
        "beta",
        config={
            "template": "basic",
            "name": "Beta",
            "description": "Second sheet",
            "mainColor": "#abcdef",
            "secondaryColor": "#fedcba",
            "icon": "assets/logo.png",
            "templateParams": {"columns": 2, "extra": "yes"},
        },
        markdown=(
            "## Code\n\n"
            "```python\n"
            "def greet():\n"
            "    return 'hi'\n"
            "```\n\n"
            "See [docs](https://example.com/docs).\n"
        ),
        assets={"logo.png": LOGO_BYTES},
    )
    return BuildConfig(
        cheatsheets_dir=cheatsheets,
        templates_dir=write_templates(tmp_path / "templates"),
        output_dir=tmp_path / "dist",
    )


@pytest.fixture
def logo_bytes() -> bytes:
    """Return the bytes written to ``beta/assets/logo.png``."""
    return LOGO_BYTES


@pytest.fixture
def make_cheatsheet() -> typ.Callable[..., Path]:
    """Return the helper that writes an extra cheatsheet source directory."""
    return write_cheatsheet
