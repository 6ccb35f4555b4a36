"""Write one cheatsheet's HTML page and its static files to the output tree.

:class:`PageGenerator` renders a template's ``index.jinja`` against a
:class:`~cheatsheet_pages.generator.models.CheatsheetContext`, writes
``<output>/<slug>/cheatsheet.html``, copies the template stylesheet and the
cheatsheet's ``assets`` folder next to it, and refreshes the shared
``common.css`` in the output root.

Example
-------
>>> from cheatsheet_pages.config import BuildConfig
>>> from cheatsheet_pages.templates import TemplateRegistry
>>> config = BuildConfig()
>>> generator = PageGenerator(
...     config, registry=TemplateRegistry(config.templates_dir)
... )  # doctest: +SKIP
>>> generator.generate("basic", "python", context)  # doctest: +SKIP
[PosixPath('dist/python/cheatsheet.html'), PosixPath('dist/python/style.css'), ...]
"""

from __future__ import annotations

import shutil
import typing as typ

from jinja2 import Environment, FileSystemLoader

from cheatsheet_pages._constants import (
    COMMON_STYLESHEET_FILENAME,
    PAGE_FILENAME,
    STYLESHEET_FILENAME,
)
from cheatsheet_pages.repository import CheatsheetRepository

if typ.TYPE_CHECKING:
    from pathlib import Path

    from cheatsheet_pages.config import BuildConfig
    from cheatsheet_pages.generator.models import CheatsheetContext
    from cheatsheet_pages.templates import TemplateRegistry


class PageGenerator:
    """Materialize a rendered cheatsheet bundle on disk."""

    def __init__(self, config: BuildConfig, *, registry: TemplateRegistry) -> None:
        """Initialize the generator and its Jinja environment.

        Parameters
        ----------
        config : BuildConfig
            Build roots; pages are written below ``config.output_dir``.
        registry : TemplateRegistry
            Resolves template names to layout and stylesheet paths.

        Notes
        -----
        The Jinja loader is rooted at the templates directory so layouts can
        include shared fragments such as ``partials/head.jinja``.
        """
        self.config = config
        self.registry = registry
        self.repository = CheatsheetRepository(config.cheatsheets_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(config.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def generate(
        self, template_name: str, slug: str, context: CheatsheetContext
    ) -> list[Path]:
        """Render and write the page bundle for ``slug``.

        Returns
        -------
        list[Path]
            Paths written, page first.

        Raises
        ------
        FileExistsError
            If ``<output>/<slug>`` already exists.
        FileNotFoundError
            If the template stylesheet or the shared ``common.css`` is missing.
        TemplateNotFoundError
            If ``template_name`` cannot be resolved.
        """
        template = self.registry.get(template_name)
        out_dir = self.config.output_dir / slug
        if out_dir.exists():
            msg = f"Output directory '{out_dir}' already exists."
            raise FileExistsError(msg)

        layout = self.env.get_template(template.layout_name)
        html = layout.render(**context.as_template_context())
        if not html.endswith("\n"):
            html += "\n"

        out_dir.mkdir(parents=True)
        page_path = out_dir / PAGE_FILENAME
        page_path.write_text(html, encoding="utf-8")
        written = [page_path]

        stylesheet = out_dir / STYLESHEET_FILENAME
        shutil.copyfile(template.stylesheet_path, stylesheet)
        written.append(stylesheet)

        assets_src = self.repository.assets_dir(slug)
        if assets_src.is_dir():
            assets_dest = out_dir / assets_src.name
            shutil.copytree(assets_src, assets_dest)
            written.append(assets_dest)

        common = self.config.output_dir / COMMON_STYLESHEET_FILENAME
        shutil.copyfile(self.config.templates_dir / COMMON_STYLESHEET_FILENAME, common)
        written.append(common)
        return written


__all__ = ["PageGenerator"]
