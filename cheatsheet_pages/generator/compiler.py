"""Compile a single cheatsheet source into a rendering context and page."""

from __future__ import annotations

import typing as typ

from cheatsheet_pages._constants import DEFAULT_PYGMENTS_STYLE
from cheatsheet_pages.config import load_cheatsheet_config
from cheatsheet_pages.generator.models import CheatsheetContext
from cheatsheet_pages.repository import CheatsheetRepository

if typ.TYPE_CHECKING:
    from pathlib import Path

    from cheatsheet_pages.config import BuildConfig
    from cheatsheet_pages.generator.page_generator import PageGenerator
    from cheatsheet_pages.generator.renderer import MarkdownEngineFactory
    from cheatsheet_pages.templates import TemplateRegistry


class CheatsheetCompiler:
    """Turn ``<cheatsheets>/<slug>/`` into a :class:`CheatsheetContext`."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        registry: TemplateRegistry,
        engine_factory: MarkdownEngineFactory,
        page_generator: PageGenerator,
    ) -> None:
        self.config = config
        self.registry = registry
        self.engine_factory = engine_factory
        self.page_generator = page_generator
        self.repository = CheatsheetRepository(config.cheatsheets_dir)

    def compile(self, slug: str) -> CheatsheetContext:
        """Load, render, and write ``slug``, returning its rendering context."""
        context, _written = self.build(slug)
        return context

    def build(self, slug: str) -> tuple[CheatsheetContext, list[Path]]:
        """Load, render, and write the cheatsheet identified by ``slug``.

        Configuration, template, and markdown body are all resolved before
        anything is written, so a bad template name leaves no output behind.

        Parameters
        ----------
        slug : str
            Directory name of the cheatsheet under the cheatsheet root.

        Returns
        -------
        tuple[CheatsheetContext, list[Path]]
            The context used to render the page, retained for the index, and
            the paths the page generator wrote.

        Raises
        ------
        FileNotFoundError
            If ``config.json`` or ``index.md`` is missing.
        CheatsheetConfigError
            If ``config.json`` is malformed.
        TemplateNotFoundError
            If the configured template does not exist.
        TemplateLoadError
            If the template module cannot be imported.
        """
        cheatsheet_config = load_cheatsheet_config(
            self.repository.config_path(slug), slug=slug
        )
        template = self.registry.get(cheatsheet_config.template)
        params = template.merge_params(cheatsheet_config.template_params)
        engine = self.engine_factory.create(
            template.name,
            pygments_style=str(params.get("pygments_style") or DEFAULT_PYGMENTS_STYLE),
        )
        markdown_source = self.repository.markdown_path(slug).read_text(
            encoding="utf-8"
        )
        context = CheatsheetContext(
            cheatsheet=slug,
            title=cheatsheet_config.name,
            description=cheatsheet_config.description,
            main_color=cheatsheet_config.main_color,
            secondary_color=cheatsheet_config.secondary_color,
            content=engine.render(markdown_source),
            icon=cheatsheet_config.icon,
            template=template.name,
            template_params=params,
            pygments_css=engine.stylesheet,
        )
        written = self.page_generator.generate(template.name, slug, context)
        return context, written


__all__ = ["CheatsheetCompiler"]
