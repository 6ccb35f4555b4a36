"""Build and render the top-level pages listing every cheatsheet.

This module takes the rendering contexts produced for each cheatsheet and
renders every layout found in ``<templates>/main/`` against one shared
payload, writing the results into the output root. Non-layout files in
``main/`` (favicons, scripts, robots.txt, ...) are copied verbatim.

Typical usage runs after every cheatsheet has been compiled:

>>> from cheatsheet_pages.config import BuildConfig
>>> from cheatsheet_pages.templates import TemplateRegistry
>>> config = BuildConfig()
>>> builder = IndexBuilder(config, registry=TemplateRegistry(config.templates_dir))
>>> builder.build(contexts)  # doctest: +SKIP
[PosixPath('dist/index.html'), PosixPath('dist/robots.txt')]

Layouts receive ``cheatsheets`` (also exposed as ``cheatsheetsContext``), a
list of :class:`~cheatsheet_pages.generator.models.CheatsheetContext`, and
``templates``, the sorted list of usable template names.
"""

from __future__ import annotations

import shutil
import typing as typ

from jinja2 import Environment, FileSystemLoader

from ._constants import LAYOUT_SUFFIX, MAIN_TEMPLATE_AREA

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc
    from pathlib import Path

    from .config import BuildConfig
    from .generator.models import CheatsheetContext
    from .templates import TemplateRegistry


class IndexBuilder:
    """Render the site-level pages from the ``main`` template area."""

    def __init__(self, config: BuildConfig, *, registry: TemplateRegistry) -> None:
        """Initialize the index builder.

        Parameters
        ----------
        config : BuildConfig
            Build roots; reads ``templates_dir/main`` and writes into
            ``output_dir``.
        registry : TemplateRegistry
            Supplies the list of available template names.
        """
        self.config = config
        self.registry = registry
        self.main_dir = config.templates_dir / MAIN_TEMPLATE_AREA
        self.env = Environment(
            loader=FileSystemLoader(str(config.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def build(self, contexts: cabc.Sequence[CheatsheetContext]) -> list[Path]:
        """Render every ``main`` layout and copy the remaining static files.

        Returns
        -------
        list[Path]
            Written paths: rendered pages first, then copied files, each group
            in name order.

        Raises
        ------
        FileNotFoundError
            If the ``main`` template area does not exist.
        """
        if not self.main_dir.is_dir():
            msg = f"Template area '{self.main_dir}' not found."
            raise FileNotFoundError(msg)

        cheatsheets = list(contexts)
        payload = {
            "cheatsheets": cheatsheets,
            "cheatsheetsContext": cheatsheets,
            "templates": self.registry.names(),
        }
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        entries = sorted(self.main_dir.iterdir(), key=lambda entry: entry.name)
        layouts = [
            entry
            for entry in entries
            if entry.is_file() and entry.name.endswith(LAYOUT_SUFFIX)
        ]
        statics = [entry for entry in entries if entry not in layouts]

        written: list[Path] = []
        for layout_path in layouts:
            template = self.env.get_template(f"{MAIN_TEMPLATE_AREA}/{layout_path.name}")
            html = template.render(**payload)
            if not html.endswith("\n"):
                html += "\n"
            output_path = self.config.output_dir / output_name(layout_path.name)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)

        for entry in statics:
            target = self.config.output_dir / entry.name
            if entry.is_dir():
                shutil.copytree(entry, target, dirs_exist_ok=True)
            else:
                shutil.copyfile(entry, target)
            written.append(target)
        return written


def output_name(layout_name: str) -> str:
    """Map a layout filename to the page it renders.

    >>> output_name("index.jinja")
    'index.html'
    >>> output_name("feed.xml.jinja")
    'feed.xml'
    """
    stem = layout_name.removesuffix(LAYOUT_SUFFIX)
    return stem if "." in stem else f"{stem}.html"


__all__ = ["IndexBuilder", "output_name"]
