"""Discover cheatsheet templates and load their Python hooks by name.

Each template lives in ``<templates_dir>/<name>/`` and bundles a Jinja page
layout (``index.jinja``), a stylesheet (``style.css``), and an optional
``template.py`` module. The module may define ``initialize_template(md)``,
which receives the fresh ``markdown.Markdown`` instance so the template can
register extensions, and ``DEFAULT_PARAMS``, a mapping merged underneath the
cheatsheet's own ``templateParams``.

:class:`TemplateRegistry` discovers templates on demand, imports their
modules once, and also accepts statically registered :class:`Template`
bundles so callers can plug templates in without touching the filesystem.

Examples
--------
>>> from pathlib import Path
>>> registry = TemplateRegistry(Path("templates"))  # doctest: +SKIP
>>> registry.names()  # doctest: +SKIP
['basic']
>>> registry.get("basic").default_params  # doctest: +SKIP
{'columns': 3, 'pygments_style': 'monokai'}
"""

from __future__ import annotations

import dataclasses as dc
import importlib.util
import re
import typing as typ
from pathlib import Path

from ._constants import (
    LAYOUT_FILENAME,
    RESERVED_TEMPLATE_AREAS,
    STYLESHEET_FILENAME,
    TEMPLATE_MODULE_FILENAME,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from types import ModuleType

    from markdown import Markdown

TemplateInitializer = typ.Callable[["Markdown"], None]

_MODULE_NAMESPACE = "cheatsheet_pages_templates"


class TemplateNotFoundError(LookupError):
    """Raised when a cheatsheet names a template that does not exist."""


class TemplateLoadError(ImportError):
    """Raised when a template's ``template.py`` cannot be imported."""


def _noop_initializer(md: Markdown) -> None:  # noqa: ARG001
    return None


@dc.dataclass(frozen=True, slots=True)
class Template:
    """Capability bundle for one named template.

    Attributes
    ----------
    name : str
        Template identifier referenced by ``config.json``.
    directory : Path
        Template directory; layouts are resolved relative to its parent.
    initializer : Callable[[Markdown], None]
        Hook invoked with each new markdown engine.
    default_params : Mapping[str, Any]
        Parameters merged underneath the cheatsheet's ``templateParams``.
    """

    name: str
    directory: Path
    initializer: TemplateInitializer = _noop_initializer
    default_params: cabc.Mapping[str, typ.Any] = dc.field(default_factory=dict)

    @property
    def layout_path(self) -> Path:
        """Return the page layout file for this template."""
        return self.directory / LAYOUT_FILENAME

    @property
    def layout_name(self) -> str:
        """Return the layout name as seen by a loader rooted at the templates dir."""
        return f"{self.directory.name}/{LAYOUT_FILENAME}"

    @property
    def stylesheet_path(self) -> Path:
        """Return the stylesheet copied next to every page using this template."""
        return self.directory / STYLESHEET_FILENAME

    def merge_params(
        self, overrides: cabc.Mapping[str, typ.Any] | None
    ) -> dict[str, typ.Any]:
        """Shallow-merge ``overrides`` over the defaults; overrides win."""
        merged = dict(self.default_params)
        if overrides:
            merged.update(overrides)
        return merged


class TemplateRegistry:
    """Resolve template names to :class:`Template` bundles."""

    def __init__(self, templates_dir: Path) -> None:
        self.templates_dir = templates_dir
        self._templates: dict[str, Template] = {}

    def register(self, template: Template) -> None:
        """Register ``template`` statically, shadowing any discovered one."""
        self._templates[template.name] = template

    def names(self) -> list[str]:
        """Return every available template name, excluding reserved areas."""
        discovered: set[str] = set(self._templates)
        if self.templates_dir.is_dir():
            discovered.update(
                entry.name
                for entry in self.templates_dir.iterdir()
                if entry.is_dir() and not entry.name.startswith((".", "_"))
            )
        return sorted(discovered - RESERVED_TEMPLATE_AREAS)

    def get(self, name: str) -> Template:
        """Return the template called ``name``, loading it on first use.

        Raises
        ------
        TemplateNotFoundError
            If ``name`` is reserved, malformed, or has no template directory.
        TemplateLoadError
            If the template's ``template.py`` fails to import.
        """
        cached = self._templates.get(name)
        if cached is not None:
            return cached
        if name in RESERVED_TEMPLATE_AREAS or not _is_valid_name(name):
            msg = f"'{name}' is not a usable template name."
            raise TemplateNotFoundError(msg)
        directory = self.templates_dir / name
        if not directory.is_dir():
            available = ", ".join(self.names()) or "none"
            msg = f"Unknown template '{name}'. Known templates: {available}"
            raise TemplateNotFoundError(msg)
        template = self._load(name, directory)
        self._templates[name] = template
        return template

    def _load(self, name: str, directory: Path) -> Template:
        """Build a Template from ``directory``, importing its hook module."""
        module_path = directory / TEMPLATE_MODULE_FILENAME
        if not module_path.is_file():
            return Template(name=name, directory=directory)
        module = _import_template_module(name, module_path)
        initializer = getattr(module, "initialize_template", None) or _noop_initializer
        if not callable(initializer):
            msg = f"Template '{name}' initialize_template is not callable."
            raise TemplateLoadError(msg, name=name, path=str(module_path))
        defaults = getattr(module, "DEFAULT_PARAMS", None) or {}
        if not isinstance(defaults, dict):
            msg = f"Template '{name}' DEFAULT_PARAMS must be a dict."
            raise TemplateLoadError(msg, name=name, path=str(module_path))
        return Template(
            name=name,
            directory=directory,
            initializer=initializer,
            default_params=dict(defaults),
        )


def _is_valid_name(name: str) -> bool:
    return bool(re.fullmatch(r"[A-Za-z0-9][A-Za-z0-9_.-]*", name)) and ".." not in name


def _import_template_module(name: str, module_path: Path) -> ModuleType:
    """Import ``module_path`` under a private namespace without touching sys.path."""
    module_name = f"{_MODULE_NAMESPACE}.{re.sub(r'[^A-Za-z0-9_]', '_', name)}"
    spec = importlib.util.spec_from_file_location(module_name, module_path)
    if spec is None or spec.loader is None:  # pragma: no cover - importlib guard
        msg = f"Cannot load template module for '{name}'."
        raise TemplateLoadError(msg, name=name, path=str(module_path))
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        msg = f"Template '{name}' failed to import: {exc}"
        raise TemplateLoadError(msg, name=name, path=str(module_path)) from exc
    return module


__all__ = [
    "Template",
    "TemplateInitializer",
    "TemplateLoadError",
    "TemplateNotFoundError",
    "TemplateRegistry",
]
