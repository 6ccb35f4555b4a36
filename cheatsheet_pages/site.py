"""High-level orchestration for a full cheatsheet site build.

:class:`SiteBuilder` wires the pipeline together: it clears the output root,
enumerates cheatsheets, compiles each one into its page bundle, and finally
renders the index pages from the collected contexts. A failing cheatsheet is
recorded and skipped so the others still ship; pass ``fail_fast=True`` to
abort on the first error instead.

Example
-------
>>> from cheatsheet_pages.config import BuildConfig
>>> from cheatsheet_pages.site import SiteBuilder
>>> report = SiteBuilder(BuildConfig()).run()  # doctest: +SKIP
>>> [context.cheatsheet for context in report.contexts]  # doctest: +SKIP
['git', 'python']
"""

from __future__ import annotations

import dataclasses as dc
import shutil
import typing as typ

from jinja2 import TemplateError
from pygments.util import ClassNotFound

from cheatsheet_pages.config import CheatsheetConfigError
from cheatsheet_pages.generator.compiler import CheatsheetCompiler
from cheatsheet_pages.generator.page_generator import PageGenerator
from cheatsheet_pages.generator.renderer import MarkdownEngineFactory
from cheatsheet_pages.index_builder import IndexBuilder
from cheatsheet_pages.output import OutputLifecycle
from cheatsheet_pages.repository import CheatsheetRepository
from cheatsheet_pages.templates import (
    TemplateLoadError,
    TemplateNotFoundError,
    TemplateRegistry,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from cheatsheet_pages.config import BuildConfig
    from cheatsheet_pages.generator.models import CheatsheetContext

# Failures that only affect the cheatsheet being compiled.
CHEATSHEET_ERRORS: tuple[type[Exception], ...] = (
    OSError,
    UnicodeDecodeError,
    CheatsheetConfigError,
    TemplateNotFoundError,
    TemplateLoadError,
    TemplateError,
    ClassNotFound,
)


@dc.dataclass(frozen=True, slots=True)
class CheatsheetFailure:
    """A cheatsheet that could not be built and the error that stopped it."""

    slug: str
    error: Exception

    def __str__(self) -> str:
        return f"{self.slug}: {self.error}"


class SiteBuildError(RuntimeError):
    """Raised when one or more cheatsheets failed to build."""

    def __init__(self, failures: typ.Sequence[CheatsheetFailure]) -> None:
        self.failures = list(failures)
        slugs = ", ".join(failure.slug for failure in self.failures)
        super().__init__(f"{len(self.failures)} cheatsheet(s) failed: {slugs}")


@dc.dataclass(slots=True)
class BuildReport:
    """Outcome of a :meth:`SiteBuilder.run` call."""

    contexts: list[CheatsheetContext] = dc.field(default_factory=list)
    written: list[Path] = dc.field(default_factory=list)
    failures: list[CheatsheetFailure] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise :class:`SiteBuildError` if any cheatsheet failed."""
        if self.failures:
            raise SiteBuildError(self.failures)


class SiteBuilder:
    """Run the clear → compile → index pipeline for one configuration."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        registry: TemplateRegistry | None = None,
        fail_fast: bool = False,
    ) -> None:
        self.config = config
        self.fail_fast = fail_fast
        self.registry = registry or TemplateRegistry(config.templates_dir)
        self.lifecycle = OutputLifecycle(config.output_dir)
        self.repository = CheatsheetRepository(config.cheatsheets_dir)
        self.compiler = CheatsheetCompiler(
            config,
            registry=self.registry,
            engine_factory=MarkdownEngineFactory(self.registry),
            page_generator=PageGenerator(config, registry=self.registry),
        )
        self.index_builder = IndexBuilder(config, registry=self.registry)

    def run(self) -> BuildReport:
        """Build every cheatsheet and the index pages.

        Returns
        -------
        BuildReport
            Contexts of the cheatsheets that built, every written path, and
            the failures that were skipped.

        Raises
        ------
        FileNotFoundError
            If the cheatsheet root or the ``main`` template area is missing.
        Exception
            With ``fail_fast`` set, the first per-cheatsheet error is re-raised
            unchanged.
        """
        self.lifecycle.clear()
        report = BuildReport()
        for slug in self.repository.list():
            try:
                context, written = self.compiler.build(slug)
            except CHEATSHEET_ERRORS as exc:
                if self.fail_fast:
                    raise
                self._discard_partial_output(slug)
                report.failures.append(CheatsheetFailure(slug=slug, error=exc))
                continue
            report.contexts.append(context)
            report.written.extend(written)
        report.written.extend(self.index_builder.build(report.contexts))
        return report

    def _discard_partial_output(self, slug: str) -> None:
        partial = self.config.output_dir / slug
        if partial.is_dir():
            shutil.rmtree(partial)


__all__ = [
    "CHEATSHEET_ERRORS",
    "BuildReport",
    "CheatsheetFailure",
    "SiteBuildError",
    "SiteBuilder",
]
