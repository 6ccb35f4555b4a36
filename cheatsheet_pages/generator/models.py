"""Shared dataclasses used by the cheatsheet build pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class CheatsheetContext:
    """Structured data passed to a template's page layout.

    Attributes
    ----------
    cheatsheet : str
        Cheatsheet slug; also the output sub-directory name.
    title : str
        Display title taken from ``config.json`` ``name``.
    description : str
        Short description shown on the page and in the index.
    main_color : str or None
        Primary colour, passed through untouched.
    secondary_color : str or None
        Secondary colour, passed through untouched.
    content : str
        Rendered HTML fragment for the markdown body.
    icon : str or None
        Icon reference, passed through untouched.
    template : str
        Name of the template used to render the page.
    template_params : dict[str, Any]
        Template defaults merged with the cheatsheet's ``templateParams``.
    pygments_css : str
        Stylesheet for the highlighted code blocks in ``content``.
    """

    cheatsheet: str
    title: str
    description: str
    main_color: str | None
    secondary_color: str | None
    content: str
    icon: str | None
    template: str
    template_params: dict[str, typ.Any] = dc.field(default_factory=dict)
    pygments_css: str = ""

    def as_template_context(self) -> dict[str, typ.Any]:
        """Return the mapping rendered by page layouts.

        Layouts may use either the snake_case attribute names or the camelCase
        keys used in ``config.json``.
        """
        context = {field.name: getattr(self, field.name) for field in dc.fields(self)}
        context.update(
            {
                "mainColor": self.main_color,
                "secondaryColor": self.secondary_color,
                "templateParams": self.template_params,
            }
        )
        return context


__all__ = ["CheatsheetContext"]
