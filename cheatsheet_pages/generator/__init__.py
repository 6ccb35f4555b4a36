"""Utilities for rendering and writing individual cheatsheet pages."""

from .compiler import CheatsheetCompiler
from .extensions import ExternalLinkExtension
from .models import CheatsheetContext
from .page_generator import PageGenerator
from .renderer import MarkdownEngine, MarkdownEngineFactory

__all__ = [
    "CheatsheetCompiler",
    "CheatsheetContext",
    "ExternalLinkExtension",
    "MarkdownEngine",
    "MarkdownEngineFactory",
    "PageGenerator",
]
