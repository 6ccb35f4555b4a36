"""Load and validate configuration for cheatsheet builds.

This subpackage covers the two configuration layers of a build: the optional
``cheatsheets.yaml`` that points the pipeline at its input, template, and
output directories (:func:`load_build_config`), and the per-cheatsheet
``config.json`` documents that pick a template and supply display metadata
(:func:`load_cheatsheet_config`).

Examples
--------
>>> from pathlib import Path
>>> from cheatsheet_pages.config import load_build_config
>>> config = load_build_config(Path("cheatsheets.yaml"))  # doctest: +SKIP
>>> config.output_dir  # doctest: +SKIP
PosixPath('dist')
"""

from .loader import DEFAULT_BUILD_CONFIG, load_build_config, load_cheatsheet_config
from .models import (
    BuildConfig,
    BuildConfigError,
    CheatsheetConfig,
    CheatsheetConfigError,
)

__all__ = [
    "DEFAULT_BUILD_CONFIG",
    "BuildConfig",
    "BuildConfigError",
    "CheatsheetConfig",
    "CheatsheetConfigError",
    "load_build_config",
    "load_cheatsheet_config",
]
