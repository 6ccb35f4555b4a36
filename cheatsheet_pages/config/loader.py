"""Load build settings (YAML) and cheatsheet configuration (JSON)."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec
import msgspec.json as msgspec_json
from ruamel.yaml import YAML

from .models import BuildConfig, BuildConfigError, CheatsheetConfig, CheatsheetConfigError

DEFAULT_BUILD_CONFIG = Path("cheatsheets.yaml")
_PATH_KEYS = ("cheatsheets_dir", "templates_dir", "output_dir")


def load_build_config(path: Path | None = None) -> BuildConfig:
    """Load the optional YAML file describing build roots and retention.

    Parameters
    ----------
    path : Path, optional
        Explicit configuration file. When ``None`` the default
        ``cheatsheets.yaml`` in the working directory is used if it exists,
        otherwise built-in defaults are returned.

    Returns
    -------
    BuildConfig
        Resolved configuration. Relative directories are resolved against the
        directory containing the YAML file.

    Raises
    ------
    FileNotFoundError
        If an explicit ``path`` does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    BuildConfigError
        If ``max_generated`` is not a non-negative integer.

    Examples
    --------
    >>> load_build_config(None).output_dir  # doctest: +SKIP
    PosixPath('dist')
    """
    if path is None:
        if not DEFAULT_BUILD_CONFIG.exists():
            return BuildConfig()
        path = DEFAULT_BUILD_CONFIG
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    base = BuildConfig()
    base_dir = path.parent
    resolved: dict[str, Path] = {}
    for key in _PATH_KEYS:
        value = raw.get(key)
        default = getattr(base, key)
        resolved[key] = _resolve_dir(base_dir, value) if value else base_dir / default

    return BuildConfig(
        cheatsheets_dir=resolved["cheatsheets_dir"],
        templates_dir=resolved["templates_dir"],
        output_dir=resolved["output_dir"],
        max_generated=_parse_max_generated(
            raw.get("max_generated", base.max_generated)
        ),
    )


def load_cheatsheet_config(path: Path, *, slug: str) -> CheatsheetConfig:
    """Decode a cheatsheet ``config.json`` into a :class:`CheatsheetConfig`.

    Parameters
    ----------
    path : Path
        Location of the ``config.json`` document.
    slug : str
        Cheatsheet directory name; used as the display name fallback and in
        error messages.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    CheatsheetConfigError
        If the document is not valid JSON, is not an object, names no
        template, or carries a non-object ``templateParams``.
    """
    data = path.read_bytes()
    try:
        payload = msgspec_json.decode(data)
    except msgspec.DecodeError as exc:
        msg = f"Cheatsheet '{slug}' has malformed {path.name}: {exc}"
        raise CheatsheetConfigError(msg) from exc

    match payload:
        case dict():
            pass
        case _:
            msg = f"Cheatsheet '{slug}' {path.name} must contain a JSON object."
            raise CheatsheetConfigError(msg)

    template = payload.get("template")
    if not isinstance(template, str) or not template.strip():
        msg = f"Cheatsheet '{slug}' does not name a template."
        raise CheatsheetConfigError(msg)

    params = payload.get("templateParams") or {}
    if not isinstance(params, dict):
        msg = f"Cheatsheet '{slug}' templateParams must be a JSON object."
        raise CheatsheetConfigError(msg)

    return CheatsheetConfig(
        template=template.strip(),
        name=_optional_str(payload.get("name")) or slug,
        description=_optional_str(payload.get("description")) or "",
        main_color=_optional_str(payload.get("mainColor")),
        secondary_color=_optional_str(payload.get("secondaryColor")),
        icon=_optional_str(payload.get("icon")),
        template_params=dict(params),
    )


def _resolve_dir(base_dir: Path, value: object) -> Path:
    candidate = Path(str(value)).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _parse_max_generated(value: object) -> int:
    """Return ``value`` as a non-negative int or raise BuildConfigError."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"max_generated must be a non-negative integer, got {value!r}."
        raise BuildConfigError(msg)
    return value


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = ["DEFAULT_BUILD_CONFIG", "load_build_config", "load_cheatsheet_config"]
