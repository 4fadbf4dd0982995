"""Load build configuration YAML into a :class:`BuildConfig`."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from simple_ssg._constants import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PYGMENTS_STYLE,
)

from .models import BuildConfig, BuiltInTemplate, SiteConfigError

KNOWN_KEYS = frozenset(
    {"source", "output_dir", "web_prefix", "template", "strict", "clean", "pygments_style"}
)


def load_build_config(
    path: Path | None = None,
    *,
    source: Path | None = None,
    output_dir: Path | None = None,
    web_prefix: str | None = None,
    template: str | BuiltInTemplate | None = None,
    strict: bool | None = None,
    clean: bool | None = None,
    pygments_style: str | None = None,
) -> BuildConfig:
    """Merge an optional YAML file with explicit overrides into a BuildConfig.

    Parameters
    ----------
    path : Path or None, optional
        YAML configuration file. When ``None``, ``simple-ssg.yaml`` in the
        current directory is used if it exists.
    source, output_dir, web_prefix, template, strict, clean, pygments_style
        Explicit overrides; any value other than ``None`` wins over the file.

    Returns
    -------
    BuildConfig
        Resolved configuration. ``output_dir`` defaults to ``./output``.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given explicitly and does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the file holds unknown keys, names an unknown template, or no
        source directory is configured at all.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_build_config(source=Path("site"))  # doctest: +SKIP
    >>> config.output_dir.name  # doctest: +SKIP
    'output'
    """
    raw, base_dir = _read_config_file(path)

    unknown = sorted(set(raw) - KNOWN_KEYS)
    if unknown:
        msg = f"Unknown configuration keys: {', '.join(unknown)}"
        raise SiteConfigError(msg)

    resolved_source = source or _path_from(raw.get("source"), base_dir)
    if resolved_source is None:
        msg = "No source directory configured."
        raise SiteConfigError(msg)
    resolved_output = (
        output_dir
        or _path_from(raw.get("output_dir"), base_dir)
        or Path.cwd() / DEFAULT_OUTPUT_DIR
    )

    return BuildConfig(
        source=resolved_source,
        output_dir=resolved_output,
        web_prefix=_first(web_prefix, raw.get("web_prefix"), ""),
        template=_parse_template(_first(template, raw.get("template"), None)),
        strict=bool(_first(strict, raw.get("strict"), False)),
        clean=bool(_first(clean, raw.get("clean"), False)),
        pygments_style=_first(
            pygments_style, raw.get("pygments_style"), DEFAULT_PYGMENTS_STYLE
        ),
    )


def _read_config_file(path: Path | None) -> tuple[dict[str, typ.Any], Path]:
    """Return the parsed mapping and the directory relative paths resolve to."""
    if path is None:
        path = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if not path.exists():
            return {}, Path.cwd()
    elif not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return dict(loaded), path.resolve().parent


def _path_from(value: typ.Any, base_dir: Path) -> Path | None:
    if value is None:
        return None
    path = Path(value)
    return path if path.is_absolute() else base_dir / path


def _first(*values: typ.Any) -> typ.Any:
    """Return the first value that is not ``None``."""
    return next((value for value in values if value is not None), None)


def _parse_template(value: str | BuiltInTemplate | None) -> BuiltInTemplate | None:
    if value is None or isinstance(value, BuiltInTemplate):
        return value
    try:
        return BuiltInTemplate(value)
    except ValueError as exc:
        available = ", ".join(member.value for member in BuiltInTemplate)
        msg = f"Unknown template '{value}'. Known templates: {available}"
        raise SiteConfigError(msg) from exc


__all__ = ["load_build_config"]
