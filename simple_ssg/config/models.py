"""Typed dataclasses describing a site build."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from simple_ssg._constants import DEFAULT_PYGMENTS_STYLE
from simple_ssg.errors import SiteConfigError
from simple_ssg.generator.templates import BuiltInTemplate


@dc.dataclass(slots=True)
class BuildConfig:
    """A fully resolved build definition.

    Attributes
    ----------
    source : Path
        Directory holding the djot/Markdown source tree.
    output_dir : Path
        Directory the rendered site is written into.
    web_prefix : str
        Prefix prepended to every generated internal link, for deployments
        under a non-root URL path.
    template : BuiltInTemplate or None
        Built-in template forced for every page; ``None`` uses the nearest
        ``template.html``.
    strict : bool
        Escalate reportable issues (missing index, dangling links, traversal
        errors) into hard failures.
    clean : bool
        Remove the output directory before building.
    pygments_style : str
        Pygments style used for highlighted code blocks.
    """

    source: Path
    output_dir: Path
    web_prefix: str = ""
    template: BuiltInTemplate | None = None
    strict: bool = False
    clean: bool = False
    pygments_style: str = DEFAULT_PYGMENTS_STYLE


__all__ = ["BuildConfig", "BuiltInTemplate", "SiteConfigError"]
