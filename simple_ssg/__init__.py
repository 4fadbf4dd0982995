"""Static site generation from djot and Markdown document trees.

This package walks a source directory, renders every ``.dj``, ``.djot`` and
``.md`` document to HTML with intra-site links rewritten to ``.html``, wraps
pages in the nearest ``template.html``, and injects a table of contents that
mirrors the directory structure.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_site``: Library entry point taking a :class:`BuildConfig`.

Examples
--------
>>> from simple_ssg import main
>>> main()  # doctest: +SKIP
>>> from simple_ssg import app
>>> app.name[0]
'simple-ssg'
"""

from __future__ import annotations

from .cli import app, main
from .config import BuildConfig, load_build_config
from .generator import build_file, build_site

__all__ = ["BuildConfig", "app", "build_file", "build_site", "load_build_config", "main"]
