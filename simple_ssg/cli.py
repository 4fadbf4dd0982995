"""Cyclopts CLI entrypoint for building static sites from djot and Markdown.

The ``simple-ssg`` console script renders a directory tree of ``.dj``,
``.djot`` and ``.md`` documents into HTML (``simple-ssg build``) or converts a
single document (``simple-ssg render``). Every option can also be supplied as a
``SIMPLE_SSG_*`` environment variable, and defaults may live in a
``simple-ssg.yaml`` file.

Examples
--------
Build ``site/`` into ``./output``:

>>> from simple_ssg.cli import app
>>> app(["build", "site"])  # doctest: +SKIP

Rebuild from scratch under a URL prefix, failing on any warning:

>>> app(
...     ["build", "site", "--clean", "--strict", "--web-prefix", "/docs/"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_build_config
from .errors import SiteBuildError, SiteConfigError
from .generator import build_file, build_site

logger = logging.getLogger(__name__)

app = App(name="simple-ssg", config=cyclopts.config.Env("SIMPLE_SSG_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _set_verbosity(verbose: bool) -> None:  # noqa: FBT001
    if verbose:
        logging.getLogger("simple_ssg").setLevel(logging.DEBUG)


@app.command(help="Build a static HTML site from a directory of documents.")
def build(
    source: typ.Annotated[
        Path | None, Parameter(help="Directory to generate the site from")
    ] = None,
    *,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(name=["--output-dir", "-o"], help="Output directory (default ./output)"),
    ] = None,
    clean: typ.Annotated[
        bool | None,
        Parameter(help="Remove the output directory before building"),
    ] = None,
    web_prefix: typ.Annotated[
        str | None, Parameter(help="Prefix for generated links (default local paths)")
    ] = None,
    template: typ.Annotated[
        str | None,
        Parameter(
            name=["--template", "-t"],
            help="Built-in template overriding every template.html",
        ),
    ] = None,
    strict: typ.Annotated[
        bool | None,
        Parameter(help="Treat warnings as errors and abort the build"),
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a simple-ssg.yaml file")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build the site rooted at ``source``.

    Parameters
    ----------
    source : Path or None, optional
        Directory holding the documents; may instead come from the config
        file.
    output_dir : Path or None, optional
        Where the rendered site is written; defaults to ``./output``.
    clean : bool or None, optional
        Remove ``output_dir`` before building. ``None`` defers to the config
        file.
    web_prefix : str or None, optional
        Prefix prepended to every generated internal link.
    template : str or None, optional
        ``default``, ``github-markdown`` or ``force-none``.
    strict : bool or None, optional
        Escalate warnings into a failed build. ``--no-strict`` overrides a
        ``strict: true`` config file.
    config : Path or None, optional
        Configuration file; ``./simple-ssg.yaml`` is used when present.
    verbose : bool, optional
        Log debug output.

    Returns
    -------
    None
        Writes the site and prints each written page path.

    Raises
    ------
    SiteConfigError
        If ``source`` is a file, or does not exist.
    """
    _set_verbosity(verbose)
    build_config = load_build_config(
        config,
        source=source,
        output_dir=output_dir,
        web_prefix=web_prefix,
        template=template,
        strict=strict,
        clean=clean,
    )
    if build_config.source.is_file():
        msg = (
            f"Path {build_config.source} is a file. "
            "Use `simple-ssg render <FILE>` if this was intended."
        )
        raise SiteConfigError(msg)
    if not build_config.source.is_dir():
        msg = f"Target path {build_config.source} is not a file or a directory."
        raise SiteConfigError(msg)

    written = build_site(build_config)
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Render a single djot or Markdown document to HTML.")
def render(
    file: typ.Annotated[Path, Parameter(help="Document to render")],
    *,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(
            name=["--output-dir", "-o"],
            help="Output directory (default current directory)",
        ),
    ] = None,
    web_prefix: typ.Annotated[
        str | None, Parameter(help="Prefix for generated links")
    ] = None,
    template: typ.Annotated[
        str | None,
        Parameter(name=["--template", "-t"], help="Built-in template to use"),
    ] = None,
    strict: typ.Annotated[
        bool | None, Parameter(help="Treat warnings as errors and abort")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render ``file`` into ``output_dir`` (the current directory by default)."""
    _set_verbosity(verbose)
    if file.is_dir():
        msg = (
            f"Path {file} is a directory. "
            "Use `simple-ssg build <DIRECTORY>` if this was intended."
        )
        raise SiteConfigError(msg)
    if not file.is_file():
        msg = f"Target path {file} is not a file or a directory."
        raise SiteConfigError(msg)
    build_config = load_build_config(
        source=file.parent,
        output_dir=output_dir or Path.cwd(),
        web_prefix=web_prefix,
        template=template,
        strict=strict,
    )
    written = build_file(file, build_config)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Configure logging and invoke the Cyclopts application.

    Reportable build problems and configuration errors are logged and turn
    into exit status 1 instead of a traceback.
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    try:
        app()
    except (SiteBuildError, SiteConfigError, FileNotFoundError) as exc:
        logger.error("%s", exc)  # noqa: TRY400
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
