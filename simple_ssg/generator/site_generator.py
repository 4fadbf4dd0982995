"""High-level orchestration for static site generation.

:class:`SiteGenerator` runs the two passes over a source tree described by a
:class:`~simple_ssg.config.BuildConfig`: the walk renders every document and
copies static files, then each rendered page receives its table of contents
and is written to the output directory.

Example
-------
>>> from pathlib import Path
>>> from simple_ssg.config import load_build_config
>>> from simple_ssg.generator import SiteGenerator
>>> config = load_build_config(source=Path("site"))  # doctest: +SKIP
>>> SiteGenerator(config).run()  # doctest: +SKIP
[PosixPath('output/index.html'), ...]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import shutil
import typing as typ
from pathlib import Path

from simple_ssg._constants import MARKUP_EXTENSIONS, TOC_MARKER
from simple_ssg.errors import IssueReporter, SiteConfigError
from simple_ssg.generator.models import RenderedPage
from simple_ssg.generator.renderer import HtmlContentRenderer
from simple_ssg.generator.toc import TableOfContents
from simple_ssg.generator.walker import SiteWalker

if typ.TYPE_CHECKING:
    from simple_ssg.config import BuildConfig
    from simple_ssg.generator.models import Ledger

logger = logging.getLogger(__name__)


class SiteGenerator:
    """Render a source tree into a static HTML site."""

    def __init__(self, config: BuildConfig) -> None:
        """Initialize the generator.

        Parameters
        ----------
        config : BuildConfig
            Source and output locations, link prefix, template choice, and
            the strict/lenient policy for the run.
        """
        self.config = config
        self.reporter = IssueReporter(strict=config.strict)
        self.renderer = HtmlContentRenderer(
            self.reporter,
            web_prefix=config.web_prefix,
            pygments_style=config.pygments_style,
            source_root=config.source,
        )

    def run(self) -> list[Path]:
        """Build the site and return the written page paths in ledger order.

        Raises
        ------
        SiteBuildError
            In strict mode, when any reportable issue is encountered.
        OSError
            On any read or write failure.
        """
        if self.config.clean:
            self._clean_output()
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        logger.info("1/3: Site generation and indexing...")
        ledger = SiteWalker(self.config, self.renderer, self.reporter).walk()

        logger.info("2/3: Generating tables of contents and saving...")
        written = write_pages(ledger, self.config.output_dir, self.config.web_prefix)

        logger.info("3/3: Done! Wrote %d page(s)", len(written))
        return written

    def _clean_output(self) -> None:
        output_dir = self.config.output_dir
        logger.debug("Cleaning output path %s", output_dir)
        if output_dir.exists():
            shutil.rmtree(output_dir)
        else:
            logger.debug("Nothing to clean!")


def write_pages(ledger: Ledger, output_dir: Path, web_prefix: str = "") -> list[Path]:
    """Substitute each page's table of contents and write it below ``output_dir``."""
    toc = TableOfContents(ledger, web_prefix=web_prefix)
    written: list[Path] = []
    for entry in ledger:
        if not isinstance(entry, RenderedPage):
            continue
        table_of_contents = toc.render(entry.relative_path, entry.depth)
        text = entry.html.replace(TOC_MARKER, table_of_contents)
        output_path = output_dir / entry.relative_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        logger.debug("%s :: %s", output_path, entry.relative_path)
        written.append(output_path)
    return written


def build_site(config: BuildConfig) -> list[Path]:
    """Build the site described by ``config``; see :meth:`SiteGenerator.run`."""
    return SiteGenerator(config).run()


def build_file(document: Path, config: BuildConfig) -> Path:
    """Render a single document into ``config.output_dir``.

    The document's own directory acts as the source root, so a
    ``template.html`` beside it (or a forced built-in template) still applies
    and the table of contents lists just this page. Static siblings are not
    copied and no index page is required.

    Returns
    -------
    Path
        The written HTML file.

    Raises
    ------
    SiteConfigError
        If ``document`` does not have a djot or Markdown extension.
    """
    if document.suffix not in MARKUP_EXTENSIONS:
        msg = f"{document} is not a djot or Markdown document."
        raise SiteConfigError(msg)
    single = dc.replace(config, source=document.parent)
    generator = SiteGenerator(single)
    walker = SiteWalker(single, generator.renderer, generator.reporter)
    ledger = walker.walk_file(document)
    return write_pages(ledger, single.output_dir, single.web_prefix)[0]


__all__ = ["SiteGenerator", "build_file", "build_site", "write_pages"]
