"""First pass: walk the source tree, render documents, and build the ledger.

The walk is a deterministic pre-order traversal. Within a directory, files
are visited before subdirectories and each group is sorted by name; a
subdirectory's whole subtree is visited before its next sibling. Every
directory below the root becomes a :class:`DirEntry` and every markup document
becomes a :class:`RenderedPage` whose HTML is held in memory until the
table of contents is substituted in the second pass. Static files are copied
to the output tree as they are encountered. Symlinked directories are not
followed, and an output directory nested inside the source tree is left out
of the walk.
"""

from __future__ import annotations

import logging
import shutil
import typing as typ
from pathlib import Path, PurePosixPath

from simple_ssg._constants import (
    INDEX_FILENAMES,
    MARKUP_EXTENSIONS,
    RENDERED_EXTENSION,
    TEMPLATE_FILENAME,
)
from simple_ssg.errors import (
    IndexPageNotFoundError,
    PathNotRelativeError,
    TraversalEntryError,
)
from simple_ssg.generator.models import DirEntry, Ledger, RenderedPage
from simple_ssg.generator.templates import resolve_template, wrap_html_content

if typ.TYPE_CHECKING:
    from simple_ssg.config import BuildConfig
    from simple_ssg.errors import IssueReporter
    from simple_ssg.generator.renderer import HtmlContentRenderer

logger = logging.getLogger(__name__)


def has_index_page(source_root: Path) -> bool:
    """Return ``True`` when the root holds an ``index.{dj,djot,md}`` document."""
    return any((source_root / name).is_file() for name in INDEX_FILENAMES)


class SiteWalker:
    """Traverse a source tree and record one ledger entry per directory/page."""

    def __init__(
        self,
        config: BuildConfig,
        renderer: HtmlContentRenderer,
        reporter: IssueReporter,
    ) -> None:
        self.config = config
        self.source_root = config.source
        self.output_dir = config.output_dir
        self._resolved_output_dir = config.output_dir.resolve()
        self.renderer = renderer
        self.reporter = reporter

    def walk(self) -> Ledger:
        """Walk the source tree and return the ordered ledger.

        Returns
        -------
        Ledger
            Directory and rendered-page entries in pre-order.

        Raises
        ------
        SiteBuildError
            In strict mode, on the first missing index, unreadable directory,
            out-of-root entry, or dangling link.
        OSError
            If a document cannot be read or a static file cannot be copied.
        """
        ledger: Ledger = []
        if not has_index_page(self.source_root):
            self.reporter.report(IndexPageNotFoundError())
        self._walk_directory(self.source_root, 1, ledger)
        return ledger

    def walk_file(self, document: Path) -> Ledger:
        """Render a single document directly inside the source root."""
        ledger: Ledger = []
        self._process_path(document, 1, ledger)
        return ledger

    def _walk_directory(self, directory: Path, depth: int, ledger: Ledger) -> None:
        try:
            children = sorted(
                directory.iterdir(), key=lambda child: (child.is_dir(), child.name)
            )
        except OSError as exc:
            self.reporter.report(TraversalEntryError(directory, exc))
            return
        for child in children:
            if self._is_output_dir(child):
                logger.debug("Path %s is the output directory, skipping", child)
                continue
            self._process_path(child, depth, ledger)

    def _is_output_dir(self, entry: Path) -> bool:
        return not entry.is_symlink() and entry.resolve() == self._resolved_output_dir

    def _process_path(self, entry: Path, depth: int, ledger: Ledger) -> None:
        """Classify ``entry`` and record, render, or copy it."""
        try:
            relative = PurePosixPath(entry.relative_to(self.source_root).as_posix())
        except ValueError:
            self.reporter.report(PathNotRelativeError(entry, self.source_root))
            return
        logger.debug("%s :: %d", relative, depth)

        if entry.is_symlink() and entry.is_dir():
            logger.debug("Path %s is a symlinked directory, skipping", entry)
            return
        if entry.is_dir():
            ledger.append(DirEntry(depth=depth, relative_path=relative))
            self._walk_directory(entry, depth + 1, ledger)
            return
        if entry.name == TEMPLATE_FILENAME:
            logger.debug("Path %s is a template, skipping", entry)
            return

        markup_format = MARKUP_EXTENSIONS.get(entry.suffix)
        if markup_format is None:
            target = self.output_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(entry, target)
            logger.debug("Copied %s to %s", entry, target)
            return

        ledger.append(self._render_page(entry, relative, depth, markup_format))

    def _render_page(
        self, entry: Path, relative: PurePosixPath, depth: int, markup_format: str
    ) -> RenderedPage:
        """Render ``entry`` and wrap it in whichever template applies."""
        logger.debug("Rendering %s as %s", entry, markup_format)
        text = entry.read_text(encoding="utf-8")
        body = self.renderer.render(text, markup_format, entry.parent)
        template = resolve_template(
            entry,
            self.source_root,
            forced=self.config.template,
            stylesheet=self.renderer.stylesheet,
        )
        return RenderedPage(
            depth=depth,
            relative_path=relative.with_suffix(RENDERED_EXTENSION),
            html=wrap_html_content(body, template),
        )


__all__ = ["SiteWalker", "has_index_page"]
