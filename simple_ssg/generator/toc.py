"""Second pass: build each page's table of contents from the ledger.

The ledger is folded once into a tree of folders and pages (children kept in
ledger order); every page then renders its own view of that tree, which only
differs in the ``../`` prefix of the links and in which entry is the current,
non-linked page.

Markup follows a fixed shape::

    <ul>
      <li><a href="index.html">index</a></li>
      <li><b><u>guides:</u></b></li>
      <ul><li><b>intro</b></li></ul>
    </ul>

Folders open their list lazily: a folder with no pages anywhere below it is
not shown at all, and a folder with no pages directly inside it never gets a
heading of its own. Its subfolders are shown in its place, labelled with their
path from the nearest folder that is shown (``a/b:``).
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from html import escape
from pathlib import PurePosixPath

from simple_ssg.generator.models import DirEntry, RenderedPage

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from simple_ssg.generator.models import LedgerEntry

logger = logging.getLogger(__name__)

ROOT = PurePosixPath(".")


@dc.dataclass(slots=True)
class _Folder:
    name: str
    children: list[_Folder | RenderedPage] = dc.field(default_factory=list)
    page_count: int = 0

    @property
    def has_direct_pages(self) -> bool:
        return any(isinstance(child, RenderedPage) for child in self.children)


class TableOfContents:
    """Navigation tree shared by every page of one site build.

    Parameters
    ----------
    ledger : Iterable[LedgerEntry]
        Entries from the first pass, in walk order.
    web_prefix : str, optional
        Site link prefix inserted before every page path.
    """

    def __init__(
        self, ledger: cabc.Iterable[LedgerEntry], *, web_prefix: str = ""
    ) -> None:
        self.web_prefix = web_prefix
        self._folders: dict[PurePosixPath, _Folder] = {ROOT: _Folder(name="")}
        for entry in ledger:
            if isinstance(entry, DirEntry):
                self._folder(entry.relative_path)
            else:
                self._folder(entry.relative_path.parent).children.append(entry)
        self._count_pages(self.root)

    @property
    def root(self) -> _Folder:
        return self._folders[ROOT]

    def render(self, target_path: PurePosixPath, target_depth: int) -> str:
        """Return the ``<ul>`` markup as seen from the page at ``target_path``.

        Parameters
        ----------
        target_path : PurePosixPath
            Rendered path of the viewing page; it is shown in bold, unlinked.
        target_depth : int
            Depth of the viewing page (``index.html`` is 1); links receive
            ``target_depth - 1`` leading ``../`` segments when the web prefix
            is relative.
        """
        up = ""
        if target_depth > 1 and _is_relative_prefix(self.web_prefix):
            up = "../" * (target_depth - 1)
        parts = ["<ul>"]
        self._render_contents(self.root, target_path, up + self.web_prefix, parts)
        parts.append("</ul>")
        return "".join(parts)

    def _folder(self, path: PurePosixPath) -> _Folder:
        """Return the folder for ``path``, creating it and its parents on demand."""
        folder = self._folders.get(path)
        if folder is None:
            folder = _Folder(name=path.name)
            self._folder(path.parent).children.append(folder)
            self._folders[path] = folder
        return folder

    def _count_pages(self, folder: _Folder) -> int:
        folder.page_count = sum(
            self._count_pages(child) if isinstance(child, _Folder) else 1
            for child in folder.children
        )
        return folder.page_count

    def _render_contents(
        self,
        folder: _Folder,
        target_path: PurePosixPath,
        href_prefix: str,
        parts: list[str],
    ) -> None:
        for child in folder.children:
            if isinstance(child, _Folder):
                self._render_folder(child, child.name, target_path, href_prefix, parts)
            elif child.relative_path == target_path:
                parts.append(f"<li><b>{escape(child.stem)}</b></li>")
            else:
                href = escape(href_prefix + child.relative_path.as_posix())
                parts.append(f'<li><a href="{href}">{escape(child.stem)}</a></li>')

    def _render_folder(
        self,
        folder: _Folder,
        label: str,
        target_path: PurePosixPath,
        href_prefix: str,
        parts: list[str],
    ) -> None:
        if folder.page_count == 0:
            logger.debug("Folder %s has no pages, omitting", label)
            return
        if not folder.has_direct_pages:
            for child in folder.children:
                if isinstance(child, _Folder):
                    self._render_folder(
                        child, f"{label}/{child.name}", target_path, href_prefix, parts
                    )
            return
        parts.append(f"<li><b><u>{escape(label)}:</u></b></li>")
        parts.append("<ul>")
        self._render_contents(folder, target_path, href_prefix, parts)
        parts.append("</ul>")


def assemble_table_of_contents(
    ledger: cabc.Iterable[LedgerEntry],
    target_depth: int,
    target_path: PurePosixPath,
    web_prefix: str = "",
) -> str:
    """Build the table of contents for a single page from ``ledger``."""
    return TableOfContents(ledger, web_prefix=web_prefix).render(
        target_path, target_depth
    )


def _is_relative_prefix(prefix: str) -> bool:
    """Return ``False`` for root-absolute or scheme-qualified prefixes."""
    return not prefix.startswith("/") and "://" not in prefix


__all__ = ["TableOfContents", "assemble_table_of_contents"]
