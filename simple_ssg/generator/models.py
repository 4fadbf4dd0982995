"""Ledger records produced by the first pass and consumed by the second."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import PurePosixPath


@dc.dataclass(frozen=True, slots=True)
class DirEntry:
    """A directory encountered during the tree walk.

    Attributes
    ----------
    depth : int
        Number of path segments between the source root and the directory
        (``nested`` is 1, ``nested/deeper`` is 2).
    relative_path : PurePosixPath
        Directory path relative to the source root.
    """

    depth: int
    relative_path: PurePosixPath

    @property
    def name(self) -> str:
        """Return the directory's own name."""
        return self.relative_path.name


@dc.dataclass(frozen=True, slots=True)
class RenderedPage:
    """A document converted to HTML and held in memory until pass two.

    Attributes
    ----------
    depth : int
        Number of path segments between the source root and the page
        (``index.html`` is 1, ``nested/hey.html`` is 2).
    relative_path : PurePosixPath
        Output path relative to the site root, always ending in ``.html``.
    html : str
        Rendered page, still carrying any unresolved table-of-contents marker.
    """

    depth: int
    relative_path: PurePosixPath
    html: str = dc.field(repr=False)

    @property
    def stem(self) -> str:
        """Return the page's file name without its extension."""
        return self.relative_path.stem


LedgerEntry: typ.TypeAlias = DirEntry | RenderedPage
Ledger: typ.TypeAlias = list[LedgerEntry]


__all__ = ["DirEntry", "Ledger", "LedgerEntry", "RenderedPage"]
