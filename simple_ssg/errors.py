"""Error taxonomy and the strict/lenient reporting policy for site builds.

Four kinds of problem can surface while a site is assembled: a missing root
index page, an entry that cannot be expressed relative to the source root, a
directory entry the walk could not read, and a cross-document link whose
target does not exist. Each of them is either logged as a warning (lenient
mode) or raised to abort the run (strict mode). :class:`IssueReporter` applies
that choice uniformly and is passed explicitly to every component that can
produce one of these errors.

Plain I/O failures (``OSError`` while reading or writing content) are not part
of this taxonomy and always propagate.

Examples
--------
>>> reporter = IssueReporter(strict=False)
>>> reporter.report(IndexPageNotFoundError())
>>> len(reporter.issues)
1
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SiteConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


class SiteBuildError(RuntimeError):
    """Base class for problems governed by the strict/lenient policy."""


class IndexPageNotFoundError(SiteBuildError):
    """Raised when the source root has no landing document."""

    def __init__(self) -> None:
        super().__init__(
            "index.{dj|djot|md} not found! consider creating one in the base "
            "target directory as the default page."
        )


class PathNotRelativeError(SiteBuildError):
    """Raised when an entry cannot be expressed relative to the source root."""

    def __init__(self, path: Path, root: Path) -> None:
        self.path = path
        self.root = root
        super().__init__(f"Path {path} is not relative to target directory {root}")


class TraversalEntryError(SiteBuildError):
    """Raised when the tree walk cannot read an entry."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"An entry returned error {cause}")


class DanglingLinkError(SiteBuildError):
    """Raised when a rewritten link points at a document that does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Referenced file path {path} does not exist!")


class IssueReporter:
    """Route site build issues to warnings or hard failures.

    Parameters
    ----------
    strict : bool, optional
        When ``True`` every reported issue is raised; otherwise it is logged
        at WARNING level and collected in :attr:`issues`.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self.issues: list[SiteBuildError] = []

    def report(self, error: SiteBuildError) -> None:
        """Raise ``error`` in strict mode, otherwise log and record it."""
        if self.strict:
            raise error
        logger.warning("%s", error)
        self.issues.append(error)


__all__ = [
    "DanglingLinkError",
    "IndexPageNotFoundError",
    "IssueReporter",
    "PathNotRelativeError",
    "SiteBuildError",
    "SiteConfigError",
    "TraversalEntryError",
]
