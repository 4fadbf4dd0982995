"""Helpers for rewriting links between site documents to rendered paths.

Both markup formats funnel their link destinations through one
:class:`SourceLinkRewriter`, so djot and Markdown documents share exactly the
same rewriting rules. Markdown links are reached with a Python-Markdown
treeprocessor; djot links are reached by walking the pandoc JSON AST that
pypandoc returns for the document.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path, PurePosixPath
from urllib.parse import unquote, urlsplit, urlunsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from simple_ssg._constants import MARKUP_EXTENSIONS, RENDERED_EXTENSION
from simple_ssg.errors import DanglingLinkError

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from simple_ssg.errors import IssueReporter
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any
    IssueReporter = typ.Any

logger = logging.getLogger(__name__)


class SourceLinkRewriter:
    """Point links at other source documents to their rendered output.

    Parameters
    ----------
    source_dir : Path
        Directory containing the document whose links are rewritten; link
        destinations are resolved against it.
    web_prefix : str
        Site link prefix prepended to every rewritten destination.
    reporter : IssueReporter
        Receives a :class:`DanglingLinkError` when a rewritten destination
        does not exist on disk.
    source_root : Path or None, optional
        Site root that root-absolute destinations such as ``/guide.md`` are
        resolved against. Defaults to ``source_dir``.
    """

    def __init__(
        self,
        source_dir: Path,
        *,
        web_prefix: str,
        reporter: IssueReporter,
        source_root: Path | None = None,
    ) -> None:
        self.source_dir = source_dir
        self.source_root = source_dir if source_root is None else source_root
        self.web_prefix = web_prefix
        self.reporter = reporter

    def rewrite(self, target: str | None) -> str | None:
        """Return the rewritten destination, or ``None`` to leave it alone."""
        if not target:
            return None

        lower = target.lower()
        invalid = lower.startswith(
            ("http://", "https://", "mailto:", "tel:", "data:", "javascript:")
        )
        if target.startswith(("#", "//")) or "://" in target:
            invalid = True

        parsed = None
        if not invalid:
            parsed = urlsplit(target)
            invalid = bool(parsed.scheme or parsed.netloc or not parsed.path)

        if invalid or parsed is None:
            return None

        path = PurePosixPath(parsed.path)
        if path.suffix not in MARKUP_EXTENSIONS:
            return None

        if path.is_absolute():
            referenced = self.source_root / unquote(parsed.path).lstrip("/")
        else:
            referenced = self.source_dir / unquote(parsed.path)
        if not referenced.exists():
            self.reporter.report(DanglingLinkError(referenced))

        rendered = parsed.path[: -len(path.suffix)] + RENDERED_EXTENSION
        rewritten = self._prefixed(
            urlunsplit(("", "", rendered, parsed.query, parsed.fragment))
        )
        logger.debug("Rewrote link %s -> %s", target, rewritten)
        return rewritten

    def _prefixed(self, rendered: str) -> str:
        # Root-absolute paths only take a prefix that is itself absolute.
        if not rendered.startswith("/"):
            return self.web_prefix + rendered
        if self.web_prefix.startswith("/") or "://" in self.web_prefix:
            return self.web_prefix.rstrip("/") + rendered
        return rendered


class SourceLinkExtension(Extension):
    """Rewrite Markdown links to sibling documents into ``.html`` links."""

    def __init__(self, rewriter: SourceLinkRewriter) -> None:
        self.rewriter = rewriter

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the source-link treeprocessor on the Markdown instance."""
        processor = SourceLinkTreeprocessor(md, self.rewriter)
        md.treeprocessors.register(processor, "simple_ssg_source_links", 15)


class SourceLinkTreeprocessor(Treeprocessor):
    """Apply a :class:`SourceLinkRewriter` to every anchor in the tree."""

    def __init__(self, md: Markdown, rewriter: SourceLinkRewriter) -> None:
        super().__init__(md)
        self.rewriter = rewriter

    def run(self, root: Element) -> Element:
        """Rewrite anchors in the parsed markdown tree in place."""
        for element in root.iter("a"):
            rewritten = self.rewriter.rewrite(element.get("href"))
            if rewritten is not None:
                element.set("href", rewritten)
        return root


def rewrite_pandoc_links(node: typ.Any, rewriter: SourceLinkRewriter) -> int:
    """Rewrite ``Link`` targets in a pandoc JSON AST in place.

    Parameters
    ----------
    node : Any
        A pandoc JSON document, or any list/dict nested inside one.
    rewriter : SourceLinkRewriter
        Rewriter applied to each link destination.

    Returns
    -------
    int
        Number of link destinations that were changed.
    """
    changed = 0
    match node:
        case list():
            for child in node:
                changed += rewrite_pandoc_links(child, rewriter)
        case {"t": "Link", "c": [_attr, inlines, target]}:
            rewritten = rewriter.rewrite(target[0])
            if rewritten is not None:
                target[0] = rewritten
                changed += 1
            changed += rewrite_pandoc_links(inlines, rewriter)
        case dict():
            for value in node.values():
                changed += rewrite_pandoc_links(value, rewriter)
        case _:
            pass
    return changed


__all__ = [
    "SourceLinkExtension",
    "SourceLinkRewriter",
    "SourceLinkTreeprocessor",
    "rewrite_pandoc_links",
]
