"""Render djot and Markdown documents into HTML fragments.

Markdown is converted with Python-Markdown and Pygments-backed ``codehilite``;
djot is converted by pandoc through pypandoc, going via pandoc's JSON AST so
link destinations can be rewritten before the HTML is produced. Both paths
share one :class:`~simple_ssg.generator.link_rewriter.SourceLinkRewriter`
configuration.
"""

from __future__ import annotations

import json
import logging
import re
import typing as typ

import pypandoc
from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from simple_ssg._constants import DEFAULT_PYGMENTS_STYLE, DJOT, MARKDOWN
from simple_ssg.generator.link_rewriter import (
    SourceLinkExtension,
    SourceLinkRewriter,
    rewrite_pandoc_links,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from markdown.extensions import Extension

    from simple_ssg.errors import IssueReporter
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any
    IssueReporter = typ.Any

logger = logging.getLogger(__name__)

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)


class HtmlContentRenderer:
    """Render markup documents with consistent link handling and styling."""

    def __init__(
        self,
        reporter: IssueReporter,
        *,
        web_prefix: str = "",
        pygments_style: str = DEFAULT_PYGMENTS_STYLE,
        source_root: Path | None = None,
    ) -> None:
        """Initialize a renderer.

        Parameters
        ----------
        reporter : IssueReporter
            Receives dangling-link issues raised while rewriting links.
        web_prefix : str, optional
            Site link prefix prepended to rewritten links. Defaults to ``""``.
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults
            to ``"monokai"``.
        source_root : Path or None, optional
            Site root used for root-absolute link destinations. Defaults to
            the directory of each rendered document.
        """
        self.reporter = reporter
        self.web_prefix = web_prefix
        self.pygments_style = pygments_style
        self.source_root = source_root
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(self, text: str, markup_format: str, source_dir: Path) -> str:
        """Render ``text`` written in ``markup_format`` into an HTML fragment.

        Raises
        ------
        ValueError
            If ``markup_format`` is not ``"djot"`` or ``"markdown"``.
        """
        if markup_format == MARKDOWN:
            return self.markdown(text, source_dir)
        if markup_format == DJOT:
            return self.djot(text, source_dir)
        msg = f"Unsupported markup format '{markup_format}'."
        raise ValueError(msg)

    def markdown(self, text: str, source_dir: Path) -> str:
        """Render Markdown into HTML, rewriting links relative to ``source_dir``."""
        normalized = FENCED_INDENT_PATTERN.sub(r"\1", text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
            SourceLinkExtension(self._rewriter(source_dir)),
        ]
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return md.convert(normalized)

    def djot(self, text: str, source_dir: Path) -> str:
        """Render djot into HTML, rewriting links relative to ``source_dir``."""
        if not text.strip():
            return ""
        ast = json.loads(pypandoc.convert_text(text, "json", format="djot"))
        changed = rewrite_pandoc_links(ast, self._rewriter(source_dir))
        logger.debug("Rewrote %d djot link(s) in %s", changed, source_dir)
        return pypandoc.convert_text(json.dumps(ast), "html", format="json")

    def _rewriter(self, source_dir: Path) -> SourceLinkRewriter:
        return SourceLinkRewriter(
            source_dir,
            web_prefix=self.web_prefix,
            reporter=self.reporter,
            source_root=self.source_root,
        )


__all__ = ["HtmlContentRenderer"]
