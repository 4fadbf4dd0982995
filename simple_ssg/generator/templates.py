"""Page template discovery and content wrapping.

A page is wrapped in the nearest ``template.html`` found by walking upward
from the document's directory to the source root, unless a built-in template
is forced for the whole run. Templates are plain HTML: the rendered document
replaces ``<!-- {CONTENT} -->`` and the table of contents later replaces
``<!-- {TABLE_OF_CONTENTS} -->``.

Examples
--------
>>> wrap_html_content("<p>hi</p>", "<main><!-- {CONTENT} --></main>")
'<main><p>hi</p></main>'
>>> wrap_html_content("<p>hi</p>", None)
'<p>hi</p>'
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path

from simple_ssg._constants import (
    CONTENT_MARKER,
    PYGMENTS_CSS_MARKER,
    TEMPLATE_FILENAME,
)

logger = logging.getLogger(__name__)

BUILTIN_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class BuiltInTemplate(enum.StrEnum):
    """Templates shipped with the package that can be forced for every page."""

    DEFAULT = "default"
    GITHUB_MARKDOWN = "github-markdown"
    FORCE_NONE = "force-none"

    def get_template(self, stylesheet: str = "") -> str | None:
        """Return the template HTML, or ``None`` for :attr:`FORCE_NONE`."""
        if self is BuiltInTemplate.FORCE_NONE:
            return None
        path = BUILTIN_TEMPLATES_DIR / f"{self.value}.html"
        return path.read_text(encoding="utf-8").replace(PYGMENTS_CSS_MARKER, stylesheet)


def find_template(document: Path, source_root: Path) -> str | None:
    """Return the nearest ``template.html`` above ``document`` within the root."""
    directory = document.parent
    while True:
        candidate = directory / TEMPLATE_FILENAME
        if candidate.is_file():
            logger.debug("Using template %s for %s", candidate, document)
            return candidate.read_text(encoding="utf-8")
        if directory == source_root or source_root not in directory.parents:
            return None
        directory = directory.parent


def resolve_template(
    document: Path,
    source_root: Path,
    forced: BuiltInTemplate | None = None,
    stylesheet: str = "",
) -> str | None:
    """Return the template applying to ``document``; ``forced`` always wins."""
    if forced is not None:
        return forced.get_template(stylesheet)
    return find_template(document, source_root)


def wrap_html_content(html: str, template: str | None) -> str:
    """Substitute ``html`` into the template content marker, if any template."""
    if template is None:
        return html
    return template.replace(CONTENT_MARKER, html)


__all__ = [
    "BuiltInTemplate",
    "find_template",
    "resolve_template",
    "wrap_html_content",
]
