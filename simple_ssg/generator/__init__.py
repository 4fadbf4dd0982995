"""Utilities for walking, rendering, and assembling simple-ssg sites."""

from .link_rewriter import SourceLinkExtension, SourceLinkRewriter
from .models import DirEntry, Ledger, LedgerEntry, RenderedPage
from .renderer import HtmlContentRenderer
from .site_generator import SiteGenerator, build_file, build_site
from .templates import BuiltInTemplate
from .toc import TableOfContents, assemble_table_of_contents
from .walker import SiteWalker

__all__ = [
    "BuiltInTemplate",
    "DirEntry",
    "HtmlContentRenderer",
    "Ledger",
    "LedgerEntry",
    "RenderedPage",
    "SiteGenerator",
    "SiteWalker",
    "SourceLinkExtension",
    "SourceLinkRewriter",
    "TableOfContents",
    "assemble_table_of_contents",
    "build_file",
    "build_site",
]
