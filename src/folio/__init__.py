"""Folio: page resolution for static site builds."""

from folio.build import BuildReport, PageFailure, process_pages
from folio.context import BuildContext
from folio.enhancers import Enhancer, EnhancementResult, EnhancerFailure, run_enhancers
from folio.exceptions import (
    ConfigLoadError,
    EnhancerError,
    FolioError,
    FrontmatterParsingError,
    PageError,
)
from folio.locales import LocaleResolver, LocaleView
from folio.markdown.renderer import MarkdownRenderer
from folio.page import Page, PageOptions
from folio.sources import RouteKind

__all__ = [
    "BuildContext",
    "BuildReport",
    "ConfigLoadError",
    "Enhancer",
    "EnhancementResult",
    "EnhancerError",
    "EnhancerFailure",
    "FolioError",
    "FrontmatterParsingError",
    "LocaleResolver",
    "LocaleView",
    "MarkdownRenderer",
    "Page",
    "PageError",
    "PageFailure",
    "PageOptions",
    "RouteKind",
    "process_pages",
    "run_enhancers",
]
