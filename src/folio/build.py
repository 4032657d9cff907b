"""Concurrent processing of a site's pages."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from folio.exceptions import FolioError

if TYPE_CHECKING:
    from folio.enhancers import Enhancer
    from folio.locales import LocaleResolver
    from folio.markdown.renderer import MarkdownRenderer
    from folio.page import Page

logger = logging.getLogger(__name__)

# Errors that fail a single page. I/O errors arrive unwrapped.
PAGE_ERRORS = (FolioError, OSError)


@dataclass(frozen=True, slots=True)
class PageFailure:
    page_key: str
    source: str | None
    error: FolioError | OSError


@dataclass(slots=True)
class BuildReport:
    processed: list[Page] = field(default_factory=list)
    failures: list[PageFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


async def process_pages(
    pages: Sequence[Page],
    *,
    computed: LocaleResolver,
    markdown: MarkdownRenderer,
    enhancers: Sequence[Enhancer] = (),
    pre_render: Mapping[str, Any] | None = None,
    fail_fast: bool = False,
) -> BuildReport:
    """Process every page concurrently, one task per page.

    A page that fails with a :class:`FolioError` or an :class:`OSError` is
    recorded in the report and does not affect its siblings. Any other
    exception is re-raised.

    Raises:
        FolioError | OSError: The first page failure, when ``fail_fast`` is set.

    """
    outcomes = await asyncio.gather(
        *(
            page.process(computed=computed, markdown=markdown, enhancers=enhancers, pre_render=pre_render)
            for page in pages
        ),
        return_exceptions=True,
    )

    report = BuildReport()
    for page, outcome in zip(pages, outcomes, strict=True):
        if isinstance(outcome, PAGE_ERRORS):
            logger.error("Skipping page %s: %s", page.source_label, outcome)
            report.failures.append(PageFailure(page_key=page.key, source=page.source_label, error=outcome))
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            report.processed.append(page)

    logger.info("Processed %d page(s), %d failed", len(report.processed), len(report.failures))
    if fail_fast and report.failures:
        raise report.failures[0].error
    return report
