"""Tests for concurrent page processing."""

import pytest

from folio.build import process_pages
from folio.enhancers import Enhancer
from folio.exceptions import EnhancerError
from folio.page import Page


@pytest.mark.asyncio
async def test_failing_page_does_not_affect_siblings(build_context, file_page, locales, markdown, site_root):
    good = file_page("good.md", "# Good\n\n## Part\n")
    inline = Page.create({"path": "/inline.html", "content": "# Inline"}, build_context)
    broken = Page.create({"file_path": site_root / "missing.md", "relative": "missing.md"}, build_context)

    report = await process_pages([good, broken, inline], computed=locales, markdown=markdown)

    assert not report.ok
    assert report.processed == [good, inline]
    assert good.title == "Good"
    assert inline.title == "Inline"
    assert len(report.failures) == 1
    failure = report.failures[0]
    assert failure.page_key == broken.key
    assert failure.source == str(site_root / "missing.md")
    assert isinstance(failure.error, FileNotFoundError)


@pytest.mark.asyncio
async def test_fail_fast_raises_first_failure(build_context, locales, markdown, site_root):
    broken = Page.create({"file_path": site_root / "missing.md", "relative": "missing.md"}, build_context)

    with pytest.raises(FileNotFoundError):
        await process_pages([broken], computed=locales, markdown=markdown, fail_fast=True)


@pytest.mark.asyncio
async def test_enhancer_failures_are_reported_per_page(build_context, locales, markdown):
    def only_for_b(page):
        if page.path == "/b.html":
            raise RuntimeError("plugin bug")

    pages = [Page.create({"path": "/a.html"}, build_context), Page.create({"path": "/b.html"}, build_context)]

    report = await process_pages(
        pages,
        computed=locales,
        markdown=markdown,
        enhancers=[Enhancer("picky", only_for_b)],
    )

    assert [page.path for page in report.processed] == ["/a.html"]
    assert isinstance(report.failures[0].error, EnhancerError)
    assert report.failures[0].error.enhancer_name == "picky"


@pytest.mark.asyncio
async def test_unexpected_errors_propagate(build_context, locales, markdown):
    class BrokenResolver:
        def resolve(self, page):
            raise LookupError("resolver bug")

    page = Page.create({"path": "/a.html"}, build_context)

    with pytest.raises(LookupError):
        await process_pages([page], computed=BrokenResolver(), markdown=markdown)


@pytest.mark.asyncio
async def test_empty_build(locales, markdown):
    report = await process_pages([], computed=locales, markdown=markdown)

    assert report.ok
    assert report.processed == []
