"""Tests for permalink formatting and resolution."""

import pytest

from folio.permalinks import format_permalink
from folio.page import Page


def test_no_pattern_yields_no_permalink():
    assert format_permalink(pattern=None, slug="a", date=None, regular_path="/a.html") is None
    assert format_permalink(pattern="", slug="a", date=None, regular_path="/a.html") is None


def test_date_and_slug_placeholders():
    link = format_permalink(
        pattern="/:year/:month/:day/:slug.html",
        slug="my-post",
        date="2023-05-01",
        regular_path="/posts/2023-05-01-my-post.html",
    )

    assert link == "/2023/05/01/my-post.html"


def test_unpadded_placeholders():
    link = format_permalink(pattern=":year/:i_month/:i_day/:slug", slug="x", date="2023-05-01", regular_path="/x")

    assert link == "/2023/5/1/x"


def test_regular_placeholder_and_locale_prefix():
    link = format_permalink(pattern="/:regular", slug="a", date=None, regular_path="/guide/a.html", locale_path="/zh/")

    assert link == "/zh/guide/a.html"


def test_slug_is_uri_encoded():
    link = format_permalink(pattern="/:slug", slug="中文", date=None, regular_path="/x")

    assert link == "/%E4%B8%AD%E6%96%87"


def test_missing_date_uses_epoch():
    assert format_permalink(pattern="/:year/:slug", slug="a", date=None, regular_path="/a") == "/1970/a"


@pytest.mark.asyncio
async def test_configured_pattern_sets_path(build_context, locales, markdown):
    page = Page.create(
        {"path": "/posts/2023-05-01-my-post.html", "permalink_pattern": "/:year/:month/:slug.html"},
        build_context,
    )

    await page.process(computed=locales, markdown=markdown)

    assert page.regular_path == "/posts/2023-05-01-my-post.html"
    assert page.path == "/2023/05/my-post.html"


@pytest.mark.asyncio
async def test_frontmatter_permalink_overrides_configured_pattern(file_page, locales, markdown):
    page = file_page(
        "posts/2023-05-01-my-post.md",
        "---\npermalink: /blog/:slug/\n---\n# Post",
        permalink_pattern="/:year/:slug.html",
    )

    await page.process(computed=locales, markdown=markdown)

    assert page.path == "/blog/my-post/"


@pytest.mark.asyncio
async def test_explicit_permalink_skips_pattern(build_context, locales, markdown):
    page = Page.create({"permalink": "/fixed/", "permalink_pattern": "/:slug.html"}, build_context)

    await page.process(computed=locales, markdown=markdown)

    assert page.path == "/fixed/"


@pytest.mark.asyncio
async def test_without_pattern_path_stays_regular(file_page, locales, markdown):
    page = file_page("guide/intro.md", "# Intro")

    await page.process(computed=locales, markdown=markdown)

    assert page.path == page.regular_path == "/guide/intro.html"


@pytest.mark.asyncio
async def test_locale_prefix_applies_to_pattern(build_context, locales, markdown):
    page = Page.create({"path": "/zh/hello.html", "permalink_pattern": "/:slug/"}, build_context)

    await page.process(computed=locales, markdown=markdown)

    assert page.path == "/zh/hello/"


def test_build_permalink_is_idempotent(build_context):
    page = Page.create(
        {"path": "/posts/2023-05-01-my-post.html", "permalink_pattern": "/:year/:slug.html"},
        build_context,
    )

    page.build_permalink()
    first = page.path
    page.frontmatter["permalink"] = "/changed/:slug"
    page.build_permalink()

    assert first == "/2023/my-post.html"
    assert page.path == first


@pytest.mark.asyncio
async def test_non_latin_filenames_get_distinct_permalinks(file_page, locales, markdown):
    chinese = file_page("中文.md", "# 中文", permalink_pattern="/:slug.html")
    japanese = file_page("日本語.md", "# 日本語", permalink_pattern="/:slug.html")

    await chinese.process(computed=locales, markdown=markdown)
    await japanese.process(computed=locales, markdown=markdown)

    assert chinese.slug == "中文"
    assert japanese.slug == "日本語"
    assert chinese.path == "/%E4%B8%AD%E6%96%87.html"
    assert japanese.path == "/%E6%97%A5%E6%9C%AC%E8%AA%9E.html"
