from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from folio.config.settings import FolioSettings, LocaleSettings
from folio.context import BuildContext
from folio.locales import LocaleResolver
from folio.markdown.renderer import MarkdownRenderer
from folio.page import Page, PageOptions


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def settings() -> FolioSettings:
    return FolioSettings()


@pytest.fixture
def build_context(site_root: Path, settings: FolioSettings) -> BuildContext:
    return BuildContext(site_root, settings)


@pytest.fixture
def markdown() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture
def locales() -> LocaleResolver:
    return LocaleResolver(
        {
            "/": LocaleSettings(lang="en-US", title="Docs"),
            "/zh/": LocaleSettings(lang="zh-CN", title="文档"),
        }
    )


@pytest.fixture
def write_source(site_root: Path) -> Callable[[str, str], Path]:
    """Write a source file under the site root and return its absolute path."""

    def _write(relative: str, text: str) -> Path:
        target = site_root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        return target

    return _write


@pytest.fixture
def file_page(
    site_root: Path,
    build_context: BuildContext,
    write_source: Callable[[str, str], Path],
) -> Callable[..., Page]:
    """Create a file-backed page from a relative path and its source text."""

    def _create(relative: str, text: str, **options: Any) -> Page:
        file_path = write_source(relative, text)
        return Page.create(PageOptions(file_path=file_path, relative=relative, **options), build_context)

    return _create
