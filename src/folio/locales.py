"""Locale resolution for pages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from folio.config.settings import FolioSettings, LocaleSettings
    from folio.page import Page

ROOT_LOCALE = "/"


@dataclass(frozen=True, slots=True)
class LocaleView:
    """The locale that applies to one page."""

    locale_path: str = ROOT_LOCALE
    lang: str | None = None
    title: str | None = None
    description: str | None = None


class LocaleResolver:
    """Map a page's regular path to the most specific configured locale."""

    def __init__(self, locales: Mapping[str, LocaleSettings] | None = None) -> None:
        # Longest prefix first so "/zh/guide/" beats "/zh/".
        self._locales = sorted((locales or {}).items(), key=lambda item: len(item[0]), reverse=True)

    @classmethod
    def from_settings(cls, settings: FolioSettings) -> LocaleResolver:
        return cls(settings.locales)

    def resolve_path(self, regular_path: str | None) -> LocaleView:
        target = regular_path or ROOT_LOCALE
        for prefix, locale in self._locales:
            if target.startswith(prefix):
                return LocaleView(
                    locale_path=prefix,
                    lang=locale.lang,
                    title=locale.title,
                    description=locale.description,
                )
        return LocaleView()

    def resolve(self, page: Page) -> LocaleView:
        return self.resolve_path(page.regular_path)
