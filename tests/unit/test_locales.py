"""Tests for locale resolution."""

from folio.config.settings import FolioSettings, LocaleSettings
from folio.locales import LocaleResolver, LocaleView


def test_longest_prefix_wins():
    resolver = LocaleResolver(
        {
            "/": LocaleSettings(lang="en-US"),
            "/zh/": LocaleSettings(lang="zh-CN"),
            "/zh/tw/": LocaleSettings(lang="zh-TW"),
        }
    )

    assert resolver.resolve_path("/zh/tw/guide.html").locale_path == "/zh/tw/"
    assert resolver.resolve_path("/zh/guide.html").lang == "zh-CN"
    assert resolver.resolve_path("/guide.html").locale_path == "/"


def test_without_locales_everything_is_root():
    resolver = LocaleResolver()

    assert resolver.resolve_path("/zh/guide.html") == LocaleView()
    assert resolver.resolve_path(None).locale_path == "/"


def test_unmatched_path_falls_back_to_root():
    resolver = LocaleResolver({"/fr/": LocaleSettings(lang="fr-FR")})

    assert resolver.resolve_path("/de/page.html").locale_path == "/"


def test_from_settings():
    settings = FolioSettings(locales={"/pt/": {"lang": "pt-BR", "title": "Documentação"}})

    view = LocaleResolver.from_settings(settings).resolve_path("/pt/index.html")

    assert view.locale_path == "/pt/"
    assert view.title == "Documentação"
