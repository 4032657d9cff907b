"""Folio configuration."""

from folio.config.settings import (
    CONFIG_FILENAME,
    DEFAULT_EXTRACT_HEADERS,
    FolioSettings,
    LocaleSettings,
    load_settings,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_EXTRACT_HEADERS",
    "FolioSettings",
    "LocaleSettings",
    "load_settings",
]
