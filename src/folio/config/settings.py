"""Site configuration for Folio.

Settings live in ``.folio/folio.toml`` under the site root and can be
overridden through environment variables with the pattern
``FOLIO_SECTION__KEY`` (e.g. ``FOLIO_PERMALINK_PATTERN``).
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from folio.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)

CONFIG_DIRNAME = ".folio"
CONFIG_FILENAME = "folio.toml"
DEFAULT_EXTRACT_HEADERS = ("h2", "h3")
DEFAULT_TEMP_DIR = ".folio/.temp"


class LocaleSettings(BaseModel):
    """Per-locale site metadata, keyed by its path prefix (``/``, ``/zh/``...)."""

    lang: str = "en-US"
    title: str | None = None
    description: str | None = None


class FolioSettings(BaseSettings):
    """Root configuration for a Folio site."""

    permalink_pattern: str | None = Field(
        default=None,
        description="Fallback permalink pattern used when a page declares none",
    )
    extract_headers: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTRACT_HEADERS))
    excerpt_separator: str = "<!-- more -->"
    temp_dir: Path = Field(default=Path(DEFAULT_TEMP_DIR))
    locales: dict[str, LocaleSettings] = Field(default_factory=dict)

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="FOLIO_",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Env vars > config file (passed as init kwargs) > defaults
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @field_validator("extract_headers")
    @classmethod
    def validate_header_levels(cls, value: list[str]) -> list[str]:
        allowed = {f"h{level}" for level in range(1, 7)}
        invalid = [level for level in value if level not in allowed]
        if invalid:
            msg = f"Unsupported header levels: {', '.join(invalid)}"
            raise ValueError(msg)
        return value

    @field_validator("locales")
    @classmethod
    def validate_locale_prefixes(cls, value: dict[str, LocaleSettings]) -> dict[str, LocaleSettings]:
        for prefix in value:
            if not (prefix.startswith("/") and prefix.endswith("/")):
                msg = f"Locale prefix must start and end with '/': {prefix!r}"
                raise ValueError(msg)
        return value

    def resolve_temp_dir(self, site_root: Path) -> Path:
        if self.temp_dir.is_absolute():
            return self.temp_dir
        return (site_root / self.temp_dir).resolve()


def config_path(site_root: Path) -> Path:
    return site_root / CONFIG_DIRNAME / CONFIG_FILENAME


def load_settings(site_root: Path) -> FolioSettings:
    """Load settings from ``.folio/folio.toml``, falling back to defaults.

    Environment variables override values from the file.

    Raises:
        ConfigLoadError: If the file is not valid TOML or fails validation.

    """
    path = config_path(site_root)
    data: dict[str, Any] = {}

    if path.exists():
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigLoadError(str(path), str(exc)) from exc
        logger.debug("Loaded site config from %s", path)
    else:
        logger.debug("No config at %s, using defaults", path)

    try:
        return FolioSettings(**data)
    except ValidationError as exc:
        raise ConfigLoadError(str(path), str(exc)) from exc
