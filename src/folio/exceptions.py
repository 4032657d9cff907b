"""Centralized exceptions for Folio."""

from __future__ import annotations


class FolioError(Exception):
    """Base exception for all Folio errors."""


class PageError(FolioError):
    """Base class for errors raised while processing a single page."""

    def __init__(self, path: str | None, message: str) -> None:
        self.path = path
        super().__init__(message)


class FrontmatterParsingError(PageError):
    """Raised when YAML or TOML frontmatter is invalid."""

    def __init__(self, path: str | None, reason: str) -> None:
        self.reason = reason
        where = f" in '{path}'" if path else ""
        super().__init__(path, f"Invalid frontmatter{where}: {reason}")


class EnhancerError(PageError):
    """Raised when an enhancer fails; names both the enhancer and the page."""

    def __init__(self, enhancer_name: str, path: str | None) -> None:
        self.enhancer_name = enhancer_name
        super().__init__(path, f"[{enhancer_name}] failed to enhance page '{path or '<route>'}'.")


class ConfigLoadError(FolioError):
    """Raised when a site configuration file cannot be loaded or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load or parse config at '{path}': {reason}")
