"""Helpers for parsing YAML or TOML frontmatter from page sources."""

from __future__ import annotations

import logging
import re
import tomllib
from dataclasses import dataclass, field
from typing import Any

import frontmatter
import yaml
from frontmatter.default_handlers import BaseHandler

from folio.exceptions import FrontmatterParsingError

logger = logging.getLogger(__name__)

DEFAULT_EXCERPT_SEPARATOR = "<!-- more -->"

_COMPONENT_BLOCK_RE = re.compile(r"<frontmatter>([\s\S]*?)</frontmatter>")
_TOML_OPEN_RE = re.compile(r"(?:---toml|\+{3})[ \t]*\r?\n")


class TOMLFrontmatterHandler(BaseHandler):
    """TOML frontmatter opened by ``---toml`` or ``+++``.

    The block closes with ``---`` or ``+++``. Parsed with :mod:`tomllib`.
    """

    FM_BOUNDARY = re.compile(r"^(?:-{3}(?:toml)?|\+{3})\s*$", re.MULTILINE)
    START_DELIMITER = "---toml"
    END_DELIMITER = "---"

    def detect(self, text: str) -> bool:
        return bool(_TOML_OPEN_RE.match(text.lstrip()))

    def load(self, fm: str, **kwargs: object) -> dict[str, Any]:
        return tomllib.loads(fm)


_toml_handler = TOMLFrontmatterHandler()


@dataclass(slots=True)
class ParsedFrontmatter:
    """Result of splitting a markdown document into metadata, body and excerpt."""

    data: dict[str, Any] = field(default_factory=dict)
    content: str = ""
    excerpt: str | None = None


def _ensure_mapping(raw: Any, path: str | None) -> dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise FrontmatterParsingError(path, f"expected a mapping, got {type(raw).__name__}")
    return dict(raw)


def parse_frontmatter(
    text: str,
    *,
    excerpt_separator: str = DEFAULT_EXCERPT_SEPARATOR,
    path: str | None = None,
) -> ParsedFrontmatter:
    """Parse YAML frontmatter, or TOML frontmatter opened by ``---toml``.

    The excerpt is the part of the body before the separator. A document may
    override the separator through an ``excerpt_separator`` frontmatter key.

    Raises:
        FrontmatterParsingError: If the frontmatter is not valid YAML or TOML, or not a mapping.

    """
    try:
        handler = _toml_handler if _toml_handler.detect(text) else None
        parsed = frontmatter.loads(text, handler=handler)
    except (yaml.YAMLError, ValueError, TypeError) as exc:
        raise FrontmatterParsingError(path, str(exc)) from exc

    data = _ensure_mapping(parsed.metadata, path)
    body = parsed.content if isinstance(parsed.content, str) else str(parsed.content)

    separator = data.get("excerpt_separator") or excerpt_separator
    excerpt = None
    index = body.find(separator) if separator else -1
    if index != -1:
        excerpt = body[:index]

    return ParsedFrontmatter(data=data, content=body, excerpt=excerpt)


def parse_component_frontmatter(text: str, *, path: str | None = None) -> dict[str, Any]:
    """Read the ``<frontmatter>`` block embedded in a component file.

    Returns an empty mapping when the component declares no block.
    """
    match = _COMPONENT_BLOCK_RE.search(text)
    if not match:
        return {}

    try:
        raw = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise FrontmatterParsingError(path, str(exc)) from exc

    logger.debug("Parsed component frontmatter from %s", path)
    return _ensure_mapping(raw, path)
