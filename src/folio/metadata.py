"""Metadata extraction from a page's loaded source."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from folio.markdown.frontmatter import DEFAULT_EXCERPT_SEPARATOR, parse_component_frontmatter, parse_frontmatter
from folio.markdown.headers import Header, extract_headers, infer_title
from folio.markdown.renderer import MarkdownRenderer

logger = logging.getLogger(__name__)


class SourceFormat(str, Enum):
    MARKDOWN = ".md"
    COMPONENT = ".vue"
    UNKNOWN = ""

    @classmethod
    def from_path(cls, file_path: Path | None) -> SourceFormat:
        suffix = file_path.suffix if file_path else ""
        for member in (cls.MARKDOWN, cls.COMPONENT):
            if suffix == member.value:
                return member
        return cls.UNKNOWN


@dataclass(slots=True)
class ExtractedMetadata:
    """Fields extracted from a source; ``None`` means "leave the page as is"."""

    frontmatter: dict[str, Any] | None = None
    stripped_content: str | None = None
    title: str | None = None
    headers: list[Header] = field(default_factory=list)
    excerpt: str | None = None


def _extract_markdown(
    content: str,
    *,
    file_path: Path | None,
    markdown: MarkdownRenderer,
    extract_levels: Sequence[str],
    excerpt_separator: str,
) -> ExtractedMetadata:
    parsed = parse_frontmatter(
        content,
        excerpt_separator=excerpt_separator,
        path=str(file_path) if file_path else None,
    )
    metadata = ExtractedMetadata(frontmatter=parsed.data, stripped_content=parsed.content)
    metadata.title = infer_title(parsed.data, parsed.content)
    metadata.headers = extract_headers(parsed.content, extract_levels, markdown)

    if parsed.excerpt:
        metadata.excerpt = markdown.render(parsed.excerpt).html
    return metadata


def _extract_component(content: str, *, file_path: Path | None, key: str) -> ExtractedMetadata:
    data = parse_component_frontmatter(content, path=str(file_path) if file_path else None)
    # The component is its own layout unless its frontmatter names another one.
    return ExtractedMetadata(frontmatter={"layout": key, **data})


def extract_metadata(
    content: str,
    *,
    file_path: Path | None,
    key: str,
    markdown: MarkdownRenderer,
    extract_levels: Sequence[str] = ("h2", "h3"),
    excerpt_separator: str = DEFAULT_EXCERPT_SEPARATOR,
) -> ExtractedMetadata:
    """Parse frontmatter, title, headers and excerpt according to the source format.

    Sources of unknown formats yield an empty result.
    """
    source_format = SourceFormat.from_path(file_path)

    if source_format is SourceFormat.MARKDOWN:
        return _extract_markdown(
            content,
            file_path=file_path,
            markdown=markdown,
            extract_levels=extract_levels,
            excerpt_separator=excerpt_separator,
        )
    if source_format is SourceFormat.COMPONENT:
        return _extract_component(content, file_path=file_path, key=key)

    logger.debug("Skipping metadata extraction for %s", file_path)
    return ExtractedMetadata()
