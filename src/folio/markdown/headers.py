"""Title inference and header extraction for markdown pages."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from markdown_it import MarkdownIt
from pydantic import BaseModel

from folio.utils.paths import slugify

if TYPE_CHECKING:
    from folio.markdown.renderer import MarkdownRenderer

_LEADING_HEADING_RE = re.compile(r"#+\s+(.*)")
_TEXT_TOKENS = frozenset({"text", "code_inline", "image"})

_inline_md = MarkdownIt("commonmark")


class Header(BaseModel):
    level: int
    title: str
    slug: str


def parse_headers(text: str) -> str:
    """Reduce inline markdown (emphasis, links, code, raw HTML) to plain text.

    Examples:
        >>> parse_headers("Use **`folio`** with [links](/x)")
        'Use folio with links'

    """
    pieces: list[str] = []
    for token in _inline_md.parseInline(text):
        for child in token.children or []:
            if child.type in _TEXT_TOKENS:
                pieces.append(child.content)
            elif child.type == "softbreak":
                pieces.append(" ")
    return "".join(pieces).strip()


def infer_title(frontmatter: Mapping[str, Any], body: str) -> str | None:
    """Return the page title from frontmatter, else from a leading heading."""
    if frontmatter.get("home"):
        return "Home"
    if frontmatter.get("title"):
        return parse_headers(str(frontmatter["title"]))

    match = _LEADING_HEADING_RE.match(body.strip())
    if match:
        return parse_headers(match.group(1))
    return None


def _unique_slug(slug: str, used: set[str]) -> str:
    candidate = slug
    suffix = 1
    while candidate in used:
        candidate = f"{slug}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


def extract_headers(body: str, levels: Iterable[str], markdown: MarkdownRenderer) -> list[Header]:
    """Collect headings of the given levels (``"h2"``, ``"h3"``...) in document order.

    Slugs are unique within the document: a repeated heading gets a ``-1``,
    ``-2``... suffix, counting headings of every level.
    """
    wanted = set(levels)
    tokens = markdown.parse(body)
    used: set[str] = set()
    headers: list[Header] = []

    for index, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        title = parse_headers(tokens[index + 1].content)
        anchor = token.attrGet("id")
        slug = _unique_slug(str(anchor) if anchor else slugify(title), used)
        if token.tag in wanted:
            headers.append(Header(level=int(token.tag[1:]), title=title, slug=slug))
    return headers
