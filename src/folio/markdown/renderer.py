"""Markdown rendering backed by markdown-it-py."""

from __future__ import annotations

from dataclasses import dataclass

from markdown_it import MarkdownIt
from markdown_it.token import Token


@dataclass(frozen=True, slots=True)
class RenderResult:
    html: str


class MarkdownRenderer:
    """Thin wrapper around a CommonMark parser with raw HTML enabled."""

    def __init__(self, md: MarkdownIt | None = None) -> None:
        self._md = md or MarkdownIt("commonmark", {"html": True})

    def render(self, text: str) -> RenderResult:
        return RenderResult(html=self._md.render(text))

    def parse(self, text: str) -> list[Token]:
        return self._md.parse(text)
