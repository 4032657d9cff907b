"""Markdown helpers: frontmatter parsing, rendering and header extraction."""

from folio.markdown.frontmatter import ParsedFrontmatter, parse_component_frontmatter, parse_frontmatter
from folio.markdown.headers import Header, extract_headers, infer_title, parse_headers
from folio.markdown.renderer import MarkdownRenderer, RenderResult

__all__ = [
    "Header",
    "MarkdownRenderer",
    "ParsedFrontmatter",
    "RenderResult",
    "extract_headers",
    "infer_title",
    "parse_component_frontmatter",
    "parse_frontmatter",
    "parse_headers",
]
