"""Path, URL and slug helpers for page routing."""

from __future__ import annotations

import re
from urllib.parse import quote

from pymdownx.slugs import slugify as _md_slugify

# Characters JavaScript's encodeURI leaves untouched, besides alphanumerics and "-_.~".
_ENCODE_URI_SAFE = ";,/?:@&=+$!*'()#"

_INDEX_FILE_RE = re.compile(r"(^|.*/)(index|readme)\.md$", re.IGNORECASE)
_SOURCE_EXT_RE = re.compile(r"\.(vue|md)$")
_DASH_RUN_RE = re.compile(r"-{2,}")

# NFKD splits accented letters into a base letter and a combining mark. The
# slugifier drops the marks and keeps letters of every script.
slugify_lower = _md_slugify(case="lower", normalize="NFKD")
slugify_case = _md_slugify(normalize="NFKD")


def slugify(text: str, *, lowercase: bool = True) -> str:
    """Convert text to a URL slug, keeping non-Latin letters.

    The result may be empty; callers percent-encode it where a URL needs it.

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Café à Paris")
        'cafe-a-paris'
        >>> slugify("安装 指南")
        '安装-指南'

    """
    if not text:
        return ""

    slugifier = slugify_lower if lowercase else slugify_case
    slug = slugifier(text, sep="-")
    return _DASH_RUN_RE.sub("-", slug).strip("-")


def encode_uri(value: str) -> str:
    """Percent-encode a URL path the way ``encodeURI`` does in browsers."""
    return quote(value, safe=_ENCODE_URI_SAFE)


def ensure_leading_slash(value: str) -> str:
    return value if value.startswith("/") else f"/{value}"


def remove_leading_slash(value: str) -> str:
    return value[1:] if value.startswith("/") else value


def file_to_path(relative: str) -> str:
    """Map a source-relative file path to its route.

    ``README.md`` and ``index.md`` map to their directory, every other
    source file maps to an ``.html`` route.

    Examples:
        >>> file_to_path("README.md")
        '/'
        >>> file_to_path("guide/index.md")
        '/guide/'
        >>> file_to_path("guide/getting-started.md")
        '/guide/getting-started.html'

    """
    normalized = relative.replace("\\", "/")
    match = _INDEX_FILE_RE.match(normalized)
    if match:
        return f"/{match.group(1)}"
    return "/" + _SOURCE_EXT_RE.sub("", normalized) + ".html"


__all__ = [
    "encode_uri",
    "ensure_leading_slash",
    "file_to_path",
    "remove_leading_slash",
    "slugify",
]
