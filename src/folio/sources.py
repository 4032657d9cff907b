"""Route kinds and source loading for pages.

A page is backed by a file on disk, by in-memory content (for which a temp
file is synthesized), or by nothing at all (a pure route).
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from folio.context import BuildContext

logger = logging.getLogger(__name__)

TEMP_PAGES_DIR = "temp-pages"


class RouteKind(str, Enum):
    FILE_BACKED = "file_backed"
    INLINE_CONTENT = "inline_content"
    ROUTE_ONLY = "route_only"


@dataclass(frozen=True, slots=True)
class FileBackedSource:
    file_path: Path

    @property
    def kind(self) -> RouteKind:
        return RouteKind.FILE_BACKED


@dataclass(frozen=True, slots=True)
class InlineContentSource:
    content: str

    @property
    def kind(self) -> RouteKind:
        return RouteKind.INLINE_CONTENT


@dataclass(frozen=True, slots=True)
class RouteOnlySource:
    @property
    def kind(self) -> RouteKind:
        return RouteKind.ROUTE_ONLY


PageSource = FileBackedSource | InlineContentSource | RouteOnlySource


@dataclass(frozen=True, slots=True)
class ResolvedSource:
    content: str | None = None
    file_path: Path | None = None


def source_from_options(file_path: Path | str | None, content: str | None) -> PageSource:
    """Pick the route kind from the inputs a page was created with."""
    if file_path:
        return FileBackedSource(Path(file_path))
    if content:
        return InlineContentSource(content)
    return RouteOnlySource()


def temp_page_name(key: str) -> str:
    return f"{TEMP_PAGES_DIR}/{key}.md"


async def resolve_source(
    source: PageSource,
    *,
    key: str,
    context: BuildContext,
    route: str | None = None,
) -> ResolvedSource:
    """Load a page's raw content, synthesizing a backing file for inline content.

    Raises:
        OSError: Unchanged from the failed read or temp write.

    """
    match source:
        case FileBackedSource(file_path=file_path):
            logger.debug("static_route %s", route)
            content = await asyncio.to_thread(file_path.read_text, encoding="utf-8")
            return ResolvedSource(content=content, file_path=file_path)

        case InlineContentSource(content=content):
            logger.debug("static_route %s", route)
            name = temp_page_name(key)
            file_path = await context.write_temp(name, content)
            return ResolvedSource(content=content, file_path=file_path)

        case RouteOnlySource():
            logger.debug("dynamic_route %s", route)
            return ResolvedSource()
