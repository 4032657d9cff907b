"""Build context shared by every page of a site build."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from folio.config.settings import FolioSettings

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def _write_text(target: Path, content: str) -> bool:
    """Write ``content`` unless the file already holds it. Returns whether it wrote."""
    if target.is_file() and target.read_text(encoding="utf-8") == content:
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return True


class BuildContext:
    """Site-wide state handed to pages: settings and the temp-file writer.

    Temp files are keyed by the caller, so concurrent pages writing their own
    keys never collide.
    """

    def __init__(self, site_root: Path, settings: FolioSettings | None = None) -> None:
        self.site_root = site_root
        self.settings = settings or FolioSettings()
        self.temp_dir = self.settings.resolve_temp_dir(site_root)

    async def write_temp(self, relative: str, content: str) -> Path:
        """Write ``content`` under the temp directory and return the file path.

        The file is left untouched when it already holds ``content``, so
        rebuilds keep its modification time.
        """
        target = self.temp_dir / relative
        if await asyncio.to_thread(_write_text, target, content):
            logger.debug("Wrote temp file %s", target)
        return target
