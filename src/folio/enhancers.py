"""Enhancers: named, plugin-supplied transforms applied to a loaded page.

An enhancer mutates the page it is given (most often its frontmatter or extra
fields) and its return value is ignored, unless it hands back a different page.
The chain stops at the first failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from folio.page import Page

logger = logging.getLogger(__name__)

EnhancerFunc = Callable[["Page"], Any]


@dataclass(frozen=True, slots=True)
class Enhancer:
    name: str
    apply: EnhancerFunc


@dataclass(frozen=True, slots=True)
class EnhancerFailure:
    name: str
    error: BaseException


@dataclass(slots=True)
class EnhancementResult:
    applied: list[str] = field(default_factory=list)
    failure: EnhancerFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class PageReplacedError(Exception):
    """Raised when an enhancer returns another page instead of mutating its own."""

    def __init__(self, returned: Any) -> None:
        super().__init__(f"Enhancers must mutate the page in place, got page {returned.key!r}")


def run_enhancers(page: Page, enhancers: Iterable[Enhancer]) -> EnhancementResult:
    """Apply ``enhancers`` in order, stopping at the first one that fails."""
    result = EnhancementResult()
    for enhancer in enhancers:
        try:
            returned = enhancer.apply(page)
            if isinstance(returned, type(page)) and returned is not page:
                raise PageReplacedError(returned)
        except Exception as exc:  # any plugin failure is reported with its name
            result.failure = EnhancerFailure(name=enhancer.name, error=exc)
            return result
        result.applied.append(enhancer.name)
        logger.debug("Applied enhancer %s", enhancer.name)
    return result
