"""Date inference helpers for pages."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import UTC, date, datetime
from typing import Any, Final

from dateutil import parser as date_parser

# yyyy-MM-dd-<rest> or yyyy-MM-<rest>
DATE_RE: Final[re.Pattern[str]] = re.compile(r"^(\d{4}-\d{1,2}(-\d{1,2})?)-(.*)$")

EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=UTC)


def _to_string(value: Any) -> str:
    if isinstance(value, datetime | date):
        return value.isoformat()
    return str(value)


def infer_date(frontmatter: Mapping[str, Any], filename: str) -> str | None:
    """Infer a page date from its frontmatter or from a dated filename.

    Examples:
        >>> infer_date({}, "2023-05-01-my-post")
        '2023-05-01'
        >>> infer_date({"date": "2020-01-02"}, "2023-05-01-my-post")
        '2020-01-02'
        >>> infer_date({}, "about") is None
        True

    """
    value = frontmatter.get("date")
    if value:
        return _to_string(value)

    match = DATE_RE.match(filename)
    if match:
        return match.group(1)
    return None


def coerce_datetime(value: str | date | datetime | None) -> datetime:
    """Turn an inferred date into a datetime, falling back to the Unix epoch."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if not value:
        return EPOCH

    normalized = value.strip()
    try:
        return date_parser.isoparse(normalized)
    except (ValueError, OverflowError, TypeError):
        pass

    try:
        return date_parser.parse(normalized)
    except (ValueError, OverflowError, TypeError):
        return EPOCH


__all__ = ["DATE_RE", "EPOCH", "coerce_datetime", "infer_date"]
