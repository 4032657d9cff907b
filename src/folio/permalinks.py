"""Permalink pattern formatting.

A pattern is a path template such as ``/:year/:month/:day/:slug`` whose
placeholders are substituted from the page's inferred metadata.
"""

from __future__ import annotations

from folio.utils.dates import coerce_datetime
from folio.utils.paths import encode_uri, ensure_leading_slash, remove_leading_slash


def format_permalink(
    *,
    pattern: str | None,
    slug: str,
    date: str | None,
    regular_path: str | None,
    locale_path: str | None = "/",
) -> str | None:
    """Substitute placeholders in ``pattern`` and prefix the locale path.

    Each placeholder is replaced once. Returns ``None`` when there is no pattern.

    Examples:
        >>> format_permalink(pattern="/:year/:month/:slug", slug="my-post",
        ...                  date="2023-05-01", regular_path="/my-post.html")
        '/2023/05/my-post'

    """
    if not pattern:
        return None

    moment = coerce_datetime(date)
    replacements = (
        (":year", str(moment.year)),
        (":month", f"{moment.month:02d}"),
        (":i_month", str(moment.month)),
        (":i_day", str(moment.day)),
        (":day", f"{moment.day:02d}"),
        (":minutes", str(moment.minute)),
        (":seconds", str(moment.second)),
        (":slug", encode_uri(slug)),
        (":regular", remove_leading_slash(regular_path or "")),
    )

    link = remove_leading_slash(pattern)
    for placeholder, value in replacements:
        link = link.replace(placeholder, value, 1)

    return ensure_leading_slash((locale_path or "/") + link)


__all__ = ["format_permalink"]
