"""The page record: one content unit of a static site build.

A page is created synchronously from whatever the build knows about it (a
source file, inline content, or only a route) and is then resolved by
:meth:`Page.process`:

1. load the source (the only step that performs I/O),
2. extract frontmatter, title, headers and excerpt,
3. attach the locale that applies to the page,
4. run the enhancer chain,
5. build the permalink.

Public fields are declared on the model (enhancers may add more); working
state lives in private attributes and is never serialized.
"""

from __future__ import annotations

import copy
import hashlib
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from folio.enhancers import Enhancer, run_enhancers
from folio.exceptions import EnhancerError
from folio.locales import LocaleView
from folio.markdown.frontmatter import DEFAULT_EXCERPT_SEPARATOR
from folio.markdown.headers import Header
from folio.metadata import extract_metadata
from folio.permalinks import format_permalink
from folio.sources import PageSource, RouteKind, RouteOnlySource, resolve_source, source_from_options
from folio.utils.dates import DATE_RE, infer_date
from folio.utils.paths import encode_uri, file_to_path, slugify

if TYPE_CHECKING:
    from folio.context import BuildContext
    from folio.locales import LocaleResolver
    from folio.markdown.renderer import MarkdownRenderer

logger = logging.getLogger(__name__)

KEY_PREFIX = "v-"
INTERNAL_PREFIX = "_"
# Declared fields left out of the JSON form while unset.
OPTIONAL_FIELDS = frozenset({"regular_path", "path", "title", "headers", "excerpt"})


class PageOptions(BaseModel):
    """Everything the build knows about a page before processing it.

    Attributes:
        path: The URL (excluding the domain name) of the page.
        meta: Route metadata handed through to the router.
        title: Title to use when the source does not declare one.
        content: Markdown content for pages without a source file.
        file_path: Absolute path of the source file.
        relative: Source file path relative to the source directory.
        permalink: Explicit permalink; disables pattern substitution.
        frontmatter: Initial frontmatter, replaced by parsed markdown frontmatter.
        permalink_pattern: Pattern used when the frontmatter declares no permalink.
        extract_headers: Heading levels collected into ``headers``.

    """

    model_config = ConfigDict(extra="forbid")

    path: str | None = None
    meta: dict[str, Any] | None = None
    title: str | None = None
    content: str | None = None
    file_path: Path | None = None
    relative: str | None = None
    permalink: str | None = None
    frontmatter: dict[str, Any] = Field(default_factory=dict)
    permalink_pattern: str | None = None
    extract_headers: list[str] | None = None


def compute_key(file_path: Path | str | None, regular_path: str | None) -> str:
    """Stable fingerprint of a page; either component may be missing."""
    material = f"{file_path or ''}{regular_path or ''}"
    return KEY_PREFIX + hashlib.sha256(material.encode("utf-8")).hexdigest()[:16]


def compute_regular_path(options: PageOptions) -> str | None:
    if options.relative:
        return encode_uri(file_to_path(options.relative))
    if options.path:
        return encode_uri(options.path)
    if options.permalink:
        return encode_uri(options.permalink)
    return None


class Page(BaseModel):
    model_config = ConfigDict(extra="allow")

    key: str
    regular_path: str | None = None
    path: str | None = None
    title: str | None = None
    frontmatter: dict[str, Any] = Field(default_factory=dict)
    headers: list[Header] | None = None
    excerpt: str | None = None

    _source: PageSource = PrivateAttr(default_factory=RouteOnlySource)
    _context: BuildContext | None = PrivateAttr(default=None)
    _meta: dict[str, Any] | None = PrivateAttr(default=None)
    _file_path: Path | None = PrivateAttr(default=None)
    _content: str | None = PrivateAttr(default=None)
    _stripped_content: str | None = PrivateAttr(default=None)
    _permalink: str | None = PrivateAttr(default=None)
    _permalink_pattern: str | None = PrivateAttr(default=None)
    _extract_headers: list[str] = PrivateAttr(default_factory=lambda: ["h2", "h3"])
    _locale_view: LocaleView | None = PrivateAttr(default=None)
    _locale_path: str | None = PrivateAttr(default=None)
    _pre_render: dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def create(cls, options: PageOptions | Mapping[str, Any], context: BuildContext) -> Page:
        """Build a page from its options. Performs no I/O."""
        if not isinstance(options, PageOptions):
            options = PageOptions.model_validate(options)

        regular_path = compute_regular_path(options)
        settings = context.settings
        page = cls(
            key=compute_key(options.file_path, regular_path),
            regular_path=regular_path,
            # Overridden by the permalink once it is built.
            path=regular_path,
            title=options.title,
            frontmatter=copy.deepcopy(options.frontmatter),
        )
        page._source = source_from_options(options.file_path, options.content)
        page._context = context
        page._meta = options.meta
        page._file_path = options.file_path
        page._content = options.content
        page._permalink = options.permalink
        page._permalink_pattern = options.permalink_pattern or settings.permalink_pattern
        page._extract_headers = list(options.extract_headers or settings.extract_headers)
        return page

    async def process(
        self,
        *,
        computed: LocaleResolver,
        markdown: MarkdownRenderer,
        enhancers: Sequence[Enhancer] = (),
        pre_render: Mapping[str, Any] | None = None,
    ) -> None:
        """Resolve the page.

        Pages with a source resolve title, headers and excerpt from it; pure
        routes are only localized, enhanced and given a permalink.
        """
        if self._context is None:
            msg = "Page has no build context; create it with Page.create()"
            raise RuntimeError(msg)

        resolved = await resolve_source(self._source, key=self.key, context=self._context, route=self.path)
        self._content = resolved.content
        self._file_path = resolved.file_path

        if self._content:
            self._apply_metadata(markdown, self._context.settings.excerpt_separator)

        self._locale_view = computed.resolve(self)
        self._locale_path = self._locale_view.locale_path
        self._pre_render = dict(pre_render or {})

        self.enhance(enhancers)
        self.build_permalink()

    def _apply_metadata(self, markdown: MarkdownRenderer, excerpt_separator: str = DEFAULT_EXCERPT_SEPARATOR) -> None:
        metadata = extract_metadata(
            self._content or "",
            file_path=self._file_path,
            key=self.key,
            markdown=markdown,
            extract_levels=self._extract_headers,
            excerpt_separator=excerpt_separator,
        )
        if metadata.frontmatter is not None:
            self.frontmatter = metadata.frontmatter
        self._stripped_content = metadata.stripped_content
        if metadata.title:
            self.title = metadata.title
        if metadata.headers:
            self.headers = metadata.headers
        if metadata.excerpt:
            self.excerpt = metadata.excerpt

    @property
    def route_kind(self) -> RouteKind:
        return self._source.kind

    @property
    def meta(self) -> dict[str, Any] | None:
        return self._meta

    @property
    def file_path(self) -> Path | None:
        return self._file_path

    @property
    def source_label(self) -> str | None:
        """File path of the page when it has one, otherwise its route."""
        return str(self._file_path) if self._file_path else self.path

    @property
    def stripped_content(self) -> str | None:
        return self._stripped_content

    @property
    def locale(self) -> LocaleView | None:
        return self._locale_view

    @property
    def pre_render(self) -> dict[str, Any]:
        """Render-stage options handed to :meth:`process`."""
        return self._pre_render

    @property
    def filename(self) -> str:
        """Name of the source file without extension, or the last segment of the regular path."""
        if self._file_path:
            return Path(self._file_path).stem
        return PurePosixPath(self.regular_path or "").stem

    @property
    def stripped_filename(self) -> str:
        """File name with a ``yyyy-MM-dd-`` or ``yyyy-MM-`` prefix removed."""
        match = DATE_RE.match(self.filename)
        return match.group(3) if match else self.filename

    @property
    def slug(self) -> str:
        return slugify(self.stripped_filename)

    @property
    def date(self) -> str | None:
        return infer_date(self.frontmatter, self.filename)

    def to_json(self) -> dict[str, Any]:
        """Serialize the public fields, including those added by enhancers.

        Private state is never included, nor is any attribute whose name starts
        with an underscore. Unset optional fields are left out; an extra field set
        to ``None`` is kept.
        """
        data = self.model_dump(mode="json")
        return {
            key: value
            for key, value in data.items()
            if not key.startswith(INTERNAL_PREFIX) and not (value is None and key in OPTIONAL_FIELDS)
        }

    def build_permalink(self) -> None:
        """Resolve the permalink from the pattern and point ``path`` at it.

        Once a permalink exists it is reused, so calling this again is a no-op.
        """
        if not self._permalink:
            self._permalink = format_permalink(
                pattern=self.frontmatter.get("permalink") or self._permalink_pattern,
                slug=self.slug,
                date=self.date,
                locale_path=self._locale_path,
                regular_path=self.regular_path,
            )

        if self._permalink:
            self.path = self._permalink

    def enhance(self, enhancers: Sequence[Enhancer]) -> None:
        """Run the enhancer chain, failing fast on the first enhancer that raises.

        Raises:
            EnhancerError: Names the failing enhancer; chained to its exception.

        """
        result = run_enhancers(self, enhancers)
        if result.failure is None:
            return

        failure = result.failure
        logger.error(
            "Enhancer [%s] failed on %s: %s",
            failure.name,
            self.source_label,
            failure.error,
        )
        raise EnhancerError(failure.name, self.source_label) from failure.error
