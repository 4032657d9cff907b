"""Main Typer application for Folio."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from folio.build import process_pages
from folio.config import load_settings
from folio.context import BuildContext
from folio.exceptions import ConfigLoadError
from folio.locales import LocaleResolver
from folio.logging_setup import configure_logging, console
from folio.markdown.renderer import MarkdownRenderer
from folio.page import Page, PageOptions

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = (".md", ".vue")

app = typer.Typer(
    name="folio",
    help="Resolve static site pages: identity, metadata and permalinks.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (default: $FOLIO_LOG_LEVEL or INFO)"),
    ] = None,
) -> None:
    configure_logging(log_level)


def discover_sources(site_root: Path) -> list[Path]:
    """List page sources under ``site_root``, skipping hidden directories."""
    found = []
    for path in sorted(site_root.rglob("*")):
        relative = path.relative_to(site_root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if path.is_file() and path.suffix in SOURCE_SUFFIXES:
            found.append(relative)
    return found


@app.command(name="inspect")
def inspect_pages(
    site_root: Annotated[
        Path,
        typer.Argument(help="Site root directory (may contain .folio/folio.toml)"),
    ],
    files: Annotated[
        list[Path] | None,
        typer.Argument(help="Source files relative to the site root (default: all .md/.vue files)"),
    ] = None,
    summary: Annotated[
        bool,
        typer.Option("--summary", "-s", help="Print a table instead of page JSON"),
    ] = False,
) -> None:
    """Process pages and print their resolved public fields.

    Examples:
        folio inspect my-site/
        folio inspect my-site/ guide/README.md posts/2023-05-01-hello.md --summary
    """
    site_root = site_root.expanduser().resolve()
    if not site_root.is_dir():
        console.print(f"[red]Site root not found: {site_root}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    try:
        settings = load_settings(site_root)
    except ConfigLoadError as exc:
        console.print(f"[red]{exc}[/red]", soft_wrap=True)
        raise typer.Exit(1) from exc

    context = BuildContext(site_root, settings)
    sources = files or discover_sources(site_root)
    pages = [
        Page.create(PageOptions(file_path=site_root / relative, relative=relative.as_posix()), context)
        for relative in sources
    ]

    report = asyncio.run(
        process_pages(
            pages,
            computed=LocaleResolver.from_settings(settings),
            markdown=MarkdownRenderer(),
        )
    )

    if summary:
        table = Table(title=f"Pages in {site_root}")
        table.add_column("Path", style="cyan")
        table.add_column("Title")
        table.add_column("Headers", justify="right")
        for page in report.processed:
            table.add_row(page.path or "", page.title or "", str(len(page.headers or [])))
        console.print(table)
    else:
        for page in report.processed:
            console.print_json(json.dumps(page.to_json()))

    for failure in report.failures:
        message = f"{failure.source}: {failure.error}"
        console.print(f"[red]✗ {escape(message)}[/red]", soft_wrap=True)

    if not report.ok:
        raise typer.Exit(1)
