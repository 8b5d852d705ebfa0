"""CLI entry point."""

from __future__ import annotations

import asyncio
import logging
from contextlib import aclosing

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from reelfeed.core.config import get_settings
from reelfeed.core.exceptions import NotFoundError
from reelfeed.core.syndicator import Syndicator

app = typer.Typer(
    name="reelfeed",
    help="Read feeds of HTML Reels",
    no_args_is_help=True,
)
console = Console()


def build_syndicator() -> Syndicator:
    """Syndicator used by every command."""
    return Syndicator()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level (default from settings)"),
) -> None:
    """Read feeds of HTML Reels."""
    configure_logging(log_level or get_settings().log_level)


@app.command()
def version() -> None:
    """Show version."""
    from reelfeed import __version__

    console.print(f"reelfeed {__version__}")


@app.command()
def feed(
    url: str = typer.Argument(..., help="Feed location"),
    from_byte: int = typer.Option(0, "--from-byte", min=0, help="Read only content past this byte"),
) -> None:
    """List the Reels in a feed."""

    async def run() -> None:
        async with build_syndicator() as syndicator:
            listing = await syndicator.read_feed(url, from_byte)

        if not listing.is_usable:
            console.print(f"[red]Feed unavailable:[/red] {url}")
            raise typer.Exit(code=1)

        for item in listing.items:
            console.print(item)
        console.print(f"[dim]{len(listing.items)} items, {listing.bytes_consumed} bytes, resume from {listing.resume_from}[/dim]")

    asyncio.run(run())


@app.command()
def reel(url: str = typer.Argument(..., help="Reel location")) -> None:
    """Show the structure of a Reel."""

    async def run() -> None:
        async with build_syndicator() as syndicator:
            try:
                document = await syndicator.require_reel(url)
            except NotFoundError as e:
                console.print(f"[red]{e}[/red]")
                raise typer.Exit(code=1) from e

        table = Table(title="Feeds")
        table.add_column("href")
        table.add_column("visible")
        table.add_column("subscribable")
        for declaration in document.feed_declarations:
            table.add_row(declaration.href, str(declaration.visible), str(declaration.subscribable))

        console.print(table)
        console.print(f"assets: {len(document.asset_nodes)}")
        console.print(f"sections: {len(document.sections)}")

    asyncio.run(run())


@app.command()
def meta(url: str = typer.Argument(..., help="Feed location")) -> None:
    """Discover the description and icon of a feed."""

    async def run() -> None:
        async with build_syndicator() as syndicator:
            try:
                metadata = await syndicator.require_metadata(url)
            except NotFoundError as e:
                console.print(f"[red]{e}[/red]")
                raise typer.Exit(code=1) from e

        console.print(f"description: {metadata.description}")
        console.print(f"icon: {metadata.icon}")

    asyncio.run(run())


@app.command()
def posters(
    url: str = typer.Argument(..., help="Feed location"),
    limit: int = typer.Option(0, "--limit", min=0, help="Stop after this many posters (0 = all)"),
    html: bool = typer.Option(False, "--html", help="Print the isolated poster HTML"),
) -> None:
    """Stream the posters of a feed."""

    async def run() -> None:
        count = 0
        async with build_syndicator() as syndicator:
            async with aclosing(syndicator.posters(url)) as stream:
                async for item in stream:
                    console.print(f"[bold]{item.location}[/bold]")
                    if html:
                        console.print(item.poster.render(), markup=False, highlight=False)
                    count += 1
                    if limit and count >= limit:
                        break

        console.print(f"[dim]{count} posters[/dim]")

    asyncio.run(run())


if __name__ == "__main__":
    app()
