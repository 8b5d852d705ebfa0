#!/usr/bin/env python3
"""
reelfeed Quickstart Example

Shows the basic flow: read a feed, stream posters, fill one item.
Runs offline against an in-memory web of Reels.

Usage:
    python examples/01_quickstart.py
"""

import asyncio

from reelfeed import MemoryFetcher, Syndicator


def build_web() -> MemoryFetcher:
    fetcher = MemoryFetcher()
    fetcher.add(
        "https://example.com/blog/feed.txt",
        "# my blog\nhello/index.html\nmissing/index.html\nsecond/index.html\n",
        "text/plain",
    )
    fetcher.add(
        "https://example.com/blog/hello/index.html",
        "<html><head><link rel='stylesheet' href='hello.css'>"
        "<link rel='feed' href='../feed.txt' type='text/feed'></head>"
        "<body><section><h1>Hello</h1><img src='cover.jpg'></section>"
        "<section><p>The rest of the story.</p></section></body></html>",
    )
    fetcher.add(
        "https://example.com/blog/second/index.html",
        "<html><body><section><h1>Second</h1></section></body></html>",
    )
    fetcher.add(
        "https://example.com/",
        "<html><head><meta name='description' content='An example site'></head></html>",
    )
    return fetcher


async def main() -> None:
    """Stream posters, then fill the first item."""

    fetcher = build_web()

    async with Syndicator(fetcher) as syndicator:
        print("Posters...")
        async for item in syndicator.posters("https://example.com/blog/feed.txt"):
            print(f"✓ {item.location}")
            print(f"  {item.poster.select_one('h1').string}")

        metadata = await syndicator.discover_metadata("https://example.com/blog/feed.txt")
        print(f"\nFeed description: {metadata.description if metadata else '-'}")

        provider = await syndicator.provider("https://example.com/blog/feed.txt")
        full = await provider.fill_at(0)
        print(f"\nItem 0 has {len(full.sections)} sections")
        print(f"Item 1 failed: {(await provider.poster_at(1)).is_failure}")

    print(f"\nRequests made: {len(fetcher.requests)}")


if __name__ == "__main__":
    asyncio.run(main())
