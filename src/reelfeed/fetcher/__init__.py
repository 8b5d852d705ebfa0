"""Content fetcher implementations."""

from reelfeed.fetcher.memory import MemoryFetcher, StoredDocument

__all__ = ["MemoryFetcher", "StoredDocument"]
