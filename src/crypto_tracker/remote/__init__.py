"""Remote JSON fetching."""

from crypto_tracker.remote.fetcher import RemoteFetcher

__all__ = [
    "RemoteFetcher",
]
