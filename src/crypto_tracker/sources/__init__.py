"""Balance and price lookup sources."""

from crypto_tracker.sources.base import MarketDataSource
from crypto_tracker.sources.public_api import (
    BLOCKCYPHER_BASE_URL,
    COINGECKO_BASE_URL,
    PublicApiMarketData,
)

__all__ = [
    "BLOCKCYPHER_BASE_URL",
    "COINGECKO_BASE_URL",
    "MarketDataSource",
    "PublicApiMarketData",
]
