"""BlockCypher balances and CoinGecko prices over the public HTTP APIs."""

from typing import Any
from urllib.parse import quote

import httpx

from crypto_tracker.remote import RemoteFetcher
from crypto_tracker.sources.base import MarketDataSource

BLOCKCYPHER_BASE_URL = "https://api.blockcypher.com/v1"
COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3"


class PublicApiMarketData(MarketDataSource):
    """
    Market data from the BlockCypher and CoinGecko public endpoints.

    Parameters
    ----------
    fetcher : RemoteFetcher
        Fetcher used for both lookups
    balance_base_url : str
        BlockCypher API base URL
    price_base_url : str
        CoinGecko API base URL

    """

    def __init__(
        self,
        fetcher: RemoteFetcher,
        balance_base_url: str = BLOCKCYPHER_BASE_URL,
        price_base_url: str = COINGECKO_BASE_URL,
    ) -> None:
        self.fetcher = fetcher
        self.balance_base_url = balance_base_url.rstrip("/")
        self.price_base_url = price_base_url.rstrip("/")

    def balance_url(self, chain_short_name: str, address: str) -> str:
        """Build the BlockCypher address-balance URL."""
        chain = quote(chain_short_name, safe="")
        addr = quote(address, safe="")
        return f"{self.balance_base_url}/{chain}/main/addrs/{addr}/balance"

    def price_url(self, coin_full_name: str, currency: str) -> str:
        """Build the CoinGecko simple-price URL."""
        url = httpx.URL(
            f"{self.price_base_url}/simple/price",
            params={"ids": coin_full_name, "vs_currencies": currency},
        )
        return str(url)

    async def fetch_balance(self, chain_short_name: str, address: str) -> Any:
        return await self.fetcher.fetch(self.balance_url(chain_short_name, address))

    async def fetch_price(self, coin_full_name: str, currency: str) -> Any:
        return await self.fetcher.fetch(self.price_url(coin_full_name, currency))
