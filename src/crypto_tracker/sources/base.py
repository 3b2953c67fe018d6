"""Capability interface for balance and price lookups."""

from abc import ABC, abstractmethod
from typing import Any


class MarketDataSource(ABC):
    """
    Abstract source of raw wallet-balance and spot-price payloads.

    Implementations return the decoded JSON payload of each lookup unchanged;
    interpreting the payload is left to the caller. Failures are reported by
    raising ``RemoteFetchError`` subclasses.

    """

    @abstractmethod
    async def fetch_balance(self, chain_short_name: str, address: str) -> Any:
        """
        Fetch the balance payload for a wallet.

        Parameters
        ----------
        chain_short_name : str
            Chain identifier (e.g., 'btc')
        address : str
            Wallet address

        Returns
        -------
        Any
            Decoded payload, expected to hold an integer ``balance``

        """

    @abstractmethod
    async def fetch_price(self, coin_full_name: str, currency: str) -> Any:
        """
        Fetch the spot price payload for a coin.

        Parameters
        ----------
        coin_full_name : str
            Coin id (e.g., 'bitcoin')
        currency : str
            Lowercase fiat currency code

        Returns
        -------
        Any
            Decoded payload, expected shape ``{coin: {currency: price}}``

        """
