"""Per-wallet valuation: on-chain balance times spot price."""

import logging
import math
from decimal import Decimal
from typing import Any

from crypto_tracker.core.errors import RemoteFetchError
from crypto_tracker.core.models import WalletEntry, WalletValuation
from crypto_tracker.sources.base import MarketDataSource

logger = logging.getLogger(__name__)

# Every balance is treated as an integer amount of 10^-8 units.
BALANCE_SCALE = Decimal(100_000_000)


def _as_decimal(value: Any) -> Decimal | None:
    """Convert a finite JSON number to Decimal, anything else to None."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return Decimal(str(value))


class WalletValuator:
    """
    Values one wallet in fiat using two lookups.

    Parameters
    ----------
    source : MarketDataSource
        Balance and price lookups

    """

    def __init__(self, source: MarketDataSource) -> None:
        self.source = source

    async def valuate(self, entry: WalletEntry, currency: str) -> WalletValuation | None:
        """
        Compute the fiat value of a wallet.

        Parameters
        ----------
        entry : WalletEntry
            Wallet to value
        currency : str
            Lowercase fiat currency code

        Returns
        -------
        WalletValuation | None
            The valuation, or None if the wallet should be skipped because it
            is incomplete, a lookup failed, or a payload was malformed

        """
        missing = entry.missing_fields()
        if missing:
            logger.warning("Skipping wallet with missing information %s: %s", missing, entry)
            return None

        try:
            balance_payload = await self.source.fetch_balance(entry.chain_short_name, entry.address)
        except RemoteFetchError as e:
            logger.warning("Error fetching balance for %s wallet %s: %s", entry.chain_short_name, entry.address, e)
            return None

        raw_balance = _as_decimal(balance_payload.get("balance")) if isinstance(balance_payload, dict) else None
        if raw_balance is None:
            logger.warning("Invalid wallet data for %s", entry.chain_short_name)
            return None

        native_balance = raw_balance / BALANCE_SCALE

        try:
            price_payload = await self.source.fetch_price(entry.coin_full_name, currency)
        except RemoteFetchError as e:
            logger.warning("Error fetching %s price for %s: %s", currency, entry.coin_full_name, e)
            return None

        price = self._extract_price(price_payload, entry.coin_full_name, currency)
        if price is None:
            logger.warning("Invalid price data for %s", entry.coin_full_name)
            return None

        return WalletValuation(
            wallet=entry,
            native_balance=native_balance,
            price=price,
            fiat_value=native_balance * price,
        )

    @staticmethod
    def _extract_price(payload: Any, coin_full_name: str, currency: str) -> Decimal | None:
        if not isinstance(payload, dict):
            return None
        quotes = payload.get(coin_full_name)
        if not isinstance(quotes, dict):
            return None
        return _as_decimal(quotes.get(currency))
