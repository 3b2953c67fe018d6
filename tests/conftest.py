"""Pytest configuration for crypto-tracker tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from crypto_tracker.core.errors import TransportError
from crypto_tracker.sources.base import MarketDataSource

BTC_ADDRESS = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
LTC_ADDRESS = "LcHKx8ZkUMvJBZjBKsoQ9C1gF2Zt3sMTqQ"

SAMPLE_DOCUMENT = [
    {"CURRENCY": "usd", "SYMBOLS": "$"},
    {"WALLET_ADDRESS": BTC_ADDRESS, "SHORTNAME": "btc", "FULLNAME": "bitcoin"},
]


class FakeMarketData(MarketDataSource):
    """
    In-memory market data returning canned payloads.

    Values in ``balances`` / ``prices`` that are exceptions are raised instead
    of returned. Unknown keys raise ``TransportError``.

    """

    def __init__(self) -> None:
        self.balances: dict[tuple[str, str], Any] = {}
        self.prices: dict[str, Any] = {}
        self.calls: list[tuple[str, ...]] = []

    async def fetch_balance(self, chain_short_name: str, address: str) -> Any:
        self.calls.append(("balance", chain_short_name, address))
        return self._answer(self.balances, (chain_short_name, address))

    async def fetch_price(self, coin_full_name: str, currency: str) -> Any:
        self.calls.append(("price", coin_full_name, currency))
        return self._answer(self.prices, coin_full_name)

    @staticmethod
    def _answer(table: dict, key: Any) -> Any:
        if key not in table:
            raise TransportError(str(key), f"no canned response for {key}")
        value = table[key]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def market_data() -> FakeMarketData:
    """Market data preloaded with one bitcoin wallet worth $75,000."""
    source = FakeMarketData()
    source.balances[("btc", BTC_ADDRESS)] = {"address": BTC_ADDRESS, "balance": 150_000_000}
    source.prices["bitcoin"] = {"bitcoin": {"usd": 50000}}
    return source


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path of a configuration file that does not exist yet."""
    return tmp_path / "crypto-track.json"


@pytest.fixture
def write_config(config_path: Path):
    """Write a document to the configuration path and return the path."""

    def _write(document: Any = None) -> Path:
        content = document if isinstance(document, str) else json.dumps(document or SAMPLE_DOCUMENT, indent=4)
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return _write
