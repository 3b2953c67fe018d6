"""Tests for per-wallet valuation."""

import asyncio
from decimal import Decimal

import pytest

from crypto_tracker.core.errors import DecodeError, EmptyBodyError, HttpStatusError, TransportError
from crypto_tracker.core.models import WalletEntry
from crypto_tracker.core.valuator import WalletValuator

from conftest import BTC_ADDRESS

BTC_WALLET = WalletEntry(address=BTC_ADDRESS, chain_short_name="btc", coin_full_name="bitcoin")


def _valuate(source, entry=BTC_WALLET, currency="usd"):
    return asyncio.run(WalletValuator(source).valuate(entry, currency))


def test_valuate_wallet(market_data):
    """Test 1.5 BTC at $50,000 is worth $75,000."""
    valuation = _valuate(market_data)

    assert valuation is not None
    assert valuation.native_balance == Decimal("1.5")
    assert valuation.price == Decimal("50000")
    assert valuation.fiat_value == Decimal("75000")
    assert valuation.wallet == BTC_WALLET


def test_balance_looked_up_before_price(market_data):
    """Test the balance lookup precedes the price lookup."""
    _valuate(market_data)

    assert market_data.calls == [("balance", "btc", BTC_ADDRESS), ("price", "bitcoin", "usd")]


def test_fractional_price_is_exact(market_data):
    """Test float prices are converted without binary rounding noise."""
    market_data.balances[("btc", BTC_ADDRESS)] = {"balance": 1}
    market_data.prices["bitcoin"] = {"bitcoin": {"usd": 0.1}}

    valuation = _valuate(market_data)

    assert valuation.native_balance == Decimal("0.00000001")
    assert valuation.fiat_value == Decimal("0.000000001")


def test_zero_balance_is_a_valid_valuation(market_data):
    """Test an empty wallet is valued at zero rather than skipped."""
    market_data.balances[("btc", BTC_ADDRESS)] = {"balance": 0}

    valuation = _valuate(market_data)

    assert valuation is not None
    assert valuation.fiat_value == Decimal("0")


@pytest.mark.parametrize(
    "entry",
    [
        WalletEntry(address=BTC_ADDRESS, chain_short_name="btc"),
        WalletEntry(chain_short_name="btc", coin_full_name="bitcoin"),
        WalletEntry.model_validate({"WALLET_ADDRESS": BTC_ADDRESS, "SHORTNAME": "", "FULLNAME": "bitcoin"}),
    ],
)
def test_incomplete_entry_skipped_without_lookups(market_data, entry):
    """Test entries missing a field are skipped before any request."""
    assert _valuate(market_data, entry=entry) is None
    assert market_data.calls == []


@pytest.mark.parametrize(
    "error",
    [
        TransportError("url", "refused"),
        HttpStatusError("url", 404),
        EmptyBodyError("url", "empty"),
        DecodeError("url", "bad json"),
    ],
)
def test_balance_fetch_failure_skips(market_data, error):
    """Test a failed balance lookup skips the wallet and no price is fetched."""
    market_data.balances[("btc", BTC_ADDRESS)] = error

    assert _valuate(market_data) is None
    assert [call[0] for call in market_data.calls] == ["balance"]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"balance": "150000000"},
        {"balance": None},
        {"balance": True},
        {"balance": float("nan")},
        {"error": "Limits reached."},
        [150000000],
        None,
    ],
)
def test_malformed_balance_skips(market_data, payload):
    """Test a balance payload without a numeric balance skips the wallet."""
    market_data.balances[("btc", BTC_ADDRESS)] = payload

    assert _valuate(market_data) is None
    assert [call[0] for call in market_data.calls] == ["balance"]


def test_price_fetch_failure_skips(market_data):
    """Test a failed price lookup skips the wallet."""
    market_data.prices["bitcoin"] = HttpStatusError("url", 429)

    assert _valuate(market_data) is None


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"bitcoin": {}},
        {"bitcoin": {"eur": 45000}},
        {"bitcoin": {"usd": "50000"}},
        {"bitcoin": 50000},
        {"ethereum": {"usd": 3000}},
        [],
    ],
)
def test_malformed_price_skips(market_data, payload):
    """Test a price payload without [coin][currency] as a number skips the wallet."""
    market_data.prices["bitcoin"] = payload

    assert _valuate(market_data) is None


def test_price_lookup_uses_currency(market_data):
    """Test the price is read for the requested currency."""
    market_data.prices["bitcoin"] = {"bitcoin": {"usd": 50000, "eur": 40000}}

    valuation = _valuate(market_data, currency="eur")

    assert valuation.fiat_value == Decimal("60000")
    assert market_data.calls[-1] == ("price", "bitcoin", "eur")


def test_undecodable_balance_body_skips(market_data):
    """Test a DecodeError from the balance lookup skips without a price lookup."""
    market_data.balances[("btc", BTC_ADDRESS)] = DecodeError("url", "integer too long")

    assert _valuate(market_data) is None
    assert len(market_data.calls) == 1
