"""Core models and errors shared by every layer."""

from crypto_tracker.core.errors import (
    ConfigurationError,
    ConfigurationInvalidError,
    ConfigurationMissingError,
    CryptoTrackerError,
    DecodeError,
    EmptyBodyError,
    HttpStatusError,
    RemoteFetchError,
    TransportError,
)
from crypto_tracker.core.models import PortfolioConfig, PortfolioResult, WalletEntry, WalletValuation

__all__ = [
    "ConfigurationError",
    "ConfigurationInvalidError",
    "ConfigurationMissingError",
    "CryptoTrackerError",
    "DecodeError",
    "EmptyBodyError",
    "HttpStatusError",
    "PortfolioConfig",
    "PortfolioResult",
    "RemoteFetchError",
    "TransportError",
    "WalletEntry",
    "WalletValuation",
]
