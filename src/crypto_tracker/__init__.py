"""Aggregate crypto wallet balances into a single fiat portfolio value."""

__version__ = "0.1.0"
