"""Layered resolution of the portfolio configuration document."""

import json
import logging
from collections.abc import Callable
from functools import partial
from pathlib import Path
from typing import Any

from crypto_tracker.core.errors import ConfigurationInvalidError, ConfigurationMissingError
from crypto_tracker.core.models import PortfolioConfig, WalletEntry

logger = logging.getLogger(__name__)

CONFIG_EMPTY_MESSAGE = "Configuration empty. Visit Preferences to set up"
CONFIG_INCOMPLETE_MESSAGE = "Configuration incomplete. Visit Preferences to set up properly"
MISSING_CURRENCY_MESSAGE = "Missing currency information. Visit Preferences to configure"

BackupProvider = Callable[[], str | None]


class ConfigurationResolver:
    """
    Resolves the portfolio configuration from the file, then the backup string.

    Sources are tried in order and the first one that yields a parsed document
    wins:

    1. The JSON file at ``path``. Unreadable or unparsable files yield nothing.
    2. The string returned by ``backup_provider``. When the file was absent,
       the backup string is written to ``path`` so the next run finds it.

    Parameters
    ----------
    path : Path
        Location of the configuration document
    backup_provider : BackupProvider | None
        Callable returning the backup JSON string, or None if unavailable

    """

    def __init__(self, path: Path, backup_provider: BackupProvider | None = None) -> None:
        self.path = Path(path)
        self.backup_provider = backup_provider

    def resolve(self) -> PortfolioConfig:
        """
        Resolve and validate the configuration.

        Returns
        -------
        PortfolioConfig
            Currency settings and wallet entries

        Raises
        ------
        ConfigurationMissingError
            If no source yields a document, or the document has no wallet entries
        ConfigurationInvalidError
            If the header lacks ``CURRENCY`` or ``SYMBOLS``

        """
        return parse_document(self.load_document())

    def load_document(self) -> Any:
        """
        Return the first document yielded by the configured sources.

        Raises
        ------
        ConfigurationMissingError
            If every source comes up empty

        """
        file_missing = not self.path.exists()
        providers: list[Callable[[], Any]] = [
            self._from_file,
            partial(self._from_backup, repair=file_missing),
        ]

        for provider in providers:
            document = provider()
            if document is not None:
                return document

        raise ConfigurationMissingError(CONFIG_EMPTY_MESSAGE)

    def _from_file(self) -> Any:
        if not self.path.exists():
            logger.info("Configuration file %s not found", self.path)
            return None

        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Failed to read %s: %s", self.path, e)
            return None

    def _from_backup(self, repair: bool) -> Any:
        if self.backup_provider is None:
            return None

        backup = self.backup_provider()
        if not backup:
            return None

        try:
            document = json.loads(backup)
        except ValueError as e:
            logger.warning("Backup configuration is not valid JSON: %s", e)
            return None

        logger.info("Using backup configuration from settings")
        if repair:
            self._write_backup(backup)
        return document

    def _write_backup(self, backup: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(backup, encoding="utf-8")
        except OSError as e:
            logger.error("Error creating %s from backup: %s", self.path, e)
            return
        logger.info("Created %s from backup data", self.path)


def parse_document(document: Any) -> PortfolioConfig:
    """
    Validate a configuration document and convert it to a ``PortfolioConfig``.

    Parameters
    ----------
    document : Any
        Parsed JSON: ``[{CURRENCY, SYMBOLS}, {WALLET_ADDRESS, SHORTNAME, FULLNAME}, ...]``

    Returns
    -------
    PortfolioConfig
        Resolved configuration. Incomplete wallet entries are kept as-is and
        skipped at valuation time.

    Raises
    ------
    ConfigurationMissingError
        If the document is not an array of at least two elements
    ConfigurationInvalidError
        If the header lacks ``CURRENCY`` or ``SYMBOLS``

    """
    if not isinstance(document, list) or len(document) < 2:
        raise ConfigurationMissingError(CONFIG_INCOMPLETE_MESSAGE)

    header = document[0]
    if not isinstance(header, dict):
        raise ConfigurationInvalidError(MISSING_CURRENCY_MESSAGE)

    currency = header.get("CURRENCY")
    symbol = header.get("SYMBOLS")
    if not (isinstance(currency, str) and currency) or not (isinstance(symbol, str) and symbol):
        raise ConfigurationInvalidError(MISSING_CURRENCY_MESSAGE)

    wallets = [WalletEntry.model_validate(item if isinstance(item, dict) else {}) for item in document[1:]]

    return PortfolioConfig(currency=currency, display_symbol=symbol, wallets=wallets)
