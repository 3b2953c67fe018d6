"""Portfolio aggregation across all configured wallets."""

import logging
from decimal import Decimal
from pathlib import Path

import httpx

from crypto_tracker.config import AppSettings
from crypto_tracker.core.errors import ConfigurationError
from crypto_tracker.core.models import UNABLE_TO_RETRIEVE, PortfolioResult
from crypto_tracker.core.valuator import WalletValuator
from crypto_tracker.data.resolver import BackupProvider, ConfigurationResolver
from crypto_tracker.data.settings_store import SettingsStore
from crypto_tracker.remote import RemoteFetcher
from crypto_tracker.sources import MarketDataSource, PublicApiMarketData

logger = logging.getLogger(__name__)

CHECK_PREFERENCES_MESSAGE = "Check preferences > Cryptocurrency"


class PortfolioAggregator:
    """
    Sums the fiat value of every configured wallet.

    Workflow:
    1. Resolve the configuration (file, then backup string)
    2. Value each wallet in turn, skipping any that fail
    3. Format the total, or a short message when nothing could be valued

    Wallets are processed one after another: both lookups of a wallet finish
    before the next wallet starts.

    Parameters
    ----------
    source : MarketDataSource
        Balance and price lookups
    config_path : Path
        Location of the configuration document

    """

    def __init__(self, source: MarketDataSource, config_path: Path) -> None:
        self.source = source
        self.config_path = Path(config_path)
        self.valuator = WalletValuator(source)

    async def run(self, backup_provider: BackupProvider | None = None) -> PortfolioResult:
        """
        Compute the portfolio value. Never raises.

        Parameters
        ----------
        backup_provider : BackupProvider | None
            Callable returning the backup configuration string

        Returns
        -------
        PortfolioResult
            The formatted total, or a zero result whose text explains the failure

        """
        try:
            return await self._run(backup_provider)
        except Exception:
            logger.exception("Unexpected error while computing portfolio balance")
            return PortfolioResult.failure(CHECK_PREFERENCES_MESSAGE)

    async def _run(self, backup_provider: BackupProvider | None) -> PortfolioResult:
        resolver = ConfigurationResolver(self.config_path, backup_provider)
        try:
            config = resolver.resolve()
        except ConfigurationError as e:
            logger.warning("Configuration unavailable: %s", e)
            return PortfolioResult.failure(str(e) or CHECK_PREFERENCES_MESSAGE)

        total = Decimal("0")
        successful = 0

        for wallet in config.wallets:
            try:
                valuation = await self.valuator.valuate(wallet, config.currency)
            except Exception:
                # Continue with other wallets even if one fails
                logger.exception("Error processing wallet %s", wallet.address)
                continue

            if valuation is None:
                continue

            total += valuation.fiat_value
            successful += 1

        if successful == 0:
            return PortfolioResult.failure(
                UNABLE_TO_RETRIEVE,
                display_symbol=config.display_symbol,
                total_wallets=len(config.wallets),
            )

        logger.debug("Valued %d of %d wallets", successful, len(config.wallets))
        return PortfolioResult.from_total(
            config.display_symbol,
            total,
            successful_wallets=successful,
            total_wallets=len(config.wallets),
        )


async def get_portfolio_balance(
    settings: AppSettings,
    client: httpx.AsyncClient | None = None,
) -> PortfolioResult:
    """
    Run one aggregation against the public APIs.

    Parameters
    ----------
    settings : AppSettings
        File locations and API endpoints
    client : httpx.AsyncClient | None
        HTTP client to use; a temporary one is created when omitted

    Returns
    -------
    PortfolioResult
        Result of the run

    """
    store = SettingsStore(settings.settings_path)
    async with RemoteFetcher(client) as fetcher:
        source = PublicApiMarketData(
            fetcher,
            balance_base_url=settings.balance_api_url,
            price_base_url=settings.price_api_url,
        )
        aggregator = PortfolioAggregator(source, settings.config_path)
        return await aggregator.run(store.backup_json)
