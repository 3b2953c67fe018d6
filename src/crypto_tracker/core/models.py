"""Data models for portfolio configuration, wallet valuations, and results."""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNABLE_TO_RETRIEVE = "unable to retrieve wallet data"
CENT = Decimal("0.01")


class WalletEntry(BaseModel):
    """
    One wallet row of the configuration document.

    Fields are read from the document keys ``WALLET_ADDRESS``, ``SHORTNAME``
    and ``FULLNAME``. Missing, empty or non-string values are stored as
    ``None`` so the entry can be reported and skipped instead of rejected.

    Attributes
    ----------
    address : str | None
        On-chain wallet address
    chain_short_name : str | None
        BlockCypher chain identifier (e.g., 'btc', 'ltc', 'doge')
    coin_full_name : str | None
        CoinGecko coin id (e.g., 'bitcoin')

    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    address: str | None = Field(default=None, alias="WALLET_ADDRESS")
    chain_short_name: str | None = Field(default=None, alias="SHORTNAME")
    coin_full_name: str | None = Field(default=None, alias="FULLNAME")

    @field_validator("address", "chain_short_name", "coin_full_name", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> str | None:
        if isinstance(value, str) and value:
            return value
        return None

    def missing_fields(self) -> list[str]:
        """
        List the document keys this entry is missing.

        Returns
        -------
        list[str]
            Document keys with no usable value, empty if the entry is complete

        """
        fields = {
            "WALLET_ADDRESS": self.address,
            "SHORTNAME": self.chain_short_name,
            "FULLNAME": self.coin_full_name,
        }
        return [key for key, value in fields.items() if value is None]

    @property
    def is_complete(self) -> bool:
        """
        Whether all three wallet fields are present.

        Returns
        -------
        bool
            True if ``missing_fields`` is empty

        """
        return not self.missing_fields()


class PortfolioConfig(BaseModel):
    """
    Resolved portfolio configuration.

    Attributes
    ----------
    currency : str
        Lowercase fiat currency code used for price lookups (e.g., 'usd')
    display_symbol : str
        Symbol prefixed to the formatted total (e.g., '$')
    wallets : list[WalletEntry]
        Wallet entries in document order

    """

    currency: str = Field(min_length=1)
    display_symbol: str = Field(min_length=1)
    wallets: list[WalletEntry] = Field(min_length=1)

    @field_validator("currency")
    @classmethod
    def _lowercase_currency(cls, value: str) -> str:
        return value.lower()


class WalletValuation(BaseModel):
    """
    Fiat valuation of a single wallet.

    Attributes
    ----------
    wallet : WalletEntry
        Wallet that was valued
    native_balance : Decimal
        Balance in native units (raw balance divided by 10^8)
    price : Decimal
        Spot price of one native unit in the configured currency
    fiat_value : Decimal
        native_balance * price

    """

    wallet: WalletEntry
    native_balance: Decimal
    price: Decimal
    fiat_value: Decimal


class PortfolioResult(BaseModel):
    """
    Outcome of one aggregation run.

    Attributes
    ----------
    display_symbol : str | None
        Currency symbol, None when configuration could not be resolved
    total_fiat_value : Decimal
        Sum of all successful wallet valuations
    formatted_text : str
        Text to display, either the formatted total or a short failure message
    successful_wallets : int
        Number of wallets that contributed to the total
    total_wallets : int
        Number of wallet entries in the configuration

    """

    display_symbol: str | None = None
    total_fiat_value: Decimal = Decimal("0")
    formatted_text: str
    successful_wallets: int = 0
    total_wallets: int = 0

    @classmethod
    def failure(
        cls,
        message: str,
        display_symbol: str | None = None,
        total_wallets: int = 0,
    ) -> "PortfolioResult":
        """Build a zero-valued result carrying a user-facing message."""
        return cls(
            display_symbol=display_symbol,
            total_fiat_value=Decimal("0"),
            formatted_text=message,
            total_wallets=total_wallets,
        )

    @classmethod
    def from_total(
        cls,
        display_symbol: str,
        total: Decimal,
        successful_wallets: int,
        total_wallets: int,
    ) -> "PortfolioResult":
        """Build a result whose text is the symbol followed by the total to 2 decimals."""
        # Half-cent ties round up
        rounded = total.quantize(CENT, rounding=ROUND_HALF_UP)
        return cls(
            display_symbol=display_symbol,
            total_fiat_value=total,
            formatted_text=f"{display_symbol} {rounded}",
            successful_wallets=successful_wallets,
            total_wallets=total_wallets,
        )
