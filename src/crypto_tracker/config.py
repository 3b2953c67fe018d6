"""Application settings: file locations and API endpoints."""

import os
from pathlib import Path

from pydantic import BaseModel

from crypto_tracker.sources import BLOCKCYPHER_BASE_URL, COINGECKO_BASE_URL

HOME_ENV_VAR = "CRYPTO_TRACKER_HOME"
DEFAULT_HOME = Path("~/.local/share/crypto-tracker")
CONFIG_FILENAME = "crypto-track.json"
SETTINGS_FILENAME = "settings.yaml"


class AppSettings(BaseModel):
    """
    Resolved application settings.

    Attributes
    ----------
    home : Path
        Data directory holding the configuration and settings files
    config_path : Path
        Configuration document (``crypto-track.json``)
    settings_path : Path
        YAML settings store holding the configuration backup
    balance_api_url : str
        BlockCypher API base URL
    price_api_url : str
        CoinGecko API base URL

    """

    home: Path
    config_path: Path
    settings_path: Path
    balance_api_url: str = BLOCKCYPHER_BASE_URL
    price_api_url: str = COINGECKO_BASE_URL

    @classmethod
    def for_home(cls, home: Path, **overrides: object) -> "AppSettings":
        """Build settings with both files placed under ``home``."""
        home = Path(home).expanduser()
        return cls(
            home=home,
            config_path=home / CONFIG_FILENAME,
            settings_path=home / SETTINGS_FILENAME,
            **overrides,
        )

    @classmethod
    def from_env(cls, home: Path | None = None) -> "AppSettings":
        """
        Build settings from the environment.

        ``home`` takes precedence over ``$CRYPTO_TRACKER_HOME``, which takes
        precedence over ``~/.local/share/crypto-tracker``.

        """
        if home is None:
            home = Path(os.environ.get(HOME_ENV_VAR) or DEFAULT_HOME)
        return cls.for_home(home)
