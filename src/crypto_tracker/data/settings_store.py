"""YAML-backed key-value settings holding the configuration backup."""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CRYPTO_JSON_KEY = "crypto-json"
REFRESH_INTERVAL_KEY = "refresh-interval"

DEFAULTS: dict[str, Any] = {
    CRYPTO_JSON_KEY: "",
    REFRESH_INTERVAL_KEY: 300,
}


class SettingsStore:
    """
    Small settings file mirroring a key-value settings schema.

    Keys
    ----
    crypto-json
        Backup copy of the configuration document, written through on save
    refresh-interval
        Seconds between refreshes in watch mode

    Parameters
    ----------
    path : Path
        Location of the YAML settings file

    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, Any]:
        """
        Load all settings merged over the defaults.

        An absent, unreadable or malformed file yields the defaults.

        """
        settings = dict(DEFAULTS)
        if not self.path.exists():
            return settings

        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", self.path, e)
            return settings

        if isinstance(data, dict):
            settings.update(data)
        elif data is not None:
            logger.warning("Ignoring settings %s: expected a mapping", self.path)
        return settings

    def get(self, key: str) -> Any:
        return self.load().get(key, DEFAULTS.get(key))

    def set(self, key: str, value: Any) -> None:
        """Persist a single key, keeping every other stored value."""
        settings = self.load()
        settings[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(settings, f, sort_keys=True, allow_unicode=True)

    def get_string(self, key: str) -> str:
        value = self.get(key)
        return value if isinstance(value, str) else ""

    def get_int(self, key: str) -> int:
        value = self.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return DEFAULTS[key]

    def backup_json(self) -> str | None:
        """Return the stored configuration backup, or None if unset."""
        return self.get_string(CRYPTO_JSON_KEY) or None
