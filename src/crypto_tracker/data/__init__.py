"""Configuration loading, backup settings, and preferences persistence."""

from crypto_tracker.data.preferences import (
    GENERATOR_URL,
    is_complete_document,
    load_configuration_text,
    save_configuration_text,
)
from crypto_tracker.data.resolver import (
    CONFIG_EMPTY_MESSAGE,
    CONFIG_INCOMPLETE_MESSAGE,
    MISSING_CURRENCY_MESSAGE,
    ConfigurationResolver,
    parse_document,
)
from crypto_tracker.data.settings_store import (
    CRYPTO_JSON_KEY,
    REFRESH_INTERVAL_KEY,
    SettingsStore,
)

__all__ = [
    "CONFIG_EMPTY_MESSAGE",
    "CONFIG_INCOMPLETE_MESSAGE",
    "CRYPTO_JSON_KEY",
    "GENERATOR_URL",
    "MISSING_CURRENCY_MESSAGE",
    "REFRESH_INTERVAL_KEY",
    "ConfigurationResolver",
    "SettingsStore",
    "is_complete_document",
    "load_configuration_text",
    "parse_document",
    "save_configuration_text",
]
