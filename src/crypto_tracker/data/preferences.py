"""Load and save the configuration document as editable text."""

import json
import logging
from pathlib import Path

from crypto_tracker.core.errors import ConfigurationInvalidError
from crypto_tracker.data.settings_store import CRYPTO_JSON_KEY, SettingsStore

logger = logging.getLogger(__name__)

GENERATOR_URL = "https://bilgi42.github.io/polybar-crypto-track/"
EMPTY_DOCUMENT = json.dumps([], indent=4)


def is_complete_document(document: object) -> bool:
    """Return True for an array holding a header plus at least one wallet."""
    return isinstance(document, list) and len(document) >= 2


def load_configuration_text(path: Path) -> tuple[str, bool]:
    """
    Read the configuration file as pretty-printed JSON.

    Parameters
    ----------
    path : Path
        Configuration file location

    Returns
    -------
    tuple[str, bool]
        The 4-space indented document and whether it is complete. A missing
        or unparsable file yields an empty array and False.

    """
    path = Path(path)
    if not path.exists():
        return EMPTY_DOCUMENT, False

    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error("Error loading %s: %s", path, e)
        return EMPTY_DOCUMENT, False

    return json.dumps(document, indent=4, ensure_ascii=False), is_complete_document(document)


def save_configuration_text(text: str, path: Path, store: SettingsStore) -> bool:
    """
    Validate, pretty-print and save the configuration document.

    The saved text is also written to the settings store so the resolver can
    rebuild the file from it.

    Parameters
    ----------
    text : str
        JSON document as entered by the user
    path : Path
        Configuration file location
    store : SettingsStore
        Settings store receiving the backup copy

    Returns
    -------
    bool
        Whether the saved document is complete

    Raises
    ------
    ConfigurationInvalidError
        If ``text`` is not valid JSON

    """
    try:
        document = json.loads(text)
    except ValueError as e:
        msg = f"Invalid JSON configuration: {e}"
        raise ConfigurationInvalidError(msg) from e

    content = json.dumps(document, indent=4, ensure_ascii=False)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    store.set(CRYPTO_JSON_KEY, content)
    logger.info("Saved configuration to %s", path)

    return is_complete_document(document)
