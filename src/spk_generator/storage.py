"""Durable key-value storage for admin settings.

Settings live in a small JSON file mapping fixed keys to strings:

    {"adminSignature": "data:image/png;base64,...", "spkCounter": "8"}

Absent keys mean "no signature" and counter 1.
"""

import json
import logging
from pathlib import Path

from .models import AdminSettings

logger = logging.getLogger(__name__)

SIGNATURE_KEY = "adminSignature"
COUNTER_KEY = "spkCounter"
DEFAULT_COUNTER = 1


class SettingsStore:
    """String key-value store backed by a JSON file.

    The file is read lazily on first access and rewritten on every change.
    """

    def __init__(self, path: str | Path):
        """Initialize the store.

        Args:
            path: Location of the JSON file. Parent directories are created
                on first write.
        """
        self.path = Path(path)
        self._data: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._data is not None:
            return self._data

        if not self.path.exists():
            logger.debug(f"Settings file not found, starting empty: {self.path}")
            self._data = {}
            return self._data

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read settings file {self.path}: {e}. Using defaults.")
            loaded = {}

        if not isinstance(loaded, dict):
            logger.warning(f"Settings file {self.path} is not a JSON object. Using defaults.")
            loaded = {}

        self._data = {str(k): str(v) for k, v in loaded.items() if v is not None}
        return self._data

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(self._load(), f, indent=2)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._load().get(key, default)

    def set(self, key: str, value: str) -> None:
        self._load()[key] = value
        self._flush()
        logger.debug(f"Stored settings key '{key}' in {self.path}")


def _parse_counter(raw: str | None) -> int:
    if raw is None:
        return DEFAULT_COUNTER
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring invalid stored counter {raw!r}, using {DEFAULT_COUNTER}")
        return DEFAULT_COUNTER
    if value < 1:
        logger.warning(f"Ignoring non-positive stored counter {value}, using {DEFAULT_COUNTER}")
        return DEFAULT_COUNTER
    return value


def load_admin_settings(store: SettingsStore) -> AdminSettings:
    """Read the signature and counter from the store.

    Args:
        store: Settings store to read from.

    Returns:
        AdminSettings with defaults for any missing or invalid value.
    """
    signature = store.get(SIGNATURE_KEY) or None
    counter = _parse_counter(store.get(COUNTER_KEY))
    logger.info(
        f"Loaded admin settings: counter={counter}, "
        f"signature={'present' if signature else 'absent'}"
    )
    return AdminSettings(signature_image=signature, document_counter=counter)


def save_signature(store: SettingsStore, data_url: str) -> None:
    store.set(SIGNATURE_KEY, data_url)


def save_counter(store: SettingsStore, counter: int) -> None:
    store.set(COUNTER_KEY, str(counter))
