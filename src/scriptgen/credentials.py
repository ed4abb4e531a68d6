"""File-backed store for provider API keys."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from .config import config

logger = logging.getLogger(__name__)


class CredentialStore:
    """Key-value store of API keys, keyed by provider key name.

    An environment variable named after the upper-cased key name (for example
    `GEMINI_API_KEY` for `gemini_api_key`) takes precedence over the file.
    The file is re-read on every lookup so a saved key applies to the next call.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        """Initialize the store.

        Args:
            path: YAML file holding the keys. Defaults to config.credentials_file.
        """
        self._path = Path(path) if path else config.credentials_file

    @property
    def path(self) -> Path:
        """Return the backing file path."""
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        with open(self._path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Credentials file is not a mapping: {self._path}")
        return {str(k): str(v) for k, v in data.items() if v}

    def _save(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False)

    def get(self, key_name: str) -> Optional[str]:
        """Return the key for `key_name`, or None when not configured."""
        env_value = os.getenv(key_name.upper())
        if env_value and env_value.strip():
            return env_value.strip()
        return self._load().get(key_name)

    def has(self, key_name: str) -> bool:
        """Return True when a key is configured."""
        return self.get(key_name) is not None

    def set(self, key_name: str, value: str) -> None:
        """Save a key.

        Raises:
            ValueError: If the value is blank.
        """
        value = value.strip()
        if not value:
            raise ValueError("API key must not be empty")
        data = self._load()
        data[key_name] = value
        self._save(data)
        logger.info(f"Saved credential '{key_name}' to {self._path}")

    def delete(self, key_name: str) -> bool:
        """Remove a stored key. Returns True if one was removed."""
        data = self._load()
        if key_name not in data:
            return False
        del data[key_name]
        self._save(data)
        logger.info(f"Removed credential '{key_name}'")
        return True
