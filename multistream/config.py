"""
Environment configuration.

Values are layered, later sources overriding earlier ones:
1) `env.example` (committed, safe placeholders)
2) `env.local` (optional, MUST NOT be committed)
3) Process environment variables (highest priority)

Empty strings count as unset for the typed getters, so a blank placeholder in
`env.example` falls through to the caller's default.
"""

import os
from pathlib import Path

from dotenv import dotenv_values
from loguru import logger

PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILES = ("env.example", "env.local")
TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def parse_bool(raw: str | None, default: bool = False) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in TRUE_VALUES


def parse_list(raw: str | None, default: list[str] | None = None) -> list[str]:
    """Split a comma separated value, dropping blank items."""
    if raw is None or not raw.strip():
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


class EnvironConfig:
    """
    Singleton holding the merged env files and process environment.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config: dict[str, str | None] = {}
            self._load_config()
            EnvironConfig._initialized = True

    def _load_config(self):
        for name in ENV_FILES:
            path = PROJECT_ROOT / name
            if path.exists():
                self._config.update(dotenv_values(path))
                logger.info("Loaded environment variables from {}", path)

        self._config.update(os.environ)

    def reload(self):
        """Re-read env files and the environment (tests, config changes)."""
        self._config.clear()
        self._load_config()
        logger.info("Configuration reloaded")

    def __getitem__(self, key: str) -> str | None:
        if key not in self._config:
            raise KeyError(f"Configuration key '{key}' not found")
        return self._config[key]

    def __contains__(self, key: object) -> bool:
        return key in self._config

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._config.get(key, default)

    def get_str(self, key: str, default: str | None = None) -> str | None:
        value = self._config.get(key)
        if value is None or not value.strip():
            return default
        return value.strip()

    def get_bool(self, key: str, default: bool = False) -> bool:
        return parse_bool(self._config.get(key), default)

    def get_int(self, key: str, default: int) -> int:
        value = self.get_str(key)
        return int(value) if value is not None else default

    def get_float(self, key: str, default: float) -> float:
        value = self.get_str(key)
        return float(value) if value is not None else default

    def get_list(self, key: str, default: list[str] | None = None) -> list[str]:
        return parse_list(self._config.get(key), default)


config = EnvironConfig()
