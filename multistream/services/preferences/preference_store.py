"""Key-value storage for single-user conveniences.

Nothing stored here is correctness-critical: reads fall back to defaults and
writes are last-writer-wins without locking.
"""

from typing import Protocol

from loguru import logger
from redis.asyncio import Redis


class PreferenceStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class InMemoryPreferenceStore:
    def __init__(self):
        self._values: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value


class RedisPreferenceStore:
    """Preferences kept in Redis under a namespaced key."""

    def __init__(self, redis_client: Redis, key_prefix: str = "multistream"):
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}:prefs:{key}"

    async def get(self, key: str) -> str | None:
        value = await self.redis.get(self._key(key))
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def set(self, key: str, value: str) -> None:
        await self.redis.set(self._key(key), value)


async def safe_get(store: PreferenceStore, key: str) -> str | None:
    try:
        return await store.get(key)
    except Exception as exc:
        logger.warning(f"Preference read failed for {key}: {type(exc).__name__}: {exc}")
        return None


async def safe_set(store: PreferenceStore, key: str, value: str) -> None:
    try:
        await store.set(key, value)
    except Exception as exc:
        logger.warning(f"Preference write failed for {key}: {type(exc).__name__}: {exc}")
