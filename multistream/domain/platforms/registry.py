"""Platform adapter registry."""

from loguru import logger

from .platform_models import PlatformAdapter
from .youtube_adapter import youtube_adapter


class PlatformRegistry:
    """Lookup from adapter id to PlatformAdapter.

    Built once at startup and handed to whatever needs adapter lookup.
    Registering an id that already exists replaces the adapter in place, so
    enumeration order stays the order in which ids were first registered.
    """

    def __init__(self, adapters: list[PlatformAdapter] | None = None):
        self._platforms: dict[str, PlatformAdapter] = {}
        for adapter in adapters or []:
            self.register(adapter)

    def register(self, adapter: PlatformAdapter) -> None:
        if adapter.id in self._platforms:
            logger.info(f"Replacing registered platform adapter: {adapter.id}")
        self._platforms[adapter.id] = adapter

    def get_platform(self, platform_id: str) -> PlatformAdapter | None:
        return self._platforms.get(platform_id)

    def get_all_platforms(self) -> list[PlatformAdapter]:
        return list(self._platforms.values())

    def __contains__(self, platform_id: object) -> bool:
        return platform_id in self._platforms

    def __len__(self) -> int:
        return len(self._platforms)


def build_default_registry() -> PlatformRegistry:
    """Create a registry populated with the built-in adapters."""
    return PlatformRegistry([youtube_adapter])
