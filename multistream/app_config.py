from pydantic import BaseModel

from multistream.config import config


class AppEnvironConfig(BaseModel):
    DEBUG: bool = config.get_bool("DEBUG")
    # Demo switch: when enabled, the session store is kept in process memory.
    DEMO_MODE: bool = config.get_bool("DEMO_MODE", default=True)

    API_HOST: str = config.get_str("API_HOST", "127.0.0.1")  # type: ignore[assignment]
    API_PORT: int = config.get_int("API_PORT", 8000)
    API_WORKERS: int = config.get_int("API_WORKERS", 1)
    API_CORS_ORIGINS: list[str] = config.get_list("API_CORS_ORIGINS", ["*"])

    # Session store (external collaborator that performs the actual streaming)
    SESSION_STORE_BASE_URL: str | None = config.get_str("SESSION_STORE_BASE_URL")
    SESSION_STORE_API_KEY: str | None = config.get_str("SESSION_STORE_API_KEY")
    SESSION_STORE_TIMEOUT_SECONDS: float = config.get_float("SESSION_STORE_TIMEOUT_SECONDS", 30)

    # User preferences (last used title / video url, verification status)
    REDIS_URL: str | None = config.get_str("REDIS_URL")
    PREFERENCES_KEY_PREFIX: str = config.get_str("PREFERENCES_KEY_PREFIX", "multistream")  # type: ignore[assignment]

    LOGFIRE_ENABLE: bool = config.get_bool("LOGFIRE_ENABLE")
    LOGFIRE_TOKEN: str | None = config.get_str("LOGFIRE_TOKEN")

    @property
    def use_http_session_store(self) -> bool:
        return bool(self.SESSION_STORE_BASE_URL) and not self.DEMO_MODE


_app_environ_config = AppEnvironConfig()


def get_app_environ_config() -> AppEnvironConfig:
    return _app_environ_config
