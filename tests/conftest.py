import os

# Keep tests on the in-memory stores regardless of the developer's env.local
os.environ.update(
    {
        "DEMO_MODE": "true",
        "REDIS_URL": "",
        "LOGFIRE_ENABLE": "false",
    }
)

import pytest  # noqa: E402

from multistream.domain.live.session.session_domain import SessionService  # noqa: E402
from multistream.domain.platforms.registry import build_default_registry  # noqa: E402
from multistream.services.preferences.preference_store import InMemoryPreferenceStore  # noqa: E402
from multistream.services.preferences.user_preferences import QuickStartPreferences  # noqa: E402
from multistream.services.session_store import InMemorySessionStore  # noqa: E402


@pytest.fixture
def youtube_values() -> dict:
    """A complete, valid value map for the YouTube adapter."""
    return {
        "name": "My Channel",
        "ingestUrl": "rtmp://a.rtmp.youtube.com/live2",
        "streamKey": "abcd-efgh-ijkl-mnop",
        "maxBitrate": 6000,
    }


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def memory_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def quick_start_preferences() -> QuickStartPreferences:
    return QuickStartPreferences(InMemoryPreferenceStore())


@pytest.fixture
def session_service(memory_store, registry, quick_start_preferences) -> SessionService:
    """SessionService wired to in-memory collaborators."""
    return SessionService(
        store=memory_store,
        registry=registry,
        preferences=quick_start_preferences,
    )
