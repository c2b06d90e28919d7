import time
from enum import Enum

import orjson
from loguru import logger
from pydantic import BaseModel, ValidationError

from .preference_store import PreferenceStore, safe_get, safe_set

KEY_LAST_TITLE = "quickstart_last_title"
KEY_LAST_VIDEO_URL = "quickstart_last_video_url"


def _verification_key(session_id: str) -> str:
    return f"youtube_verification_{session_id}"


class QuickStartDefaults(BaseModel):
    title: str | None = None
    video_source_url: str | None = None


class QuickStartPreferences:
    """Last used session title and video source URL."""

    def __init__(self, store: PreferenceStore):
        self.store = store

    async def get_last_used_title(self) -> str | None:
        return await safe_get(self.store, KEY_LAST_TITLE)

    async def set_last_used_title(self, title: str) -> None:
        await safe_set(self.store, KEY_LAST_TITLE, title)

    async def get_last_used_video_url(self) -> str | None:
        return await safe_get(self.store, KEY_LAST_VIDEO_URL)

    async def set_last_used_video_url(self, url: str) -> None:
        await safe_set(self.store, KEY_LAST_VIDEO_URL, url)

    async def get_defaults(self) -> QuickStartDefaults:
        return QuickStartDefaults(
            title=await self.get_last_used_title(),
            video_source_url=await self.get_last_used_video_url(),
        )


class VerificationStatus(str, Enum):
    NOT_CHECKED = "not-checked"
    VERIFIED = "verified"
    NOT_RECEIVING = "not-receiving"


class PlatformVerification(BaseModel):
    """Manual confirmation that the destination platform is receiving the stream."""

    status: VerificationStatus = VerificationStatus.NOT_CHECKED
    platform_url: str | None = None
    last_checked: int | None = None


class VerificationPreferences:
    """Per-session manual verification status."""

    def __init__(self, store: PreferenceStore):
        self.store = store

    async def get_verification(self, session_id: str) -> PlatformVerification:
        raw = await safe_get(self.store, _verification_key(session_id))
        if not raw:
            return PlatformVerification()

        try:
            return PlatformVerification.model_validate(orjson.loads(raw))
        except (orjson.JSONDecodeError, ValidationError) as exc:
            logger.warning(f"Discarding unreadable verification for session={session_id}: {exc}")
            return PlatformVerification()

    async def set_verification(
        self, session_id: str, verification: PlatformVerification
    ) -> PlatformVerification:
        stored = verification.model_copy(update={"last_checked": int(time.time() * 1000)})
        await safe_set(
            self.store,
            _verification_key(session_id),
            orjson.dumps(stored.model_dump(mode="json")).decode(),
        )
        return stored
