"""User preference storage."""

from .preference_store import InMemoryPreferenceStore, PreferenceStore, RedisPreferenceStore
from .user_preferences import (
    PlatformVerification,
    QuickStartDefaults,
    QuickStartPreferences,
    VerificationPreferences,
    VerificationStatus,
)

__all__ = [
    "InMemoryPreferenceStore",
    "PlatformVerification",
    "PreferenceStore",
    "QuickStartDefaults",
    "QuickStartPreferences",
    "RedisPreferenceStore",
    "VerificationPreferences",
    "VerificationStatus",
]
