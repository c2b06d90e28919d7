"""Session store implementations."""

from .http_store import HttpSessionStore
from .memory_store import InMemorySessionStore

__all__ = ["HttpSessionStore", "InMemorySessionStore"]
