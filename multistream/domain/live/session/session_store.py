"""Interface of the external session store.

The session store performs the actual encoding and transmission. Session ids
are generated by the caller; output and layer ids are assigned by the store.
"""

from typing import Protocol, runtime_checkable

from .session_models import Layer, Output, Session


class SessionStoreError(Exception):
    """A session store call failed (network, upstream rejection, unknown id)."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.message = message


@runtime_checkable
class SessionStore(Protocol):
    async def create_session(self, session_id: str, title: str) -> None: ...

    async def set_video_source(self, session_id: str, video_source_url: str) -> None: ...

    async def add_output(
        self,
        session_id: str,
        name: str,
        protocol: str,
        url: str,
        stream_key: str,
        max_bitrate: int,
        ingest_categories: list[str],
    ) -> int: ...

    async def add_layer(
        self,
        session_id: str,
        name: str,
        source_url: str,
        x: int,
        y: int,
        width: int,
        height: int,
    ) -> int: ...

    async def start_session(self, session_id: str) -> None: ...

    async def stop_session(self, session_id: str) -> None: ...

    async def get_session(self, session_id: str) -> Session: ...

    async def get_output(self, output_id: int) -> Output: ...

    async def get_layer(self, layer_id: int) -> Layer: ...

    async def list_active_sessions(self) -> list[Session]: ...

    async def list_outputs_by_category(self, category_id: str) -> list[Output]: ...
