"""Process-local session store used in demo mode and tests."""

from itertools import count

from loguru import logger

from multistream.domain.live.session.session_models import Layer, Output, Position, Session, Size
from multistream.domain.live.session.session_store import SessionStoreError


class InMemorySessionStore:
    """Keeps sessions, outputs and layers in dictionaries.

    Mirrors the remote store's behaviour closely enough for local runs: session
    ids come from the caller, output and layer ids are assigned sequentially.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}
        self._outputs: dict[int, Output] = {}
        self._layers: dict[int, Layer] = {}
        self._output_ids = count(1)
        self._layer_ids = count(1)

    def _require_session(self, operation: str, session_id: str) -> Session:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionStoreError(operation, f"Session not found: {session_id}")
        return session

    async def create_session(self, session_id: str, title: str) -> None:
        if session_id in self._sessions:
            raise SessionStoreError("create_session", f"Session already exists: {session_id}")
        self._sessions[session_id] = Session(id=session_id, title=title)
        logger.debug(f"Created session {session_id}")

    async def set_video_source(self, session_id: str, video_source_url: str) -> None:
        session = self._require_session("set_video_source", session_id)
        session.video_source_url = video_source_url

    async def add_output(
        self,
        session_id: str,
        name: str,
        protocol: str,
        url: str,
        stream_key: str,
        max_bitrate: int,
        ingest_categories: list[str],
    ) -> int:
        session = self._require_session("add_output", session_id)
        output_id = next(self._output_ids)
        self._outputs[output_id] = Output(
            id=output_id,
            name=name,
            protocol=protocol,
            url=url,
            stream_key=stream_key,
            max_bitrate=max_bitrate,
            ingest_categories=list(ingest_categories),
        )
        session.outputs.append(output_id)
        logger.debug(f"Added output {output_id} to session {session_id}")
        return output_id

    async def add_layer(
        self,
        session_id: str,
        name: str,
        source_url: str,
        x: int,
        y: int,
        width: int,
        height: int,
    ) -> int:
        session = self._require_session("add_layer", session_id)
        layer_id = next(self._layer_ids)
        self._layers[layer_id] = Layer(
            id=layer_id,
            name=name,
            source_url=source_url,
            position=Position(x=x, y=y),
            size=Size(width=width, height=height),
        )
        session.layers.append(layer_id)
        return layer_id

    async def start_session(self, session_id: str) -> None:
        self._require_session("start_session", session_id).is_active = True

    async def stop_session(self, session_id: str) -> None:
        self._require_session("stop_session", session_id).is_active = False

    async def get_session(self, session_id: str) -> Session:
        return self._require_session("get_session", session_id).model_copy(deep=True)

    async def get_output(self, output_id: int) -> Output:
        output = self._outputs.get(output_id)
        if output is None:
            raise SessionStoreError("get_output", f"Output not found: {output_id}")
        return output.model_copy(deep=True)

    async def get_layer(self, layer_id: int) -> Layer:
        layer = self._layers.get(layer_id)
        if layer is None:
            raise SessionStoreError("get_layer", f"Layer not found: {layer_id}")
        return layer.model_copy(deep=True)

    async def list_active_sessions(self) -> list[Session]:
        return [s.model_copy(deep=True) for s in self._sessions.values() if s.is_active]

    async def list_outputs_by_category(self, category_id: str) -> list[Output]:
        return [
            o.model_copy(deep=True)
            for o in self._outputs.values()
            if category_id in o.ingest_categories
        ]
