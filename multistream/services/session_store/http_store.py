from typing import Any, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from multistream.domain.live.session.session_models import Layer, Output, Session
from multistream.domain.live.session.session_store import SessionStoreError

from .store_schemas import AddLayerBody, AddOutputBody, IdResult, SessionStoreApiResponse

ModelT = TypeVar("ModelT", bound=BaseModel)


class HttpSessionStore:
    """Session store client speaking JSON over HTTP.

    Every operation is a POST to ``{base_url}/api/v1/store/<operation>`` and
    answers with a ``{success, results, errcode, errmesg}`` envelope.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _build_headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.api_key:
            headers["X-Api-Key"] = self.api_key
        if extra:
            headers.update(extra)
        return headers

    async def _call(self, operation: str, body: dict[str, Any] | BaseModel) -> Any:
        if isinstance(body, BaseModel):
            body = body.model_dump()

        url = f"{self.base_url}/api/v1/store/{operation}"
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    url,
                    json=body,
                    headers=self._build_headers(),
                    timeout=self.timeout,
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(f"Session store {operation} returned HTTP {exc.response.status_code}")
            raise SessionStoreError(operation, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.error(f"Session store {operation} request error: {type(exc).__name__}: {exc}")
            raise SessionStoreError(operation, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            logger.error(f"Session store {operation} returned invalid JSON")
            raise SessionStoreError(operation, "invalid JSON response") from exc

        try:
            envelope = SessionStoreApiResponse.model_validate(data)
        except ValidationError as exc:
            logger.exception(f"Failed to validate session store {operation} response")
            raise SessionStoreError(operation, "unexpected response shape") from exc

        if not envelope.success:
            logger.warning(
                f"Session store {operation} error: {envelope.errcode} - {envelope.errmesg}"
            )
            raise SessionStoreError(
                operation, envelope.errmesg or envelope.errcode or "unknown error"
            )

        return envelope.results

    def _parse(self, operation: str, model: type[ModelT], results: Any) -> ModelT:
        try:
            return model.model_validate(results)
        except ValidationError as exc:
            raise SessionStoreError(operation, f"unexpected {model.__name__} payload") from exc

    async def create_session(self, session_id: str, title: str) -> None:
        await self._call("create_session", {"session_id": session_id, "title": title})

    async def set_video_source(self, session_id: str, video_source_url: str) -> None:
        await self._call(
            "set_video_source",
            {"session_id": session_id, "video_source_url": video_source_url},
        )

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
        body = AddOutputBody(
            session_id=session_id,
            name=name,
            protocol=protocol,
            url=url,
            stream_key=stream_key,
            max_bitrate=max_bitrate,
            ingest_categories=ingest_categories,
        )
        results = await self._call("add_output", body)
        return self._parse("add_output", IdResult, results).id

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
        body = AddLayerBody(
            session_id=session_id,
            name=name,
            source_url=source_url,
            x=x,
            y=y,
            width=width,
            height=height,
        )
        results = await self._call("add_layer", body)
        return self._parse("add_layer", IdResult, results).id

    async def start_session(self, session_id: str) -> None:
        await self._call("start_session", {"session_id": session_id})

    async def stop_session(self, session_id: str) -> None:
        await self._call("stop_session", {"session_id": session_id})

    async def get_session(self, session_id: str) -> Session:
        results = await self._call("get_session", {"session_id": session_id})
        return self._parse("get_session", Session, results)

    async def get_output(self, output_id: int) -> Output:
        results = await self._call("get_output", {"id": output_id})
        return self._parse("get_output", Output, results)

    async def get_layer(self, layer_id: int) -> Layer:
        results = await self._call("get_layer", {"id": layer_id})
        return self._parse("get_layer", Layer, results)

    async def list_active_sessions(self) -> list[Session]:
        results = await self._call("list_active_sessions", {})
        return [self._parse("list_active_sessions", Session, item) for item in results or []]

    async def list_outputs_by_category(self, category_id: str) -> list[Output]:
        results = await self._call("list_outputs_by_category", {"category_id": category_id})
        return [self._parse("list_outputs_by_category", Output, item) for item in results or []]
