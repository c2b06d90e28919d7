from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SessionStoreApiResponse(BaseModel):
    """Response envelope returned by the remote session store."""

    model_config = ConfigDict(extra="ignore")

    success: bool = True
    results: Any = None
    errcode: str | None = None
    errmesg: str | None = None


class IdResult(BaseModel):
    id: int


class AddOutputBody(BaseModel):
    session_id: str
    name: str
    protocol: str
    url: str
    stream_key: str
    max_bitrate: int = Field(ge=0)
    ingest_categories: list[str] = Field(default_factory=list)


class AddLayerBody(BaseModel):
    session_id: str
    name: str
    source_url: str
    x: int
    y: int
    width: int
    height: int
