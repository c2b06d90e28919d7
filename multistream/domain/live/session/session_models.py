"""Session domain models.

Sessions, outputs and layers are owned by the external session store; these
models mirror what the store returns and what we send to it.
"""

from pydantic import BaseModel, Field

from multistream.domain.platforms.output_params import OutputParams


class Position(BaseModel):
    x: int = 0
    y: int = 0


class Size(BaseModel):
    width: int
    height: int


class Session(BaseModel):
    id: str
    title: str
    video_source_url: str | None = None
    layers: list[int] = Field(default_factory=list)
    is_active: bool = False
    outputs: list[int] = Field(default_factory=list)


class Output(BaseModel):
    id: int
    name: str
    protocol: str
    url: str
    stream_key: str
    max_bitrate: int = 0
    ingest_categories: list[str] = Field(default_factory=list)


class Layer(BaseModel):
    id: int
    name: str
    source_url: str
    position: Position = Field(default_factory=Position)
    size: Size


class LayerParams(BaseModel):
    """Parameters for adding an overlay layer."""

    name: str
    source_url: str
    x: int = 0
    y: int = 0
    width: int = Field(gt=0)
    height: int = Field(gt=0)


class QuickStartParams(BaseModel):
    """Parameters for the platform-driven quick start flow."""

    title: str
    video_source_url: str
    platform_id: str
    field_values: dict[str, str | int | float | bool] = Field(default_factory=dict)
    session_id: str | None = None


class QuickStartResponse(BaseModel):
    session_id: str
    output: OutputParams


class OutputReadiness(BaseModel):
    output_id: int
    name: str
    configured: bool


class SessionReadiness(BaseModel):
    session_id: str
    has_video_source: bool
    has_outputs: bool
    outputs: list[OutputReadiness] = Field(default_factory=list)
    ready: bool


class NetworkInfo(BaseModel):
    """Connection values reported by the client; never measured here."""

    effective_type: str | None = None
    downlink: float | None = Field(default=None, description="Mbps")
    rtt: int | None = Field(default=None, description="ms")
    save_data: bool | None = None


class NetworkAssessment(BaseModel):
    network: NetworkInfo
    is_low_bandwidth: bool
    recommendations: list[str] = Field(default_factory=list)
