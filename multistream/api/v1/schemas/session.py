from pydantic import BaseModel, Field

from multistream.domain.live.session.session_models import NetworkInfo
from multistream.domain.platforms.output_params import OutputParams
from multistream.domain.platforms.platform_models import FieldValue
from multistream.domain.platforms.validation import mask_secret
from multistream.domain.presets.preset_models import StreamPreset
from multistream.services.preferences.user_preferences import VerificationStatus


class VideoSourceNoticeOut(BaseModel):
    is_google_drive: bool = False
    guidance: str | None = None


class OutputSummaryOut(BaseModel):
    """Output values echoed back to the caller with the stream key masked."""

    name: str
    protocol: str
    url: str
    stream_key_masked: str
    max_bitrate: int
    categories: list[str]

    @classmethod
    def from_params(cls, output: OutputParams) -> "OutputSummaryOut":
        return cls(
            name=output.name,
            protocol=output.protocol,
            url=output.url,
            stream_key_masked=mask_secret(output.stream_key),
            max_bitrate=output.max_bitrate,
            categories=list(output.categories),
        )


class QuickStartIn(BaseModel):
    title: str = Field(description="Session title")
    video_source_url: str = Field(description="Video file URL or RTMP stream URL")
    platform_id: str = Field(description="Registered platform adapter id")
    field_values: dict[str, FieldValue] = Field(default_factory=dict)


class QuickStartOut(BaseModel):
    session_id: str
    output: OutputSummaryOut
    video_source: VideoSourceNoticeOut


class ApplyPresetIn(BaseModel):
    preset: StreamPreset
    platform_id: str = Field(default="youtube")


class CreateSessionIn(BaseModel):
    title: str = Field(description="Session title")
    session_id: str | None = Field(default=None, description="Optional caller-chosen id")


class CreateSessionOut(BaseModel):
    session_id: str


class SessionIdIn(BaseModel):
    session_id: str


class SetVideoSourceIn(BaseModel):
    session_id: str
    video_source_url: str


class AddOutputIn(BaseModel):
    session_id: str
    platform_id: str
    values: dict[str, FieldValue] = Field(default_factory=dict)


class AddOutputOut(BaseModel):
    output_id: int


class AddLayerIn(BaseModel):
    session_id: str
    name: str
    source_url: str
    x: int = 0
    y: int = 0
    width: int = Field(gt=0)
    height: int = Field(gt=0)


class AddLayerOut(BaseModel):
    layer_id: int


class NetworkAssessmentIn(NetworkInfo):
    pass


class SuggestTitleOut(BaseModel):
    title: str


class VerificationIn(BaseModel):
    session_id: str
    status: VerificationStatus
    platform_url: str | None = None
