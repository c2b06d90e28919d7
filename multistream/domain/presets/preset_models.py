from pydantic import BaseModel, Field


class StreamPreset(BaseModel):
    """A fully specified video source + output credential bundle."""

    title: str
    video_link: str
    ingest_url: str
    stream_key: str


class PresetParseResult(BaseModel):
    presets: list[StreamPreset] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
