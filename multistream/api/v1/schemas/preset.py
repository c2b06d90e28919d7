from pydantic import BaseModel, Field

from multistream.domain.presets.preset_models import StreamPreset


class ParsePresetsIn(BaseModel):
    text: str = Field(description="Pasted text containing one or more preset blocks")


class ParsePresetsOut(BaseModel):
    presets: list[StreamPreset]
    errors: list[str]


class FormatInstructionsOut(BaseModel):
    instructions: str
