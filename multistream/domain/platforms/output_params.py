from pydantic import BaseModel, Field

from .platform_models import FieldValues, PlatformAdapter
from .validation import coerce_number


class OutputParams(BaseModel):
    """Normalized output values handed to the session store."""

    name: str
    protocol: str
    url: str
    stream_key: str
    max_bitrate: int = Field(default=0, ge=0, description="kbps, 0 for unlimited")
    categories: list[str] = Field(default_factory=list)


def _text(values: FieldValues, key: str) -> str:
    value = values.get(key)
    if value is None or isinstance(value, bool):
        return ""
    return str(value).strip()


def build_output_params(adapter: PlatformAdapter, values: FieldValues) -> OutputParams:
    """Build session-store output parameters from a validated value map."""
    bitrate = coerce_number(values.get("maxBitrate") or 0)

    return OutputParams(
        name=_text(values, "name") or adapter.display_name,
        protocol=adapter.protocol,
        url=_text(values, "ingestUrl"),
        stream_key=_text(values, "streamKey"),
        max_bitrate=int(bitrate or 0),
        categories=list(adapter.default_categories),
    )
