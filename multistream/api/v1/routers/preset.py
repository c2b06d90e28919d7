from fastapi import APIRouter

from multistream.api.v1.schemas.base import ApiOut
from multistream.api.v1.schemas.preset import (
    FormatInstructionsOut,
    ParsePresetsIn,
    ParsePresetsOut,
)
from multistream.domain.presets.preset_import import (
    get_preset_format_instructions,
    parse_presets_from_text,
)

router = APIRouter(prefix="/preset")


@router.post("/parse_presets")
async def parse_presets(body: ParsePresetsIn) -> ApiOut[ParsePresetsOut]:
    """Parse pasted preset text. Per-block problems are returned, not raised."""
    result = parse_presets_from_text(body.text)
    return ApiOut[ParsePresetsOut](
        results=ParsePresetsOut(presets=result.presets, errors=result.errors)
    )


@router.get("/format_instructions")
async def format_instructions() -> ApiOut[FormatInstructionsOut]:
    return ApiOut[FormatInstructionsOut](
        results=FormatInstructionsOut(instructions=get_preset_format_instructions())
    )
