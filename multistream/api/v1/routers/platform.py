from fastapi import APIRouter, Depends, Query

from multistream.api.v1.dependency import get_platform_registry
from multistream.api.v1.schemas.base import ApiOut
from multistream.api.v1.schemas.platform import (
    ListPlatformsOut,
    PlatformOut,
    ValidateFieldsIn,
    ValidateFieldsOut,
)
from multistream.domain.platforms.registry import PlatformRegistry
from multistream.domain.platforms.validation import apply_field_defaults, validate_platform_fields
from multistream.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

router = APIRouter(prefix="/platform")


def _require_platform(registry: PlatformRegistry, platform_id: str):
    adapter = registry.get_platform(platform_id)
    if not adapter:
        raise AppError(
            errcode=AppErrorCode.E_PLATFORM_NOT_FOUND,
            errmesg=f"Platform not found: {platform_id}",
            status_code=HttpStatusCode.NOT_FOUND,
        )
    return adapter


@router.get("/list_platforms")
async def list_platforms(
    registry: PlatformRegistry = Depends(get_platform_registry),
) -> ApiOut[ListPlatformsOut]:
    """List registered platform adapters in registration order."""
    platforms = [PlatformOut.from_adapter(adapter) for adapter in registry.get_all_platforms()]
    return ApiOut[ListPlatformsOut](results=ListPlatformsOut(platforms=platforms))


@router.get("/get_platform")
async def get_platform(
    registry: PlatformRegistry = Depends(get_platform_registry),
    platform_id: str = Query(..., description="Platform adapter id"),
) -> ApiOut[PlatformOut]:
    adapter = _require_platform(registry, platform_id)
    return ApiOut[PlatformOut](results=PlatformOut.from_adapter(adapter))


@router.post("/validate_fields")
async def validate_fields(
    body: ValidateFieldsIn,
    registry: PlatformRegistry = Depends(get_platform_registry),
) -> ApiOut[ValidateFieldsOut]:
    """Validate field values against a platform's schema.

    Always succeeds when the platform exists; field problems are reported in
    results.errors so every issue can be fixed in one pass.
    """
    adapter = _require_platform(registry, body.platform_id)
    values = apply_field_defaults(adapter, body.values) if body.apply_defaults else body.values
    errors = validate_platform_fields(adapter, values)
    return ApiOut[ValidateFieldsOut](results=ValidateFieldsOut(valid=not errors, errors=errors))
