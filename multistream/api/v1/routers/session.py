from fastapi import APIRouter, Depends, Query

from multistream.api.v1.dependency import (
    get_quick_start_preferences,
    get_session_service,
    get_verification_preferences,
)
from multistream.api.v1.schemas.base import ApiOut
from multistream.api.v1.schemas.session import (
    AddLayerIn,
    AddLayerOut,
    AddOutputIn,
    AddOutputOut,
    ApplyPresetIn,
    CreateSessionIn,
    CreateSessionOut,
    NetworkAssessmentIn,
    OutputSummaryOut,
    QuickStartIn,
    QuickStartOut,
    SessionIdIn,
    SetVideoSourceIn,
    SuggestTitleOut,
    VerificationIn,
    VideoSourceNoticeOut,
)
from multistream.domain.live.session.readiness import assess_network
from multistream.domain.live.session.session_domain import SessionService
from multistream.domain.live.session.session_models import (
    Layer,
    LayerParams,
    NetworkAssessment,
    Output,
    QuickStartParams,
    QuickStartResponse,
    Session,
    SessionReadiness,
)
from multistream.domain.utils.titles import generate_fireplace_title
from multistream.domain.utils.video_links import (
    get_google_drive_permissions_guidance,
    is_google_drive_link,
)
from multistream.services.preferences.user_preferences import (
    PlatformVerification,
    QuickStartDefaults,
    QuickStartPreferences,
    VerificationPreferences,
)

router = APIRouter(prefix="/session")


def _video_source_notice(url: str) -> VideoSourceNoticeOut:
    if is_google_drive_link(url):
        return VideoSourceNoticeOut(
            is_google_drive=True,
            guidance=get_google_drive_permissions_guidance(),
        )
    return VideoSourceNoticeOut()


def _quick_start_out(result: QuickStartResponse, video_source_url: str) -> QuickStartOut:
    return QuickStartOut(
        session_id=result.session_id,
        output=OutputSummaryOut.from_params(result.output),
        video_source=_video_source_notice(video_source_url),
    )


@router.post("/quick_start")
async def quick_start(
    body: QuickStartIn,
    service: SessionService = Depends(get_session_service),
) -> ApiOut[QuickStartOut]:
    """Create a session, set its video source, add one platform output and start it."""
    result = await service.quick_start_with_platform(
        QuickStartParams(
            title=body.title,
            video_source_url=body.video_source_url,
            platform_id=body.platform_id,
            field_values=body.field_values,
        )
    )
    return ApiOut[QuickStartOut](results=_quick_start_out(result, body.video_source_url))


@router.post("/apply_preset")
async def apply_preset(
    body: ApplyPresetIn,
    service: SessionService = Depends(get_session_service),
) -> ApiOut[QuickStartOut]:
    """Run quick start from a parsed preset."""
    result = await service.apply_preset(body.preset, platform_id=body.platform_id)
    return ApiOut[QuickStartOut](results=_quick_start_out(result, body.preset.video_link))


@router.get("/quick_start_defaults")
async def quick_start_defaults(
    preferences: QuickStartPreferences = Depends(get_quick_start_preferences),
) -> ApiOut[QuickStartDefaults]:
    """Last used title and video source URL, to prefill the quick start form."""
    return ApiOut[QuickStartDefaults](results=await preferences.get_defaults())


@router.get("/suggest_title")
async def suggest_title() -> ApiOut[SuggestTitleOut]:
    return ApiOut[SuggestTitleOut](results=SuggestTitleOut(title=generate_fireplace_title()))


@router.post("/create_session")
async def create_session(
    body: CreateSessionIn,
    service: SessionService = Depends(get_session_service),
) -> ApiOut[CreateSessionOut]:
    session_id = await service.create_session(body.title, session_id=body.session_id)
    return ApiOut[CreateSessionOut](results=CreateSessionOut(session_id=session_id))


@router.get("/get_session")
async def get_session(
    service: SessionService = Depends(get_session_service),
    session_id: str = Query(..., description="Session id"),
) -> ApiOut[Session]:
    return ApiOut[Session](results=await service.get_session(session_id))


@router.get("/list_active_sessions")
async def list_active_sessions(
    service: SessionService = Depends(get_session_service),
) -> ApiOut[list[Session]]:
    return ApiOut[list[Session]](results=await service.list_active_sessions())


@router.post("/start_session")
async def start_session(
    body: SessionIdIn,
    service: SessionService = Depends(get_session_service),
) -> ApiOut[str]:
    await service.start_session(body.session_id)
    return ApiOut[str](results="OK")


@router.post("/stop_session")
async def stop_session(
    body: SessionIdIn,
    service: SessionService = Depends(get_session_service),
) -> ApiOut[str]:
    await service.stop_session(body.session_id)
    return ApiOut[str](results="OK")


@router.post("/set_video_source")
async def set_video_source(
    body: SetVideoSourceIn,
    service: SessionService = Depends(get_session_service),
) -> ApiOut[VideoSourceNoticeOut]:
    await service.set_video_source(body.session_id, body.video_source_url)
    return ApiOut[VideoSourceNoticeOut](results=_video_source_notice(body.video_source_url))


@router.post("/add_output")
async def add_output(
    body: AddOutputIn,
    service: SessionService = Depends(get_session_service),
) -> ApiOut[AddOutputOut]:
    """Validate platform field values and add the output to a session."""
    output_id = await service.add_platform_output(body.session_id, body.platform_id, body.values)
    return ApiOut[AddOutputOut](results=AddOutputOut(output_id=output_id))


@router.get("/get_output")
async def get_output(
    service: SessionService = Depends(get_session_service),
    output_id: int = Query(..., description="Output id"),
) -> ApiOut[Output]:
    return ApiOut[Output](results=await service.get_output(output_id))


@router.get("/list_outputs_by_category")
async def list_outputs_by_category(
    service: SessionService = Depends(get_session_service),
    category_id: str = Query(..., description="Ingest category id"),
) -> ApiOut[list[Output]]:
    return ApiOut[list[Output]](results=await service.list_outputs_by_category(category_id))


@router.post("/add_layer")
async def add_layer(
    body: AddLayerIn,
    service: SessionService = Depends(get_session_service),
) -> ApiOut[AddLayerOut]:
    params = LayerParams(**body.model_dump(exclude={"session_id"}))
    layer_id = await service.add_layer(body.session_id, params)
    return ApiOut[AddLayerOut](results=AddLayerOut(layer_id=layer_id))


@router.get("/get_layer")
async def get_layer(
    service: SessionService = Depends(get_session_service),
    layer_id: int = Query(..., description="Layer id"),
) -> ApiOut[Layer]:
    return ApiOut[Layer](results=await service.get_layer(layer_id))


@router.get("/readiness")
async def readiness(
    service: SessionService = Depends(get_session_service),
    session_id: str = Query(..., description="Session id"),
) -> ApiOut[SessionReadiness]:
    """Configuration checklist: video source, outputs, output credentials."""
    return ApiOut[SessionReadiness](results=await service.get_session_readiness(session_id))


@router.post("/network_assessment")
async def network_assessment(body: NetworkAssessmentIn) -> ApiOut[NetworkAssessment]:
    """Classify client-reported connection values; nothing is measured server side."""
    return ApiOut[NetworkAssessment](results=assess_network(body))


@router.get("/verification")
async def get_verification(
    preferences: VerificationPreferences = Depends(get_verification_preferences),
    session_id: str = Query(..., description="Session id"),
) -> ApiOut[PlatformVerification]:
    return ApiOut[PlatformVerification](results=await preferences.get_verification(session_id))


@router.post("/verification")
async def set_verification(
    body: VerificationIn,
    preferences: VerificationPreferences = Depends(get_verification_preferences),
) -> ApiOut[PlatformVerification]:
    """Record the user's manual check that the platform is receiving the stream."""
    stored = await preferences.set_verification(
        body.session_id,
        PlatformVerification(status=body.status, platform_url=body.platform_url),
    )
    return ApiOut[PlatformVerification](results=stored)
