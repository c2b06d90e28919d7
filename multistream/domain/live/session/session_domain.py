"""Session domain service."""

from loguru import logger

from multistream.domain.platforms.output_params import OutputParams, build_output_params
from multistream.domain.platforms.platform_models import FieldValues, PlatformAdapter
from multistream.domain.platforms.registry import PlatformRegistry
from multistream.domain.platforms.validation import (
    apply_field_defaults,
    redact_field_values,
    validate_platform_fields,
)
from multistream.domain.presets.preset_import import preset_to_field_values
from multistream.domain.presets.preset_models import StreamPreset
from multistream.domain.utils.idgen import new_session_id
from multistream.services.preferences.user_preferences import QuickStartPreferences
from multistream.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .quick_start import QuickStartOperations
from .readiness import check_session_readiness
from .session_models import (
    Layer,
    LayerParams,
    Output,
    QuickStartParams,
    QuickStartResponse,
    Session,
    SessionReadiness,
)
from .session_store import SessionStore


class SessionService:
    """Configuration operations on top of the session store."""

    def __init__(
        self,
        store: SessionStore,
        registry: PlatformRegistry,
        preferences: QuickStartPreferences | None = None,
    ):
        self.store = store
        self.registry = registry
        self.preferences = preferences
        self._quick_start = QuickStartOperations(store)

    # ==================== PLATFORMS ====================

    def resolve_platform(self, platform_id: str | None) -> PlatformAdapter:
        """Look up an adapter by id.

        Raises AppError if no platform is selected or the id is unknown.
        """
        if not platform_id:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg="Please select a platform",
                status_code=HttpStatusCode.BAD_REQUEST,
            )

        adapter = self.registry.get_platform(platform_id)
        if not adapter:
            raise AppError(
                errcode=AppErrorCode.E_PLATFORM_NOT_FOUND,
                errmesg=f"Platform not found: {platform_id}",
                status_code=HttpStatusCode.NOT_FOUND,
            )
        return adapter

    def prepare_output(self, adapter: PlatformAdapter, values: FieldValues) -> OutputParams:
        """Fill defaults, validate and normalize field values into output params.

        Raises AppError carrying every field error when validation fails.
        """
        merged = apply_field_defaults(adapter, values)
        errors = validate_platform_fields(adapter, merged)
        if errors:
            logger.info(
                f"Rejected {adapter.id} values {redact_field_values(adapter, merged)}: {errors}"
            )
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg="; ".join(errors.values()),
                status_code=HttpStatusCode.BAD_REQUEST,
                details={"field_errors": errors},
            )
        return build_output_params(adapter, merged)

    # ==================== SESSIONS ====================

    async def create_session(self, title: str, session_id: str | None = None) -> str:
        title = title.strip()
        if not title:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg="Session title is required",
                status_code=HttpStatusCode.BAD_REQUEST,
            )
        session_id = session_id or new_session_id()
        await self.store.create_session(session_id, title)
        logger.info(f"Created session {session_id}")
        return session_id

    async def get_session(self, session_id: str) -> Session:
        return await self.store.get_session(session_id)

    async def list_active_sessions(self) -> list[Session]:
        return await self.store.list_active_sessions()

    async def start_session(self, session_id: str) -> None:
        await self.store.start_session(session_id)
        logger.info(f"Session {session_id} started")

    async def stop_session(self, session_id: str) -> None:
        await self.store.stop_session(session_id)
        logger.info(f"Session {session_id} stopped")

    async def set_video_source(self, session_id: str, video_source_url: str) -> None:
        video_source_url = video_source_url.strip()
        if not video_source_url:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg="Video source URL is required",
                status_code=HttpStatusCode.BAD_REQUEST,
            )
        await self.store.set_video_source(session_id, video_source_url)

    # ==================== OUTPUTS & LAYERS ====================

    async def add_platform_output(
        self,
        session_id: str,
        platform_id: str,
        values: FieldValues,
    ) -> int:
        """Validate values for a platform and add the resulting output."""
        adapter = self.resolve_platform(platform_id)
        output = self.prepare_output(adapter, values)

        output_id = await self.store.add_output(
            session_id,
            output.name,
            output.protocol,
            output.url,
            output.stream_key,
            output.max_bitrate,
            list(output.categories),
        )
        logger.info(f"Added {adapter.id} output {output_id} to session {session_id}")
        return output_id

    async def get_output(self, output_id: int) -> Output:
        return await self.store.get_output(output_id)

    async def list_outputs_by_category(self, category_id: str) -> list[Output]:
        return await self.store.list_outputs_by_category(category_id)

    async def add_layer(self, session_id: str, params: LayerParams) -> int:
        return await self.store.add_layer(
            session_id,
            params.name,
            params.source_url,
            params.x,
            params.y,
            params.width,
            params.height,
        )

    async def get_layer(self, layer_id: int) -> Layer:
        return await self.store.get_layer(layer_id)

    async def get_session_readiness(self, session_id: str) -> SessionReadiness:
        session = await self.store.get_session(session_id)
        outputs = [await self.store.get_output(output_id) for output_id in session.outputs]
        return check_session_readiness(session, outputs)

    # ==================== QUICK START ====================

    async def quick_start_with_platform(self, params: QuickStartParams) -> QuickStartResponse:
        """Validate a platform selection and run the quick start flow.

        Raises:
            AppError: on missing title/video source, unknown platform or invalid fields
            QuickStartError: if a session store step fails
        """
        title = params.title.strip()
        video_source_url = params.video_source_url.strip()

        if not title:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg="Session title is required",
                status_code=HttpStatusCode.BAD_REQUEST,
            )
        if not video_source_url:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg="Video source URL is required",
                status_code=HttpStatusCode.BAD_REQUEST,
            )

        adapter = self.resolve_platform(params.platform_id)
        output = self.prepare_output(adapter, params.field_values)
        session_id = params.session_id or new_session_id()

        await self._quick_start.quick_start(
            session_id=session_id,
            title=title,
            video_source_url=video_source_url,
            output=output,
        )

        if self.preferences:
            await self.preferences.set_last_used_title(title)
            await self.preferences.set_last_used_video_url(video_source_url)

        return QuickStartResponse(session_id=session_id, output=output)

    async def apply_preset(
        self,
        preset: StreamPreset,
        platform_id: str = "youtube",
    ) -> QuickStartResponse:
        """Run quick start from an imported preset."""
        adapter = self.resolve_platform(platform_id)
        return await self.quick_start_with_platform(
            QuickStartParams(
                title=preset.title,
                video_source_url=preset.video_link,
                platform_id=adapter.id,
                field_values=preset_to_field_values(preset, adapter),
            )
        )
