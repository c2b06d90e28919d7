"""FastAPI dependencies resolving the services built at startup."""

from fastapi import Request

from multistream.domain.live.session.session_domain import SessionService
from multistream.domain.platforms.registry import PlatformRegistry
from multistream.services.preferences.user_preferences import (
    QuickStartPreferences,
    VerificationPreferences,
)


def get_platform_registry(request: Request) -> PlatformRegistry:
    return request.app.state.platform_registry


def get_session_service(request: Request) -> SessionService:
    return request.app.state.session_service


def get_quick_start_preferences(request: Request) -> QuickStartPreferences:
    return request.app.state.quick_start_preferences


def get_verification_preferences(request: Request) -> VerificationPreferences:
    return request.app.state.verification_preferences
