import time
import traceback
import uuid
from contextlib import asynccontextmanager
from os import environ

import logfire
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from granian import Granian
from loguru import logger
from redis.asyncio import Redis
from starlette.middleware.base import BaseHTTPMiddleware

from multistream.api.errors import (
    app_error_handler,
    request_validation_error_handler,
    session_store_error_handler,
)
from multistream.api.utils import api_failure, init_logger, load_routes
from multistream.api.v1.routers import platform, preset, session
from multistream.app_config import AppEnvironConfig, get_app_environ_config
from multistream.domain.live.session.session_domain import SessionService
from multistream.domain.live.session.session_store import SessionStore, SessionStoreError
from multistream.domain.platforms.registry import build_default_registry
from multistream.services.preferences.preference_store import (
    InMemoryPreferenceStore,
    PreferenceStore,
    RedisPreferenceStore,
)
from multistream.services.preferences.user_preferences import (
    QuickStartPreferences,
    VerificationPreferences,
)
from multistream.services.session_store import HttpSessionStore, InMemorySessionStore
from multistream.utils.app_errors import AppError, AppErrorCode

app_config = get_app_environ_config()


class HTTPLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):  # type: ignore
        start_time = time.time()
        request_id = str(uuid.uuid4())[:8]

        logger.info(f"[{request_id}] {request.method} {request.url.path}")

        try:
            response = await call_next(request)

            process_time = (time.time() - start_time) * 1000
            logger.info(
                f"[{request_id}] {request.method} {request.url.path} - "
                f"Status: {response.status_code} - "
                f"Duration: {process_time:.2f}ms"
            )

            return response

        except Exception as exc:
            process_time = (time.time() - start_time) * 1000
            logger.error(
                f"[{request_id}] Unhandled exception in {request.method} {request.url.path} - "
                f"Duration: {process_time:.2f}ms - "
                f"Error: {type(exc).__name__}: {exc}\n"
                f"Traceback:\n{traceback.format_exc()}"
            )

            failure = api_failure(
                errcode=AppErrorCode.E_INTERNAL_ERROR.value,
                errmesg=f"Internal server error (request_id: {request_id})",
            )
            return ORJSONResponse(
                status_code=500,
                content=failure.model_dump(),
            )


def build_session_store(cfg: AppEnvironConfig) -> SessionStore:
    if cfg.use_http_session_store:
        logger.info(f"Using HTTP session store at {cfg.SESSION_STORE_BASE_URL}")
        return HttpSessionStore(
            base_url=cfg.SESSION_STORE_BASE_URL,  # type: ignore[arg-type]
            api_key=cfg.SESSION_STORE_API_KEY,
            timeout=cfg.SESSION_STORE_TIMEOUT_SECONDS,
        )

    logger.info("Using in-memory session store (demo mode)")
    return InMemorySessionStore()


def build_preference_store(cfg: AppEnvironConfig) -> tuple[PreferenceStore, Redis | None]:
    if cfg.REDIS_URL:
        logger.info("Using Redis preference store")
        redis_client = Redis.from_url(cfg.REDIS_URL)
        return RedisPreferenceStore(redis_client, key_prefix=cfg.PREFERENCES_KEY_PREFIX), redis_client

    logger.info("Using in-memory preference store")
    return InMemoryPreferenceStore(), None


def init_services(server: FastAPI, cfg: AppEnvironConfig) -> None:
    """Build the registry, stores and services and attach them to app state."""
    registry = build_default_registry()
    store = build_session_store(cfg)
    pref_store, redis_client = build_preference_store(cfg)

    quick_start_preferences = QuickStartPreferences(pref_store)

    server.state.platform_registry = registry
    server.state.redis_client = redis_client
    server.state.quick_start_preferences = quick_start_preferences
    server.state.verification_preferences = VerificationPreferences(pref_store)
    server.state.session_service = SessionService(
        store=store,
        registry=registry,
        preferences=quick_start_preferences,
    )


@asynccontextmanager
async def lifespan(server: FastAPI):
    init_logger(debug=app_config.DEBUG)

    logger.info("Application startup...")

    init_services(server, app_config)

    if app_config.LOGFIRE_ENABLE:
        logger.info("Logfire initializing")

        logfire.configure(
            token=app_config.LOGFIRE_TOKEN,
            service_name="multistream",
            service_version=environ.get("BUILD_COMMIT") or "dev",
        )

        logger.info("Logfire instrument fastapi")
        logfire.instrument_fastapi(server, capture_headers=True)

        logger.info("Logfire instrument httpx")
        logfire.instrument_httpx()

        logger.info("Logfire instrument pydantic")
        logfire.instrument_pydantic()

    yield

    logger.info("Application shutdown...")

    if server.state.redis_client is not None:
        await server.state.redis_client.aclose()


app = FastAPI(
    version="1.0",
    title="Multistream Configuration API",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)

app.add_middleware(HTTPLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,  # type: ignore
    allow_origins=app_config.API_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore
app.add_exception_handler(AppError, app_error_handler)  # type: ignore
app.add_exception_handler(SessionStoreError, session_store_error_handler)  # type: ignore

load_routes(app, "/api/v1", [platform.router, preset.router, session.router])


@app.get("/health")
async def health():
    return {"status": "ok"}


def build_granian_kwargs():
    kwargs = {
        "interface": "asgi",
        "address": app_config.API_HOST,
        "port": app_config.API_PORT,
        "workers": app_config.API_WORKERS,
        "reload": app_config.DEBUG,
    }

    return kwargs


if __name__ == "__main__":
    granian_kwargs = build_granian_kwargs()
    Granian("multistream.main:app", **granian_kwargs).serve()
