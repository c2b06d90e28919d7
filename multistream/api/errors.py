from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from multistream.domain.live.session.session_store import SessionStoreError
from multistream.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .utils import E_INVALID_PARAMS, ApiFailure, api_failure, make_response


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """
    Custom exception handler for AppError.
    Converts AppError to ApiFailure and returns via make_response.
    """
    # Log with the caller info captured when AppError was raised
    log_msg = f"{exc.errcode} {exc.erresid} msg={exc.errmesg} caller={exc.caller_info}"
    if exc.status_code >= 500:
        logger.error(log_msg)
    else:
        logger.warning(log_msg)

    failure = ApiFailure(
        errcode=exc.errcode,
        errmesg=exc.errmesg,
        erresid=exc.erresid,
        errdata=exc.details,
    )
    return make_response(failure, status_code=exc.status_code)


async def session_store_error_handler(request: Request, exc: SessionStoreError) -> JSONResponse:
    """
    Custom exception handler for SessionStoreError (downstream failures).
    Reported as a bad gateway so clients can tell it apart from their own mistakes.
    """
    logger.error(f"SessionStoreError: operation={exc.operation} msg={exc.message}")

    failure = ApiFailure(
        errcode=AppErrorCode.E_SESSION_STORE_FAILURE.value,
        errmesg=f"Session store request failed: {exc.message}",
        errdata={"operation": exc.operation},
    )
    return make_response(failure, status_code=HttpStatusCode.BAD_GATEWAY)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()

    logger.warning(
        "Validation error: path={} method={} errors={}",
        request.url.path,
        request.method,
        errors,
    )

    failure = api_failure(E_INVALID_PARAMS, errmesg=str(errors))

    return make_response(failure, status_code=HttpStatusCode.UNPROCESSABLE_ENTITY)
