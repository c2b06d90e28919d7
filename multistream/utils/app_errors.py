import inspect
from enum import Enum, IntEnum
from typing import Any
from uuid import uuid4


class AppErrorCode(str, Enum):
    E_INVALID_PARAMS = "E_INVALID_PARAMS"
    E_INVALID_REQUEST = "E_INVALID_REQUEST"
    E_PLATFORM_NOT_FOUND = "E_PLATFORM_NOT_FOUND"
    E_SESSION_NOT_FOUND = "E_SESSION_NOT_FOUND"
    E_SESSION_STORE_FAILURE = "E_SESSION_STORE_FAILURE"
    E_INTERNAL_ERROR = "E_INTERNAL_ERROR"


class HttpStatusCode(IntEnum):
    OK = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422
    INTERNAL_SERVER_ERROR = 500
    BAD_GATEWAY = 502


class AppError(Exception):
    """Application error surfaced to API callers as an ApiFailure envelope.

    The caller location is captured at construction time so the error handler
    can log where the error was raised rather than where it was caught.
    """

    def __init__(
        self,
        errcode: AppErrorCode | str = AppErrorCode.E_INTERNAL_ERROR,
        errmesg: str = "We are sorry, an error occurred.",
        status_code: int = HttpStatusCode.INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(errmesg)
        self.errcode = errcode.value if isinstance(errcode, AppErrorCode) else errcode
        self.errmesg = errmesg
        self.status_code = int(status_code)
        self.details = details
        self.erresid = uuid4().hex[:10]
        self.caller_info = _caller_info()

    def __str__(self) -> str:
        return f"{self.errcode}: {self.errmesg}"


def _caller_info() -> str:
    # Skip this helper and AppError.__init__ (and subclass __init__ frames).
    for frame_info in inspect.stack()[2:]:
        if frame_info.function != "__init__":
            module = inspect.getmodule(frame_info.frame)
            module_name = (
                module.__name__
                if module and getattr(module, "__name__", None)
                else frame_info.filename
            )
            return f"{module_name}:{frame_info.function}:{frame_info.lineno}"
    return "unknown"
