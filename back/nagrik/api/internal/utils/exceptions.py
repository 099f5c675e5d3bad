# Third-party imports
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import sentry_sdk
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.schemas.common import BaseResponse

# Map specific HTTP status codes to custom error codes
ERROR_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    422: "unprocessable_entity",
    429: "too_many_requests",
    500: "internal_server_error",
}

MAX_VALIDATION_ERRORS = 5


def format_validation_errors(errors: list[dict]) -> str:
    """Join pydantic error messages into one readable line."""
    messages = []
    for error in errors:
        message = error.get("msg", "")
        # Remove "Value error, " prefix added by pydantic for ValueError
        prefix = "Value error, "
        if message.startswith(prefix):
            message = message[len(prefix) :]
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{field}: {message}" if field else message)

    shown = messages[:MAX_VALIDATION_ERRORS]
    if len(messages) > MAX_VALIDATION_ERRORS:
        shown.append("...and more errors")
    return "; ".join(shown) if shown else "Invalid request data"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,  # noqa
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        error_code = ERROR_CODES.get(exc.status_code, "error")
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        response = BaseResponse.failure(code=error_code, message=detail)
        return JSONResponse(status_code=exc.status_code, content=response.model_dump(), headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,  # noqa
        exc: RequestValidationError,
    ) -> JSONResponse:
        response = BaseResponse.failure(code="bad_request", message=format_validation_errors(exc.errors()))
        return JSONResponse(status_code=400, content=response.model_dump())

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger = get_contextual_logger(__name__, request_id=getattr(request.state, "request_id", None))
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        # Capture the exception in Sentry for monitoring
        sentry_sdk.capture_exception(exc)
        response = BaseResponse.failure(
            code="internal_server_error",
            message="An unexpected error occurred. Please try again later.",
        )
        return JSONResponse(status_code=500, content=response.model_dump())
