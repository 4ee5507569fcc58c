"""Exception handlers rendering errors as ``{"error": "<message>"}``."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import NotificationError

logger = get_module_logger()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def notification_error_handler(request: Request, exc: NotificationError):
    logger.warning(
        "request_failed",
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=exc.status_code,
    )
    return error_response(exc.status_code, str(exc))


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    message = "invalid request body"
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = f"{location}: {first.get('msg')}" if location else first.get("msg")
        message = f"{message}: {detail}"
    logger.info("request_body_invalid", error=message)
    return error_response(400, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotificationError, notification_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
