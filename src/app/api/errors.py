"""Error responses for the HTTP layer."""
from fastapi import FastAPI, HTTPException, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.app.core.validation import INVALID_DATA_MESSAGE, BODY_FIELD
from src.client.schemas import ErrorResponse
from src.app.logging import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error."


def api_error(
    status_code: int,
    message: str,
    details: dict[str, list[str]] | None = None,
) -> HTTPException:
    """
    Build an HTTPException whose body follows the ErrorResponse shape.

    Args:
        status_code: HTTP status code
        message: Human readable error message
        details: Optional per-field messages

    Returns:
        HTTPException to be raised by the route
    """
    body = ErrorResponse(error=message, details=details or None)
    return HTTPException(status_code=status_code, detail=body.model_dump(exclude_none=True))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = ErrorResponse(error=str(exc.detail)).model_dump(exclude_none=True)
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests (e.g. invalid JSON) as 400 with field details."""
    details: dict[str, list[str]] = {}
    for item in exc.errors():
        location = [
            part for part in item.get("loc", ())
            if isinstance(part, str) and part not in ("body", "path", "query")
        ]
        key = location[0] if location else BODY_FIELD
        details.setdefault(key, []).append(item.get("msg", "Invalid value"))
    logger.error(f"Malformed request to {request.url.path}: {details}")
    body = ErrorResponse(error=INVALID_DATA_MESSAGE, details=details)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump(exclude_none=True))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    body = ErrorResponse(error=INTERNAL_ERROR_MESSAGE)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers so every error body is {"error": ..., "details"?: ...}."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
