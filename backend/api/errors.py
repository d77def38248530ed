"""Map domain exceptions to HTTP responses.

Body shape: {"error": <code>, "message": <text>}.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.shared.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _reject(request: Request, status_code: int, error: str, exc: Exception) -> JSONResponse:
    logger.info(
        "Request rejected",
        extra={
            "path": request.url.path,
            "status_code": status_code,
            "error": error,
            "reason": str(exc),
        },
    )
    content = {"error": error, "message": str(exc)}
    field = getattr(exc, "field", None)
    if field is not None:
        content["field"] = field
    return JSONResponse(status_code=status_code, content=content)


async def _validation_error(request: Request, exc: Exception) -> JSONResponse:
    return _reject(request, status.HTTP_400_BAD_REQUEST, "validation_error", exc)


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return _reject(request, status.HTTP_404_NOT_FOUND, "not_found", exc)


async def _conflict(request: Request, exc: Exception) -> JSONResponse:
    return _reject(request, status.HTTP_409_CONFLICT, "conflict", exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers for the domain error hierarchy.

    UnsetFieldError has no handler and surfaces as a 500.
    """
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(ConflictError, _conflict)
