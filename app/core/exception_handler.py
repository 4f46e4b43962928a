import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import AppException

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Translate an AppException into its JSON error response."""
    request_id = getattr(request.state, "request_id", None)
    if exc.status_code >= 500:
        logger.error(
            f"Request failed: {exc.detail}",
            extra={"request_id": request_id, "path": request.url.path},
        )
    else:
        logger.info(
            f"{exc.error}: {exc.detail}",
            extra={"request_id": request_id, "path": request.url.path},
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error,
            "message": exc.detail,
            "resource_type": exc.resource_type,
        },
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are a 400, rejected before any service call."""
    logger.info(
        "Request validation failed",
        extra={"path": request.url.path, "errors": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Bad Request",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
