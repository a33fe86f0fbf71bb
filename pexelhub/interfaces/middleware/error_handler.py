from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from pexelhub.application.errors import AppError, InfrastructureError, ValidationError

logger = logging.getLogger(__name__)

GENERIC_SERVER_MESSAGE = "Unexpected server error"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:  # noqa: WPS430
        if exc.status_code >= 500:
            logger.error(
                "Server error handled: %s - %s",
                exc.code,
                exc.message,
                exc_info=exc,
                extra={"path": request.url.path, "method": request.method},
            )
            payload = {"code": exc.code, "message": GENERIC_SERVER_MESSAGE}
            return JSONResponse(status_code=exc.status_code, content=payload)
        logger.info(
            "Application error handled: %s - %s (status: %d)",
            exc.code,
            exc.message,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        payload = {"code": exc.code, "message": exc.message}
        if exc.details is not None:
            payload["details"] = dict(exc.details)
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(  # noqa: WPS430
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
        payload = {
            "code": ValidationError.code,
            "message": "Invalid request parameters",
            "details": {"fields": fields},
        }
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=payload)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # noqa: WPS430
        payload = {"code": "http_error", "message": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:  # noqa: WPS430
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        error = InfrastructureError(GENERIC_SERVER_MESSAGE)
        payload = {"code": error.code, "message": error.message}
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)
