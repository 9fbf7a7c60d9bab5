import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import AppError

logger = logging.getLogger(__name__)


def error_response(
    request: Request,
    message: str,
    status_code: int,
    details: Optional[Any] = None,
    stack: Optional[str] = None
) -> JSONResponse:
    """Единый формат ответа с ошибкой для публичного и админского API"""
    error: Dict[str, Any] = {
        "message": message,
        "status": status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.url.path,
    }
    if details is not None:
        error["details"] = details
    if stack is not None:
        error["stack"] = stack

    return JSONResponse(status_code=status_code, content=jsonable_encoder({"error": error}))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return error_response(request, exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        return error_response(request, "Validation failed", 400, details=details)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        if exc.status_code == 404 and message == "Not Found":
            message = f"Route {request.method} {request.url.path} not found"
        return error_response(request, message, exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")

        settings = request.app.state.settings
        if settings.is_development:
            return error_response(
                request,
                str(exc) or exc.__class__.__name__,
                500,
                stack="".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            )
        return error_response(request, "Internal server error", 500)
