"""Exception handlers rendering error bodies as {"error": ...} or {"message": ...}."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.logger import setup_logger

logger = setup_logger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTPException details.

    Dict details are sent as they are; anything else is wrapped in
    ``{"error": detail}``.
    """
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed path parameters and bodies with a 400."""
    logger.warning(f"Invalid request to {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI):
    """Install the error handlers on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
