"""FastAPI exception handlers that turn failures into the response envelope.

Full detail is always logged server-side. The client sees the error's
``client_message``; internal detail is attached only in development mode.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError

from shared import responses
from shared.config import get_settings
from shared.errors import ShopError

logger = structlog.get_logger(__name__)


async def shop_error_handler(request: Request, exc: ShopError):
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "Request failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        detail=exc.detail,
        exc_info=exc.__cause__ or exc,
    )
    detail = exc.detail if get_settings().is_development else None
    return responses.error(exc.client_message, status_code=exc.status_code, detail=detail)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(
        [{key: value for key, value in err.items() if key not in ("input", "ctx")} for err in exc.errors()]
    )
    logger.warning("Request validation failed", path=request.url.path, errors=errors)
    return responses.error("Request validation failed", status_code=400, detail=errors)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error", path=request.url.path, exc_info=exc)
    detail = repr(exc) if get_settings().is_development else None
    return responses.error("Internal server error", status_code=500, detail=detail)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShopError, shop_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
