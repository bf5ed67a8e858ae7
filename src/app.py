"""buyNothing checkout FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000
"""

from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalogue.api import product_router
from notifications.api.routes import contact_router
from notifications.dispatch import drain_background_tasks
from ordering.api.routes import checkout_router
from shared.config import get_settings
from shared.db import configure_database, dispose_database, setup_db
from shared.exception_handlers import register_exception_handlers
from shared.logging import add_context, clear_context, configure_logging
from sharing.api.routes import share_router

API_PREFIX = "/api/v1"

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    settings = get_settings()
    configure_database(settings.database_url)
    await setup_db()
    logger.info("Application started", environment=settings.environment)
    yield
    await drain_background_tasks(timeout=10.0)
    await dispose_database()
    logger.info("Application stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="buyNothing Checkout API",
        description="Checkout, payment verification, order confirmation and sharing",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Bind a request id to every log line emitted while handling the request."""
        clear_context()
        add_context(request_id=request.headers.get("X-Request-ID") or uuid4().hex, path=request.url.path)
        try:
            return await call_next(request)
        finally:
            clear_context()

    register_exception_handlers(app)

    app.include_router(product_router, prefix=API_PREFIX)
    app.include_router(checkout_router, prefix=API_PREFIX)
    app.include_router(share_router, prefix=API_PREFIX)
    app.include_router(contact_router, prefix=API_PREFIX)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "environment": settings.environment})

    return app


app = create_app()
