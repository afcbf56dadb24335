"""FastAPI application for the item catalog."""

from __future__ import annotations

from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.middleware.base import BaseHTTPMiddleware

from itemcatalog.config import AppConfig, get_config
from itemcatalog.core.logging import configure_logging
from itemcatalog.errors import (
    CatalogError,
    DuplicateItemError,
    EmptyStackError,
    InvalidItemError,
    ItemNotFoundError,
    StoreError,
    UndoApplyFailedError,
)
from itemcatalog.models import DEFAULT_ITEMS
from itemcatalog.service import CatalogService
from itemcatalog.store import build_store
from itemcatalog.web.routes import health, history, items

logger = structlog.get_logger()


# Request Logging Middleware
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        structlog.contextvars.clear_contextvars()

        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        structlog.contextvars.bind_contextvars(request_id=request_id)

        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)

            logger.info(
                "request_completed",
                status_code=response.status_code,
            )
            return response

        except Exception as exc:
            logger.error("request_failed", error=str(exc))
            raise


def status_for_error(exc: CatalogError) -> int:
    """HTTP status code reported for a catalog error."""
    if isinstance(exc, InvalidItemError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, ItemNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (DuplicateItemError, EmptyStackError, UndoApplyFailedError)):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, StoreError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


async def build_service(config: AppConfig) -> CatalogService:
    """Create the store and service described by ``config`` and seed it."""
    if config.store_backend == "sql":
        from itemcatalog.db.connection import init_db

        await init_db()

    service = CatalogService(
        build_store(config), recent_capacity=config.history.recent_capacity
    )
    if config.seed_default_items:
        await service.seed(DEFAULT_ITEMS)
    return service


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    configure_logging(config)

    owns_service = getattr(app.state, "service", None) is None
    if owns_service:
        app.state.service = await build_service(config)
        logger.info(
            "catalog_started",
            store_backend=config.store_backend,
            recent_capacity=config.history.recent_capacity,
        )
    try:
        yield
    finally:
        if owns_service:
            await app.state.service.close()
            if config.store_backend == "sql":
                from itemcatalog.db.connection import close_db

                await close_db()
            app.state.service = None


def create_app(service: CatalogService | None = None) -> FastAPI:
    """Build the FastAPI app.

    Args:
        service: Pre-built service to serve. When omitted, one is built from
            the environment configuration at startup.
    """
    app = FastAPI(
        title="Item Catalog",
        description="Search, add and delete catalog items with undo history",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.service = service

    app.add_middleware(RequestLoggingMiddleware)

    # Prometheus Metrics
    Instrumentator(registry=CollectorRegistry()).instrument(app).expose(app)

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        status_code = status_for_error(exc)
        if status_code >= 500:
            logger.error("catalog_error", error=str(exc), path=request.url.path)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    app.include_router(items.router)
    app.include_router(history.router)
    app.include_router(health.router)

    return app


app = create_app()
