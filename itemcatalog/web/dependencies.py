"""Shared dependencies for item catalog web routes.

Dependencies are injected using FastAPI's Depends() system.

Usage:
    from fastapi import Depends
    from itemcatalog.web.dependencies import get_service

    @router.get("/items")
    async def list_items(service: CatalogService = Depends(get_service)):
        return await service.list_items()
"""

from __future__ import annotations

from fastapi import Request

from itemcatalog.service import CatalogService


def get_service(request: Request) -> CatalogService:
    """Return the CatalogService built at startup and stored on app.state.

    Raises:
        RuntimeError: If the application has not finished starting up
    """
    service = getattr(request.app.state, "service", None)
    if service is None:
        raise RuntimeError("Catalog service is not initialized")
    return service
