"""Health check API routes.

Provides endpoints for monitoring application health and connectivity.
"""

from fastapi import APIRouter, Depends, status

from itemcatalog.errors import StoreError
from itemcatalog.service import CatalogService
from itemcatalog.web.dependencies import get_service
from itemcatalog.web.models import HealthResponse

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check(service: CatalogService = Depends(get_service)):
    """Check application health.

    Verifies the store is reachable.
    """
    try:
        await service.ping()
        return HealthResponse(status="ok", store="connected")
    except StoreError as e:
        return HealthResponse(status="error", store="disconnected", detail=str(e))
