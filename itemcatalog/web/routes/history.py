"""Undo and activity log routes.

Routes:
- POST /undo          - Reverse the most recent add or delete
- GET  /activity-log  - Activity entries, oldest first
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from itemcatalog.service import CatalogService
from itemcatalog.web.dependencies import get_service
from itemcatalog.web.models import ErrorResponse, UndoResponse

router = APIRouter(tags=["history"])


@router.post(
    "/undo",
    response_model=UndoResponse,
    responses={409: {"model": ErrorResponse}},
)
async def undo(service: CatalogService = Depends(get_service)):
    """Undo the most recent mutation.

    Undoing a delete re-creates the item, and the store may give it a new id;
    the returned ``item`` carries the id it now has.
    """
    result = await service.undo()
    return UndoResponse.from_result(result)


@router.get("/activity-log", response_model=list[str])
async def activity_log(service: CatalogService = Depends(get_service)):
    return await service.activity()
