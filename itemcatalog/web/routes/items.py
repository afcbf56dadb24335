"""Item routes: list, search, add, delete and the recent-items ring.

Routes:
- GET    /items         - List all items
- GET    /items/search  - Case-insensitive name search (?query=)
- GET    /items/recent  - Most recently added items, oldest first
- POST   /items         - Add an item
- DELETE /items         - Delete an item (?id=)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from itemcatalog.models import MAX_INTEGER, Item, ItemCreate
from itemcatalog.service import CatalogService
from itemcatalog.web.dependencies import get_service
from itemcatalog.web.models import ErrorResponse

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=list[Item])
async def list_items(service: CatalogService = Depends(get_service)):
    return await service.list_items()


@router.get("/search", response_model=list[Item])
async def search_items(
    query: str = Query(default=""),
    service: CatalogService = Depends(get_service),
):
    """Search items whose name contains ``query``, ignoring case.

    An empty query matches every item.
    """
    return await service.search(query)


@router.get("/recent", response_model=list[Item])
async def recent_items(service: CatalogService = Depends(get_service)):
    """Items from the recent-items ring, oldest to newest."""
    return await service.recent_items()


@router.post(
    "",
    response_model=Item,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def add_item(
    new_item: ItemCreate,
    service: CatalogService = Depends(get_service),
):
    """Add an item. The store assigns the id."""
    return await service.add_item(new_item.name, new_item.price)


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_item(
    item_id: int = Query(..., alias="id", le=MAX_INTEGER),
    service: CatalogService = Depends(get_service),
):
    await service.delete_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
