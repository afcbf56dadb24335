"""Catalog service: store mutations plus recent-items and undo history.

One CatalogService instance is built at startup and shared by every request
handler. An asyncio.Lock serializes all operations, and the ring, undo stack
and activity log are only updated after the store call has succeeded, so they
never reflect uncommitted or failed store state.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import assert_never

import structlog

from itemcatalog.core.activity import ActivityLog
from itemcatalog.core.history import RecentItemsRing, UndoStack
from itemcatalog.errors import (
    DuplicateItemError,
    InvalidItemError,
    StoreError,
    UndoApplyFailedError,
)
from itemcatalog.models import (
    MAX_INTEGER,
    AddAction,
    DeleteAction,
    Item,
    ItemCreate,
    UndoAction,
    UndoResult,
)
from itemcatalog.store.base import ItemStore

logger = structlog.get_logger(__name__)


class CatalogService:
    """Search, add, delete and undo against an ItemStore."""

    def __init__(
        self,
        store: ItemStore,
        recent_capacity: int = 5,
        activity_log: ActivityLog | None = None,
    ) -> None:
        self.store = store
        self.recent = RecentItemsRing(recent_capacity)
        self.undo_stack = UndoStack()
        self.activity_log = activity_log if activity_log is not None else ActivityLog()
        self._lock = asyncio.Lock()

    async def seed(self, items: Iterable[ItemCreate]) -> int:
        """Populate an empty store. History and activity are left untouched.

        Returns:
            Number of items created (0 if the store already had items)
        """
        async with self._lock:
            if await self.store.list_all():
                return 0
            count = 0
            for new_item in items:
                await self.store.create(new_item.name, new_item.price)
                count += 1
        logger.info("catalog_seeded", count=count)
        return count

    async def list_items(self) -> list[Item]:
        async with self._lock:
            return await self.store.list_all()

    async def search(self, query: str) -> list[Item]:
        """Case-insensitive substring search on item names."""
        query = query.lower()
        async with self._lock:
            results = await self.store.search(query)
            self.activity_log.append(f"Search query: {query}")
        return results

    async def add_item(self, name: str, price: int) -> Item:
        """Create an item, then record it for undo and in the recent ring.

        Raises:
            InvalidItemError: If the name is blank or the price is out of range
            DuplicateItemError: If an item with this name exists
            StoreError: If the store rejects the insert
        """
        if not name.strip():
            raise InvalidItemError("name must not be blank")
        if not 0 <= price <= MAX_INTEGER:
            raise InvalidItemError(f"price must be between 0 and {MAX_INTEGER}")

        async with self._lock:
            if await self.store.find_by_name(name) is not None:
                raise DuplicateItemError(name)
            item = await self.store.create(name, price)

            self.undo_stack.push(AddAction(item=item))
            self.recent.enqueue(item)
            self.activity_log.append(f"Added item: {item.name}")

        logger.info("item_added", item_id=item.id, name=item.name, price=item.price)
        return item

    async def delete_item(self, item_id: int) -> Item:
        """Delete an item by id and record the deletion for undo.

        Raises:
            ItemNotFoundError: If no item has ``item_id``
        """
        async with self._lock:
            item = await self.store.delete_by_id(item_id)

            self.undo_stack.push(DeleteAction(item=item))
            self.activity_log.append(f"Deleted item ID: {item_id}")

        logger.info("item_deleted", item_id=item.id, name=item.name)
        return item

    async def undo(self) -> UndoResult:
        """Reverse the most recent add or delete.

        The popped action is consumed even if its inverse fails.

        Raises:
            EmptyStackError: If there is nothing to undo
            UndoApplyFailedError: If the inverse store operation fails
        """
        async with self._lock:
            action = self.undo_stack.pop_last()
            try:
                item = await self._apply_inverse(action)
            except StoreError as e:
                self.activity_log.append(
                    f"Undo {action.kind} failed for item ID: {action.item.id}"
                )
                logger.warning(
                    "undo_failed",
                    kind=action.kind,
                    item_id=action.item.id,
                    error=str(e),
                )
                raise UndoApplyFailedError(action.kind, e) from e

            self.activity_log.append(self._describe_undo(action, item))

        logger.info("undo_applied", kind=action.kind, item_id=item.id)
        return UndoResult(action=action, item=item)

    async def _apply_inverse(self, action: UndoAction) -> Item:
        match action:
            case AddAction(item=item):
                return await self.store.delete_by_id(item.id)
            case DeleteAction(item=item):
                # Ids come from the store's normal insert path, not from the deleted item.
                return await self.store.create(item.name, item.price)
            case _:
                assert_never(action)

    @staticmethod
    def _describe_undo(action: UndoAction, item: Item) -> str:
        if isinstance(action, AddAction):
            return f"Undo add: removed item ID: {item.id}"
        return f"Undo delete: restored item {item.name} as ID: {item.id}"

    async def recent_items(self) -> list[Item]:
        async with self._lock:
            return self.recent.snapshot()

    async def activity(self) -> list[str]:
        async with self._lock:
            return self.activity_log.entries()

    async def ping(self) -> None:
        """Check the store is reachable. Raises StoreError if not."""
        async with self._lock:
            await self.store.ping()

    async def close(self) -> None:
        await self.store.close()
