"""Abstract store interface consumed by the catalog service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from itemcatalog.models import Item


class ItemStore(ABC):
    """Persistence collaborator holding the canonical item records.

    Implementations raise ``StoreError`` subclasses; they never touch the
    service's history structures.
    """

    @abstractmethod
    async def create(self, name: str, price: int) -> Item:
        """Assign an id, persist the item and return the stored record.

        Raises:
            DuplicateItemError: If the store enforces unique names and one exists
            StoreError: On any other persistence failure
        """

    @abstractmethod
    async def delete_by_id(self, item_id: int) -> Item:
        """Remove the item and return the removed record.

        Raises:
            ItemNotFoundError: If no item has ``item_id``
        """

    @abstractmethod
    async def find_by_name(self, name: str) -> Item | None:
        """Return the item with exactly this name, if any."""

    @abstractmethod
    async def get(self, item_id: int) -> Item | None:
        """Return the item with this id, if any."""

    @abstractmethod
    async def search(self, query: str) -> list[Item]:
        """Return items whose name contains ``query``, case-insensitively."""

    @abstractmethod
    async def list_all(self) -> list[Item]:
        """Return every item ordered by id."""

    async def ping(self) -> None:
        """Check the store is reachable. Raises StoreError if not."""

    async def close(self) -> None:
        """Release any resources held by the store."""
