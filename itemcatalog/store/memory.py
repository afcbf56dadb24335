"""In-memory item store (list plus name index)."""

from __future__ import annotations

from itemcatalog.errors import DuplicateItemError, ItemNotFoundError
from itemcatalog.models import Item
from itemcatalog.store.base import ItemStore


class InMemoryItemStore(ItemStore):
    """Keeps items in insertion order; ids come from a counter that never goes back."""

    def __init__(self) -> None:
        self._items: list[Item] = []
        self._name_index: dict[str, int] = {}
        self._last_id = 0

    async def create(self, name: str, price: int) -> Item:
        if name in self._name_index:
            raise DuplicateItemError(name)
        self._last_id += 1
        item = Item(id=self._last_id, name=name, price=price)
        self._items.append(item)
        self._name_index[item.name] = item.id
        return item

    async def delete_by_id(self, item_id: int) -> Item:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[i]
                self._name_index.pop(item.name, None)
                return item
        raise ItemNotFoundError(item_id)

    async def find_by_name(self, name: str) -> Item | None:
        item_id = self._name_index.get(name)
        if item_id is None:
            return None
        return await self.get(item_id)

    async def get(self, item_id: int) -> Item | None:
        return next((item for item in self._items if item.id == item_id), None)

    async def search(self, query: str) -> list[Item]:
        needle = query.lower()
        return [item for item in self._items if needle in item.name.lower()]

    async def list_all(self) -> list[Item]:
        return sorted(self._items, key=lambda item: item.id)
