"""In-memory history structures for the catalog service.

RecentItemsRing keeps the last K accepted items; UndoStack keeps every
reversible mutation until it is undone. Neither does any I/O or locking of its
own: the owning CatalogService serializes access.
"""

from __future__ import annotations

from collections import deque

from itemcatalog.errors import EmptyStackError
from itemcatalog.models import Item, UndoAction


class RecentItemsRing:
    """Fixed-capacity FIFO buffer; the oldest item is evicted on overflow."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._items: deque[Item] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._items.maxlen or 0

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, item: Item) -> None:
        """Append ``item``, dropping the front entry first when the ring is full."""
        self._items.append(item)

    def snapshot(self) -> list[Item]:
        """Return the held items oldest to newest as a new list."""
        return list(self._items)


class UndoStack:
    """Unbounded LIFO stack of reversible actions."""

    def __init__(self) -> None:
        self._actions: list[UndoAction] = []

    def __len__(self) -> int:
        return len(self._actions)

    def push(self, action: UndoAction) -> None:
        self._actions.append(action)

    def pop_last(self) -> UndoAction:
        """Remove and return the most recently pushed action.

        Raises:
            EmptyStackError: If there is nothing to undo
        """
        if not self._actions:
            raise EmptyStackError()
        return self._actions.pop()
