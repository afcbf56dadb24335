"""Exceptions raised by the catalog core and stores."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog errors reported to callers."""

    pass


class EmptyStackError(CatalogError):
    """Raised when undo is requested with nothing to undo."""

    def __init__(self, message: str = "Nothing to undo") -> None:
        super().__init__(message)


class InvalidItemError(CatalogError):
    """Raised when item fields are outside what every store can hold."""

    pass


class StoreError(CatalogError):
    """Raised when a store operation fails."""

    pass


class ItemNotFoundError(StoreError):
    """Raised when no item has the requested id."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found")


class DuplicateItemError(StoreError):
    """Raised when an item with the same name already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Item named {name!r} already exists")


class UndoApplyFailedError(CatalogError):
    """Raised when the inverse of a popped action cannot be applied.

    The popped action is dropped, not returned to the undo stack.
    """

    def __init__(self, action_kind: str, cause: StoreError) -> None:
        self.action_kind = action_kind
        self.cause = cause
        super().__init__(f"Could not undo {action_kind}: {cause}")
