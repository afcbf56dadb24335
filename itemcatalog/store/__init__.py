"""Item stores: in-memory list or relational table behind one interface."""

from __future__ import annotations

from itemcatalog.config import AppConfig
from itemcatalog.store.base import ItemStore
from itemcatalog.store.memory import InMemoryItemStore
from itemcatalog.store.sql import SqlItemStore


def build_store(config: AppConfig) -> ItemStore:
    """Create the store selected by ``config.store_backend``."""
    if config.store_backend == "sql":
        from itemcatalog.db.connection import get_session_factory

        return SqlItemStore(get_session_factory())
    return InMemoryItemStore()


__all__ = ["ItemStore", "InMemoryItemStore", "SqlItemStore", "build_store"]
