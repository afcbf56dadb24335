"""Database layer for the item catalog with async SQLAlchemy."""

from itemcatalog.db.connection import (
    close_db,
    get_engine,
    get_session_factory,
    init_db,
)
from itemcatalog.db.models import Base, ItemModel

__all__ = [
    "Base",
    "ItemModel",
    "close_db",
    "get_engine",
    "get_session_factory",
    "init_db",
]
