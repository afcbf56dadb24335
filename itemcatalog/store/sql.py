"""Relational item store backed by the ``items`` table."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from itemcatalog.db.models import ItemModel
from itemcatalog.errors import DuplicateItemError, ItemNotFoundError, StoreError
from itemcatalog.models import MAX_INTEGER, Item
from itemcatalog.store.base import ItemStore

logger = structlog.get_logger(__name__)


def _fits_column(value: int) -> bool:
    return -MAX_INTEGER - 1 <= value <= MAX_INTEGER


class SqlItemStore(ItemStore):
    """Store whose ids are assigned by the table's autoincrement primary key.

    Each call runs in its own session and commits before returning, so a
    returned record is always committed state.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except IntegrityError:
            await session.rollback()
            raise
        except (SQLAlchemyError, OverflowError) as e:
            await session.rollback()
            logger.error("store_operation_failed", error=str(e))
            raise StoreError(f"Database operation failed: {e}") from e
        finally:
            await session.close()

    async def create(self, name: str, price: int) -> Item:
        try:
            async with self._session() as session:
                row = ItemModel(name=name, price=price)
                session.add(row)
                await session.flush()
                item = Item.model_validate(row)
        except IntegrityError as e:
            if await self.find_by_name(name) is not None:
                raise DuplicateItemError(name) from e
            logger.error("store_constraint_violated", name=name, error=str(e.orig))
            raise StoreError(f"Item rejected by the database: {e.orig}") from e
        return item

    async def delete_by_id(self, item_id: int) -> Item:
        if not _fits_column(item_id):
            raise ItemNotFoundError(item_id)
        async with self._session() as session:
            row = await session.get(ItemModel, item_id)
            if row is None:
                raise ItemNotFoundError(item_id)
            item = Item.model_validate(row)
            await session.delete(row)
        return item

    async def find_by_name(self, name: str) -> Item | None:
        async with self._session() as session:
            result = await session.execute(
                select(ItemModel).where(ItemModel.name == name)
            )
            row = result.scalar_one_or_none()
            return Item.model_validate(row) if row is not None else None

    async def get(self, item_id: int) -> Item | None:
        if not _fits_column(item_id):
            return None
        async with self._session() as session:
            row = await session.get(ItemModel, item_id)
            return Item.model_validate(row) if row is not None else None

    async def search(self, query: str) -> list[Item]:
        async with self._session() as session:
            stmt = (
                select(ItemModel)
                .where(func.lower(ItemModel.name).contains(query.lower(), autoescape=True))
                .order_by(ItemModel.id)
            )
            result = await session.execute(stmt)
            return [Item.model_validate(row) for row in result.scalars().all()]

    async def list_all(self) -> list[Item]:
        async with self._session() as session:
            result = await session.execute(select(ItemModel).order_by(ItemModel.id))
            return [Item.model_validate(row) for row in result.scalars().all()]

    async def ping(self) -> None:
        async with self._session() as session:
            await session.execute(text("SELECT 1"))
