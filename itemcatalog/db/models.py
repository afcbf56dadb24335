"""SQLAlchemy async database models for the item catalog."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class ItemModel(Base):
    """Catalog item row; the id comes from the table's autoincrement sequence."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True, index=True)
    price: Mapped[int] = mapped_column(BigInteger, nullable=False)

    # Audit
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_item_price_non_negative"),
        CheckConstraint("length(name) > 0", name="check_item_name_not_empty"),
    )

    def __repr__(self) -> str:
        return f"<ItemModel(id={self.id}, name={self.name!r}, price={self.price})>"
