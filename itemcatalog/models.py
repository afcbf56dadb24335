"""Item catalog Pydantic models for type-safe data validation.

Items are immutable value records: the recent-items ring and the undo stack keep
them as copies, so later changes in the store never reach retained history.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Largest value a 64-bit SQL integer column holds.
MAX_INTEGER = 2**63 - 1


class Item(BaseModel):
    """Catalog record owned by a store."""

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        json_schema_extra={
            "example": {"id": 1, "name": "Laptop", "price": 12000000},
        },
    )

    id: int
    name: str = Field(min_length=1)
    price: int = Field(ge=0, le=MAX_INTEGER)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class ItemCreate(BaseModel):
    """Fields supplied by a caller; the store assigns the id."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Headphones", "price": 200000}},
    )

    name: str = Field(min_length=1)
    price: int = Field(ge=0, le=MAX_INTEGER)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class AddAction(BaseModel):
    """An item was added; undoing it deletes the item by id."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["add"] = "add"
    item: Item


class DeleteAction(BaseModel):
    """An item was deleted; undoing it re-inserts the item's fields."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["delete"] = "delete"
    item: Item


UndoAction = Annotated[Union[AddAction, DeleteAction], Field(discriminator="kind")]


class UndoResult(BaseModel):
    """Outcome of a successfully applied undo.

    ``item`` is the record the inverse operation touched: the deleted record
    when an add was undone, or the re-created record (possibly with a new id)
    when a delete was undone.
    """

    model_config = ConfigDict(frozen=True)

    action: UndoAction
    item: Item


# Catalog shipped with a fresh in-memory store.
DEFAULT_ITEMS: tuple[ItemCreate, ...] = (
    ItemCreate(name="Laptop", price=12000000),
    ItemCreate(name="Smartphone", price=8000000),
    ItemCreate(name="Headphones", price=200000),
    ItemCreate(name="PS 4", price=2500000),
)
