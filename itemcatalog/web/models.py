"""Pydantic request/response models for the item catalog API.

Item and ItemCreate from itemcatalog.models are used directly as the item
payloads; this module holds the shapes that only exist at the HTTP boundary.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from itemcatalog.models import Item, UndoResult


class UndoResponse(BaseModel):
    """Response for POST /undo."""

    action: Literal["add", "delete"]
    item: Item

    @classmethod
    def from_result(cls, result: UndoResult) -> UndoResponse:
        return cls(action=result.action.kind, item=result.item)


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: Literal["ok", "error"]
    store: str
    detail: str | None = None


class ErrorResponse(BaseModel):
    """Body of every error response."""

    detail: str


__all__ = ["UndoResponse", "HealthResponse", "ErrorResponse"]
