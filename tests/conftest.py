"""Pytest configuration and fixtures for item catalog tests.

Provides common fixtures for testing.
"""

from __future__ import annotations

import pytest

from itemcatalog.config import reset_config
from itemcatalog.models import Item
from itemcatalog.service import CatalogService
from itemcatalog.store.memory import InMemoryItemStore


@pytest.fixture
def laptop() -> Item:
    return Item(id=1, name="Laptop", price=12000000)


@pytest.fixture
def headphones() -> Item:
    return Item(id=3, name="Headphones", price=200000)


@pytest.fixture
def store() -> InMemoryItemStore:
    """Empty in-memory store."""
    return InMemoryItemStore()


@pytest.fixture
def service(store: InMemoryItemStore) -> CatalogService:
    """Service over an empty in-memory store with a ring of 5."""
    return CatalogService(store, recent_capacity=5)


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("STORE_BACKEND", "memory")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("RECENT_ITEMS_CAPACITY", raising=False)
    monkeypatch.setenv("SEED_DEFAULT_ITEMS", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    reset_config()
    yield
    reset_config()
