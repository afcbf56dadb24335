"""Tests for itemcatalog.web.routes.items - item routes."""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from itemcatalog.models import DEFAULT_ITEMS
from itemcatalog.service import CatalogService
from itemcatalog.store.memory import InMemoryItemStore
from itemcatalog.web.app import create_app


@pytest.fixture
def catalog() -> CatalogService:
    """Service seeded with the default catalog."""
    service = CatalogService(InMemoryItemStore(), recent_capacity=5)
    asyncio.run(service.seed(DEFAULT_ITEMS))
    return service


@pytest.fixture
def client(catalog):
    """Create test client."""
    return TestClient(create_app(catalog))


class TestListAndSearch:
    """Tests for GET /items and GET /items/search."""

    def test_list_items(self, client):
        response = client.get("/items")

        assert response.status_code == 200
        assert [item["name"] for item in response.json()] == [
            "Laptop",
            "Smartphone",
            "Headphones",
            "PS 4",
        ]

    def test_search_case_insensitive(self, client):
        response = client.get("/items/search", params={"query": "PhOnE"})

        assert response.status_code == 200
        assert response.json() == [
            {"id": 2, "name": "Smartphone", "price": 8000000},
            {"id": 3, "name": "Headphones", "price": 200000},
        ]

    def test_search_without_query_returns_all(self, client):
        response = client.get("/items/search")

        assert response.status_code == 200
        assert len(response.json()) == 4

    def test_search_no_match(self, client):
        response = client.get("/items/search", params={"query": "tablet"})

        assert response.status_code == 200
        assert response.json() == []


class TestAddItem:
    """Tests for POST /items."""

    def test_add_item(self, client):
        response = client.post("/items", json={"name": "Tablet", "price": 5000000})

        assert response.status_code == 201
        assert response.json() == {"id": 5, "name": "Tablet", "price": 5000000}

    def test_add_item_appears_in_recent(self, client):
        client.post("/items", json={"name": "Tablet", "price": 5000000})

        response = client.get("/items/recent")

        assert response.status_code == 200
        assert response.json() == [{"id": 5, "name": "Tablet", "price": 5000000}]

    def test_recent_keeps_last_five(self, client):
        for i in range(7):
            client.post("/items", json={"name": f"Gadget {i}", "price": i})

        names = [item["name"] for item in client.get("/items/recent").json()]

        assert names == [f"Gadget {i}" for i in range(2, 7)]

    def test_add_duplicate_name(self, client):
        response = client.post("/items", json={"name": "Laptop", "price": 1})

        assert response.status_code == 409
        assert "Laptop" in response.json()["detail"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Tablet"},
            {"name": "", "price": 10},
            {"name": "Tablet", "price": -5},
            {"name": "Tablet", "price": "cheap"},
            {"name": "Yacht", "price": 2**63},
        ],
    )
    def test_add_invalid_input(self, client, payload):
        response = client.post("/items", json=payload)

        assert response.status_code == 422


class TestDeleteItem:
    """Tests for DELETE /items."""

    def test_delete_item(self, client):
        response = client.delete("/items", params={"id": 1})

        assert response.status_code == 204
        ids = [item["id"] for item in client.get("/items").json()]
        assert 1 not in ids

    def test_delete_missing_item(self, client):
        response = client.delete("/items", params={"id": 99})

        assert response.status_code == 404
        assert response.json() == {"detail": "Item 99 not found"}

    def test_delete_invalid_id(self, client):
        response = client.delete("/items", params={"id": "abc"})

        assert response.status_code == 422

    def test_delete_id_wider_than_64_bits(self, client):
        response = client.delete("/items", params={"id": 2**63})

        assert response.status_code == 422
        assert len(client.get("/items").json()) == 4

    def test_method_not_allowed(self, client):
        response = client.put("/items", json={"name": "Laptop", "price": 1})

        assert response.status_code == 405
