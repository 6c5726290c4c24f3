"""Tests for the Supabase order store against a mocked PostgREST API."""

import json

import httpx
import pytest

from order_intake.domain.exceptions import StorageError
from order_intake.domain.model.order import ValidatedOrder
from order_intake.domain.model.value_objects import Quantity
from order_intake.infrastructure.persistence.supabase_order_store import (
    SupabaseOrderStore,
)

ROW = {
    "id": 1,
    "customer_name": "Jo",
    "phone_number": "123456",
    "address": "12 Main St City",
    "items": "2 burgers",
    "quantity": 2,
    "created_at": "2024-03-01T14:05:00+00:00",
}


def _order() -> ValidatedOrder:
    return ValidatedOrder(
        customer_name="Jo",
        phone_number="123456",
        address="12 Main St City",
        items="2 burgers",
        quantity=Quantity(2),
    )


def _store(handler) -> SupabaseOrderStore:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return SupabaseOrderStore("https://project.supabase.co/", "service-key", client=client)


class TestInsert:

    def test_posts_row_and_returns_stored_order(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json=[ROW])

        stored = _store(handler).insert(_order())

        assert stored.id == 1
        assert stored.quantity == Quantity(2)
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://project.supabase.co/rest/v1/orders"
        assert request.headers["apikey"] == "service-key"
        assert request.headers["Authorization"] == "Bearer service-key"
        assert request.headers["Prefer"] == "return=representation"
        assert json.loads(request.content) == {
            "customer_name": "Jo",
            "phone_number": "123456",
            "address": "12 Main St City",
            "items": "2 burgers",
            "quantity": 2,
        }

    def test_http_error_becomes_storage_error(self):
        store = _store(lambda request: httpx.Response(409, json={"message": "duplicate"}))
        with pytest.raises(StorageError, match="HTTP 409"):
            store.insert(_order())

    def test_connection_error_becomes_storage_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(StorageError, match="request failed"):
            _store(handler).insert(_order())

    def test_empty_representation_rejected(self):
        store = _store(lambda request: httpx.Response(201, json=[]))
        with pytest.raises(StorageError, match="no row"):
            store.insert(_order())

    def test_single_object_body_rejected(self):
        store = _store(lambda request: httpx.Response(201, json=ROW))
        with pytest.raises(StorageError, match="Expected a list of rows"):
            store.insert(_order())

    def test_malformed_row_rejected(self):
        store = _store(lambda request: httpx.Response(201, json=[{"id": 1}]))
        with pytest.raises(StorageError, match="Unexpected order row"):
            store.insert(_order())


class TestGetById:

    def test_filters_by_id(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[ROW])

        stored = _store(handler).get_by_id(1)
        assert stored.customer_name == "Jo"
        assert seen[0].url.params["id"] == "eq.1"

    def test_missing_returns_none(self):
        store = _store(lambda request: httpx.Response(200, json=[]))
        assert store.get_by_id(5) is None
