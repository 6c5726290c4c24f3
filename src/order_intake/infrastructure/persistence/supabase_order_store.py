"""Supabase (PostgREST) implementation of OrderStore.

Rows live in the ``orders`` table with snake_case columns; ``id`` and
``created_at`` are filled in by the database.
"""

from __future__ import annotations

from datetime import datetime

import httpx

from order_intake.domain.exceptions import StorageError, ValidationError
from order_intake.domain.model.order import StoredOrder, ValidatedOrder
from order_intake.domain.model.value_objects import Quantity
from order_intake.domain.repository.order_store import OrderStore

TABLE = "orders"


class SupabaseOrderStore(OrderStore):

    def __init__(
        self,
        url: str,
        service_key: str,
        client: httpx.Client | None = None,
    ) -> None:
        self._endpoint = f"{url.rstrip('/')}/rest/v1/{TABLE}"
        self._headers = {
            "apikey": service_key,
            "Authorization": f"Bearer {service_key}",
            "Content-Type": "application/json",
        }
        self._client = client or httpx.Client()

    # --- OrderStore interface -------------------------------------------------

    def insert(self, order: ValidatedOrder) -> StoredOrder:
        payload = {
            "customer_name": order.customer_name,
            "phone_number": order.phone_number,
            "address": order.address,
            "items": order.items,
            "quantity": order.quantity.value,
        }
        rows = self._request(
            "POST",
            json=payload,
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise StorageError("Insert returned no row")
        return self._to_domain(rows[0])

    def get_by_id(self, order_id: int) -> StoredOrder | None:
        rows = self._request(
            "GET",
            params={"id": f"eq.{order_id}", "select": "*"},
        )
        if not rows:
            return None
        return self._to_domain(rows[0])

    # --- HTTP helpers ---------------------------------------------------------

    def _request(self, method: str, **kwargs) -> list[dict]:
        headers = {**self._headers, **kwargs.pop("headers", {})}
        try:
            response = self._client.request(
                method, self._endpoint, headers=headers, **kwargs
            )
            response.raise_for_status()
            rows = response.json()
        except httpx.HTTPStatusError as exc:
            raise StorageError(
                f"Supabase returned HTTP {exc.response.status_code}: {exc.response.text}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise StorageError(f"Supabase request failed: {exc}") from exc
        if not isinstance(rows, list):
            raise StorageError(f"Expected a list of rows from Supabase, got {type(rows).__name__}")
        return rows

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: dict) -> StoredOrder:
        try:
            return StoredOrder(
                id=int(row["id"]),
                customer_name=row["customer_name"],
                phone_number=row["phone_number"],
                address=row["address"],
                items=row["items"],
                quantity=Quantity(int(row["quantity"])),
                created_at=datetime.fromisoformat(row["created_at"]),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise StorageError(f"Unexpected order row from Supabase: {row!r}") from exc
