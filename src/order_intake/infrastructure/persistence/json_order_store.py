"""JSON-file-backed implementation of OrderStore."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path

from order_intake.domain.exceptions import StorageError
from order_intake.domain.model.order import StoredOrder, ValidatedOrder
from order_intake.domain.model.value_objects import Quantity
from order_intake.domain.repository.order_store import OrderStore


class JsonOrderStore(OrderStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        # Guards read-modify-write so concurrent inserts get distinct ids.
        self._lock = threading.Lock()
        self._ensure_file()

    # --- OrderStore interface -------------------------------------------------

    def insert(self, order: ValidatedOrder) -> StoredOrder:
        with self._lock:
            orders = self._load_raw()
            next_id = max((o["id"] for o in orders), default=0) + 1
            stored = StoredOrder.from_validated(
                order, order_id=next_id, created_at=datetime.now(timezone.utc)
            )
            orders.append(self._to_raw(stored))
            self._persist_raw(orders)
        return stored

    def get_by_id(self, order_id: int) -> StoredOrder | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: StoredOrder) -> dict:
        return {
            "id": order.id,
            "customer_name": order.customer_name,
            "phone_number": order.phone_number,
            "address": order.address,
            "items": order.items,
            "quantity": order.quantity.value,
            "created_at": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> StoredOrder:
        return StoredOrder(
            id=raw["id"],
            customer_name=raw["customer_name"],
            phone_number=raw["phone_number"],
            address=raw["address"],
            items=raw["items"],
            quantity=Quantity(raw["quantity"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            orders = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(orders, list) or not all(
            isinstance(o, dict) and isinstance(o.get("id"), int) for o in orders
        ):
            raise StorageError(f"{self._file_path} is not a list of orders")
        return orders

    def _persist_raw(self, orders: list[dict]) -> None:
        # Atomic: write a sibling temp file, then rename it over the target.
        content = json.dumps(orders, indent=2, ensure_ascii=False) + "\n"
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(content)
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
