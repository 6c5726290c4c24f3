"""Tests for the JSON-file order store."""

import json
import threading

import pytest

from order_intake.domain.exceptions import StorageError
from order_intake.domain.model.order import ValidatedOrder
from order_intake.domain.model.value_objects import Quantity
from order_intake.infrastructure.persistence.json_order_store import JsonOrderStore


def _order(name: str = "Jo") -> ValidatedOrder:
    return ValidatedOrder(
        customer_name=name,
        phone_number="123456",
        address="12 Main St City",
        items="2 burgers",
        quantity=Quantity(2),
    )


class TestJsonOrderStore:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "orders.json"
        JsonOrderStore(path)
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_insert_assigns_id_and_timestamp(self, tmp_path):
        store = JsonOrderStore(tmp_path / "orders.json")
        stored = store.insert(_order())
        assert stored.id == 1
        assert stored.created_at.tzinfo is not None
        assert stored.customer_name == "Jo"

    def test_round_trip_through_file(self, tmp_path):
        path = tmp_path / "orders.json"
        stored = JsonOrderStore(path).insert(_order())
        loaded = JsonOrderStore(path).get_by_id(stored.id)
        assert loaded == stored

    def test_get_unknown_returns_none(self, tmp_path):
        assert JsonOrderStore(tmp_path / "orders.json").get_by_id(42) is None

    def test_concurrent_inserts_get_unique_ids(self, tmp_path):
        store = JsonOrderStore(tmp_path / "orders.json")
        ids: list[int] = []

        def worker(i: int) -> None:
            ids.append(store.insert(_order(f"Customer {i}")).id)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(ids) == list(range(1, 11))

    def test_corrupt_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "orders.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonOrderStore(path)
        with pytest.raises(StorageError, match="Cannot read"):
            store.insert(_order())

    @pytest.mark.parametrize("content", ["{}", '["x"]', '[{"name": "no id"}]'])
    def test_unexpected_shape_raises_storage_error(self, tmp_path, content):
        path = tmp_path / "orders.json"
        path.write_text(content, encoding="utf-8")
        store = JsonOrderStore(path)
        with pytest.raises(StorageError, match="not a list of orders"):
            store.insert(_order())

    def test_write_leaves_no_temp_files(self, tmp_path):
        store = JsonOrderStore(tmp_path / "orders.json")
        store.insert(_order())
        store.insert(_order("Bob"))
        assert sorted(p.name for p in tmp_path.iterdir()) == ["orders.json"]

    def test_failed_write_keeps_previous_contents(self, tmp_path, monkeypatch):
        path = tmp_path / "orders.json"
        store = JsonOrderStore(path)
        store.insert(_order())
        before = path.read_text(encoding="utf-8")

        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(
            "order_intake.infrastructure.persistence.json_order_store.os.replace", fail_replace
        )
        with pytest.raises(StorageError, match="Cannot write"):
            store.insert(_order("Bob"))

        assert path.read_text(encoding="utf-8") == before
        assert sorted(p.name for p in tmp_path.iterdir()) == ["orders.json"]
