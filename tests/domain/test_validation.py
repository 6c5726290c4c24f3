"""Unit tests for order field validation."""

import pytest

from order_intake.domain.exceptions import OrderValidationError
from order_intake.domain.model.order import OrderRequest
from order_intake.domain.validation import collect_errors, validate


def _request(**overrides) -> OrderRequest:
    fields = dict(
        customer_name="Jo",
        phone_number="123456",
        address="12 Main St City",
        items="2 burgers",
        quantity=2,
    )
    fields.update(overrides)
    return OrderRequest(**fields)


class TestValidOrders:

    def test_minimum_lengths_pass(self):
        order = validate(_request(address="12 Ma", items="tea"))
        assert order.customer_name == "Jo"
        assert order.address == "12 Ma"
        assert order.items == "tea"
        assert order.quantity.value == 2

    def test_surrounding_whitespace_is_stripped(self):
        order = validate(_request(customer_name="  Alice  ", phone_number=" 0612345678 "))
        assert order.customer_name == "Alice"
        assert order.phone_number == "0612345678"

    def test_phone_format_is_not_checked(self):
        order = validate(_request(phone_number="call me"))
        assert order.phone_number == "call me"


class TestFieldErrors:

    def test_each_short_field_reported(self):
        errors = collect_errors(_request(customer_name="J", address="12"))
        assert set(errors) == {"customer_name", "address"}
        assert errors["customer_name"] == "Name must be at least 2 characters"
        assert errors["address"] == "Delivery address must be at least 5 characters"

    def test_empty_field_reported_as_required(self):
        errors = collect_errors(_request(items="   "))
        assert errors == {"items": "Items is required"}

    def test_all_fields_collected_in_one_pass(self):
        with pytest.raises(OrderValidationError) as exc_info:
            validate(OrderRequest(customer_name="J"))
        assert set(exc_info.value.field_errors) == {
            "customer_name",
            "phone_number",
            "address",
            "items",
        }

    def test_one_message_per_field(self):
        errors = collect_errors(OrderRequest())
        assert all(isinstance(msg, str) for msg in errors.values())
        assert errors["phone_number"] == "Phone number is required"

    def test_whitespace_does_not_count_towards_length(self):
        errors = collect_errors(_request(customer_name=" J "))
        assert "customer_name" in errors


class TestQuantityCoercion:

    @pytest.mark.parametrize("raw", [0, -3, "", None, "abc", "2.5", 1.5, True])
    def test_invalid_quantity_becomes_one(self, raw):
        order = validate(_request(quantity=raw))
        assert order.quantity.value == 1

    @pytest.mark.parametrize(
        "raw, expected",
        [(3, 3), ("4", 4), (" 7 ", 7), (5.0, 5), ("2.0", 2), ("1e2", 100)],
    )
    def test_numeric_quantity_is_kept(self, raw, expected):
        order = validate(_request(quantity=raw))
        assert order.quantity.value == expected

    def test_invalid_quantity_never_produces_error(self):
        errors = collect_errors(_request(quantity="lots"))
        assert errors == {}
