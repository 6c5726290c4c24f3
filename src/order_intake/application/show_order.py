"""Application service: Show Order use case (query)."""

from __future__ import annotations

from order_intake.application.dto import OrderDTO
from order_intake.domain.exceptions import EntityNotFoundError
from order_intake.domain.repository.order_store import OrderStore


class ShowOrderHandler:

    def __init__(self, order_store: OrderStore) -> None:
        self._order_store = order_store

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_store.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return OrderDTO.from_stored(order)
