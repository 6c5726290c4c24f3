"""Abstract store for submitted orders.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, Supabase)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_intake.domain.model.order import StoredOrder, ValidatedOrder


class OrderStore(ABC):

    @abstractmethod
    def insert(self, order: ValidatedOrder) -> StoredOrder:
        """Persist a new order and return it with its assigned id.

        Raises ``StorageError`` if the order could not be recorded.
        """

    @abstractmethod
    def get_by_id(self, order_id: int) -> StoredOrder | None:
        """Return an order by its ID, or None if not found."""
