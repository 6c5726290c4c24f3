"""Application service: Submit Order use case.

Coordinates the validator, the order store and the notifier for a single
form submission.  The store write always happens before the alert: an
order that is not recorded is never announced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from order_intake.application.dto import OrderDTO, SubmissionResult
from order_intake.domain.exceptions import OrderValidationError, StorageError
from order_intake.domain.model.order import OrderRequest
from order_intake.domain.notification.message import format_order_message
from order_intake.domain.notification.notifier import Notifier
from order_intake.domain.repository.order_store import OrderStore
from order_intake.domain.validation import validate

logger = logging.getLogger(__name__)

STORAGE_FAILURE_MESSAGE = "Failed to save order to database"
DEGRADED_NOTIFICATION_WARNING = "Order saved, but the administrator alert could not be sent"


@dataclass(frozen=True)
class AdminAlertConfig:
    """Where new-order alerts go.  Fixed per process, not per request."""

    recipient: str


class SubmitOrderHandler:

    def __init__(
        self,
        order_store: OrderStore,
        notifier: Notifier,
        alert_config: AdminAlertConfig,
    ) -> None:
        self._order_store = order_store
        self._notifier = notifier
        self._alert_config = alert_config

    def handle(self, raw: OrderRequest) -> SubmissionResult:
        """Process one submission end to end.

        Steps:
        1. Validate every field (no side effects on failure).
        2. Insert into the store (terminal failure if this fails).
        3. Alert the administrator.  Any failure here only degrades the
           result: the order is already recorded.
        """
        try:
            order = validate(raw)
        except OrderValidationError as exc:
            logger.info("Order rejected: invalid fields %s", sorted(exc.field_errors))
            return SubmissionResult.invalid(exc.field_errors)

        try:
            stored = self._order_store.insert(order)
        except StorageError:
            logger.error("Order could not be stored", exc_info=True)
            return SubmissionResult.storage_failed(STORAGE_FAILURE_MESSAGE)

        logger.info("Order #%s stored for %s", stored.id, stored.customer_name)
        dto = OrderDTO.from_stored(stored)

        try:
            message_id = self._notifier.send(
                self._alert_config.recipient, format_order_message(stored)
            )
        except Exception as exc:
            logger.warning(
                "Admin alert for order #%s failed: %s", stored.id, exc, exc_info=True
            )
            return SubmissionResult.degraded(dto, DEGRADED_NOTIFICATION_WARNING)

        logger.info("Admin alerted for order #%s (message %s)", stored.id, message_id)
        return SubmissionResult.success(dto)
