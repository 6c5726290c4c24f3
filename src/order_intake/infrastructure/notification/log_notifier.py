"""Notifier that writes alerts to the log instead of a messaging provider.

Used when no provider is configured (local development).
"""

from __future__ import annotations

import itertools
import logging

from order_intake.domain.notification.notifier import Notifier

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):

    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def send(self, recipient: str, body: str) -> str:
        message_id = f"log-{next(self._counter)}"
        logger.info("Alert %s for %s:\n%s", message_id, recipient, body)
        return message_id
