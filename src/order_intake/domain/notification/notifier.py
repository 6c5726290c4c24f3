"""Abstract messaging channel used to alert the administrator."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Notifier(ABC):

    @abstractmethod
    def send(self, recipient: str, body: str) -> str:
        """Deliver *body* to *recipient* and return the provider message id.

        Raises ``NotificationError`` if delivery failed.
        """
