"""Abstract gateway for notifying store staff about new orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.notification import OrderNotification


class NotificationGateway(ABC):

    @abstractmethod
    def notify(self, notification: OrderNotification) -> str:
        """Deliver the notification and return the provider's message id.

        Raises NotifyError on any delivery failure.
        """
