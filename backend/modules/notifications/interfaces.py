"""
Notification module interface.

Services depend on INotificationGateway, not on Telegram.
"""

from typing import Protocol, runtime_checkable

from modules.shelters.models import User


@runtime_checkable
class INotificationGateway(Protocol):
    """Sends a text message to a user."""

    async def send_message_to_user(
        self,
        user: User,
        text: str,
        priority: int = 0,
    ) -> None:
        """
        Deliver a message to a user.

        Args:
            user: Recipient
            text: Message text
            priority: 0 for a normal message, negative for a silent one

        Raises:
            DeliveryFailedError: If the transport did not accept the message
        """
        ...
