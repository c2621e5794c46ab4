"""
Single entry point for sending a message under a delivery policy.
"""

import logging

from modules.shelters.models import User
from .exceptions import DeliveryFailedError
from .interfaces import INotificationGateway
from .models import DeliveryPolicy

logger = logging.getLogger(__name__)


async def notify(
    gateway: INotificationGateway,
    user: User,
    text: str,
    policy: DeliveryPolicy,
    priority: int = 0,
) -> bool:
    """
    Send a message and apply the delivery policy to a failure.

    Args:
        gateway: Transport to send through
        user: Recipient
        text: Message text
        policy: FATAL re-raises a failure, BEST_EFFORT logs it
        priority: Passed through to the gateway

    Returns:
        True if delivered, False if a best-effort delivery failed

    Raises:
        DeliveryFailedError: If delivery failed under FATAL policy
    """
    try:
        await gateway.send_message_to_user(user, text, priority)
    except DeliveryFailedError as e:
        logger.error(f"Message to user {user.id} not delivered ({policy.value}): {e.message}")
        if policy is DeliveryPolicy.FATAL:
            raise
        return False
    return True
