"""
Notifications module.

Delivers messages to adopters and applies the per-operation delivery policy.

Public API:
- INotificationGateway: Interface for message transports
- DeliveryPolicy: FATAL or BEST_EFFORT
- notify: Send under a policy
- DeliveryFailedError: Transport failure
"""

from .interfaces import INotificationGateway
from .models import DeliveryPolicy, SentMessage
from .exceptions import DeliveryFailedError
from .gateway import TelegramNotificationGateway, InMemoryNotificationGateway
from .policy import notify

__all__ = [
    # Interface
    "INotificationGateway",
    # Models
    "DeliveryPolicy",
    "SentMessage",
    # Exceptions
    "DeliveryFailedError",
    # Gateways
    "TelegramNotificationGateway",
    "InMemoryNotificationGateway",
    # Policy
    "notify",
]
