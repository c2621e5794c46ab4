"""
Notification module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class DeliveryFailedError(ExternalServiceError):
    """
    Raised when a message could not be delivered to a user.

    Whether this aborts the calling operation is decided by the caller
    through DeliveryPolicy.
    """

    def __init__(
        self,
        message: str,
        user_id: Optional[int] = None,
        service: str = "telegram",
    ):
        super().__init__(
            message,
            service=service,
            code="DELIVERY_FAILED",
            details={"user_id": user_id} if user_id is not None else {},
        )
