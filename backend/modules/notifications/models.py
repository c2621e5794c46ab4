"""
Notification module data models.
"""

from enum import Enum

from pydantic import BaseModel, Field


class DeliveryPolicy(str, Enum):
    """What a failed delivery means to the operation that sent it."""

    FATAL = "fatal"              # Failure aborts the operation
    BEST_EFFORT = "best_effort"  # Failure is logged, the operation goes on


class SentMessage(BaseModel):
    """A message handed to the transport."""

    user_id: int = Field(..., description="Recipient user ID")
    chat_id: int = Field(..., description="Recipient chat ID")
    text: str = Field(..., description="Message text")
    priority: int = Field(default=0, description="0 is normal, negative is silent")
