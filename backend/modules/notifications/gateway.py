"""
Notification gateways.

- TelegramNotificationGateway: Telegram Bot API sendMessage over httpx
- InMemoryNotificationGateway: Records messages, can be told to fail
"""

import logging
from typing import Iterable, Optional

import httpx

from modules.shelters.models import User
from .exceptions import DeliveryFailedError
from .models import SentMessage

logger = logging.getLogger(__name__)


class TelegramNotificationGateway:
    """
    Delivers messages through the Telegram Bot API.

    Transport errors and any reply other than a JSON object with "ok": true
    are reported as DeliveryFailedError. Nothing is retried here.
    """

    def __init__(
        self,
        bot_token: str,
        api_url: str = "https://api.telegram.org",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            bot_token: Bot token issued by BotFather
            api_url: Bot API base URL
            timeout: Request timeout in seconds
            client: Optional shared client (tests pass one with a MockTransport)
        """
        self._bot_token = bot_token
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self._bot_token)

    async def send_message_to_user(
        self,
        user: User,
        text: str,
        priority: int = 0,
    ) -> None:
        if not self.is_configured:
            raise DeliveryFailedError("Telegram bot token not configured", user_id=user.id)

        url = f"{self._api_url}/bot{self._bot_token}/sendMessage"
        payload = {
            "chat_id": user.messenger_chat_id,
            "text": text,
            "disable_notification": priority < 0,
        }

        try:
            if self._client is not None:
                response = await self._client.post(url, json=payload, timeout=self._timeout)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(url, json=payload, timeout=self._timeout)
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise DeliveryFailedError(f"Telegram request failed: {e}", user_id=user.id) from e

        if not isinstance(data, dict):
            raise DeliveryFailedError(
                f"Telegram returned an unexpected reply (HTTP {response.status_code})",
                user_id=user.id,
            )
        if not data.get("ok"):
            description = data.get("description", f"HTTP {response.status_code}")
            raise DeliveryFailedError(
                f"Telegram rejected message: {description}",
                user_id=user.id,
            )

        logger.debug(f"Delivered message to user {user.id}")


class InMemoryNotificationGateway:
    """
    Gateway that keeps sent messages in a list.

    For development and tests. Users listed in failing_users (or every user,
    with fail_all) get a DeliveryFailedError instead.
    """

    def __init__(self, failing_users: Iterable[int] = (), fail_all: bool = False):
        self.sent: list[SentMessage] = []
        self.failing_users: set[int] = set(failing_users)
        self.fail_all = fail_all

    async def send_message_to_user(
        self,
        user: User,
        text: str,
        priority: int = 0,
    ) -> None:
        if self.fail_all or user.id in self.failing_users:
            raise DeliveryFailedError(
                f"Delivery to user {user.id} failed",
                user_id=user.id,
                service="memory",
            )
        self.sent.append(
            SentMessage(
                user_id=user.id,
                chat_id=user.messenger_chat_id,
                text=text,
                priority=priority,
            )
        )

    def messages_for(self, user_id: int) -> list[str]:
        """Texts delivered to one user, oldest first."""
        return [m.text for m in self.sent if m.user_id == user_id]
