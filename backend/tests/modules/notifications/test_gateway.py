"""Tests for notification gateways."""

import json

import httpx
import pytest

from modules.notifications import DeliveryPolicy, notify
from modules.notifications.exceptions import DeliveryFailedError
from modules.notifications.gateway import (
    InMemoryNotificationGateway,
    TelegramNotificationGateway,
)
from modules.shelters.models import User


def telegram(handler, token: str = "test-token") -> TelegramNotificationGateway:
    """Gateway whose HTTP traffic goes to handler."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return TelegramNotificationGateway(token, client=client)


class TestTelegramNotificationGateway:

    @pytest.mark.asyncio
    async def test_send_message(self):
        """Should post to sendMessage with the user's chat ID."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"ok": True, "result": {"message_id": 1}})

        gateway = telegram(handler)
        await gateway.send_message_to_user(User(id=5, chat_id=777), "Hello")

        assert len(requests) == 1
        assert requests[0].url.path == "/bottest-token/sendMessage"
        body = json.loads(requests[0].content)
        assert body == {"chat_id": 777, "text": "Hello", "disable_notification": False}

    @pytest.mark.asyncio
    async def test_negative_priority_is_silent(self):
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"ok": True})

        await telegram(handler).send_message_to_user(User(id=5), "psst", priority=-1)

        assert bodies[0]["disable_notification"] is True
        assert bodies[0]["chat_id"] == 5

    @pytest.mark.asyncio
    async def test_rejected_by_telegram(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                403,
                json={"ok": False, "error_code": 403, "description": "bot was blocked by the user"},
            )

        with pytest.raises(DeliveryFailedError) as exc_info:
            await telegram(handler).send_message_to_user(User(id=5), "Hello")

        assert "blocked" in exc_info.value.message
        assert exc_info.value.details == {"user_id": 5, "service": "telegram"}

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DeliveryFailedError):
            await telegram(handler).send_message_to_user(User(id=5), "Hello")

    @pytest.mark.asyncio
    async def test_non_json_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(DeliveryFailedError):
            await telegram(handler).send_message_to_user(User(id=5), "Hello")

    @pytest.mark.asyncio
    async def test_json_reply_that_is_not_an_object(self):
        """A proxy answering with a JSON list is a failed delivery."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, content=b"[]")

        with pytest.raises(DeliveryFailedError) as exc_info:
            await telegram(handler).send_message_to_user(User(id=5), "Hello")

        assert "HTTP 502" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_unexpected_reply_is_best_effort(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json="x")

        delivered = await notify(
            telegram(handler), User(id=5), "Hello", DeliveryPolicy.BEST_EFFORT
        )

        assert delivered is False

    @pytest.mark.asyncio
    async def test_missing_token(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        gateway = telegram(handler, token="")

        assert not gateway.is_configured
        with pytest.raises(DeliveryFailedError):
            await gateway.send_message_to_user(User(id=5), "Hello")


class TestInMemoryNotificationGateway:

    @pytest.mark.asyncio
    async def test_records_messages(self):
        gateway = InMemoryNotificationGateway()

        await gateway.send_message_to_user(User(id=1), "one")
        await gateway.send_message_to_user(User(id=2, chat_id=20), "two", priority=1)
        await gateway.send_message_to_user(User(id=1), "three")

        assert gateway.messages_for(1) == ["one", "three"]
        assert gateway.sent[1].chat_id == 20
        assert gateway.sent[1].priority == 1

    @pytest.mark.asyncio
    async def test_failing_user(self):
        gateway = InMemoryNotificationGateway(failing_users=[2])

        await gateway.send_message_to_user(User(id=1), "ok")
        with pytest.raises(DeliveryFailedError) as exc_info:
            await gateway.send_message_to_user(User(id=2), "lost")

        assert exc_info.value.details["service"] == "memory"
        assert gateway.messages_for(2) == []
