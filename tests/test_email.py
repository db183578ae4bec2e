"""Tests for the Resend email notifier."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from folio.config import EmailConfig
from folio.db.models import Message
from folio.lib.email import EmailNotifier, render_new_message

CONFIGURED = EmailConfig(resend_api_key="re_test", admin_email="owner@example.com")


def _message(**overrides) -> Message:
    fields = {
        "name": "Ana",
        "email": "ana@example.com",
        "content": "Hello there",
        "created_at": datetime(2026, 1, 2, 15, 30, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Message(**fields)


class TestRenderNewMessage:
    def test_includes_sender_and_content(self):
        html = render_new_message(_message())
        assert "Ana" in html
        assert "mailto:ana@example.com" in html
        assert "02 January 2026 15:30 UTC" in html

    def test_user_input_is_escaped(self):
        html = render_new_message(_message(content="<script>alert(1)</script>"))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestEmailNotifier:
    @pytest.mark.asyncio
    async def test_posts_to_resend(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["auth"] = request.headers["authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "email-1"})

        notifier = EmailNotifier(CONFIGURED, transport=httpx.MockTransport(handler))
        assert await notifier.send_new_message_notification(_message()) is True

        assert captured["auth"] == "Bearer re_test"
        assert captured["body"]["to"] == ["owner@example.com"]
        assert captured["body"]["subject"] == "New Message from Ana"
        assert captured["body"]["reply_to"] == "ana@example.com"

    @pytest.mark.asyncio
    async def test_api_error_returns_false(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(422, json={"message": "bad"}))
        notifier = EmailNotifier(CONFIGURED, transport=transport)

        assert await notifier.send_new_message_notification(_message()) is False

    @pytest.mark.asyncio
    async def test_network_error_returns_false(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out")

        notifier = EmailNotifier(CONFIGURED, transport=httpx.MockTransport(handler))
        assert await notifier.send_new_message_notification(_message()) is False

    @pytest.mark.asyncio
    async def test_unconfigured_skips(self):
        def handler(request):
            raise AssertionError("no request expected")

        notifier = EmailNotifier(EmailConfig(), transport=httpx.MockTransport(handler))
        assert await notifier.send_new_message_notification(_message()) is False
