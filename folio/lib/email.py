"""Admin email notifications sent through the Resend HTTP API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from jinja2 import Environment, PackageLoader, select_autoescape

if TYPE_CHECKING:
    from folio.config import EmailConfig
    from folio.db.models import Message

logger = logging.getLogger(__name__)

_templates = Environment(
    loader=PackageLoader("folio", "templates"),
    autoescape=select_autoescape(["html"]),
)


def render_new_message(message: Message) -> str:
    """Render the HTML body for a new contact message. User input is escaped."""
    received_at = message.created_at.strftime("%d %B %Y %H:%M UTC") if message.created_at else ""
    return _templates.get_template("email/new_message.html").render(
        message=message, received_at=received_at
    )


class EmailNotifier:
    """Sends notifications to the site owner. Failures are logged, never raised."""

    def __init__(self, config: EmailConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.config = config
        self._transport = transport
        if not config.enabled:
            logger.warning("Resend API key or admin email not configured. Email notifications disabled.")

    async def send_new_message_notification(self, message: Message) -> bool:
        """Email the admin about a new contact message.

        Returns:
            True when Resend accepted the email, False otherwise
        """
        if not self.config.enabled:
            logger.warning("Email service not configured. Skipping notification.")
            return False

        payload = {
            "from": self.config.from_address,
            "to": [self.config.admin_email],
            "subject": f"New Message from {message.name}",
            "html": render_new_message(message),
            "reply_to": message.email,
        }
        headers = {"Authorization": f"Bearer {self.config.resend_api_key}"}

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.config.api_url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Email send error: %s", exc)
            return False

        if response.status_code >= 400:
            logger.error("Failed to send email: %s %s", response.status_code, response.text)
            return False

        logger.info("Email notification sent successfully: %s", response.json().get("id"))
        return True
