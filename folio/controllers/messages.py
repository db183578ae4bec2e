"""Contact form endpoint and the admin inbox."""

import logging
from uuid import UUID

from litestar import Controller, Request, delete, get, patch, post
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.services import message_service
from folio.lib.email import EmailNotifier
from folio.schemas import serialize, serialize_many
from folio.schemas.common import SUCCESS
from folio.schemas.messages import CreateMessageRequest, MessageResponse

logger = logging.getLogger(__name__)


class MessageController(Controller):
    path = "/messages"
    tags = ["messages"]

    @post("/")
    async def send_message(
        self, request: Request, db_session: AsyncSession, data: CreateMessageRequest
    ) -> dict:
        """Store a contact message and notify the owner by email.

        The message is saved before the email is attempted, and an email
        failure does not fail the request.
        """
        message = await message_service.create_message(
            db_session, name=data.name, email=str(data.email), content=data.content
        )

        notifier: EmailNotifier = request.app.state.email_notifier
        await notifier.send_new_message_notification(message)

        return {"success": True, "message": "Message sent successfully"}

    @get("/", guards=[admin_guard])
    async def list_messages(self, db_session: AsyncSession) -> list[dict]:
        return serialize_many(MessageResponse, await message_service.list_messages(db_session))

    @get("/{message_id:uuid}", guards=[admin_guard])
    async def get_message(self, db_session: AsyncSession, message_id: UUID) -> dict:
        return serialize(MessageResponse, await message_service.read_message(db_session, message_id))

    @patch("/{message_id:uuid}/read", guards=[admin_guard])
    async def toggle_read(self, db_session: AsyncSession, message_id: UUID) -> dict:
        return serialize(MessageResponse, await message_service.toggle_message_read(db_session, message_id))

    @delete("/{message_id:uuid}", guards=[admin_guard], status_code=HTTP_200_OK)
    async def delete_message(self, db_session: AsyncSession, message_id: UUID) -> dict:
        await message_service.delete_message(db_session, message_id)
        return SUCCESS
