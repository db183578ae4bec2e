from pydantic import EmailStr, Field

from folio.schemas.base import RequestSchema
from folio.schemas.common import RecordSchema


class CreateMessageRequest(RequestSchema):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    content: str = Field(min_length=1, max_length=2000)


class MessageResponse(RecordSchema):
    name: str
    email: str
    content: str
    is_read: bool
