from pydantic import Field

from folio.schemas.base import RequestSchema
from folio.schemas.common import RecordSchema


class CreateServiceRequest(RequestSchema):
    title: str = Field(min_length=1, max_length=255)
    description: str
    icon_url: str | None = None


class UpdateServiceRequest(RequestSchema):
    clearable = frozenset({"icon_url"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    icon_url: str | None = None


class ServiceResponse(RecordSchema):
    title: str
    description: str
    icon_url: str | None
    order: int
