from uuid import UUID

from pydantic import Field

from folio.schemas.base import RequestSchema, ResponseSchema
from folio.schemas.common import RecordSchema

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class CreateClientRequest(RequestSchema):
    name: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255, pattern=SLUG_PATTERN)
    logo_url: str | None = None
    description: str | None = None
    order: int | None = Field(default=None, ge=0)
    is_visible: bool = True


class UpdateClientRequest(RequestSchema):
    clearable = frozenset({"logo_url", "description"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    logo_url: str | None = None
    description: str | None = None
    order: int | None = Field(default=None, ge=0)
    is_visible: bool | None = None


class ReorderClientsRequest(RequestSchema):
    ordered_ids: list[UUID] = Field(min_length=1)


class CreateClientCategoryRequest(RequestSchema):
    name: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255, pattern=SLUG_PATTERN)


class UpdateClientCategoryRequest(RequestSchema):
    name: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)


class CategoryImageResponse(RecordSchema):
    category_id: UUID
    url: str
    order: int


class ClientCategoryResponse(RecordSchema):
    client_id: UUID
    name: str
    slug: str
    order: int
    images: list[CategoryImageResponse] = []


class ClientSummary(ResponseSchema):
    id: UUID
    name: str
    slug: str


class ClientCategoryWithClientResponse(ClientCategoryResponse):
    client: ClientSummary


class ClientResponse(RecordSchema):
    name: str
    slug: str
    logo_url: str | None
    description: str | None
    is_visible: bool
    order: int
    categories: list[ClientCategoryResponse] = []
