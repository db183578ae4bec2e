from datetime import datetime
from uuid import UUID

from pydantic import Field

from folio.schemas.base import RequestSchema, ResponseSchema


class ReorderItem(RequestSchema):
    id: UUID
    # Accepted for compatibility; the item's position in the list decides its order
    order: int | None = None


class ReorderRequest(RequestSchema):
    """``{"items": [{"id": ...}, ...]}`` in the desired display order."""

    items: list[ReorderItem] = Field(min_length=1)

    @property
    def ids(self) -> list[UUID]:
        return [item.id for item in self.items]


class ImageUrlRequest(RequestSchema):
    url: str = Field(min_length=1, max_length=1024)


class ImageIdsRequest(RequestSchema):
    image_ids: list[UUID] = Field(min_length=1)


class RecordSchema(ResponseSchema):
    id: UUID
    created_at: datetime
    updated_at: datetime


SUCCESS = {"success": True}
