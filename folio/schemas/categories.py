from pydantic import Field

from folio.schemas.base import RequestSchema
from folio.schemas.common import RecordSchema


class CategoryRequest(RequestSchema):
    name: str = Field(min_length=1, max_length=255)


class CategoryResponse(RecordSchema):
    name: str
    slug: str
    order: int
