from pydantic import Field

from folio.db.models import SkillCategory
from folio.schemas.base import RequestSchema
from folio.schemas.common import RecordSchema


class CreateSkillRequest(RequestSchema):
    name: str = Field(min_length=1, max_length=255)
    short_name: str | None = Field(default=None, max_length=64)
    icon_url: str | None = None
    category: SkillCategory
    description: str | None = None
    gradient_from: str | None = None
    gradient_to: str | None = None
    gradient_via: str | None = None


class UpdateSkillRequest(RequestSchema):
    clearable = frozenset(
        {"short_name", "icon_url", "description", "gradient_from", "gradient_to", "gradient_via"}
    )

    name: str | None = Field(default=None, min_length=1, max_length=255)
    short_name: str | None = Field(default=None, max_length=64)
    icon_url: str | None = None
    category: SkillCategory | None = None
    description: str | None = None
    gradient_from: str | None = None
    gradient_to: str | None = None
    gradient_via: str | None = None


class SkillResponse(RecordSchema):
    name: str
    short_name: str | None
    icon_url: str | None
    category: SkillCategory
    description: str | None
    gradient_from: str | None
    gradient_to: str | None
    gradient_via: str | None
    order: int
