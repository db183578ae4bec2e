from datetime import datetime
from typing import Any

from pydantic import Field

from folio.schemas.base import RequestSchema
from folio.schemas.common import RecordSchema


class CreateExperienceRequest(RequestSchema):
    company: str = Field(min_length=1, max_length=255)
    role: str = Field(min_length=1, max_length=255)
    start_date: datetime
    end_date: datetime | None = None
    is_current: bool = False
    # Rich-text editor document
    description: dict[str, Any]
    thumbnail_url: str | None = None
    logo_url: str | None = None


class UpdateExperienceRequest(RequestSchema):
    clearable = frozenset({"end_date", "thumbnail_url", "logo_url"})

    company: str | None = Field(default=None, min_length=1, max_length=255)
    role: str | None = Field(default=None, min_length=1, max_length=255)
    start_date: datetime | None = None
    end_date: datetime | None = None
    is_current: bool | None = None
    description: dict[str, Any] | None = None
    thumbnail_url: str | None = None
    logo_url: str | None = None


class ExperienceResponse(RecordSchema):
    company: str
    role: str
    start_date: datetime
    end_date: datetime | None
    is_current: bool
    description: dict[str, Any]
    thumbnail_url: str | None
    logo_url: str | None
