from uuid import UUID

from pydantic import Field

from folio.schemas.base import RequestSchema
from folio.schemas.common import RecordSchema

_PROFILE_URLS = frozenset(
    {
        "profile_image_url",
        "hero_image_url",
        "resume_url",
        "linkedin_url",
        "instagram_url",
        "tiktok_url",
        "pinterest_url",
        "youtube_url",
    }
)


class UpdateProfileRequest(RequestSchema):
    clearable = _PROFILE_URLS | {"name", "tagline", "footer_text"}

    name: str | None = Field(default=None, max_length=255)
    tagline: str | None = Field(default=None, max_length=500)
    bio: str | None = None
    profile_image_url: str | None = None
    hero_image_url: str | None = None
    resume_url: str | None = None
    email: str | None = Field(default=None, max_length=320)
    footer_text: str | None = Field(default=None, max_length=500)
    linkedin_url: str | None = None
    instagram_url: str | None = None
    tiktok_url: str | None = None
    pinterest_url: str | None = None
    youtube_url: str | None = None


class CreateEducationRequest(RequestSchema):
    degree: str = Field(min_length=1, max_length=255)
    institution: str = Field(min_length=1, max_length=255)
    start_year: int = Field(ge=1900, le=2100)
    end_year: int | None = Field(default=None, ge=1900, le=2100)
    is_current: bool = False
    description: str | None = None
    order: int | None = Field(default=None, ge=0)


class UpdateEducationRequest(RequestSchema):
    clearable = frozenset({"end_year", "description"})

    degree: str | None = Field(default=None, min_length=1, max_length=255)
    institution: str | None = Field(default=None, min_length=1, max_length=255)
    start_year: int | None = Field(default=None, ge=1900, le=2100)
    end_year: int | None = Field(default=None, ge=1900, le=2100)
    is_current: bool | None = None
    description: str | None = None
    order: int | None = Field(default=None, ge=0)


class EducationResponse(RecordSchema):
    profile_id: UUID
    degree: str
    institution: str
    start_year: int
    end_year: int | None
    is_current: bool
    description: str | None
    order: int


class ProfileResponse(RecordSchema):
    name: str | None
    tagline: str | None
    bio: str
    profile_image_url: str | None
    hero_image_url: str | None
    resume_url: str | None
    email: str
    footer_text: str | None
    linkedin_url: str | None
    instagram_url: str | None
    tiktok_url: str | None
    pinterest_url: str | None
    youtube_url: str | None
    educations: list[EducationResponse] = []
