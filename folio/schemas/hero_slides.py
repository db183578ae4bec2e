from pydantic import Field

from folio.schemas.base import RequestSchema
from folio.schemas.common import RecordSchema


class CreateHeroSlideRequest(RequestSchema):
    title: str = Field(min_length=1, max_length=255)
    left_title: str = Field(max_length=255)
    left_subtitle: str = Field(max_length=500)
    right_title: str = Field(max_length=255)
    right_subtitle: str = Field(max_length=500)
    image_url: str | None = None
    background_color: str | None = None
    background_from: str | None = None
    background_to: str | None = None
    is_visible: bool = True


class UpdateHeroSlideRequest(RequestSchema):
    clearable = frozenset({"image_url", "background_color", "background_from", "background_to"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    left_title: str | None = Field(default=None, max_length=255)
    left_subtitle: str | None = Field(default=None, max_length=500)
    right_title: str | None = Field(default=None, max_length=255)
    right_subtitle: str | None = Field(default=None, max_length=500)
    image_url: str | None = None
    background_color: str | None = None
    background_from: str | None = None
    background_to: str | None = None
    is_visible: bool | None = None


class HeroSlideResponse(RecordSchema):
    title: str
    left_title: str
    left_subtitle: str
    right_title: str
    right_subtitle: str
    image_url: str | None
    background_color: str | None
    background_from: str | None
    background_to: str | None
    is_visible: bool
    order: int
