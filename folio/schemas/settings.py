from datetime import datetime
from uuid import UUID

from pydantic import Field

from folio.schemas.base import RequestSchema, ResponseSchema

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class UpdateSiteSettingsRequest(RequestSchema):
    clearable = frozenset(
        {
            "browser_title",
            "logo_url",
            "favicon_url",
            "footer_text",
            "cta_heading",
            "cta_description",
            "cta_button_text",
            "whatsapp_number",
        }
    )

    site_name: str | None = Field(default=None, min_length=1, max_length=255)
    browser_title: str | None = Field(default=None, max_length=255)
    logo_url: str | None = None
    favicon_url: str | None = None
    primary_color: str | None = Field(default=None, pattern=HEX_COLOR)
    secondary_color: str | None = Field(default=None, pattern=HEX_COLOR)
    footer_text: str | None = Field(default=None, max_length=500)
    cta_heading: str | None = Field(default=None, max_length=255)
    cta_description: str | None = None
    cta_button_text: str | None = Field(default=None, max_length=100)
    whatsapp_number: str | None = Field(default=None, max_length=32)


class SiteSettingsResponse(ResponseSchema):
    # None until the settings are saved for the first time
    id: UUID | None = None
    updated_at: datetime | None = None

    site_name: str
    browser_title: str | None
    logo_url: str | None
    favicon_url: str | None
    primary_color: str
    secondary_color: str
    footer_text: str | None
    cta_heading: str | None
    cta_description: str | None
    cta_button_text: str | None
    whatsapp_number: str | None
