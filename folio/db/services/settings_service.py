"""Site settings service. A single row holds the settings."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.models import SiteSettings
from folio.db.services.common import apply_updates

DEFAULT_SITE_SETTINGS: dict[str, Any] = {
    "site_name": "Portfolio",
    "browser_title": None,
    "logo_url": None,
    "favicon_url": None,
    "primary_color": "#FFD369",
    "secondary_color": "#1a1a2e",
    "footer_text": "© 2024 All rights reserved.",
    "cta_heading": "Let's Work Together",
    "cta_description": "Ready to bring your ideas to life?",
    "cta_button_text": "Get In Touch",
    "whatsapp_number": None,
}


async def _stored_settings(db_session: AsyncSession) -> SiteSettings | None:
    result = await db_session.execute(
        select(SiteSettings).order_by(SiteSettings.created_at.asc()).limit(1)
    )
    return result.scalar_one_or_none()


async def get_site_settings(db_session: AsyncSession) -> SiteSettings:
    """Return the stored settings, or an unsaved row filled with the defaults."""
    settings = await _stored_settings(db_session)
    if settings is None:
        return SiteSettings(**DEFAULT_SITE_SETTINGS)
    return settings


async def update_site_settings(db_session: AsyncSession, fields: dict[str, Any]) -> SiteSettings:
    """Apply the supplied fields, creating the settings row from the defaults on first save."""
    settings = await _stored_settings(db_session)
    if settings is None:
        settings = SiteSettings(**DEFAULT_SITE_SETTINGS)
        db_session.add(settings)

    apply_updates(settings, fields)
    await db_session.commit()
    await db_session.refresh(settings)
    return settings
