"""Bearer token validation delegated to Supabase Auth.

Folio does not issue or verify tokens itself. A token is accepted when
Supabase's ``/auth/v1/user`` endpoint resolves it to a user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx
from litestar.exceptions import ServiceUnavailableException

if TYPE_CHECKING:
    from folio.config import SupabaseConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    id: str
    email: str | None


class SupabaseAuthDelegate:
    """Resolves bearer tokens to users through the Supabase Auth REST API."""

    def __init__(self, config: SupabaseConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.config = config
        self._transport = transport
        if not config.enabled:
            logger.warning("Supabase URL or service key not configured; all authenticated requests will be rejected")

    @property
    def user_url(self) -> str:
        return f"{self.config.url.rstrip('/')}/auth/v1/user"

    async def resolve(self, token: str) -> AuthenticatedUser | None:
        """Return the user for ``token``, or None if Supabase rejects it.

        Raises:
            ServiceUnavailableException: Supabase could not be reached
        """
        if not self.config.enabled:
            return None

        headers = {
            "apikey": self.config.service_key,
            "Authorization": f"Bearer {token}",
        }
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout, transport=self._transport) as client:
                response = await client.get(self.user_url, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Supabase auth request failed: %s", exc)
            raise ServiceUnavailableException(detail="Authentication service unavailable") from exc

        if response.status_code != 200:
            logger.debug("Supabase rejected token with status %s", response.status_code)
            return None

        data = response.json()
        user_id = data.get("id")
        if not user_id:
            return None
        return AuthenticatedUser(id=str(user_id), email=data.get("email"))
