"""Route guards for authenticated and admin-only endpoints.

``auth_guard`` requires a bearer token the auth delegate accepts.
``admin_guard`` additionally requires the user's email on the ``admins``
allow-list. Handlers without a guard are public.
"""

from litestar.connection import ASGIConnection
from litestar.exceptions import NotAuthorizedException, PermissionDeniedException
from litestar.handlers.base import BaseRouteHandler

from folio.auth.delegate import AuthenticatedUser
from folio.db.services import admin_service


def extract_bearer_token(authorization: str | None) -> str | None:
    """Pull the token out of an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_current_user(connection: ASGIConnection) -> AuthenticatedUser:
    """Resolve and cache the request's user. Raises 401 when there is none."""
    user = connection.scope.get("state", {}).get("user")
    if user is not None:
        return user

    token = extract_bearer_token(connection.headers.get("authorization"))
    if token is None:
        raise NotAuthorizedException(detail="Missing authentication token")

    user = await connection.app.state.auth_delegate.resolve(token)
    if user is None:
        raise NotAuthorizedException(detail="Invalid or expired token")

    connection.scope.setdefault("state", {})["user"] = user
    return user


async def auth_guard(connection: ASGIConnection, _: BaseRouteHandler) -> None:
    await get_current_user(connection)


async def admin_guard(connection: ASGIConnection, _: BaseRouteHandler) -> None:
    """Allow only users whose email is in the admins table."""
    user = await get_current_user(connection)

    session_maker = connection.app.state.session_maker
    async with session_maker() as db_session:
        allowed = await admin_service.is_admin(db_session, user.email)

    if not allowed:
        raise PermissionDeniedException(detail="Admin access required")
