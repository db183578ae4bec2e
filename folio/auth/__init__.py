from folio.auth.delegate import AuthenticatedUser, SupabaseAuthDelegate
from folio.auth.guards import admin_guard, auth_guard

__all__ = ["AuthenticatedUser", "SupabaseAuthDelegate", "admin_guard", "auth_guard"]
