"""Client IP extraction from the ASGI scope."""

import hashlib

from litestar.types import Scope


def get_client_ip(scope: Scope) -> str:
    """Extract client IP, preferring the first x-forwarded-for hop."""
    headers = dict(scope.get("headers", []))
    forwarded = headers.get(b"x-forwarded-for")
    if forwarded:
        return forwarded.decode().split(",")[0].strip()
    real_ip = headers.get(b"x-real-ip")
    if real_ip:
        return real_ip.decode().strip()
    client = scope.get("client")
    if client:
        return client[0]
    return "unknown"


def hash_client_ip(ip: str) -> str:
    """SHA-256 hex digest of an IP so raw addresses are never stored."""
    return hashlib.sha256(ip.encode()).hexdigest()
