"""Security response headers.

Adds CSP, HSTS, X-Frame-Options and friends to every HTTP response. Headers a
route handler already set are left alone so individual routes can override.
"""

from litestar.types import ASGIApp, Message, Receive, Scope, Send


class SecurityHeadersMiddleware:
    """ASGI middleware that appends pre-encoded security headers.

    Args:
        app: The ASGI application to wrap.
        headers: Header pairs as ``(name_bytes, value_bytes)``, CSP excluded.
        csp_value: The Content-Security-Policy value, or None to omit it.
    """

    def __init__(
        self,
        app: ASGIApp,
        headers: list[tuple[bytes, bytes]],
        csp_value: str | None = None,
    ) -> None:
        self.app = app
        self.headers = list(headers)
        if csp_value:
            self.headers.append((b"content-security-policy", csp_value.encode()))

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                current = list(message.get("headers", []))
                existing = {name.lower() for name, _ in current}
                message["headers"] = current + [
                    (name, value) for name, value in self.headers if name not in existing
                ]
            await send(message)

        await self.app(scope, receive, send_with_headers)
