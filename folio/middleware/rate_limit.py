"""Per-client-IP rate limiting.

Every IP gets ``requests_per_minute`` requests in a sliding one-minute window.
Path-prefix overrides get their own bucket; the longest matching prefix wins.
"""

import json

from litestar.types import ASGIApp, Receive, Scope, Send

from folio.lib.client_ip import get_client_ip
from folio.lib.exceptions import error_payload
from folio.lib.sliding_window import SlidingWindowCounter


class RateLimitMiddleware:
    """ASGI middleware that answers 429 once a client exceeds its limit.

    Args:
        app: The ASGI application to wrap.
        requests_per_minute: Default limit for every path.
        paths: Dict of path-prefix -> requests_per_minute overrides.
    """

    def __init__(
        self,
        app: ASGIApp,
        requests_per_minute: int = 100,
        paths: dict[str, int] | None = None,
    ) -> None:
        self.app = app
        self.requests_per_minute = requests_per_minute
        self.paths = paths or {}
        self._counter = SlidingWindowCounter(window=60.0)

    def _get_limit(self, path: str) -> tuple[str, int]:
        """Return ``(bucket_suffix, limit_per_minute)`` for a request path."""
        best_match = ""
        for prefix in self.paths:
            if path.startswith(prefix) and len(prefix) > len(best_match):
                best_match = prefix

        if best_match:
            return best_match, self.paths[best_match]
        return "", self.requests_per_minute

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        ip = get_client_ip(scope)
        bucket_suffix, limit = self._get_limit(scope.get("path", "/"))
        allowed, retry_after = self._counter.hit(f"{ip}:{bucket_suffix}", limit)

        if allowed:
            await self.app(scope, receive, send)
            return

        body = json.dumps(
            error_payload(429, "too_many_requests", "Too Many Requests")
        ).encode()
        await send({
            "type": "http.response.start",
            "status": 429,
            "headers": [
                (b"content-type", b"application/json"),
                (b"content-length", str(len(body)).encode()),
                (b"retry-after", str(retry_after).encode()),
            ],
        })
        await send({"type": "http.response.body", "body": body})
