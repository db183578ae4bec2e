"""Tests for security headers middleware and configuration."""

import pytest

from folio.config import SecurityHeadersConfig
from folio.middleware.security import SecurityHeadersMiddleware


class TestSecurityHeadersConfig:
    """Tests for SecurityHeadersConfig model."""

    def test_default_build_headers(self):
        """Default config builds every header except CSP, which the middleware adds."""
        headers = SecurityHeadersConfig().build_headers(debug=False)
        names = {name for name, _ in headers}
        assert b"content-security-policy" not in names
        assert b"strict-transport-security" in names
        assert b"x-content-type-options" in names
        assert b"x-frame-options" in names
        assert b"referrer-policy" in names
        assert b"cross-origin-resource-policy" in names

    def test_hsts_excluded_in_debug_mode(self):
        headers = SecurityHeadersConfig().build_headers(debug=True)
        assert b"strict-transport-security" not in {name for name, _ in headers}

    def test_none_header_excluded(self):
        config = SecurityHeadersConfig(x_frame_options=None)
        headers = config.build_headers(debug=False)
        assert b"x-frame-options" not in {name for name, _ in headers}

    def test_custom_header_values(self):
        config = SecurityHeadersConfig(x_frame_options="DENY", referrer_policy="same-origin")
        header_dict = dict(config.build_headers(debug=False))
        assert header_dict[b"x-frame-options"] == b"DENY"
        assert header_dict[b"referrer-policy"] == b"same-origin"

    def test_headers_are_bytes(self):
        for name, value in SecurityHeadersConfig().build_headers(debug=False):
            assert isinstance(name, bytes)
            assert isinstance(value, bytes)


class TestSecurityHeadersMiddleware:
    def _make_app(self, headers=None):
        async def app(scope, receive, send):
            await send({
                "type": "http.response.start",
                "status": 200,
                "headers": headers or [(b"content-type", b"application/json")],
            })
            await send({"type": "http.response.body", "body": b"{}"})
        return app

    def _scope(self):
        return {"type": "http", "method": "GET", "path": "/api/health", "headers": []}

    @pytest.mark.asyncio
    async def test_headers_added(self):
        captured = []

        async def send(message):
            captured.append(message)

        middleware = SecurityHeadersMiddleware(
            self._make_app(),
            headers=[(b"x-content-type-options", b"nosniff")],
            csp_value="default-src 'self'",
        )
        await middleware(self._scope(), None, send)

        headers = dict(captured[0]["headers"])
        assert headers[b"x-content-type-options"] == b"nosniff"
        assert headers[b"content-security-policy"] == b"default-src 'self'"

    @pytest.mark.asyncio
    async def test_route_headers_take_precedence(self):
        captured = []

        async def send(message):
            captured.append(message)

        app = self._make_app(headers=[(b"x-frame-options", b"DENY")])
        middleware = SecurityHeadersMiddleware(app, headers=[(b"x-frame-options", b"SAMEORIGIN")])
        await middleware(self._scope(), None, send)

        values = [v for n, v in captured[0]["headers"] if n == b"x-frame-options"]
        assert values == [b"DENY"]

    @pytest.mark.asyncio
    async def test_non_http_passthrough(self):
        called = False

        async def app(scope, receive, send):
            nonlocal called
            called = True

        await SecurityHeadersMiddleware(app, headers=[])({"type": "lifespan"}, None, None)
        assert called
