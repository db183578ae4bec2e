"""Tests for the JSON exception handlers."""

import json
from unittest.mock import MagicMock, patch

import pytest
from litestar.exceptions import NotAuthorizedException, ValidationException

from folio.lib import observability
from folio.lib.exceptions import (
    ConflictError,
    InvalidRequestError,
    NotFoundError,
    StorageUnavailableError,
    folio_error_handler,
    http_exception_handler,
    internal_server_error_handler,
)


@pytest.fixture
def fake_request():
    """Create a minimal mock request for the error handlers."""
    request = MagicMock()
    request.method = "PATCH"
    request.url.path = "/api/skills/reorder"
    return request


def _body(response) -> dict:
    content = response.content
    return json.loads(content) if isinstance(content, (bytes, str)) else content


class TestObservabilityException:
    """Test the observability.exception() facade function."""

    def test_returns_true_when_available(self):
        with patch.object(observability, "_logfire", MagicMock()) as mock_lf, \
             patch.object(observability, "_configured", True):
            result = observability.exception("test error")
            assert result is True
            mock_lf.exception.assert_called_once_with("test error")

    def test_returns_false_when_unavailable(self):
        with patch.object(observability, "_logfire", None), \
             patch.object(observability, "_configured", False):
            assert observability.exception("test error") is False


class TestFolioErrorHandler:
    """Domain errors map to their status codes and error kinds."""

    @pytest.mark.parametrize(
        "exc, status, kind",
        [
            (NotFoundError("Skill not found"), 404, "not_found"),
            (ConflictError("Slug taken"), 409, "conflict"),
            (InvalidRequestError("Bad ids"), 400, "invalid_request"),
            (StorageUnavailableError("db down"), 503, "storage_unavailable"),
        ],
    )
    def test_status_and_body(self, fake_request, exc, status, kind):
        response = folio_error_handler(fake_request, exc)

        assert response.status_code == status
        assert _body(response) == {"statusCode": status, "error": kind, "message": exc.message}


class TestHttpExceptionHandler:
    def test_unauthorized_shape(self, fake_request):
        response = http_exception_handler(fake_request, NotAuthorizedException(detail="Missing authentication token"))

        assert response.status_code == 401
        assert _body(response) == {
            "statusCode": 401,
            "error": "unauthorized",
            "message": "Missing authentication token",
        }

    def test_validation_errors_included(self, fake_request):
        exc = ValidationException(detail="Validation failed", extra=[{"key": "items", "message": "too short"}])
        response = http_exception_handler(fake_request, exc)

        body = _body(response)
        assert response.status_code == 400
        assert body["error"] == "invalid_request"
        assert body["errors"] == [{"key": "items", "message": "too short"}]


class TestInternalServerErrorHandler:
    """Test that internal_server_error_handler logs exceptions."""

    def test_calls_observability_when_available(self, fake_request):
        exc = RuntimeError("boom")
        with patch.object(observability, "exception", return_value=True) as mock_exc:
            response = internal_server_error_handler(fake_request, exc)

        mock_exc.assert_called_once_with(
            "Unhandled exception on {method} {path}",
            method="PATCH",
            path="/api/skills/reorder",
        )
        assert response.status_code == 500

    def test_falls_back_to_stdlib_when_unavailable(self, fake_request):
        exc = RuntimeError("boom")
        with patch.object(observability, "exception", return_value=False), \
             patch("folio.lib.exceptions.logger") as mock_logger:
            response = internal_server_error_handler(fake_request, exc)

        mock_logger.exception.assert_called_once()
        assert _body(response)["message"] == "Internal Server Error"
