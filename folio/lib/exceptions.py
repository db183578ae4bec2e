"""Domain errors and the JSON exception handlers that render them."""

import logging

from litestar import Request, Response
from litestar.exceptions import HTTPException, ValidationException
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from folio.lib import observability

logger = logging.getLogger(__name__)


class FolioError(Exception):
    """Base class for errors surfaced to API clients.

    ``kind`` is the stable machine-readable error name, ``status_code`` the
    HTTP status the error maps to.
    """

    kind = "error"
    status_code = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(FolioError):
    """A record or collection targeted by the request does not exist."""

    kind = "not_found"
    status_code = HTTP_404_NOT_FOUND


class ConflictError(FolioError):
    """A uniqueness rule would be violated (duplicate slug, repeat like, ...)."""

    kind = "conflict"
    status_code = HTTP_409_CONFLICT


class InvalidRequestError(FolioError):
    """The request is well-formed but cannot be applied."""

    kind = "invalid_request"
    status_code = HTTP_400_BAD_REQUEST


class StorageUnavailableError(FolioError):
    """The database or object store could not complete the operation."""

    kind = "storage_unavailable"
    status_code = HTTP_503_SERVICE_UNAVAILABLE


_HTTP_KINDS = {
    400: "invalid_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    413: "payload_too_large",
    429: "too_many_requests",
}


def error_payload(status_code: int, kind: str, message: str, **extra) -> dict:
    """Build the standard error body shared by every handler."""
    return {"statusCode": status_code, "error": kind, "message": message, **extra}


def folio_error_handler(request: Request, exc: FolioError) -> Response:
    """Render domain errors as JSON."""
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        logger.warning("%s on %s %s: %s", exc.kind, request.method, request.url.path, exc.message)
    return Response(
        content=error_payload(exc.status_code, exc.kind, exc.message),
        status_code=exc.status_code,
        media_type="application/json",
    )


def http_exception_handler(request: Request, exc: HTTPException) -> Response:
    """Render Litestar HTTP exceptions (401, 403, 404, validation) as JSON."""
    status_code = exc.status_code
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    kind = _HTTP_KINDS.get(status_code, "error")

    extra = {}
    if isinstance(exc, ValidationException) and exc.extra:
        extra["errors"] = exc.extra

    return Response(
        content=error_payload(status_code, kind, detail, **extra),
        status_code=status_code,
        media_type="application/json",
    )


def internal_server_error_handler(request: Request, exc: Exception) -> Response:
    """Log unexpected exceptions and return a generic 500 body."""
    logged = observability.exception(
        "Unhandled exception on {method} {path}",
        method=request.method,
        path=request.url.path,
    )
    if not logged:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    return Response(
        content=error_payload(status_code, "internal_error", "Internal Server Error"),
        status_code=status_code,
        media_type="application/json",
    )


EXCEPTION_HANDLERS = {
    FolioError: folio_error_handler,
    HTTPException: http_exception_handler,
    Exception: internal_server_error_handler,
}
