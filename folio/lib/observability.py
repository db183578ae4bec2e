"""Optional tracing through Pydantic Logfire.

Install the ``logfire`` extra and set ``logfire.enabled`` in app.yaml to
trace requests, SQL and calls to Supabase and Resend. Until then every
helper here does nothing.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from folio.config import LogfireConfig, Settings

_logfire = None
_configured = False


def is_available() -> bool:
    return _logfire is not None and _configured


def _configure_options(config: LogfireConfig, lf) -> dict[str, Any]:
    options: dict[str, Any] = {
        "service_name": config.service_name,
        "send_to_logfire": "if-token-present",
    }
    if config.environment:
        options["environment"] = config.environment
    if config.sample_rate < 1.0:
        options["trace_sample_rate"] = config.sample_rate
    if config.console:
        options["console"] = lf.ConsoleOptions()
    return options


def configure(settings: Settings) -> bool:
    """Set up logfire when enabled. Returns whether tracing is active."""
    global _logfire, _configured

    if not settings.logfire.enabled:
        return False

    try:
        import logfire
    except ImportError:
        return False

    logfire.configure(**_configure_options(settings.logfire, logfire))
    _logfire = logfire
    _configured = True
    return True


def instrument_app(app):
    if is_available():
        return _logfire.instrument_asgi(app)
    return app


def instrument_sqlalchemy(engine) -> None:
    if is_available():
        _logfire.instrument_sqlalchemy(engine=engine)


def instrument_httpx() -> None:
    """Trace the outbound calls made by the auth delegate and the email notifier."""
    if is_available():
        _logfire.instrument_httpx()


@contextmanager
def span(name: str, **attrs: Any):
    if not is_available():
        yield None
        return
    with _logfire.span(name, **attrs) as current:
        yield current


def exception(msg: str, **kwargs: Any) -> bool:
    """Report an exception with its traceback. Returns False when tracing is off."""
    if not is_available():
        return False
    _logfire.exception(msg, **kwargs)
    return True
