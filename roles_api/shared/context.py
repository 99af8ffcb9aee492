"""Request-scoped context using contextvars.

The request id set by RequestIDMiddleware is visible to everything that runs
while the request is handled, including log records (see
roles_api.shared.telemetry.logging.RequestIdFilter).
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Bind request_id to the current task; pass the token to reset_request_id()."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    """Request id of the request being handled, or None outside a request."""
    return _current_request_id.get()
