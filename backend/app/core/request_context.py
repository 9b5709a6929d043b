"""Per-request context shared with log records."""

from contextvars import ContextVar

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    """Get current request ID from context."""
    return request_id_var.get()


def set_request_id(request_id: str | None) -> None:
    """Set request ID in context."""
    request_id_var.set(request_id)
