"""
Request context management using contextvars.

Provides async-safe storage for request-scoped data such as the
correlation ID used to tie log lines to a request.

Usage:
    # In middleware:
    set_correlation_id("3f0c...")

    # In any code running for that request:
    correlation_id = get_correlation_id()  # Returns "3f0c..." or None

    # Context is automatically reset per request due to contextvars
"""

from contextvars import ContextVar

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID for the current request."""
    _correlation_id.set(correlation_id)


def get_correlation_id() -> str | None:
    """Get the correlation ID, or None outside of a request."""
    return _correlation_id.get()
