"""
Logging context management using contextvars.

Request-scoped fields (request id, command name, current span) are attached
to every log entry without passing them through call signatures. Each
dispatch coroutine runs in its own context copy, so concurrent requests do
not see each other's fields.
"""

from contextvars import ContextVar, Token
from dataclasses import asdict, dataclass
from typing import Any

import structlog


@dataclass
class LogContext:
    """
    Request context attached to all log entries.

    Core identifiers:
        request_id: Unique id for one dispatch
        command: Command name being dispatched

    Tracing:
        span_id: Current span identifier
        parent_span_id: Parent span for nested steps
        step: Current step name

    Origin:
        caller: Who invoked the dispatcher ("cli", "rpc", ...)
    """

    request_id: str | None = None
    command: str | None = None

    span_id: str | None = None
    parent_span_id: str | None = None
    step: str | None = None

    caller: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    def merge(self, **kwargs: Any) -> "LogContext":
        """Create new context with merged values."""
        current = asdict(self)
        current.update({k: v for k, v in kwargs.items() if v is not None})
        return LogContext(**current)


_log_context: ContextVar[LogContext] = ContextVar("log_context")  # noqa: B039


def get_context() -> LogContext:
    """Get the current log context."""
    return _log_context.get(LogContext())


def set_context(
    request_id: str | None = None,
    command: str | None = None,
    caller: str | None = None,
    step: str | None = None,
    span_id: str | None = None,
    parent_span_id: str | None = None,
) -> LogContext:
    """
    Set the current log context.

    This replaces the current context. Use bind_context() to add to existing.
    """
    ctx = LogContext(
        request_id=request_id,
        command=command,
        caller=caller,
        step=step,
        span_id=span_id,
        parent_span_id=parent_span_id,
    )
    _log_context.set(ctx)
    return ctx


def bind_context(**kwargs: Any) -> LogContext:
    """Merge values into the current context."""
    updated = get_context().merge(**kwargs)
    _log_context.set(updated)
    return updated


def clear_context() -> None:
    """Clear the current context (reset to empty)."""
    _log_context.set(LogContext())


class _ContextToken:
    """Token for restoring context after a scoped operation."""

    def __init__(self, token: Token[LogContext]):
        self._token = token

    def restore(self) -> None:
        """Restore the previous context."""
        _log_context.reset(self._token)


def push_context(**kwargs: Any) -> _ContextToken:
    """
    Push new context values, returning a token to restore later.

    Usage:
        token = push_context(step="validate")
        try:
            do_work()
        finally:
            token.restore()
    """
    updated = get_context().merge(**kwargs)
    return _ContextToken(_log_context.set(updated))


def add_context_processor(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that adds the request context to every entry."""
    for key, value in get_context().to_dict().items():
        if key not in event_dict:
            event_dict[key] = value
    return event_dict


def get_logger(name: str | None = None) -> Any:
    """
    Get a structured logger.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)
