"""
Structured, request-aware logging.

This module provides:
- Structured logging with structlog
- Request context propagation via contextvars
- Timing of dispatch steps

Usage:
    from marketrpc.framework.logging import configure_logging, get_logger, log_step

    # Configure once at startup
    configure_logging()

    log = get_logger(__name__)

    # Attached to every log entry emitted while handling the request
    set_context(request_id="abc123", command="market.add")

    with log_step("command.execute"):
        await command.execute(request)
"""

from marketrpc.framework.logging.config import configure_logging, is_configured
from marketrpc.framework.logging.context import (
    LogContext,
    bind_context,
    clear_context,
    get_context,
    get_logger,
    push_context,
    set_context,
)
from marketrpc.framework.logging.timing import TimingResult, log_step

__all__ = [
    # Configuration
    "configure_logging",
    "is_configured",
    # Context
    "get_logger",
    "set_context",
    "clear_context",
    "get_context",
    "bind_context",
    "push_context",
    "LogContext",
    # Timing
    "log_step",
    "TimingResult",
]
