"""
Timing utilities for dispatch logging.

``log_step`` logs the start of a step at DEBUG and its end at INFO with
``duration_ms``. The step's span id is pushed into the log context so nested
entries carry it as ``parent_span_id``.
"""

import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from marketrpc.framework.logging.context import get_context, get_logger, push_context


def _generate_span_id() -> str:
    """Generate a short span ID (8 hex chars)."""
    return uuid.uuid4().hex[:8]


@dataclass
class TimingResult:
    """Result of a timed step with tracing support."""

    step: str
    span_id: str = field(default_factory=_generate_span_id)
    parent_span_id: str | None = None
    started_at: float = field(default_factory=time.perf_counter)
    ended_at: float | None = None
    metrics: dict[str, Any] = field(default_factory=dict)
    status: str = "ok"  # ok, error
    error_info: dict[str, Any] | None = None

    def stop(self) -> "TimingResult":
        """Record end time."""
        self.ended_at = time.perf_counter()
        return self

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds."""
        end = self.ended_at if self.ended_at is not None else time.perf_counter()
        return (end - self.started_at) * 1000

    def add_metric(self, key: str, value: Any) -> "TimingResult":
        """Add a metric to include in the log output."""
        self.metrics[key] = value
        return self

    def set_error(self, e: BaseException) -> "TimingResult":
        """Record error information."""
        self.status = "error"
        self.error_info = {
            "error_type": type(e).__name__,
            "error_message": str(e),
        }
        return self

    def to_log_dict(self) -> dict[str, Any]:
        """Convert to dict for logging."""
        result: dict[str, Any] = {
            "duration_ms": round(self.duration_ms, 2),
            "span_id": self.span_id,
        }
        if self.parent_span_id:
            result["parent_span_id"] = self.parent_span_id
        result.update(self.metrics)
        return result

    def to_error_dict(self) -> dict[str, Any]:
        """Convert to dict for error logging."""
        result = self.to_log_dict()
        result["status"] = "error"
        if self.error_info:
            result.update(self.error_info)
        return result


@contextmanager
def log_step(event: str, **extra_metrics: Any) -> Iterator[TimingResult]:
    """
    Context manager that logs step start/end with timing and tracing.

    Usage:
        with log_step("command.execute", command="market.add") as timer:
            result = await command.execute(request)
            timer.add_metric("result_type", type(result).__name__)

        # DEBUG command.execute.start span_id=a1b2c3d4 command=market.add
        # INFO  command.execute.end   span_id=a1b2c3d4 duration_ms=1.2 command=market.add result_type=Market

    Exceptions are logged as ``<event>.error`` at WARNING and re-raised.
    Cancellation is not logged as an error.
    """
    log = get_logger("marketrpc.timing")

    parent_span = get_context().span_id
    timer = TimingResult(step=event, parent_span_id=parent_span, metrics=dict(extra_metrics))
    context_token = push_context(span_id=timer.span_id, parent_span_id=parent_span, step=event)

    try:
        start_fields: dict[str, Any] = {"span_id": timer.span_id}
        if parent_span:
            start_fields["parent_span_id"] = parent_span
        start_fields.update(extra_metrics)
        log.debug(f"{event}.start", **start_fields)

        yield timer

    except Exception as e:
        timer.stop()
        timer.set_error(e)
        log.warning(f"{event}.error", **timer.to_error_dict())
        raise

    finally:
        timer.stop()
        context_token.restore()

    log.info(f"{event}.end", **timer.to_log_dict())
