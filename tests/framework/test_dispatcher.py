"""
Tests for marketrpc.framework.dispatcher module.

Tests cover:
- Unknown commands never touch any command
- Validate-then-execute ordering
- Errors surfaced unmodified
- Cancellation propagation
- Request context binding and isolation
- Execute timing metrics
"""

import asyncio

import pytest

from marketrpc.core.errors import (
    InvalidParameterTypeError,
    MissingParameterError,
    ServiceError,
    UnknownCommandError,
)
from marketrpc.framework.commands import Command
from marketrpc.framework.dispatcher import CommandDispatcher
from marketrpc.framework.logging import get_context, timing
from marketrpc.framework.params import CommandContract, ParamDef, ParamType
from marketrpc.framework.registry import CommandRegistry
from marketrpc.framework.request import RpcRequest


class SpyCommand(Command):
    """Records calls; optionally fails or blocks inside execute."""

    name = "test.spy"
    summary = "Spy."
    contract = CommandContract(
        params=(
            ParamDef(0, "id", ParamType.NUMBER),
            ParamDef(1, "alias", ParamType.STRING, required=False, default_from=None),
        )
    )

    def __init__(self, error: Exception | None = None, delay: float = 0.0) -> None:
        self.calls: list[str] = []
        self.contexts: list = []
        self.error = error
        self.delay = delay

    def validate(self, request):
        self.calls.append("validate")
        return super().validate(request)

    async def execute(self, request):
        self.calls.append("execute")
        self.contexts.append(get_context())
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return {"id": request.params[0]}


def make_dispatcher(*commands: Command) -> CommandDispatcher:
    registry = CommandRegistry()
    for command in commands:
        registry.register(command)
    return CommandDispatcher(registry.seal(), caller="test")


class TestDispatch:
    @pytest.mark.asyncio
    async def test_validates_then_executes(self):
        spy = SpyCommand()
        result = await make_dispatcher(spy).dispatch("test.spy", [7])
        assert result == {"id": 7}
        assert spy.calls == ["validate", "execute"]

    @pytest.mark.asyncio
    async def test_accepts_prepared_request(self):
        spy = SpyCommand()
        request = RpcRequest(params=[7], id="req-1")
        await make_dispatcher(spy).dispatch("test.spy", request)
        assert request.method == "test.spy"
        assert spy.contexts[0].request_id == "req-1"

    @pytest.mark.asyncio
    async def test_unknown_command_touches_nothing(self):
        spy = SpyCommand()
        with pytest.raises(UnknownCommandError) as exc_info:
            await make_dispatcher(spy).dispatch("test.nope", [1])
        assert exc_info.value.command_name == "test.nope"
        assert spy.calls == []

    @pytest.mark.asyncio
    async def test_validation_failure_skips_execute(self):
        spy = SpyCommand()
        dispatcher = make_dispatcher(spy)

        with pytest.raises(MissingParameterError):
            await dispatcher.dispatch("test.spy", [])
        with pytest.raises(InvalidParameterTypeError):
            await dispatcher.dispatch("test.spy", ["seven"])
        assert spy.calls == ["validate", "validate"]

    @pytest.mark.asyncio
    async def test_service_error_surfaced_unmodified(self):
        error = ServiceError("store down")
        spy = SpyCommand(error=error)
        with pytest.raises(ServiceError) as exc_info:
            await make_dispatcher(spy).dispatch("test.spy", [1])
        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_foreign_exceptions_not_translated(self):
        spy = SpyCommand(error=KeyError("raw"))
        with pytest.raises(KeyError):
            await make_dispatcher(spy).dispatch("test.spy", [1])

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        spy = SpyCommand(delay=10)
        task = asyncio.create_task(make_dispatcher(spy).dispatch("test.spy", [1]))
        while not spy.calls or spy.calls[-1] != "execute":
            await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    def test_dispatch_sync(self):
        assert make_dispatcher(SpyCommand()).dispatch_sync("test.spy", [3]) == {"id": 3}


class TestRequestContext:
    @pytest.mark.asyncio
    async def test_context_bound_during_execute_and_restored(self):
        spy = SpyCommand()
        await make_dispatcher(spy).dispatch("test.spy", [1])

        ctx = spy.contexts[0]
        assert ctx.command == "test.spy"
        assert ctx.caller == "test"
        assert ctx.request_id
        assert get_context().request_id is None

    @pytest.mark.asyncio
    async def test_context_restored_after_failure(self):
        with pytest.raises(MissingParameterError):
            await make_dispatcher(SpyCommand()).dispatch("test.spy", [])
        assert get_context().command is None

    @pytest.mark.asyncio
    async def test_concurrent_dispatches_are_isolated(self):
        spy = SpyCommand(delay=0.01)
        dispatcher = make_dispatcher(spy)

        results = await asyncio.gather(
            *(dispatcher.dispatch("test.spy", RpcRequest(params=[i], id=f"r{i}")) for i in range(5))
        )

        assert [r["id"] for r in results] == list(range(5))
        assert sorted(ctx.request_id for ctx in spy.contexts) == [f"r{i}" for i in range(5)]


class RecordingLogger:
    def __init__(self) -> None:
        self.entries: list[tuple[str, str, dict]] = []

    def __getattr__(self, level):
        return lambda event, **fields: self.entries.append((level, event, fields))


class TestExecuteTiming:
    @pytest.mark.asyncio
    async def test_execute_end_carries_metrics(self, monkeypatch):
        recorder = RecordingLogger()
        monkeypatch.setattr(timing, "get_logger", lambda name: recorder)

        await make_dispatcher(SpyCommand()).dispatch("test.spy", [1, "a"])

        ends = [fields for level, event, fields in recorder.entries if event == "dispatch.execute.end"]
        assert len(ends) == 1
        assert ends[0]["command"] == "test.spy"
        assert ends[0]["param_count"] == 2
        assert ends[0]["result_type"] == "dict"
        assert ends[0]["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_validation_failure_never_times_execute(self, monkeypatch):
        recorder = RecordingLogger()
        monkeypatch.setattr(timing, "get_logger", lambda name: recorder)

        with pytest.raises(MissingParameterError):
            await make_dispatcher(SpyCommand()).dispatch("test.spy", [])

        assert recorder.entries == []
