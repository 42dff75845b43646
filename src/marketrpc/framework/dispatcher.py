"""
Command dispatcher.

Resolves a command name, validates the request, then executes it. Errors
from either step reach the caller unmodified; a validation failure always
means the command body never ran.
"""

import asyncio
from collections.abc import Sequence
from typing import Any
from uuid import uuid4

from marketrpc.core.errors import RpcError, UnknownCommandError
from marketrpc.framework.logging import get_logger, log_step, push_context
from marketrpc.framework.registry import CommandRegistry
from marketrpc.framework.request import RpcRequest, as_request

log = get_logger(__name__)


class CommandDispatcher:
    """
    Dispatcher for command invocations.

    Stateless apart from the registry reference: every call is validated
    and executed independently, and concurrent calls share nothing mutable.
    """

    def __init__(self, registry: CommandRegistry, caller: str = "rpc") -> None:
        self._registry = registry
        self._caller = caller

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    async def dispatch(
        self,
        name: str,
        params: RpcRequest | Sequence[Any] | None = None,
    ) -> Any:
        """
        Dispatch one invocation.

        Args:
            name: Registered command name
            params: Raw positional parameters or a prepared ``RpcRequest``

        Returns:
            The service result returned by the command

        Raises:
            UnknownCommandError: ``name`` is not registered
            ValidationError: parameters violate the command's contract
            ServiceError: the downstream service failed
        """
        request = as_request(params, method=name)
        request_id = str(request.id) if request.id is not None else uuid4().hex[:12]
        context_token = push_context(request_id=request_id, command=name, caller=self._caller)

        try:
            log.info("dispatch.submitted", param_count=len(request))

            try:
                command = self._registry.get(name)
            except UnknownCommandError as e:
                log.warning("dispatch.unknown_command", **e.to_dict())
                raise

            try:
                command.validate(request)
            except RpcError as e:
                log.info("dispatch.params_invalid", **e.to_dict())
                raise

            with log_step("dispatch.execute", command=name, param_count=len(request)) as timer:
                result = await command.execute(request)
                timer.add_metric("result_type", type(result).__name__)

            log.info("dispatch.completed", duration_ms=round(timer.duration_ms, 2))
            return result
        finally:
            context_token.restore()

    def dispatch_sync(self, name: str, params: RpcRequest | Sequence[Any] | None = None) -> Any:
        """Run ``dispatch`` to completion from code without an event loop."""
        return asyncio.run(self.dispatch(name, params))
