"""
Command framework - contracts, registry and dispatch for RPC commands.

This module provides:
- Positional parameter contracts and the validation pipeline
- The command base class and its operator-facing metadata
- The command registry and dispatcher
- Structured logging with request context
"""

from marketrpc.framework.commands import Command
from marketrpc.framework.dispatcher import CommandDispatcher
from marketrpc.framework.params import (
    CommandContract,
    ParamDef,
    ParamGuard,
    ParamType,
    length_equals,
    requires_slot,
    validate,
)
from marketrpc.framework.registry import CommandRegistry
from marketrpc.framework.request import RpcRequest, as_request

__all__ = [
    # Contracts
    "CommandContract",
    "ParamDef",
    "ParamGuard",
    "ParamType",
    "length_equals",
    "requires_slot",
    "validate",
    # Requests
    "RpcRequest",
    "as_request",
    # Commands
    "Command",
    "CommandRegistry",
    "CommandDispatcher",
]
