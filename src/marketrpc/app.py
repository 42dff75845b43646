"""
Startup wiring.

Builds the command registry from already-constructed service handles.
There is no service locator: each command receives its services through
its constructor here, and the registry is sealed before first use.
"""

from __future__ import annotations

from marketrpc.commands.market import MarketAddCommand, MarketListCommand, MarketRemoveCommand
from marketrpc.domain.market import MarketService
from marketrpc.framework.dispatcher import CommandDispatcher
from marketrpc.framework.registry import CommandRegistry


def build_registry(market_service: MarketService) -> CommandRegistry:
    """Register every command against the given services and seal the registry."""
    registry = CommandRegistry()
    registry.register(MarketAddCommand(market_service))
    registry.register(MarketListCommand(market_service))
    registry.register(MarketRemoveCommand(market_service))
    return registry.seal()


def build_dispatcher(market_service: MarketService, caller: str = "rpc") -> CommandDispatcher:
    return CommandDispatcher(build_registry(market_service), caller=caller)
