"""RPC commands."""

from marketrpc.commands.market import MarketAddCommand, MarketListCommand, MarketRemoveCommand

__all__ = ["MarketAddCommand", "MarketListCommand", "MarketRemoveCommand"]
