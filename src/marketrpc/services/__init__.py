"""Reference service implementations."""

from marketrpc.services.market import InMemoryMarketService

__all__ = ["InMemoryMarketService"]
