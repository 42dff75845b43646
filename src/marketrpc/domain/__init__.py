"""Domain types exchanged between commands and services."""

from marketrpc.domain.market import Market, MarketCreateRequest, MarketService

__all__ = ["Market", "MarketCreateRequest", "MarketService"]
