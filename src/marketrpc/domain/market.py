"""Market domain types and the service protocol commands depend on."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

from marketrpc.core.enums import MarketType


@dataclass(frozen=True)
class MarketCreateRequest:
    """Typed request built by ``market.add`` from its positional params."""

    profile_id: int
    name: str
    type: MarketType
    receive_key: str
    receive_address: str
    publish_key: str
    publish_address: str


@dataclass
class Market:
    """A market as returned by the market service."""

    id: int
    profile_id: int
    name: str
    type: MarketType
    receive_key: str
    receive_address: str
    publish_key: str
    publish_address: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@runtime_checkable
class MarketService(Protocol):
    """
    Persistence-side market operations.

    Implementations own every business rule (name uniqueness, key checks)
    and signal failures with ``ServiceError`` subclasses.
    """

    async def create(self, request: MarketCreateRequest) -> Market: ...

    async def list_by_profile(self, profile_id: int) -> list[Market]: ...

    async def destroy(self, market_id: int) -> Market: ...
