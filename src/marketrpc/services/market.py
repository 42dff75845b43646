"""In-memory market service.

Backs the CLI and the test-suite. Markets are unique per
``(profile_id, name)``; ids are assigned sequentially from 1.
"""

from __future__ import annotations

import asyncio
import itertools

from marketrpc.core.errors import DuplicateEntityError, EntityNotFoundError
from marketrpc.domain.market import Market, MarketCreateRequest
from marketrpc.framework.logging import get_logger

log = get_logger(__name__)


class InMemoryMarketService:
    """Dict-backed ``MarketService``."""

    def __init__(self) -> None:
        self._markets: dict[int, Market] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def create(self, request: MarketCreateRequest) -> Market:
        async with self._lock:
            for market in self._markets.values():
                if market.profile_id == request.profile_id and market.name == request.name:
                    raise DuplicateEntityError(
                        f"Market '{request.name}' already exists for profile {request.profile_id}"
                    ).with_context(market_id=market.id)

            market = Market(
                id=next(self._ids),
                profile_id=request.profile_id,
                name=request.name,
                type=request.type,
                receive_key=request.receive_key,
                receive_address=request.receive_address,
                publish_key=request.publish_key,
                publish_address=request.publish_address,
            )
            self._markets[market.id] = market

        log.info("market.created", market_id=market.id, profile_id=market.profile_id, market_type=market.type.value)
        return market

    async def list_by_profile(self, profile_id: int) -> list[Market]:
        return [m for m in self._markets.values() if m.profile_id == profile_id]

    async def destroy(self, market_id: int) -> Market:
        async with self._lock:
            market = self._markets.pop(market_id, None)
        if market is None:
            raise EntityNotFoundError(f"Market {market_id} not found")
        log.info("market.removed", market_id=market_id)
        return market
