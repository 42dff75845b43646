"""Tests for the in-memory market service."""

import asyncio

import pytest

from marketrpc.core.enums import MarketType
from marketrpc.core.errors import DuplicateEntityError, EntityNotFoundError
from marketrpc.domain.market import MarketCreateRequest, MarketService
from marketrpc.services.market import InMemoryMarketService


def make_request(name: str = "mymarket", profile_id: int = 1) -> MarketCreateRequest:
    return MarketCreateRequest(
        profile_id=profile_id,
        name=name,
        type=MarketType.MARKETPLACE,
        receive_key="K1",
        receive_address="A1",
        publish_key="K1",
        publish_address="A1",
    )


class TestInMemoryMarketService:
    def test_satisfies_protocol(self, market_service):
        assert isinstance(market_service, MarketService)

    @pytest.mark.asyncio
    async def test_create_assigns_sequential_ids(self, market_service):
        first = await market_service.create(make_request("a"))
        second = await market_service.create(make_request("b"))
        assert (first.id, second.id) == (1, 2)
        assert first.type is MarketType.MARKETPLACE

    @pytest.mark.asyncio
    async def test_duplicate_name_per_profile_rejected(self, market_service):
        await market_service.create(make_request())
        with pytest.raises(DuplicateEntityError) as exc_info:
            await market_service.create(make_request())
        assert exc_info.value.context.metadata == {"market_id": 1}

    @pytest.mark.asyncio
    async def test_same_name_other_profile_allowed(self, market_service):
        await market_service.create(make_request(profile_id=1))
        await market_service.create(make_request(profile_id=2))
        assert len(await market_service.list_by_profile(2)) == 1

    @pytest.mark.asyncio
    async def test_concurrent_creates_keep_names_unique(self, market_service):
        results = await asyncio.gather(
            *(market_service.create(make_request()) for _ in range(5)),
            return_exceptions=True,
        )
        created = [r for r in results if not isinstance(r, Exception)]
        assert len(created) == 1
        assert sum(isinstance(r, DuplicateEntityError) for r in results) == 4

    @pytest.mark.asyncio
    async def test_destroy(self, market_service):
        market = await market_service.create(make_request())
        assert await market_service.destroy(market.id) == market
        assert await market_service.list_by_profile(1) == []

    @pytest.mark.asyncio
    async def test_destroy_unknown(self, market_service):
        with pytest.raises(EntityNotFoundError):
            await market_service.destroy(99)
