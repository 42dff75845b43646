"""Market commands: ``market.add``, ``market.list``, ``market.remove``."""

from __future__ import annotations

from marketrpc.core.enums import MarketType
from marketrpc.domain.market import Market, MarketCreateRequest, MarketService
from marketrpc.framework.commands import Command
from marketrpc.framework.params import CommandContract, ParamDef, ParamType, length_equals, requires_slot
from marketrpc.framework.request import RpcRequest


class MarketAddCommand(Command):
    """
    Create a market for a profile.

    params:
        [0]: profileId, number
        [1]: name, string
        [2]: type, MarketType member name
        [3]: receiveKey, string
        [4]: receiveAddress, string
        [5]: publishKey, string, defaults to receiveKey
        [6]: publishAddress, string, defaults to receiveAddress

    The publish key and address are given together or not at all.
    """

    name = "market.add"
    summary = "Create a new market."
    contract = CommandContract(
        params=(
            ParamDef(0, "profileId", ParamType.NUMBER, "The id of the profile creating the market."),
            ParamDef(1, "name", ParamType.STRING, "The unique name of the market being created."),
            ParamDef(2, "type", ParamType.ENUM, "The type of the market.", enum=MarketType),
            ParamDef(3, "receiveKey", ParamType.STRING, "The receive private key of the market."),
            ParamDef(4, "receiveAddress", ParamType.STRING, "The receive address matching the receive private key."),
            ParamDef(5, "publishKey", ParamType.STRING, "The publish private key of the market.",
                     required=False, default_from=3),
            ParamDef(6, "publishAddress", ParamType.STRING, "The publish address matching the publish private key.",
                     required=False, default_from=4),
        ),
        guards=(
            length_equals(6, "publishAddress"),
            requires_slot(6, 5, "publishAddress"),
            requires_slot(5, 6, "publishAddress"),
        ),
        examples=(
            "market.add 1 'mymarket' 'MARKETPLACE' '2Zc2pc9jSx2qF5tpu25DCZEr1Dwj8JBoVL5WP4H1drJsX9sP4ek' "
            "'pmktyVZshdMAQ6DPbbRXEFNGuzMbTMkqAA'",
        ),
    )

    def __init__(self, market_service: MarketService) -> None:
        self.market_service = market_service

    async def execute(self, request: RpcRequest) -> Market:
        params = request.params
        return await self.market_service.create(
            MarketCreateRequest(
                profile_id=params[0],
                name=params[1],
                type=MarketType[params[2]],
                receive_key=params[3],
                receive_address=params[4],
                publish_key=params[5],
                publish_address=params[6],
            )
        )


class MarketListCommand(Command):
    """List the markets of a profile."""

    name = "market.list"
    summary = "List the markets of a profile."
    contract = CommandContract(
        params=(ParamDef(0, "profileId", ParamType.NUMBER, "The id of the profile."),),
        examples=("market.list 1",),
    )

    def __init__(self, market_service: MarketService) -> None:
        self.market_service = market_service

    async def execute(self, request: RpcRequest) -> list[Market]:
        return await self.market_service.list_by_profile(request.params[0])


class MarketRemoveCommand(Command):
    name = "market.remove"
    summary = "Remove a market."
    contract = CommandContract(
        params=(ParamDef(0, "marketId", ParamType.NUMBER, "The id of the market to remove."),),
        examples=("market.remove 1",),
    )

    def __init__(self, market_service: MarketService) -> None:
        self.market_service = market_service

    async def execute(self, request: RpcRequest) -> Market:
        return await self.market_service.destroy(request.params[0])
