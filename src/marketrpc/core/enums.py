"""
Shared enums and enum helpers for the market RPC layer.

Enum-typed command parameters are matched against member *names*
(``"MARKETPLACE"``), not values, and the match is case-sensitive.

STDLIB ONLY - NO PYDANTIC.
"""

from enum import Enum


class MarketType(str, Enum):
    """
    Kind of market a profile can join or create.

    MARKETPLACE is the shared default market; storefronts are owned by a
    single seller, with STOREFRONT_ADMIN marking the owner's own copy.
    """

    MARKETPLACE = "MARKETPLACE"
    STOREFRONT = "STOREFRONT"
    STOREFRONT_ADMIN = "STOREFRONT_ADMIN"


def member_names(enum_class: type[Enum]) -> tuple[str, ...]:
    """Return the declared member names of an enum, in declaration order."""
    return tuple(enum_class.__members__.keys())


def contains_name(enum_class: type[Enum], value: object) -> bool:
    """Check whether ``value`` is exactly one of the enum's member names."""
    return isinstance(value, str) and value in enum_class.__members__
