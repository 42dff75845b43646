"""Core primitives: error taxonomy, shared enums, settings."""

from marketrpc.core.enums import MarketType, contains_name, member_names
from marketrpc.core.errors import (
    ContractError,
    DuplicateEntityError,
    EntityNotFoundError,
    ErrorCategory,
    ErrorContext,
    InvalidParameterTypeError,
    MissingParameterError,
    RegistryError,
    RpcError,
    ServiceError,
    UnknownCommandError,
    ValidationError,
)

__all__ = [
    "MarketType",
    "contains_name",
    "member_names",
    "ErrorCategory",
    "ErrorContext",
    "RpcError",
    "ValidationError",
    "MissingParameterError",
    "InvalidParameterTypeError",
    "UnknownCommandError",
    "ServiceError",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "ContractError",
    "RegistryError",
]
