"""
Structured error types for the market RPC layer.

Every failure that leaves the command layer is one of the typed errors below.
They carry a category, a retry flag, structured context and an optional
chained cause, so transports can serialize them without inspecting messages.

Manifesto:
    - **Typed taxonomy:** Missing parameters, bad parameter types, unknown
      commands and service failures are distinct classes
    - **No translation:** The dispatcher surfaces these unmodified; the same
      taxonomy is shared end-to-end
    - **Never retried:** Nothing in this layer retries; ``retryable`` is a
      hint for callers only

Architecture:
    ::

        RpcError
        ├── ValidationError            (VALIDATION)
        │   ├── MissingParameterError
        │   └── InvalidParameterTypeError
        ├── UnknownCommandError        (DISPATCH)
        ├── ServiceError               (SERVICE)
        │   ├── DuplicateEntityError
        │   └── EntityNotFoundError
        ├── ContractError              (CONFIG)
        └── RegistryError              (CONFIG)

Examples:
    >>> error = MissingParameterError("profileId")
    >>> str(error)
    'Missing profileId.'
    >>> error.to_dict()["param_name"]
    'profileId'

Tags:
    error-handling, exception-hierarchy, validation, rpc

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for routing and serialization."""

    VALIDATION = "VALIDATION"  # Parameter contract violations
    DISPATCH = "DISPATCH"  # Command resolution
    SERVICE = "SERVICE"  # Downstream domain service
    CONFIG = "CONFIG"  # Startup wiring, malformed contracts
    INTERNAL = "INTERNAL"  # Bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        command: Name of the command being dispatched
        request_id: Identifier of the RPC request
        metadata: Additional key-value pairs
    """

    command: str | None = None
    request_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        for key in ["command", "request_id"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class RpcError(Exception):
    """
    Base exception for all market RPC errors.

    Subclasses set ``default_category`` and ``default_retryable``.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> RpcError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ServiceError("Market store unavailable").with_context(
                command="market.add", request_id="abc123"
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(RpcError):
    """
    Parameter contract violation.

    Raised before any service call; a failed validation guarantees that no
    state was mutated.
    """

    default_category = ErrorCategory.VALIDATION
    default_retryable = False

    def __init__(self, message: str, *, param_name: str, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.param_name = param_name

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["param_name"] = self.param_name
        return result


class MissingParameterError(ValidationError):
    """A required positional parameter was absent."""

    def __init__(self, param_name: str, **kwargs: Any):
        super().__init__(f"Missing {param_name}.", param_name=param_name, **kwargs)


class InvalidParameterTypeError(ValidationError):
    """A present parameter failed its type or enum-membership check."""

    def __init__(self, param_name: str, expected_type: str, **kwargs: Any):
        super().__init__(
            f"Invalid {param_name}, expected {expected_type}.",
            param_name=param_name,
            **kwargs,
        )
        self.expected_type = expected_type

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["expected_type"] = self.expected_type
        return result


# =============================================================================
# DISPATCH ERRORS
# =============================================================================


class UnknownCommandError(RpcError):
    """Dispatch target is not registered."""

    default_category = ErrorCategory.DISPATCH

    def __init__(self, command_name: str, **kwargs: Any):
        self.command_name = command_name
        super().__init__(f"Unknown command: {command_name}", **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["command_name"] = self.command_name
        return result


# =============================================================================
# SERVICE ERRORS
# =============================================================================


class ServiceError(RpcError):
    """
    Failure raised by a downstream domain service.

    The command layer never inspects or translates these.
    """

    default_category = ErrorCategory.SERVICE


class DuplicateEntityError(ServiceError):
    """An entity with the same identity already exists."""

    pass


class EntityNotFoundError(ServiceError):
    """The referenced entity does not exist."""

    pass


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ContractError(RpcError):
    """A parameter contract is malformed."""

    default_category = ErrorCategory.CONFIG


class RegistryError(RpcError):
    """Command registration failed (duplicate name or sealed registry)."""

    default_category = ErrorCategory.CONFIG


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def is_validation_error(error: Exception) -> bool:
    """Check if an error is a parameter contract violation."""
    return isinstance(error, ValidationError)


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, RpcError):
        return error.category
    return ErrorCategory.INTERNAL


__all__ = [
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
    "is_validation_error",
    "categorize_error",
]
