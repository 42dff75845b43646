"""RPC request envelope."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass
class RpcRequest:
    """
    Uniform wrapper around the positional parameters of one invocation.

    Order is part of the compatibility surface: ``params[i]`` always means
    the i-th declared parameter of the target command. Only the validator
    mutates ``params``, and only by filling trailing optional slots.
    """

    params: list[Any] = field(default_factory=list)
    method: str | None = None
    id: str | int | None = None
    jsonrpc: str = "2.0"

    def __post_init__(self) -> None:
        if not isinstance(self.params, list):
            self.params = list(self.params)

    @classmethod
    def of(cls, *params: Any, method: str | None = None) -> "RpcRequest":
        """Build a request from positional values."""
        return cls(params=list(params), method=method)

    def get(self, index: int, default: Any = None) -> Any:
        """Value at ``index``, or ``default`` when the slot is absent."""
        if 0 <= index < len(self.params):
            return self.params[index]
        return default

    def __len__(self) -> int:
        return len(self.params)


def as_request(params: "RpcRequest | Sequence[Any] | None", method: str | None = None) -> RpcRequest:
    """Wrap a raw parameter sequence in an ``RpcRequest`` (requests pass through)."""
    if isinstance(params, RpcRequest):
        if method is not None and params.method is None:
            params.method = method
        return params
    return RpcRequest(params=list(params or []), method=method)
