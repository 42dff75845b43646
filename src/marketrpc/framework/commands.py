"""Base command interface."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from marketrpc.framework.params import CommandContract
from marketrpc.framework.request import RpcRequest


class Command(ABC):
    """
    Base class for all RPC commands.

    A command owns one immutable ``CommandContract`` and references the
    services it delegates to. Instances are built once at startup and
    reused across invocations, so they must not keep per-request state.
    """

    # Command metadata
    name: ClassVar[str] = ""
    summary: ClassVar[str] = ""
    contract: ClassVar[CommandContract] = CommandContract()

    def validate(self, request: RpcRequest) -> RpcRequest:
        """Validate and normalize ``request`` against the command's contract."""
        return self.contract.validate(request)

    @abstractmethod
    async def execute(self, request: RpcRequest) -> Any:
        """
        Run the command against an already-validated request.

        Implementations build a typed domain request from ``request.params``
        and return the service result unchanged.
        """
        ...

    # ------------------------------------------------------------------
    # Operator-facing metadata
    # ------------------------------------------------------------------

    def description(self) -> str:
        return self.summary

    def usage(self) -> str:
        args = self.contract.usage_args()
        return f"{self.name} {args}" if args else self.name

    def help(self) -> str:
        text = f"{self.usage()} - {self.description()}"
        params_help = self.contract.get_help_text()
        return f"{text}\n{params_help}" if params_help else text

    def example(self) -> str:
        return "\n".join(self.contract.examples)

    def metadata(self) -> dict[str, str]:
        """All metadata strings keyed by kind."""
        return {
            "usage": self.usage(),
            "help": self.help(),
            "example": self.example(),
            "description": self.description(),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
