"""Command registry.

Manifesto:
    The registry is built once at startup from already-constructed command
    instances and then sealed.  After that it is only read, so concurrent
    dispatches can share it without locking.

Tags:
    framework, registry, command-discovery, lookup

Doc-Types:
    api-reference
"""

from collections.abc import Iterator

from marketrpc.core.errors import RegistryError, UnknownCommandError
from marketrpc.framework.commands import Command
from marketrpc.framework.logging import get_logger

logger = get_logger(__name__)


class CommandRegistry:
    """Maps unique command names to command instances."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._sealed = False

    def register(self, command: Command, name: str | None = None) -> Command:
        """
        Register a command instance under ``name`` (defaults to ``command.name``).

        The command comes first because commands carry their own name; the
        explicit ``name`` is only for aliases.

        Raises:
            RegistryError: name empty, already registered, or registry sealed
        """
        name = name or command.name
        if not name:
            raise RegistryError(f"{command.__class__.__name__} has no command name")
        if self._sealed:
            raise RegistryError(f"Registry is sealed; cannot register '{name}'")
        if name in self._commands:
            raise RegistryError(f"Command '{name}' is already registered")

        self._commands[name] = command
        logger.debug(
            "command_registered",
            name=name,
            cls=command.__class__.__name__,
            description=command.description(),
        )
        return command

    def seal(self) -> "CommandRegistry":
        """Reject further registrations."""
        self._sealed = True
        logger.debug("command_registry_sealed", registered=len(self._commands))
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, name: str) -> Command:
        """Get a command by name."""
        try:
            return self._commands[name]
        except KeyError:
            raise UnknownCommandError(name) from None

    def names(self) -> list[str]:
        """List all registered command names."""
        return sorted(self._commands)

    def metadata(self, name: str) -> dict[str, str]:
        """``usage``/``help``/``example``/``description`` for one command."""
        return self.get(name).metadata()

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands[name] for name in self.names())
