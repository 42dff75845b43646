"""
Tests for marketrpc.framework.registry module.

Tests cover:
- Registration by command name or explicit name
- Duplicate and sealed registration errors
- Lookup and unknown-command errors
- Metadata access
"""

import pytest

from marketrpc.core.errors import RegistryError, UnknownCommandError
from marketrpc.framework.commands import Command
from marketrpc.framework.params import CommandContract, ParamDef, ParamType
from marketrpc.framework.registry import CommandRegistry


class EchoCommand(Command):
    name = "test.echo"
    summary = "Echo the first parameter."
    contract = CommandContract(params=(ParamDef(0, "value", ParamType.STRING),), examples=("test.echo hi",))

    async def execute(self, request):
        return request.params[0]


class NamelessCommand(Command):
    async def execute(self, request):
        return None


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


class TestRegister:
    def test_register_uses_command_name(self, registry):
        command = EchoCommand()
        assert registry.register(command) is command
        assert "test.echo" in registry
        assert len(registry) == 1

    def test_register_under_explicit_name(self, registry):
        registry.register(EchoCommand(), name="test.alias")
        assert registry.names() == ["test.alias"]

    def test_duplicate_raises(self, registry):
        registry.register(EchoCommand())
        with pytest.raises(RegistryError, match="already registered"):
            registry.register(EchoCommand())

    def test_nameless_command_rejected(self, registry):
        with pytest.raises(RegistryError, match="no command name"):
            registry.register(NamelessCommand())

    def test_sealed_registry_rejects_registration(self, registry):
        registry.register(EchoCommand())
        assert registry.seal() is registry
        assert registry.sealed
        with pytest.raises(RegistryError, match="sealed"):
            registry.register(EchoCommand(), name="test.other")
        assert registry.names() == ["test.echo"]


class TestLookup:
    def test_get_registered(self, registry):
        command = registry.register(EchoCommand())
        assert registry.get("test.echo") is command

    def test_get_unknown_raises(self, registry):
        with pytest.raises(UnknownCommandError) as exc_info:
            registry.get("test.missing")
        assert exc_info.value.command_name == "test.missing"

    def test_names_sorted_and_iteration_follows(self, registry):
        registry.register(EchoCommand(), name="b.cmd")
        registry.register(EchoCommand(), name="a.cmd")
        assert registry.names() == ["a.cmd", "b.cmd"]
        assert len(list(registry)) == 2

    def test_metadata(self, registry):
        registry.register(EchoCommand())
        metadata = registry.metadata("test.echo")
        assert set(metadata) == {"usage", "help", "example", "description"}
        assert metadata["usage"] == "test.echo <value>"
        assert metadata["example"] == "test.echo hi"

    def test_metadata_unknown_raises(self, registry):
        with pytest.raises(UnknownCommandError):
            registry.metadata("nope")
