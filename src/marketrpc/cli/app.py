"""
Root Typer application for the ``marketrpc`` CLI.

Commands run against an in-memory market service, so state lives only for
the duration of one invocation. The CLI is for inspecting command contracts
and trying invocations, not for operating a real market.
"""

from __future__ import annotations

import typer
from rich.table import Table
from rich.text import Text

from marketrpc.app import build_dispatcher
from marketrpc.cli.utils import console, output_error, output_result, parse_param
from marketrpc.core.errors import RpcError
from marketrpc.core.settings import get_settings
from marketrpc.framework.dispatcher import CommandDispatcher
from marketrpc.framework.logging import configure_logging
from marketrpc.services.market import InMemoryMarketService

app = typer.Typer(
    name="marketrpc",
    help="marketrpc - positional RPC commands for markets.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        from marketrpc import __version__

        typer.echo(f"marketrpc {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """marketrpc CLI - list, describe and invoke RPC commands."""
    settings = get_settings()
    configure_logging(level=settings.effective_log_level, format=settings.log_format)


def _dispatcher() -> CommandDispatcher:
    return build_dispatcher(InMemoryMarketService(), caller="cli")


@app.command("commands")
def list_commands() -> None:
    """List registered commands."""
    registry = _dispatcher().registry
    table = Table(title="Commands")
    table.add_column("Name", style="cyan")
    table.add_column("Usage")
    table.add_column("Description")
    for command in registry:
        table.add_row(command.name, Text(command.usage()), Text(command.description()))
    console.print(table)


@app.command("help")
def show_help(
    name: str = typer.Argument(..., help="Command name, e.g. market.add"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show help and an example for one command."""
    try:
        metadata = _dispatcher().registry.metadata(name)
    except RpcError as e:
        output_error(e, as_json=json_out)
        return

    if json_out:
        output_result(metadata)
        return
    console.print(metadata["help"], markup=False)
    if metadata["example"]:
        console.print("\n[bold]Example:[/bold]")
        console.print(metadata["example"], markup=False)


@app.command("call")
def call(
    name: str = typer.Argument(..., help="Command name, e.g. market.add"),
    params: list[str] | None = typer.Argument(None, help="Positional parameters (JSON literals or strings)"),  # noqa: UP007
    json_out: bool = typer.Option(False, "--json", help="Render errors as JSON."),
) -> None:
    """Validate and execute one command."""
    values = [parse_param(p) for p in params or []]
    try:
        result = _dispatcher().dispatch_sync(name, values)
    except RpcError as e:
        output_error(e, as_json=json_out)
        return
    output_result(result)
