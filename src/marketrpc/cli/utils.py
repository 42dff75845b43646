"""
CLI utility helpers - argument parsing and output formatting.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from enum import Enum
from typing import Any

import typer
from rich.console import Console

from marketrpc.core.errors import RpcError

console = Console()
err_console = Console(stderr=True)


def parse_param(raw: str) -> Any:
    """Parse one CLI argument as a JSON literal, falling back to the raw string.

    ``42`` -> 42, ``true`` -> True, ``null`` -> None, ``mymarket`` -> "mymarket".
    """
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _to_jsonable(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if hasattr(obj, "__dataclass_fields__"):
        return {k: _to_jsonable(v) for k, v in asdict(obj).items()}
    if isinstance(obj, list | tuple):
        return [_to_jsonable(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _to_jsonable(v) for k, v in obj.items()}
    return obj


def output_result(result: Any) -> None:
    """Render a command result as JSON."""
    console.print_json(json.dumps(_to_jsonable(result), default=str))


def output_error(error: RpcError, *, as_json: bool = False) -> None:
    """Render an RPC error and exit non-zero."""
    if as_json:
        err_console.print_json(json.dumps(error.to_dict(), default=str))
    else:
        err_console.print(f"[bold red]Error[/bold red] ({error.__class__.__name__}): {error.message}")
    raise typer.Exit(code=1)
