"""
market-rpc - positional RPC command layer for market operations.

Each RPC operation is a command with a declarative positional parameter
contract. The dispatcher validates every request against that contract
before the command delegates to its domain service.
"""

from marketrpc.app import build_dispatcher, build_registry

__version__ = "0.1.0"

__all__ = ["build_dispatcher", "build_registry", "__version__"]
