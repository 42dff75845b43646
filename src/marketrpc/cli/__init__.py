"""Operator CLI (``marketrpc``)."""

from marketrpc.cli.app import app

__all__ = ["app"]
