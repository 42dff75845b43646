"""
Shared pytest fixtures for market-rpc tests.

This module provides:
- Logging-context cleanup for test isolation
- A fresh in-memory market service, registry and dispatcher per test
- Canonical ``market.add`` parameter lists
"""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Ensure marketrpc package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from marketrpc.app import build_registry
from marketrpc.framework.dispatcher import CommandDispatcher
from marketrpc.framework.logging import clear_context
from marketrpc.framework.registry import CommandRegistry
from marketrpc.services.market import InMemoryMarketService


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "integration" in str(test_path):
            item.add_marker(pytest.mark.integration)
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_log_context() -> Generator[None, None, None]:
    """Reset the request log context before and after each test."""
    clear_context()
    yield
    clear_context()


@pytest.fixture
def market_service() -> InMemoryMarketService:
    return InMemoryMarketService()


@pytest.fixture
def registry(market_service: InMemoryMarketService) -> CommandRegistry:
    return build_registry(market_service)


@pytest.fixture
def dispatcher(registry: CommandRegistry) -> CommandDispatcher:
    return CommandDispatcher(registry, caller="test")


@pytest.fixture
def market_add_params() -> list:
    """profileId, name, type, receiveKey, receiveAddress (publish pair omitted)."""
    return [42, "mymarket", "MARKETPLACE", "K1", "A1"]
