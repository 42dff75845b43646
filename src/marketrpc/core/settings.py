"""Runtime settings for the market RPC layer.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.
    Settings are read once at startup from ``MARKETRPC_*`` environment
    variables or a ``.env`` file.

Examples:
    >>> from marketrpc.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'

Tags:
    settings, configuration, pydantic, environment

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RpcSettings(BaseSettings):
    """Settings shared by the CLI and any embedding transport.

    Fields
    ──────
    debug        : Enable debug mode (forces DEBUG log level)
    log_level    : Structlog log level
    log_format   : ``console`` for development, ``json`` for aggregation
    """

    model_config = SettingsConfigDict(
        env_prefix="MARKETRPC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log renderer",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_format", mode="before")
    @classmethod
    def _lower_format(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @property
    def effective_log_level(self) -> str:
        """Log level after applying ``debug``."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> RpcSettings:
    """Return the process-wide settings (cached)."""
    return RpcSettings()
