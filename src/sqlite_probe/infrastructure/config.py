"""Configuration management for the probe.

Only observability settings are configurable. The database (in-memory) and
the query (the engine version) are fixed by the probe itself.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    metrics_port: int | None = Field(
        default=None, ge=1, le=65535, description="Prometheus metrics port (disabled if unset)"
    )
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_console_export: bool = Field(
        default=False, description="Also print finished spans to the console"
    )
    otel_service_name: str = Field(default="sqlite_probe", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for the probe."""

    model_config = SettingsConfigDict(
        env_prefix="SQLITE_PROBE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
