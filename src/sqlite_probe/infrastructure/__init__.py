"""Infrastructure layer - cross-cutting concerns."""

from sqlite_probe.infrastructure.config import Config, get_config
from sqlite_probe.infrastructure.logging import setup_logging, get_logger, run_context
from sqlite_probe.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from sqlite_probe.infrastructure.tracing import setup_tracing, shutdown_tracing, get_tracer

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "run_context",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "shutdown_tracing",
    "get_tracer",
]
