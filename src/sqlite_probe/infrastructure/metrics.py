"""Prometheus metrics for the probe."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all probe metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        self.runs_total = Counter(
            "probe_runs_total",
            "Total number of probe runs",
            ["outcome"],  # success, connection_failure, query_failure
            registry=self._registry,
        )

        # Connection metrics
        self.connections_opened_total = Counter(
            "probe_connections_opened_total",
            "Total number of database connections opened",
            ["engine"],
            registry=self._registry,
        )

        self.connections_closed_total = Counter(
            "probe_connections_closed_total",
            "Total number of database connections closed",
            ["engine"],
            registry=self._registry,
        )

        # Query metrics
        self.query_latency_seconds = Histogram(
            "probe_query_latency_seconds",
            "Scalar query latency in seconds",
            ["engine"],
            buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
            registry=self._registry,
        )

        self.info = Info(
            "probe",
            "Probe and database engine information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(
    port: int | None = None,
    registry: CollectorRegistry | None = None,
) -> MetricsRegistry:
    """
    Set up the metrics registry and, optionally, the Prometheus HTTP server.

    Metrics already registered on the same collector registry are reused,
    so calling this twice does not register duplicate time series.

    Args:
        port: Port for the metrics HTTP server. No server is started if None.
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    target = registry or REGISTRY
    if _metrics is not None and _metrics.registry is target:
        return _metrics

    _metrics = MetricsRegistry(target)

    from sqlite_probe import __version__
    _metrics.info.info({
        "version": __version__,
    })

    if port is not None:
        start_http_server(port, registry=target)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
