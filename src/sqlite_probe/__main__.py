"""Command-line entry point: ``python -m sqlite_probe``.

Takes no arguments. The probe always opens an in-memory database and runs
the engine version query; the environment only tunes logging, metrics and
tracing. Exit codes:
    0: the engine version was retrieved and logged
    1: the database connection could not be opened
    2: the version query failed (logged with a traceback)
"""

from __future__ import annotations

import sys

from prometheus_client import CollectorRegistry

from sqlite_probe.adapters.outbound import SQLiteDriver
from sqlite_probe.application import VERSION_QUERY, DatabaseProbe
from sqlite_probe.domain.value_objects import ConnectionSpec
from sqlite_probe.infrastructure import (
    Config,
    get_config,
    get_logger,
    run_context,
    setup_logging,
    setup_metrics,
    setup_tracing,
    shutdown_tracing,
)
from sqlite_probe.ports.outbound import ConnectionFailure, DatabaseDriver, QueryFailure

EXIT_OK = 0
EXIT_CONNECTION_FAILURE = 1
EXIT_QUERY_FAILURE = 2


def main(
    config: Config | None = None,
    registry: CollectorRegistry | None = None,
    driver: DatabaseDriver | None = None,
) -> int:
    """Run the probe once and return the process exit code.

    Meant to be called once per process: the OpenTelemetry tracer provider
    can only be installed once, so later calls reuse the first provider
    (already shut down) and export no spans.

    Args:
        config: Observability configuration (environment-derived if None).
        registry: Prometheus registry (process-wide default if None).
        driver: Database driver (SQLiteDriver if None).
    """
    config = config or get_config()
    obs = config.observability

    setup_logging(level=obs.log_level, log_format=obs.log_format)
    setup_tracing(
        service_name=obs.otel_service_name,
        otlp_endpoint=obs.otel_endpoint,
        console_export=obs.otel_console_export,
    )
    metrics = setup_metrics(port=obs.metrics_port, registry=registry)

    logger = get_logger(__name__)
    probe = DatabaseProbe(driver or SQLiteDriver(), ConnectionSpec.in_memory(), metrics=metrics)

    with run_context(database=probe.spec.database):
        try:
            probe.run(VERSION_QUERY)
        except ConnectionFailure as e:
            logger.critical("probe_connection_failed", error=str(e))
            return EXIT_CONNECTION_FAILURE
        except QueryFailure as e:
            logger.critical(
                "probe_query_failed",
                query=VERSION_QUERY,
                error=str(e),
                exc_info=True,
            )
            return EXIT_QUERY_FAILURE
        finally:
            shutdown_tracing()

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
