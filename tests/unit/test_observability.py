"""Unit tests for logging, metrics and tracing setup."""

from __future__ import annotations

import io
import json
import warnings

import pytest
from prometheus_client import CollectorRegistry

from sqlite_probe.infrastructure.logging import get_logger, run_context, setup_logging
from sqlite_probe.infrastructure.metrics import setup_metrics
from sqlite_probe.infrastructure.tracing import get_tracer, setup_tracing, trace_span


@pytest.mark.unit
class TestLogging:
    """Tests for setup_logging."""

    def _log_failure(self) -> None:
        logger = get_logger(__name__)
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logger.critical("probe_query_failed", exc_info=True)

    def test_json_renders_exception(self) -> None:
        stream = io.StringIO()
        setup_logging(log_format="json", stream=stream)

        with run_context(database=":memory:"):
            self._log_failure()

        event = json.loads(stream.getvalue().strip())
        assert event["event"] == "probe_query_failed"
        assert event["database"] == ":memory:"
        assert "RuntimeError: boom" in event["exception"]

    def test_console_renders_exception_without_warning(self) -> None:
        stream = io.StringIO()
        setup_logging(log_format="console", stream=stream)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            self._log_failure()

        assert "probe_query_failed" in stream.getvalue()
        assert "boom" in stream.getvalue()
        assert [w for w in caught if "format_exc_info" in str(w.message)] == []

    def test_level_filtering(self) -> None:
        stream = io.StringIO()
        setup_logging(level="WARNING", stream=stream)

        get_logger(__name__).info("sqlite_version", version="3.41.2")

        assert stream.getvalue() == ""


@pytest.mark.unit
class TestMetricsSetup:
    """Tests for setup_metrics."""

    def test_same_registry_reused(self) -> None:
        registry = CollectorRegistry()

        first = setup_metrics(registry=registry)
        second = setup_metrics(registry=registry)

        assert first is second
        assert registry.get_sample_value(
            "probe_info", {"version": "0.1.0"}
        ) == 1.0

    def test_new_registry_gets_new_metrics(self) -> None:
        first = setup_metrics(registry=CollectorRegistry())
        second = setup_metrics(registry=CollectorRegistry())

        assert first is not second


@pytest.mark.unit
class TestTracingSetup:
    """Tests for setup_tracing."""

    def test_repeated_setup_does_not_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        setup_tracing(console_export=False)
        setup_tracing(console_export=False)

        assert "Overriding of current TracerProvider" not in caplog.text
        assert get_tracer() is not None

    def test_trace_span_sets_attributes(self) -> None:
        with trace_span("probe.query", {"db.system": "sqlite"}) as span:
            assert span is not None
