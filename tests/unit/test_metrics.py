"""Tests for Prometheus metrics collection."""

import pytest
from prometheus_client import CollectorRegistry

from arbor.monitoring import MetricsCollector


@pytest.mark.unit
def test_collectors_are_isolated():
    """Each collector owns a registry unless one is supplied."""
    first = MetricsCollector()
    second = MetricsCollector()

    first.record_lifecycle_violation("on_initialize")

    assert first.value("arbor_lifecycle_violations_total", {"hook": "on_initialize"}) == 1
    assert second.value("arbor_lifecycle_violations_total", {"hook": "on_initialize"}) == 0


@pytest.mark.unit
def test_render_pass_recording():
    registry = CollectorRegistry()
    metrics = MetricsCollector(registry)

    metrics.record_render_pass("success", 0.01, 3)
    metrics.record_render_pass("violation", 0.02, 0)

    assert metrics.value("arbor_render_passes_total", {"status": "success"}) == 1
    assert metrics.value("arbor_render_passes_total", {"status": "violation"}) == 1
    assert metrics.value("arbor_components_rendered_total") == 3
    assert metrics.value("arbor_render_duration_seconds_count") == 2


@pytest.mark.unit
def test_disabled_collector_records_nothing():
    metrics = MetricsCollector(enabled=False)

    metrics.record_cache_hit("markup")
    metrics.record_localizer_lookup("found")

    assert metrics.value("arbor_cache_hits_total", {"cache_type": "markup"}) == 0
    assert metrics.value("arbor_localizer_lookups_total", {"result": "found"}) == 0


@pytest.mark.unit
def test_export():
    metrics = MetricsCollector()
    metrics.record_cache_miss("properties")

    assert b"arbor_cache_misses_total" in metrics.export()
