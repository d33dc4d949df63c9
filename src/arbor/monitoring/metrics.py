"""
Metrics Collection
Prometheus metrics for render passes, caches and localization
"""

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the framework.

    Every collector owns its registry unless one is passed in, so several
    applications can live in one process.
    """

    def __init__(self, registry: CollectorRegistry | None = None, enabled: bool = True) -> None:
        self.registry = registry or CollectorRegistry()
        self.enabled = enabled

        # Render metrics
        self.render_passes_total = Counter(
            "arbor_render_passes_total",
            "Total number of render passes",
            ["status"],
            registry=self.registry,
        )
        self.render_duration = Histogram(
            "arbor_render_duration_seconds",
            "Render pass duration in seconds",
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
            registry=self.registry,
        )
        self.components_rendered_total = Counter(
            "arbor_components_rendered_total",
            "Total number of components rendered",
            registry=self.registry,
        )
        self.lifecycle_violations_total = Counter(
            "arbor_lifecycle_violations_total",
            "Hook overrides that did not call the base implementation",
            ["hook"],
            registry=self.registry,
        )

        # Cache metrics
        self.cache_hits = Counter(
            "arbor_cache_hits_total",
            "Total number of cache hits",
            ["cache_type"],
            registry=self.registry,
        )
        self.cache_misses = Counter(
            "arbor_cache_misses_total",
            "Total number of cache misses",
            ["cache_type"],
            registry=self.registry,
        )

        # Localization metrics
        self.localizer_lookups_total = Counter(
            "arbor_localizer_lookups_total",
            "Localized string lookups",
            ["result"],
            registry=self.registry,
        )

    def record_render_pass(self, status: str, duration: float, components: int) -> None:
        """Record a finished render pass."""
        if not self.enabled:
            return
        self.render_passes_total.labels(status=status).inc()
        self.render_duration.observe(duration)
        self.components_rendered_total.inc(components)

    def record_lifecycle_violation(self, hook: str) -> None:
        if self.enabled:
            self.lifecycle_violations_total.labels(hook=hook).inc()

    def record_cache_hit(self, cache_type: str) -> None:
        if self.enabled:
            self.cache_hits.labels(cache_type=cache_type).inc()

    def record_cache_miss(self, cache_type: str) -> None:
        if self.enabled:
            self.cache_misses.labels(cache_type=cache_type).inc()

    def record_localizer_lookup(self, result: str) -> None:
        if self.enabled:
            self.localizer_lookups_total.labels(result=result).inc()

    def value(self, name: str, labels: dict[str, str] | None = None) -> float:
        """Current sample value (0.0 if never recorded)."""
        result = self.registry.get_sample_value(name, labels or {})
        return result if result is not None else 0.0

    def export(self) -> bytes:
        """Prometheus text exposition of all metrics."""
        return generate_latest(self.registry)
