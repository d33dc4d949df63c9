"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..application import Application
from ..lifecycle import LifecycleController
from ..markup import CachingMarkupSource, DictMarkupSource, MarkupSource
from ..monitoring import MetricsCollector
from ..settings import ResourceSettings, build_resource_settings
from .cache import LRUCache
from .config import Settings, get_settings


class CoreModule(Module):
    """Core dependencies, built once at startup."""

    def __init__(
        self,
        settings: Settings | None = None,
        markup_source: MarkupSource | None = None,
        application_class: type[Application] = Application,
    ) -> None:
        self.settings = settings
        self.markup_source = markup_source
        self.application_class = application_class

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide explicit settings or the environment-backed ones."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_metrics(self, settings: Settings) -> MetricsCollector:
        """Provide metrics collector with its own registry."""
        return MetricsCollector(enabled=settings.enable_metrics)

    @singleton
    @provider
    def provide_resource_settings(
        self, settings: Settings, metrics: MetricsCollector
    ) -> ResourceSettings:
        """Provide resource settings with all collaborators constructed."""
        return build_resource_settings(settings, self.application_class, metrics)

    @singleton
    @provider
    def provide_markup_source(
        self, settings: Settings, resource_settings: ResourceSettings, metrics: MetricsCollector
    ) -> MarkupSource:
        """Provide markup source, cached when enabled."""
        source = self.markup_source if self.markup_source is not None else DictMarkupSource()
        if not settings.enable_markup_cache:
            return source
        cache = LRUCache(
            max_size=settings.markup_cache_size,
            ttl_seconds=resource_settings.default_cache_duration.total_seconds(),
        )
        return CachingMarkupSource(source, cache, metrics)

    @singleton
    @provider
    def provide_controller(
        self, markup_source: MarkupSource, metrics: MetricsCollector
    ) -> LifecycleController:
        """Provide lifecycle controller."""
        return LifecycleController(markup_source, metrics=metrics)

    @singleton
    @provider
    def provide_application(
        self,
        settings: Settings,
        resource_settings: ResourceSettings,
        controller: LifecycleController,
        metrics: MetricsCollector,
    ) -> Application:
        """Provide the application instance."""
        return self.application_class(settings, resource_settings, controller, metrics)


def create_container(
    settings: Settings | None = None,
    markup_source: MarkupSource | None = None,
    application_class: type[Application] = Application,
) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings, markup_source, application_class)])
