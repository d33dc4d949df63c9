"""
Resource Settings
Configuration for localization and static resources.

Every collaborator (localizer, stream locator, properties factory, watcher)
is built when the settings object is constructed, once at application
startup, and handed to the components that need it.
"""

from datetime import timedelta
from typing import Iterable

from ..core import (
    InvalidResourceFinderConfigurationError,
    LRUCache,
    Settings,
    get_logger,
)
from ..resource import (
    ClassStringResourceLoader,
    ComponentStringResourceLoader,
    JavaScriptCompressor,
    Localizer,
    ModificationWatcher,
    PackageResourceGuard,
    PackageStringResourceLoader,
    PathStyleFinder,
    PropertiesFactory,
    ResourceFactory,
    ResourceFinder,
    ResourcePath,
    ResourceStreamLocator,
    StringResourceLoader,
)

logger = get_logger(__name__)

PROPERTIES_CACHE_SIZE = 512


class ResourceSettings:
    """Resource and localization configuration shared by an application."""

    def __init__(
        self,
        *,
        application_class: type | None = None,
        resource_finder: ResourceFinder | None = None,
        throw_exception_on_missing_resource: bool = True,
        use_default_on_missing_resource: bool = True,
        default_cache_duration: timedelta = timedelta(hours=1),
        resource_poll_frequency: timedelta | None = None,
        use_timestamp_on_resources: bool = True,
        disable_gzip_compression: bool = False,
        parent_folder_placeholder: str | None = None,
        package_resource_guard: PackageResourceGuard | None = None,
        javascript_compressor: JavaScriptCompressor | None = None,
        metrics=None,
    ):
        if default_cache_duration is None:
            raise ValueError("default_cache_duration may not be None")

        self.throw_exception_on_missing_resource = throw_exception_on_missing_resource
        self.use_default_on_missing_resource = use_default_on_missing_resource
        self.use_timestamp_on_resources = use_timestamp_on_resources
        self.disable_gzip_compression = disable_gzip_compression
        self.parent_folder_placeholder = parent_folder_placeholder

        self._default_cache_duration = default_cache_duration
        self._resource_factories: dict[str, ResourceFactory] = {}
        self._package_resource_guard = package_resource_guard or PackageResourceGuard()
        self._javascript_compressor = javascript_compressor

        self._resource_finder: ResourceFinder = resource_finder if resource_finder is not None else ResourcePath()
        self._resource_stream_locator = ResourceStreamLocator(self._resource_finder)

        self._resource_poll_frequency = resource_poll_frequency
        self._resource_watcher = (
            ModificationWatcher(resource_poll_frequency) if resource_poll_frequency else None
        )

        self._properties_factory = PropertiesFactory(
            LRUCache(
                max_size=PROPERTIES_CACHE_SIZE,
                ttl_seconds=default_cache_duration.total_seconds(),
            ),
            self._resource_watcher,
        )

        self.string_resource_loaders: list[StringResourceLoader] = [
            ComponentStringResourceLoader(self),
            PackageStringResourceLoader(self),
        ]
        if application_class is not None:
            self.string_resource_loaders.append(ClassStringResourceLoader(self, application_class))

        self._localizer = Localizer(self, metrics)
        self._properties_factory.on_invalidate(self._localizer.clear_cache)

    @classmethod
    def from_settings(
        cls, settings: Settings, application_class: type | None = None, metrics=None
    ) -> "ResourceSettings":
        """Build resource settings from environment configuration."""
        resource_settings = cls(
            application_class=application_class,
            resource_finder=ResourcePath(settings.resource_folders),
            throw_exception_on_missing_resource=settings.throw_exception_on_missing_resource,
            use_default_on_missing_resource=settings.use_default_on_missing_resource,
            default_cache_duration=settings.default_cache_duration,
            resource_poll_frequency=settings.resource_poll_frequency,
            use_timestamp_on_resources=settings.use_timestamp_on_resources,
            disable_gzip_compression=settings.disable_gzip_compression,
            parent_folder_placeholder=settings.parent_folder_placeholder,
            metrics=metrics,
        )
        logger.info(
            "resource_settings_built",
            folders=len(settings.resource_folders),
            loaders=len(resource_settings.string_resource_loaders),
            watching=resource_settings.resource_watcher is not None,
        )
        return resource_settings

    # ------------------------------------------------------------------
    # Localization
    # ------------------------------------------------------------------

    @property
    def localizer(self) -> Localizer:
        return self._localizer

    @localizer.setter
    def localizer(self, localizer: Localizer) -> None:
        if localizer is None:
            raise ValueError("localizer may not be None")
        self._localizer = localizer
        self._properties_factory.on_invalidate(localizer.clear_cache)

    @property
    def properties_factory(self) -> PropertiesFactory:
        return self._properties_factory

    @properties_factory.setter
    def properties_factory(self, factory: PropertiesFactory) -> None:
        if factory is None:
            raise ValueError("properties_factory may not be None")
        self._properties_factory = factory
        factory.on_invalidate(self._localizer.clear_cache)

    # ------------------------------------------------------------------
    # Resource factories
    # ------------------------------------------------------------------

    def add_resource_factory(self, name: str, factory: ResourceFactory) -> None:
        self._resource_factories[name] = factory

    def get_resource_factory(self, name: str) -> ResourceFactory | None:
        return self._resource_factories.get(name)

    # ------------------------------------------------------------------
    # Finding and locating
    # ------------------------------------------------------------------

    @property
    def resource_finder(self) -> ResourceFinder:
        return self._resource_finder

    @resource_finder.setter
    def resource_finder(self, finder: ResourceFinder) -> None:
        if finder is None:
            raise ValueError("resource_finder may not be None")
        self._resource_finder = finder
        # the locator is derived from the finder
        self._resource_stream_locator = ResourceStreamLocator(finder)

    def add_resource_folder(self, folder: str) -> None:
        """
        Add a folder to the resource finder.

        Raises:
            InvalidResourceFinderConfigurationError: The finder is not path-style
        """
        finder = self._resource_finder
        if not isinstance(finder, PathStyleFinder):
            raise InvalidResourceFinderConfigurationError(
                "To add a resource folder, the application's resource finder must be "
                f"path-style; got {type(finder).__name__}"
            )
        finder.add(folder)

    def add_resource_folders(self, folders: Iterable[str]) -> None:
        for folder in folders:
            self.add_resource_folder(folder)

    @property
    def resource_stream_locator(self) -> ResourceStreamLocator:
        return self._resource_stream_locator

    @resource_stream_locator.setter
    def resource_stream_locator(self, locator: ResourceStreamLocator) -> None:
        if locator is None:
            raise ValueError("resource_stream_locator may not be None")
        self._resource_stream_locator = locator

    @property
    def package_resource_guard(self) -> PackageResourceGuard:
        return self._package_resource_guard

    @package_resource_guard.setter
    def package_resource_guard(self, guard: PackageResourceGuard) -> None:
        if guard is None:
            raise ValueError("Argument package_resource_guard may not be None")
        self._package_resource_guard = guard

    # ------------------------------------------------------------------
    # Watching
    # ------------------------------------------------------------------

    @property
    def resource_poll_frequency(self) -> timedelta | None:
        return self._resource_poll_frequency

    @resource_poll_frequency.setter
    def resource_poll_frequency(self, frequency: timedelta | None) -> None:
        """Changing the frequency replaces the watcher (None turns watching off)."""
        was_running = self._resource_watcher is not None and self._resource_watcher.running
        if self._resource_watcher is not None:
            self._resource_watcher.stop()

        self._resource_poll_frequency = frequency
        self.resource_watcher = ModificationWatcher(frequency) if frequency else None
        if was_running and self._resource_watcher is not None:
            self._resource_watcher.start()

    @property
    def resource_watcher(self) -> ModificationWatcher | None:
        return self._resource_watcher

    @resource_watcher.setter
    def resource_watcher(self, watcher: ModificationWatcher | None) -> None:
        """Files loaded so far are dropped so they reload under the new watcher."""
        self._resource_watcher = watcher
        self._properties_factory.watcher = watcher
        self._properties_factory.clear()
        self._localizer.clear_cache()

    def start_resource_watcher(self) -> ModificationWatcher | None:
        """Start polling if a watcher is configured; returns the watcher."""
        if self._resource_watcher is not None:
            self._resource_watcher.start()
        return self._resource_watcher

    def stop_resource_watcher(self) -> None:
        if self._resource_watcher is not None:
            self._resource_watcher.stop()

    # ------------------------------------------------------------------
    # Caching and compression
    # ------------------------------------------------------------------

    @property
    def default_cache_duration(self) -> timedelta:
        return self._default_cache_duration

    @default_cache_duration.setter
    def default_cache_duration(self, duration: timedelta) -> None:
        if duration is None:
            raise ValueError("duration may not be None")
        self._default_cache_duration = duration
        self._properties_factory.cache.ttl_seconds = duration.total_seconds()
        self._localizer.cache.ttl_seconds = duration.total_seconds()

    @property
    def javascript_compressor(self) -> JavaScriptCompressor | None:
        return self._javascript_compressor

    def set_javascript_compressor(
        self, compressor: JavaScriptCompressor | None
    ) -> JavaScriptCompressor | None:
        """Install a compressor and return the previous one."""
        previous = self._javascript_compressor
        self._javascript_compressor = compressor
        return previous


def build_resource_settings(
    settings: Settings, application_class: type | None = None, metrics=None
) -> ResourceSettings:
    """Build the application's resource settings once, at startup."""
    return ResourceSettings.from_settings(settings, application_class, metrics)


__all__ = ["ResourceSettings", "build_resource_settings", "PROPERTIES_CACHE_SIZE"]
