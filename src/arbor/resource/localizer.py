"""
Localizer
Resolves localized strings through the configured string resource loaders.
"""

from pathlib import Path

from ..core import LRUCache, MissingResourceError, get_logger

logger = get_logger(__name__)

LOCALIZER_CACHE_SIZE = 1024


class Localizer:
    """
    Asks each string resource loader in turn and caches hits.

    Missing keys follow the resource settings: the caller's default wins when
    ``use_default_on_missing_resource`` is set; otherwise
    ``throw_exception_on_missing_resource`` decides between raising and
    returning a warning placeholder. Hits expire after the settings'
    ``default_cache_duration``.
    """

    def __init__(self, resource_settings, metrics=None):
        self.resource_settings = resource_settings
        self.metrics = metrics
        self.cache: LRUCache[str] = LRUCache(
            max_size=LOCALIZER_CACHE_SIZE,
            ttl_seconds=resource_settings.default_cache_duration.total_seconds(),
        )

    @staticmethod
    def _cache_key(key: str, component, locale: str | None, style: str | None) -> str:
        if component is None:
            scope = ""
        else:
            classes = ".".join(type(c).__qualname__ for c in [component, *component.ancestors()])
            scope = f"{classes}:{component.path}"
        return f"{key}|{scope}|{locale or ''}|{style or ''}"

    def get_string(
        self,
        key: str,
        component=None,
        default: str | None = None,
        locale: str | None = None,
        style: str | None = None,
    ) -> str:
        if locale is None and component is not None:
            locale = component.get_locale()

        cache_key = self._cache_key(key, component, locale, style)
        cached = self.cache.get(cache_key)
        if cached is not None:
            self._record("cached")
            return cached

        for loader in self.resource_settings.string_resource_loaders:
            value = loader.load(component, key, locale, style)
            if value is not None:
                self.cache.set(cache_key, value)
                self._record("found")
                return value

        self._record("missing")
        settings = self.resource_settings
        if settings.use_default_on_missing_resource and default is not None:
            return default

        path = component.path if component is not None else None
        if settings.throw_exception_on_missing_resource:
            logger.warning("resource_missing", key=key, component=path, locale=locale)
            raise MissingResourceError(key, path, locale)

        return f"[Warning: Property for '{key}' not found]"

    def clear_cache(self, path: Path | None = None) -> None:
        self.cache.clear()

    def _record(self, result: str) -> None:
        if self.metrics:
            self.metrics.record_localizer_lookup(result)


__all__ = ["Localizer", "LOCALIZER_CACHE_SIZE"]
