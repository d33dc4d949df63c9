"""
String Resource Loaders
Strategies the localizer asks, in order, for a localized string.
"""

from typing import Iterable, Protocol


class StringResourceLoader(Protocol):
    """Returns the string for ``key`` or None if it has none."""

    def load(self, component, key: str, locale: str | None, style: str | None) -> str | None:
        ...


def _lookup(properties: dict[str, str], prefix: str, key: str) -> str | None:
    """Try ``a.b.key``, ``b.key``, then ``key``."""
    while prefix:
        value = properties.get(f"{prefix}.{key}")
        if value is not None:
            return value
        prefix = prefix.partition(".")[2]
    return properties.get(key)


def _classes(cls: type) -> Iterable[type]:
    return (c for c in cls.__mro__ if c is not object)


class _PropertiesLoader:
    def __init__(self, resource_settings):
        self.resource_settings = resource_settings

    def _find(
        self,
        scope: type | None,
        path: str,
        locale: str | None,
        style: str | None,
        prefix: str,
        key: str,
    ) -> str | None:
        locator = self.resource_settings.resource_stream_locator
        factory = self.resource_settings.properties_factory
        for found in locator.locate_all(scope, path, locale, style):
            value = _lookup(factory.load(found), prefix, key)
            if value is not None:
                return value
        return None


class ComponentStringResourceLoader(_PropertiesLoader):
    """
    Looks in properties files named after the classes of the component's
    page and containers, outermost first. Keys may be prefixed with the
    component's ``.``-separated path relative to the file's owner.
    """

    def load(self, component, key, locale, style):
        if component is None:
            return None

        chain = list(reversed(list(component.ancestors()))) + [component]
        for container in chain:
            prefix = component.relative_path(container) if container is not component else ""
            for cls in _classes(type(container)):
                value = self._find(cls, f"{cls.__name__}.properties", locale, style, prefix, key)
                if value is not None:
                    return value
        return None


class PackageStringResourceLoader(_PropertiesLoader):
    """Looks in ``package.properties`` files from the component's package upwards."""

    filename = "package.properties"

    def load(self, component, key, locale, style):
        if component is None:
            return None

        searched: set[str] = set()
        for cls in _classes(type(component)):
            package = cls.__module__.rpartition(".")[0]
            while package and package not in searched:
                searched.add(package)
                directory = package.replace(".", "/")
                value = self._find(None, f"{directory}/{self.filename}", locale, style, "", key)
                if value is not None:
                    return value
                package = package.rpartition(".")[0]
        return None


class ClassStringResourceLoader(_PropertiesLoader):
    """Looks in the properties file of one fixed class (usually the application)."""

    def __init__(self, resource_settings, cls: type):
        super().__init__(resource_settings)
        self.cls = cls

    def load(self, component, key, locale, style):
        for cls in _classes(self.cls):
            value = self._find(cls, f"{cls.__name__}.properties", locale, style, "", key)
            if value is not None:
                return value
        return None


__all__ = [
    "StringResourceLoader",
    "ComponentStringResourceLoader",
    "PackageStringResourceLoader",
    "ClassStringResourceLoader",
]
