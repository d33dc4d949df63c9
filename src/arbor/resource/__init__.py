"""Resource finding, localization and static resources."""

from .finder import ResourceFinder, PathStyleFinder, ResourcePath, PackageResourceFinder
from .locator import ResourceStreamLocator, resource_names, locale_candidates, package_dir
from .properties import PropertiesFactory, parse_properties
from .watcher import ModificationWatcher
from .guard import PackageResourceGuard
from .compressor import JavaScriptCompressor, WhitespaceJavaScriptCompressor
from .loaders import (
    StringResourceLoader,
    ComponentStringResourceLoader,
    PackageStringResourceLoader,
    ClassStringResourceLoader,
)
from .localizer import Localizer
from .static import ResourceFactory, ResourceResponse, StaticResourceResolver

__all__ = [
    "ResourceFinder",
    "PathStyleFinder",
    "ResourcePath",
    "PackageResourceFinder",
    "ResourceStreamLocator",
    "resource_names",
    "locale_candidates",
    "package_dir",
    "PropertiesFactory",
    "parse_properties",
    "ModificationWatcher",
    "PackageResourceGuard",
    "JavaScriptCompressor",
    "WhitespaceJavaScriptCompressor",
    "StringResourceLoader",
    "ComponentStringResourceLoader",
    "PackageStringResourceLoader",
    "ClassStringResourceLoader",
    "Localizer",
    "ResourceFactory",
    "ResourceResponse",
    "StaticResourceResolver",
]
