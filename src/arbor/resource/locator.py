"""
Resource Stream Locator
Resolves style and locale variants of a resource through a finder.
"""

import posixpath
from pathlib import Path
from typing import Iterator

from .finder import ResourceFinder


def package_dir(scope: type) -> str:
    """``/``-separated package directory of the module defining ``scope``."""
    return scope.__module__.rpartition(".")[0].replace(".", "/")


def locale_candidates(locale: str | None) -> list[str | None]:
    """``de_DE_x`` -> ``["de_DE_x", "de_DE", "de", None]``."""
    if not locale:
        return [None]
    parts = locale.replace("-", "_").split("_")
    return ["_".join(parts[:i]) for i in range(len(parts), 0, -1)] + [None]


def resource_names(path: str, locale: str | None = None, style: str | None = None) -> list[str]:
    """Candidate file names from most to least specific."""
    base, extension = posixpath.splitext(path)
    styles = [style, None] if style else [None]
    names: list[str] = []
    for current_style in styles:
        for current_locale in locale_candidates(locale):
            name = base
            if current_style:
                name += f"_{current_style}"
            if current_locale:
                name += f"_{current_locale}"
            name += extension
            if name not in names:
                names.append(name)
    return names


class ResourceStreamLocator:
    """Locates resources relative to a scope class's package, then globally."""

    def __init__(self, finder: ResourceFinder):
        self.finder = finder

    def _candidates(self, scope: type | None, name: str) -> Iterator[str]:
        if scope is not None:
            directory = package_dir(scope)
            if directory:
                yield posixpath.normpath(f"{directory}/{name}")
        yield posixpath.normpath(name)

    def locate_all(
        self,
        scope: type | None,
        path: str,
        locale: str | None = None,
        style: str | None = None,
    ) -> Iterator[Path]:
        """Yield every existing variant, most specific first."""
        seen: set[Path] = set()
        for name in resource_names(path, locale, style):
            for candidate in self._candidates(scope, name):
                found = self.finder.find(candidate)
                if found is not None and found not in seen:
                    seen.add(found)
                    yield found

    def locate(
        self,
        scope: type | None,
        path: str,
        locale: str | None = None,
        style: str | None = None,
    ) -> Path | None:
        """Most specific existing variant, or None."""
        return next(self.locate_all(scope, path, locale, style), None)


__all__ = [
    "ResourceStreamLocator",
    "package_dir",
    "locale_candidates",
    "resource_names",
]
