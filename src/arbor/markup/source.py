"""
Markup Sources
Read-only template lookup keyed by component path.
"""

from dataclasses import dataclass, field
from typing import Mapping, Protocol, Union

from ..core import LRUCache, get_logger
from .tag import ComponentTag

logger = get_logger(__name__)

ROOT_PATH = ""
"""Path of the page itself."""


@dataclass(frozen=True)
class MarkupElement:
    """Template entry for one component: tag prototype plus raw body text."""

    name: str
    attributes: tuple[tuple[str, str | None], ...] = field(default_factory=tuple)
    body: str = ""
    open_close: bool = False

    @classmethod
    def of(
        cls,
        name: str,
        attributes: Mapping[str, str | None] | None = None,
        body: str = "",
        open_close: bool = False,
    ) -> "MarkupElement":
        return cls(name, tuple((attributes or {}).items()), body, open_close)

    def new_tag(self) -> ComponentTag:
        """Fresh mutable tag for a render pass."""
        return ComponentTag(self.name, dict(self.attributes), self.open_close)


MarkupEntry = Union[MarkupElement, tuple]


class MarkupSource(Protocol):
    """Supplies template markup for component paths."""

    def get_markup(self, path: str) -> MarkupElement | None:
        """Return the markup element for a path, or None if there is none."""
        ...


def _to_element(entry: MarkupEntry) -> MarkupElement:
    if isinstance(entry, MarkupElement):
        return entry
    if isinstance(entry, tuple) and 1 <= len(entry) <= 4:
        return MarkupElement.of(*entry)
    raise TypeError(f"Unsupported markup entry: {entry!r}")


class DictMarkupSource:
    """
    Markup held in memory.

    Entries are MarkupElement instances or
    ``(tag_name, attributes, body, open_close)`` tuples, trailing items
    optional, keyed by ``:``-separated component path ("" is the page).
    """

    def __init__(self, markup: Mapping[str, MarkupEntry] | None = None):
        self._markup: dict[str, MarkupElement] = {
            path: _to_element(entry) for path, entry in (markup or {}).items()
        }

    def put(self, path: str, entry: MarkupEntry) -> None:
        self._markup[path] = _to_element(entry)

    def get_markup(self, path: str) -> MarkupElement | None:
        return self._markup.get(path)

    def __len__(self) -> int:
        return len(self._markup)


class CachingMarkupSource:
    """Wraps another source with the shared LRU cache."""

    def __init__(self, source: MarkupSource, cache: LRUCache[MarkupElement], metrics=None):
        self.source = source
        self.cache = cache
        self.metrics = metrics

    def get_markup(self, path: str) -> MarkupElement | None:
        cached = self.cache.get(path)
        if cached is not None:
            if self.metrics:
                self.metrics.record_cache_hit("markup")
            return cached

        if self.metrics:
            self.metrics.record_cache_miss("markup")

        element = self.source.get_markup(path)
        if element is not None:
            self.cache.set(path, element)
        else:
            logger.debug("markup_missing", path=path)
        return element

    def invalidate(self, path: str | None = None) -> None:
        """Drop one path, or everything when path is None."""
        if path is None:
            self.cache.clear()
        else:
            self.cache.delete(path)


__all__ = [
    "ROOT_PATH",
    "MarkupElement",
    "MarkupSource",
    "DictMarkupSource",
    "CachingMarkupSource",
]
