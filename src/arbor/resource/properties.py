"""
Properties Files
Parser for ``.properties`` string bundles and a cached factory.
"""

import threading
from pathlib import Path
from typing import Callable

from ..core import LRUCache, get_logger

logger = get_logger(__name__)

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "f": "\f"}


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\\" and i + 1 < len(text):
            following = text[i + 1]
            if following == "u" and i + 6 <= len(text):
                try:
                    out.append(chr(int(text[i + 2 : i + 6], 16)))
                    i += 6
                    continue
                except ValueError:
                    pass
            out.append(_ESCAPES.get(following, following))
            i += 2
            continue
        out.append(char)
        i += 1
    return "".join(out)


def _continues(line: str) -> bool:
    """A line continues when it ends in an odd number of backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _split(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in "=:" or char.isspace():
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip()
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip()
    return key, rest


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse ``.properties`` content.

    Supports ``#``/``!`` comments, ``=``, ``:`` or whitespace separators,
    backslash line continuations and ``\\n``, ``\\t``, ``\\uXXXX`` escapes.
    """
    result: dict[str, str] = {}
    lines = iter(text.splitlines())
    for raw in lines:
        line = raw.lstrip()
        if not line or line[0] in "#!":
            continue
        while _continues(line):
            line = line[:-1]
            following = next(lines, None)
            if following is None:
                break
            line += following.lstrip()
        key, value = _split(line)
        result[_unescape(key)] = _unescape(value)
    return result


class PropertiesFactory:
    """
    Loads and caches properties files.

    When a modification watcher is configured, loaded files are watched and
    dropped from the cache as soon as they change.
    """

    def __init__(self, cache: LRUCache[dict[str, str]], watcher=None):
        self.cache = cache
        self.watcher = watcher
        self._invalidation_listeners: list[Callable[[Path], None]] = []
        self._lock = threading.Lock()

    def load(self, path: Path) -> dict[str, str]:
        return self.cache.get_or_load(str(path), lambda: self._read(Path(path)))

    def _read(self, path: Path) -> dict[str, str]:
        properties = parse_properties(path.read_text(encoding="utf-8"))
        logger.debug("properties_loaded", path=str(path), keys=len(properties))

        if self.watcher is not None:
            self.watcher.add(path, self.invalidate)
        return properties

    def on_invalidate(self, listener: Callable[[Path], None]) -> None:
        """Register a callback run whenever a file is dropped from the cache."""
        with self._lock:
            if listener not in self._invalidation_listeners:
                self._invalidation_listeners.append(listener)

    def invalidate(self, path: Path) -> None:
        self.cache.delete(str(path))
        with self._lock:
            listeners = list(self._invalidation_listeners)
        for listener in listeners:
            listener(Path(path))

    def clear(self) -> None:
        self.cache.clear()


__all__ = ["parse_properties", "PropertiesFactory"]
