"""
Modification Watcher
Polls watched files and notifies listeners when they change.
"""

import threading
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Callable

from ..core import get_logger

logger = get_logger(__name__)

ModificationListener = Callable[[Path], None]


def _mtime(path: Path) -> int | None:
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None


@dataclass
class _Entry:
    mtime: int | None
    listeners: list[ModificationListener] = field(default_factory=list)


class ModificationWatcher:
    """
    Watches files by modification time.

    ``check()`` polls synchronously; ``start()`` runs it on a daemon thread
    every ``poll_frequency``.
    """

    def __init__(self, poll_frequency: timedelta):
        if poll_frequency.total_seconds() <= 0:
            raise ValueError("poll_frequency must be positive")
        self.poll_frequency = poll_frequency
        self._entries: dict[Path, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def add(self, path: Path, listener: ModificationListener) -> bool:
        """Watch ``path``. Returns True if the path was not watched before."""
        path = Path(path)
        with self._lock:
            entry = self._entries.get(path)
            if entry is None:
                self._entries[path] = _Entry(_mtime(path), [listener])
                return True
            if listener not in entry.listeners:
                entry.listeners.append(listener)
            return False

    def remove(self, path: Path) -> bool:
        with self._lock:
            return self._entries.pop(Path(path), None) is not None

    @property
    def watched(self) -> list[Path]:
        with self._lock:
            return list(self._entries)

    def check(self) -> list[Path]:
        """Poll once, notify listeners of changed files and return them."""
        changed: list[tuple[Path, list[ModificationListener]]] = []
        with self._lock:
            for path, entry in self._entries.items():
                current = _mtime(path)
                if current != entry.mtime:
                    entry.mtime = current
                    changed.append((path, list(entry.listeners)))

        for path, listeners in changed:
            logger.info("resource_modified", path=str(path))
            for listener in listeners:
                try:
                    listener(path)
                except Exception:
                    logger.exception("modification_listener_failed", path=str(path))
        return [path for path, _ in changed]

    def _run(self) -> None:
        interval = self.poll_frequency.total_seconds()
        while not self._stop.wait(interval):
            self.check()

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="arbor-resource-watcher", daemon=True)
        self._thread.start()
        logger.info("resource_watcher_started", interval=self.poll_frequency.total_seconds())

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self.poll_frequency.total_seconds() + 1)
            self._thread = None
            logger.info("resource_watcher_stopped")

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()


__all__ = ["ModificationWatcher", "ModificationListener"]
