"""Application-wide component lifecycle listeners."""

import threading
from typing import Iterator

from ..core import get_logger

logger = get_logger(__name__)


class ComponentListener:
    """
    Receives lifecycle notifications for every component.

    Each method runs after the corresponding hook completed. Override only
    the ones you need.
    """

    def on_initialize(self, component) -> None:
        pass

    def on_configure(self, component) -> None:
        pass

    def on_before_render(self, component) -> None:
        pass

    def on_after_render(self, component) -> None:
        pass

    def on_remove(self, component) -> None:
        pass


class ComponentListeners(ComponentListener):
    """Ordered listener collection that fans notifications out."""

    def __init__(self) -> None:
        self._listeners: list[ComponentListener] = []
        self._lock = threading.Lock()

    def add(self, listener: ComponentListener) -> bool:
        """Register a listener. Returns False if it was already registered."""
        with self._lock:
            if listener in self._listeners:
                return False
            self._listeners.append(listener)
        logger.debug("listener_added", listener=type(listener).__name__)
        return True

    def remove(self, listener: ComponentListener) -> bool:
        with self._lock:
            if listener not in self._listeners:
                return False
            self._listeners.remove(listener)
            return True

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> Iterator[ComponentListener]:
        with self._lock:
            return iter(list(self._listeners))

    def _notify(self, event: str, component) -> None:
        for listener in self:
            getattr(listener, event)(component)

    def on_initialize(self, component) -> None:
        self._notify("on_initialize", component)

    def on_configure(self, component) -> None:
        self._notify("on_configure", component)

    def on_before_render(self, component) -> None:
        self._notify("on_before_render", component)

    def on_after_render(self, component) -> None:
        self._notify("on_after_render", component)

    def on_remove(self, component) -> None:
        self._notify("on_remove", component)


__all__ = ["ComponentListener", "ComponentListeners"]
