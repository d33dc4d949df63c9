"""Component lifecycle types."""

from enum import Enum
from typing import Protocol, runtime_checkable

from ..markup import ComponentTag, MarkupElement


class LifecycleState(str, Enum):
    """Where a component is in its lifecycle."""

    CONSTRUCTED = "constructed"
    INITIALIZED = "initialized"
    CONFIGURED = "configured"
    RENDER_PREPARED = "render_prepared"
    RENDERED = "rendered"
    REMOVED = "removed"


@runtime_checkable
class Renderable(Protocol):
    """Hook set the lifecycle controller drives."""

    def on_initialize(self) -> None:
        """Runs once per lifetime; the base implementation flips the state."""
        ...

    def on_configure(self) -> None:
        """Runs every pass, also for invisible components."""
        ...

    def on_before_render(self) -> None:
        """Runs every pass for visible components; call the base last."""
        ...

    def on_component_tag(self, tag: ComponentTag) -> None:
        """Customize the tag; call the base first."""
        ...

    def on_component_tag_body(self, markup: MarkupElement, tag: ComponentTag) -> str:
        """Produce the body markup."""
        ...

    def on_after_render(self) -> None:
        ...

    def on_remove(self) -> None:
        ...
