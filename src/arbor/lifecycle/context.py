"""Active render pass tracking.

The pass in progress lives in a context variable so base hooks can reach it
without a reference being threaded through every override, and so passes on
different threads or tasks never see each other.
"""

import contextvars
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator

from ..core import IllegalLifecycleStateError
from ..core.id import RenderPassID

_current_pass: contextvars.ContextVar["RenderPass | None"] = contextvars.ContextVar(
    "arbor_render_pass", default=None
)


@dataclass
class RenderPass:
    """One traversal of a component tree producing output."""

    id: RenderPassID
    controller: Any
    root: Any
    started_at: float = field(default_factory=time.monotonic)
    visited: int = 0
    rendered: int = 0

    def visit(self, component: Any) -> None:
        """Initialize, configure and (if visible) prepare a component."""
        self.controller.visit(component, self)

    def render(self, component: Any) -> str:
        """Render a prepared component to markup."""
        return self.controller.render_component(component, self)

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started_at


def current_pass() -> RenderPass | None:
    """Return the active render pass, if any."""
    return _current_pass.get()


def require_current_pass() -> RenderPass:
    """Return the active render pass or fail if called outside one."""
    render_pass = _current_pass.get()
    if render_pass is None:
        raise IllegalLifecycleStateError("No render pass is active")
    return render_pass


@contextmanager
def activate(render_pass: RenderPass) -> Iterator[RenderPass]:
    """Make a render pass current for the duration of the block."""
    token = _current_pass.set(render_pass)
    try:
        yield render_pass
    finally:
        _current_pass.reset(token)


__all__ = ["RenderPass", "current_pass", "require_current_pass", "activate"]
