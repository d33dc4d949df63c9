"""Component lifecycle: render passes, the controller and listeners."""

from .context import RenderPass, activate, current_pass, require_current_pass
from .listeners import ComponentListener, ComponentListeners
from .controller import LifecycleController

__all__ = [
    "RenderPass",
    "activate",
    "current_pass",
    "require_current_pass",
    "ComponentListener",
    "ComponentListeners",
    "LifecycleController",
]
