"""
Behaviors
Attachable objects contributing rendering logic to components without
subclassing them.
"""

from ..core import IllegalLifecycleStateError
from ..markup import ComponentTag


class Behavior:
    """
    Cross-cutting hook object held in a component's ordered behavior list.

    The lifecycle controller calls each enabled behavior after the
    component's own hook. A behavior binds to a single component unless
    ``stateless`` is True, in which case one instance may be shared.
    """

    stateless = False

    def bind(self, component) -> None:
        bound = getattr(self, "_bound_component", None)
        if self.stateless:
            return
        if bound is not None and bound is not component:
            raise IllegalLifecycleStateError(
                f"{type(self).__name__} is already bound to '{bound.path}' "
                f"and cannot be bound to '{component.path}'"
            )
        self._bound_component = component

    def unbind(self, component) -> None:
        if getattr(self, "_bound_component", None) is component:
            self._bound_component = None

    @property
    def component(self):
        return getattr(self, "_bound_component", None)

    def is_enabled(self, component) -> bool:
        return True

    def on_configure(self, component) -> None:
        pass

    def before_render(self, component) -> None:
        pass

    def on_component_tag(self, component, tag: ComponentTag) -> None:
        pass

    def after_render(self, component) -> None:
        pass

    def on_remove(self, component) -> None:
        pass


__all__ = ["Behavior"]
