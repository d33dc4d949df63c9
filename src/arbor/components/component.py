"""
Base Component
A node in the component tree and the default implementation of every hook.
"""

from typing import Any, Iterator

from ..core import IllegalLifecycleStateError, UninitializedLifecycleError, get_logger
from ..markup import ComponentTag, MarkupElement
from .types import LifecycleState

logger = get_logger(__name__)

PATH_SEPARATOR = ":"


class Component:
    """
    Renderable tree node.

    Subclasses customize rendering by overriding the ``on_*`` hooks. Hooks
    that carry framework bookkeeping (``on_initialize``, ``on_before_render``,
    ``on_remove``) must chain to the base implementation; the lifecycle
    controller checks that they did.
    """

    _is_page = False

    def __init__(self, id: str):
        if not id:
            raise ValueError("Component id may not be empty")
        if PATH_SEPARATOR in id:
            raise ValueError(f"Component id may not contain '{PATH_SEPARATOR}': {id!r}")

        self._id = id
        self._parent: Any = None
        self._state = LifecycleState.CONSTRUCTED
        self._initialized = False
        self._pass_id: str | None = None
        self._behaviors: list = []
        self._markup_id: str | None = None

        self._before_render_called = False
        self._component_tag_called = False
        self._remove_called = False

        self.visible = True
        self.enabled = True
        self.output_markup_id = False

    # ------------------------------------------------------------------
    # Identity and hierarchy
    # ------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def parent(self):
        return self._parent

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def ancestors(self) -> Iterator["Component"]:
        """Yield parent, grandparent, ... up to the root."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def walk(self) -> Iterator["Component"]:
        """Yield all descendants depth first; a leaf has none."""
        return iter(())

    @property
    def root(self) -> "Component":
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    @property
    def page(self):
        """The page this component belongs to, or None while detached."""
        root = self.root
        return root if root._is_page else None

    @property
    def path(self) -> str:
        """``:``-joined ids from the page down to this component ("" for a page)."""
        if self._is_page:
            return ""
        ids = [self._id]
        for ancestor in self.ancestors():
            if ancestor._is_page:
                break
            ids.append(ancestor._id)
        return PATH_SEPARATOR.join(reversed(ids))

    def relative_path(self, container: "Component") -> str:
        """Path from ``container`` down to this component, ``.`` separated."""
        ids = []
        node = self
        while node is not None and node is not container:
            ids.append(node._id)
            node = node._parent
        if node is None:
            raise ValueError(f"'{container.path}' is not an ancestor of '{self.path}'")
        return ".".join(reversed(ids))

    def detach(self) -> None:
        """Detach this component from its parent."""
        if self._parent is None:
            raise IllegalLifecycleStateError(f"Component '{self._id}' has no parent")
        self._parent.remove(self)

    def replace_with(self, replacement: "Component") -> None:
        """Put ``replacement`` at this component's position in the parent."""
        if self._parent is None:
            raise IllegalLifecycleStateError(f"Component '{self._id}' has no parent")
        if replacement.id != self._id:
            raise ValueError(
                f"Replacement id '{replacement.id}' does not match '{self._id}'"
            )
        self._parent.replace(replacement)

    # ------------------------------------------------------------------
    # Visibility and enablement
    # ------------------------------------------------------------------

    def is_visible(self) -> bool:
        return self.visible

    def is_enabled(self) -> bool:
        return self.enabled

    def is_visible_in_hierarchy(self) -> bool:
        return self.is_visible() and all(a.is_visible() for a in self.ancestors())

    def is_enabled_in_hierarchy(self) -> bool:
        return self.is_enabled() and all(a.is_enabled() for a in self.ancestors())

    # ------------------------------------------------------------------
    # Markup id
    # ------------------------------------------------------------------

    @property
    def markup_id(self) -> str:
        """DOM id; generated from the page counter on first access."""
        if self._markup_id is None:
            page = self.page
            if page is None:
                raise IllegalLifecycleStateError(
                    f"Cannot generate a markup id for detached component '{self._id}'"
                )
            self._markup_id = f"{self._id}{page.next_markup_id()}"
        return self._markup_id

    @markup_id.setter
    def markup_id(self, value: str) -> None:
        self._markup_id = value

    # ------------------------------------------------------------------
    # Behaviors
    # ------------------------------------------------------------------

    @property
    def behaviors(self) -> tuple:
        return tuple(self._behaviors)

    def add_behavior(self, *behaviors) -> "Component":
        for behavior in behaviors:
            behavior.bind(self)
            self._behaviors.append(behavior)
        return self

    def remove_behavior(self, behavior) -> "Component":
        if behavior not in self._behaviors:
            raise ValueError(f"Behavior {behavior!r} is not attached to '{self._id}'")
        self._behaviors.remove(behavior)
        behavior.unbind(self)
        return self

    # ------------------------------------------------------------------
    # Localization
    # ------------------------------------------------------------------

    @property
    def application(self):
        page = self.page
        return page._application if page is not None else None

    def get_locale(self) -> str | None:
        page = self.page
        return page.locale if page is not None else None

    def get_string(self, key: str, default: str | None = None, locale: str | None = None) -> str:
        """Resolve a localized string through the application's localizer."""
        application = self.application
        if application is None:
            raise IllegalLifecycleStateError(
                f"Component '{self.path}' is not attached to a page with an application"
            )
        return application.localizer.get_string(key, self, default=default, locale=locale)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def on_initialize(self) -> None:
        self._initialized = True
        self._state = LifecycleState.INITIALIZED

    def on_configure(self) -> None:
        pass

    def on_before_render(self) -> None:
        self._before_render_called = True

    def on_component_tag(self, tag: ComponentTag) -> None:
        self._component_tag_called = True
        if self.output_markup_id:
            tag["id"] = self.markup_id

    def on_component_tag_body(self, markup: MarkupElement, tag: ComponentTag) -> str:
        return markup.body

    def on_after_render(self) -> None:
        pass

    def on_remove(self) -> None:
        self._remove_called = True

    # ------------------------------------------------------------------
    # Framework internals
    # ------------------------------------------------------------------

    def _set_lifecycle_state(self, state: LifecycleState, pass_id: str | None = None) -> None:
        self._state = state
        if pass_id is not None:
            self._pass_id = pass_id

    def _on_attached(self, parent) -> None:
        self._parent = parent
        if self._state is LifecycleState.REMOVED:
            self._state = (
                LifecycleState.INITIALIZED if self._initialized else LifecycleState.CONSTRUCTED
            )
        self._pass_id = None

    def _internal_remove(self) -> None:
        """Run on_remove for this component and mark it removed."""
        self._remove_called = False
        self.on_remove()
        if not self._remove_called:
            logger.error("lifecycle_contract_violation", path=self.path, hook="on_remove")
            raise UninitializedLifecycleError(self.path, "on_remove")

        for behavior in self._behaviors:
            behavior.on_remove(self)

        application = self.application
        if application is not None:
            application.component_listeners.on_remove(self)

        self._state = LifecycleState.REMOVED
        self._pass_id = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, path={self.path!r}, state={self._state.value})"


__all__ = ["Component", "PATH_SEPARATOR"]
