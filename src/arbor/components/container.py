"""
Markup Container
Component with ordered children.
"""

from typing import Callable, Iterator

from ..core import DuplicateComponentError, get_logger
from ..lifecycle.context import require_current_pass
from ..markup import ComponentTag, MarkupElement
from .component import Component, PATH_SEPARATOR

logger = get_logger(__name__)


class MarkupContainer(Component):
    """
    Component that owns child components.

    The base ``on_before_render`` visits every child that is attached when it
    runs, so overrides that add, remove or replace children must do so before
    calling it. The base ``on_component_tag_body`` streams the template body
    followed by the rendered children.
    """

    def __init__(self, id: str):
        super().__init__(id)
        self._children: dict[str, Component] = {}

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def _check_attachable(self, child: Component) -> None:
        if child._is_page:
            raise ValueError("A page cannot be added to a container")
        if child is self or any(ancestor is child for ancestor in self.ancestors()):
            raise ValueError(f"Adding '{child.id}' to '{self.id}' would create a cycle")

    def _attach(self, child: Component) -> None:
        if child.parent is not None:
            child.parent.remove(child)
        self._children[child.id] = child
        child._on_attached(self)

    def add(self, *children: Component) -> "MarkupContainer":
        """Attach children. Fails if a sibling already uses the same id."""
        for child in children:
            self._check_attachable(child)
            if child.id in self._children:
                raise DuplicateComponentError(
                    f"A child with id '{child.id}' already exists in '{self.path or '<page>'}'"
                )
            self._attach(child)
        return self

    def add_or_replace(self, *children: Component) -> "MarkupContainer":
        """Attach children, replacing any sibling with the same id."""
        for child in children:
            existing = self._children.get(child.id)
            if existing is None:
                self.add(child)
            elif existing is not child:
                self.replace(child)
        return self

    def replace(self, child: Component) -> "MarkupContainer":
        """Swap the child with the same id for ``child``, keeping its position."""
        self._check_attachable(child)
        existing = self._children.get(child.id)
        if existing is None:
            raise ValueError(f"No child with id '{child.id}' to replace in '{self.path or '<page>'}'")
        if existing is child:
            return self

        existing._internal_remove()
        existing._parent = None

        if child.parent is not None:
            child.parent.remove(child)
        # same key, so dict order (render order) is preserved
        self._children[child.id] = child
        child._on_attached(self)
        logger.debug("component_replaced", path=child.path)
        return self

    def remove(self, child: "Component | str") -> Component:
        """Detach a child (or the child with the given id) and return it."""
        if isinstance(child, str):
            found = self._children.get(child)
            if found is None:
                raise ValueError(f"No child with id '{child}' in '{self.path or '<page>'}'")
            child = found
        elif self._children.get(child.id) is not child:
            raise ValueError(f"'{child.id}' is not a child of '{self.path or '<page>'}'")

        child._internal_remove()
        del self._children[child.id]
        child._parent = None
        return child

    def remove_all(self) -> None:
        for child in list(self._children.values()):
            self.remove(child)

    def get(self, path: str) -> Component | None:
        """Look up a descendant by ``a:b:c`` path relative to this container."""
        node: Component = self
        for part in path.split(PATH_SEPARATOR):
            if not part:
                continue
            if not isinstance(node, MarkupContainer):
                return None
            node = node._children.get(part)
            if node is None:
                return None
        return node

    def __getitem__(self, path: str) -> Component:
        found = self.get(path)
        if found is None:
            raise KeyError(path)
        return found

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._children
        return isinstance(item, Component) and self._children.get(item.id) is item

    def __iter__(self) -> Iterator[Component]:
        return iter(list(self._children.values()))

    def __len__(self) -> int:
        return len(self._children)

    @property
    def children(self) -> list[Component]:
        return list(self._children.values())

    def walk(self) -> Iterator[Component]:
        """Yield all descendants depth first, parents before children."""
        for child in list(self._children.values()):
            yield child
            if isinstance(child, MarkupContainer):
                yield from child.walk()

    def visit_children(
        self,
        visitor: Callable[[Component], object],
        component_type: type | None = None,
    ) -> None:
        """Call ``visitor`` for every descendant, optionally filtered by type."""
        for component in self.walk():
            if component_type is None or isinstance(component, component_type):
                visitor(component)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def on_before_render(self) -> None:
        super().on_before_render()
        render_pass = require_current_pass()
        for child in list(self._children.values()):
            # a sibling's hook may have detached it
            if child.parent is self:
                render_pass.visit(child)

    def on_component_tag_body(self, markup: MarkupElement, tag: ComponentTag) -> str:
        render_pass = require_current_pass()
        rendered = [render_pass.render(child) for child in list(self._children.values())]
        return super().on_component_tag_body(markup, tag) + "".join(rendered)

    def _internal_remove(self) -> None:
        super()._internal_remove()
        for child in list(self._children.values()):
            child._internal_remove()


__all__ = ["MarkupContainer"]
