"""
Component Lifecycle Controller
Drives components through the hook sequence of a render pass.

Per pass, depth first, parents before children:

    initialize (once per lifetime) -> configure -> prepare_for_render
    (visible components only) -> build_tag -> render_tag_body

A container's base ``on_before_render`` visits its children, so preparation
of a subtree completes before any markup is produced.
"""

import time

from ..core import (
    IllegalLifecycleStateError,
    LifecycleError,
    LogContext,
    MarkupNotFoundError,
    UninitializedLifecycleError,
    get_logger,
)
from ..core.id import new_render_pass_id
from ..components.types import LifecycleState
from ..markup import ComponentTag, MarkupElement, MarkupSource
from .context import RenderPass, activate, current_pass
from .listeners import ComponentListeners

logger = get_logger(__name__)


class LifecycleController:
    """
    Runs hooks in order and verifies overrides chained to the base hooks.

    The controller holds no per-pass state; everything about a pass lives in
    its ``RenderPass``, so one controller serves concurrent requests.
    """

    def __init__(
        self,
        markup_source: MarkupSource,
        listeners: ComponentListeners | None = None,
        metrics=None,
    ):
        self.markup_source = markup_source
        self.listeners = listeners if listeners is not None else ComponentListeners()
        self.metrics = metrics

    # ------------------------------------------------------------------
    # Hook operations
    # ------------------------------------------------------------------

    def initialize(self, component) -> None:
        """Run ``on_initialize`` once and verify the state advanced."""
        if component.is_initialized:
            raise IllegalLifecycleStateError(f"Component '{component.path}' is already initialized")

        component.on_initialize()
        if not component.is_initialized or component.state is not LifecycleState.INITIALIZED:
            self._violation(component, "on_initialize")

        self.listeners.on_initialize(component)

    def configure(self, component) -> None:
        """Run ``on_configure`` and behavior configuration for this pass."""
        component.on_configure()
        for behavior in component.behaviors:
            if behavior.is_enabled(component):
                behavior.on_configure(component)

        component._set_lifecycle_state(LifecycleState.CONFIGURED, self._pass_id())
        self.listeners.on_configure(component)

    def prepare_for_render(self, component) -> None:
        """Run ``on_before_render``; containers visit their children from the base hook."""
        for behavior in component.behaviors:
            if behavior.is_enabled(component):
                behavior.before_render(component)

        component._before_render_called = False
        component.on_before_render()
        if not component._before_render_called:
            self._violation(component, "on_before_render")

        component._set_lifecycle_state(LifecycleState.RENDER_PREPARED, self._pass_id())
        self.listeners.on_before_render(component)

    def build_tag(self, component, tag: ComponentTag) -> ComponentTag:
        """Let the component, then each enabled behavior, customize the tag."""
        component._component_tag_called = False
        component.on_component_tag(tag)
        if not component._component_tag_called:
            self._violation(component, "on_component_tag")

        for behavior in component.behaviors:
            if behavior.is_enabled(component):
                behavior.on_component_tag(component, tag)
        return tag

    def render_tag_body(
        self, component, tag: ComponentTag, markup: MarkupElement | None = None
    ) -> str:
        """Produce the body markup between the open and close tags."""
        if markup is None:
            markup = self.markup_for(component)
        return component.on_component_tag_body(markup, tag)

    def remove(self, component) -> None:
        """Detach a component from its parent, running ``on_remove`` on the subtree."""
        parent = component.parent
        if parent is None:
            raise IllegalLifecycleStateError(f"Component '{component.path}' has no parent")
        parent.remove(component)

    # ------------------------------------------------------------------
    # Render pass
    # ------------------------------------------------------------------

    def visit(self, component, render_pass: RenderPass) -> None:
        """Bring a component up to date for the pass it is reached in."""
        if component.state is LifecycleState.REMOVED:
            raise IllegalLifecycleStateError(f"Component '{component.path}' has been removed")

        if not component.is_initialized:
            self.initialize(component)

        self.configure(component)
        render_pass.visited += 1

        if component.is_visible():
            self.prepare_for_render(component)
        else:
            self.initialize_subtree(component)

    def initialize_subtree(self, component) -> None:
        """Initialize descendants an invisible component keeps out of the pass."""
        for descendant in component.walk():
            if not descendant.is_initialized:
                self.initialize(descendant)

    def render(self, page) -> str:
        """
        Run one full render pass over ``page`` and return its markup.

        Raises:
            UninitializedLifecycleError: A hook override broke the contract
            MarkupNotFoundError: A visible component has no template markup
        """
        render_pass = RenderPass(new_render_pass_id(), self, page)
        status = "success"

        with LogContext(render_pass=render_pass.id, page=getattr(page, "page_id", page.id)):
            try:
                with activate(render_pass):
                    self.visit(page, render_pass)
                    output = self.render_component(page, render_pass)
            except LifecycleError:
                status = "violation"
                raise
            except Exception:
                status = "error"
                logger.exception("render_pass_failed")
                raise
            finally:
                if self.metrics:
                    self.metrics.record_render_pass(status, render_pass.elapsed, render_pass.rendered)

            logger.debug(
                "render_pass_complete",
                visited=render_pass.visited,
                rendered=render_pass.rendered,
                duration_ms=round(render_pass.elapsed * 1000, 3),
            )
        return output

    def render_component(self, component, render_pass: RenderPass) -> str:
        """Render a component prepared in ``render_pass``; invisible ones yield ''."""
        if component._pass_id != render_pass.id:
            raise UninitializedLifecycleError(
                component.path,
                "on_before_render",
                f"Component '{component.path}' was not prepared in this render pass; "
                "children added after the base on_before_render() call are not rendered",
            )

        if component.state is LifecycleState.CONFIGURED:
            return ""
        if component.state is not LifecycleState.RENDER_PREPARED:
            raise IllegalLifecycleStateError(
                f"Component '{component.path}' cannot render in state {component.state.value}"
            )

        markup = self.markup_for(component)
        tag = self.build_tag(component, markup.new_tag())

        if tag.open_close:
            output = tag.open_markup()
        else:
            body = self.render_tag_body(component, tag, markup)
            output = f"{tag.open_markup()}{body}{tag.close_markup()}"

        component._set_lifecycle_state(LifecycleState.RENDERED)
        render_pass.rendered += 1
        self._after_render(component)
        return output

    def markup_for(self, component) -> MarkupElement:
        markup = self.markup_source.get_markup(component.path)
        if markup is None:
            raise MarkupNotFoundError(component.path)
        return markup

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _after_render(self, component) -> None:
        component.on_after_render()
        for behavior in component.behaviors:
            if behavior.is_enabled(component):
                behavior.after_render(component)
        self.listeners.on_after_render(component)

    def _pass_id(self) -> str | None:
        render_pass = current_pass()
        return render_pass.id if render_pass is not None else None

    def _violation(self, component, hook: str) -> None:
        if self.metrics:
            self.metrics.record_lifecycle_violation(hook)
        logger.error("lifecycle_contract_violation", path=component.path, hook=hook)
        raise UninitializedLifecycleError(component.path, hook)


__all__ = ["LifecycleController"]
