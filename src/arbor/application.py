"""
Application
Entry point that owns settings, the lifecycle controller and resource access.
"""

from .core import IllegalLifecycleStateError, Settings, get_logger
from .components import Page
from .lifecycle import ComponentListeners, LifecycleController
from .monitoring import MetricsCollector
from .resource import Localizer, StaticResourceResolver
from .settings import ResourceSettings

logger = get_logger(__name__)


class Application:
    """
    One configured framework instance.

    Pages are created per request and rendered with ``render``; the
    application itself is shared across requests.
    """

    def __init__(
        self,
        settings: Settings,
        resource_settings: ResourceSettings,
        controller: LifecycleController,
        metrics: MetricsCollector | None = None,
    ):
        self.settings = settings
        self.resource_settings = resource_settings
        self.controller = controller
        self.metrics = metrics
        self.static_resources = StaticResourceResolver(resource_settings)
        self._started = False

    @property
    def localizer(self) -> Localizer:
        return self.resource_settings.localizer

    @property
    def component_listeners(self) -> ComponentListeners:
        return self.controller.listeners

    def start(self) -> None:
        """Start background collaborators (the resource watcher)."""
        if self._started:
            return
        self.resource_settings.start_resource_watcher()
        self._started = True
        logger.info("application_started", name=type(self).__name__)

    def stop(self) -> None:
        if not self._started:
            return
        self.resource_settings.stop_resource_watcher()
        self._started = False
        logger.info("application_stopped", name=type(self).__name__)

    def new_page(self, page_class: type[Page] = Page, *args, **kwargs) -> Page:
        """Create a page bound to this application."""
        page = page_class(*args, **kwargs)
        page.application = self
        return page

    def render(self, page: Page) -> str:
        """Render a page in a fresh render pass."""
        if page.application is None:
            page.application = self
        elif page.application is not self:
            raise IllegalLifecycleStateError("Page belongs to a different application")
        return self.controller.render(page)


__all__ = ["Application"]
