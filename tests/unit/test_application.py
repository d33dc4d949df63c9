"""Tests for the application and its dependency injection wiring."""

from datetime import timedelta

import pytest

from arbor.application import Application
from arbor.components import Label, Page
from arbor.core import IllegalLifecycleStateError, Settings, create_container
from arbor.lifecycle import ComponentListener, LifecycleController
from arbor.main import DEMO_MARKUP, DemoPage
from arbor.markup import CachingMarkupSource, DictMarkupSource, MarkupSource
from arbor.monitoring import MetricsCollector
from arbor.settings import ResourceSettings


class RemovalListener(ComponentListener):
    def __init__(self):
        self.removed = []

    def on_remove(self, component):
        self.removed.append(component.path)


@pytest.mark.unit
class TestContainer:
    """Test injector wiring."""

    def test_singletons(self, di_container, application):
        assert di_container.get(Application) is application
        assert di_container.get(LifecycleController) is application.controller
        assert di_container.get(ResourceSettings) is application.resource_settings
        assert di_container.get(MetricsCollector) is application.metrics
        assert application.controller.metrics is application.metrics

    def test_markup_cache_enabled(self, di_container):
        assert isinstance(di_container.get(MarkupSource), CachingMarkupSource)

    def test_markup_cache_disabled(self, markup_source):
        container = create_container(Settings(enable_markup_cache=False), markup_source)

        assert container.get(MarkupSource) is markup_source

    def test_markup_cache_uses_settings(self, markup_source):
        settings = Settings(markup_cache_size=7, default_cache_duration=timedelta(seconds=30))

        source = create_container(settings, markup_source).get(MarkupSource)

        assert source.cache.max_size == 7
        assert source.cache.ttl_seconds == 30

    def test_custom_application_class(self, settings, markup_source):
        class ShopApplication(Application):
            pass

        container = create_container(settings, markup_source, ShopApplication)
        application = container.get(Application)

        assert isinstance(application, ShopApplication)
        assert len(application.resource_settings.string_resource_loaders) == 3

    def test_metrics_disabled(self, markup_source):
        container = create_container(Settings(enable_metrics=False), markup_source)

        assert container.get(MetricsCollector).enabled is False


@pytest.mark.unit
class TestRendering:
    """Test rendering through the application."""

    def test_render_binds_page(self, application):
        page = Page()
        page.add(Label("a", "x"))

        assert application.render(page) == "<body><span>x</span></body>"
        assert page.application is application
        assert application.metrics.value("arbor_render_passes_total", {"status": "success"}) == 1
        assert application.metrics.value("arbor_components_rendered_total") == 2

    def test_new_page(self, application):
        page = application.new_page(Page, locale="fr")

        assert page.application is application
        assert page.locale == "fr"

    def test_foreign_page_rejected(self, application, settings, markup_source):
        other = create_container(settings, markup_source).get(Application)
        page = other.new_page()

        with pytest.raises(IllegalLifecycleStateError):
            application.render(page)

    def test_localized_label(self, application, write_resource):
        write_resource("Application.properties", "site.name=Arbor & Co\n")
        page = application.new_page()
        label = Label("a")
        label.model = lambda: label.get_string("site.name")
        page.add(label)

        assert application.render(page) == "<body><span>Arbor &amp; Co</span></body>"

    def test_remove_notifies_application_listeners(self, application):
        listener = RemovalListener()
        application.component_listeners.add(listener)
        page = application.new_page()
        page.add(Label("a"))

        page.remove("a")

        assert listener.removed == ["a"]

    def test_markup_cached_across_passes(self, application):
        page = application.new_page()
        page.add(Label("a", "x"))

        application.render(page)
        application.render(page)

        metrics = application.metrics
        assert metrics.value("arbor_cache_misses_total", {"cache_type": "markup"}) == 2
        assert metrics.value("arbor_cache_hits_total", {"cache_type": "markup"}) == 2


@pytest.mark.unit
def test_start_and_stop_watcher(tmp_path, markup_source):
    settings = Settings(resource_folders=[str(tmp_path)], resource_poll_frequency=timedelta(seconds=30))
    application = create_container(settings, markup_source).get(Application)

    application.start()
    assert application.resource_settings.resource_watcher.running

    application.stop()
    assert not application.resource_settings.resource_watcher.running


@pytest.mark.unit
def test_demo_page_alternates_status(settings):
    application = create_container(settings, DictMarkupSource(DEMO_MARKUP)).get(Application)
    page = application.new_page(DemoPage)

    first = application.render(page)
    second = application.render(page)
    third = application.render(page)

    assert first == (
        '<body><div class="border"><h1>Arbor demo</h1>'
        '<span class="status ok">online</span></div></body>'
    )
    assert second == (
        '<body><div class="border"><h1>Arbor demo</h1>'
        '<span class="status">offline</span></div></body>'
    )
    assert third == first
