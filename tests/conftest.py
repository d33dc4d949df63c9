"""Pytest configuration and fixtures."""

import os
import pytest

from arbor.application import Application
from arbor.core import Settings, create_container
from arbor.lifecycle import LifecycleController
from arbor.markup import DictMarkupSource, MarkupElement
from arbor.monitoring import MetricsCollector
from arbor.resource import ResourcePath
from arbor.settings import ResourceSettings


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['ARBOR_LOG_LEVEL'] = 'DEBUG'


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings(tmp_path):
    """Test settings with a temporary resource folder."""
    return Settings(resource_folders=[str(tmp_path)])


@pytest.fixture
def metrics():
    """Metrics collector with an isolated registry."""
    return MetricsCollector()


# ============================================================================
# Markup and Controller Fixtures
# ============================================================================

@pytest.fixture
def markup_source():
    """Markup for a page with a label, a container and a nested label."""
    return DictMarkupSource({
        "": MarkupElement.of("body"),
        "a": MarkupElement.of("span"),
        "b": MarkupElement.of("span"),
        "box": MarkupElement.of("div", {"class": "box"}),
        "box:inner": MarkupElement.of("em"),
    })


@pytest.fixture
def controller(markup_source, metrics):
    """Lifecycle controller over the fixture markup."""
    return LifecycleController(markup_source, metrics=metrics)


# ============================================================================
# Resource Fixtures
# ============================================================================

@pytest.fixture
def resource_settings(tmp_path):
    """Resource settings searching the temporary folder."""
    return ResourceSettings(resource_finder=ResourcePath([tmp_path]))


@pytest.fixture
def write_resource(tmp_path):
    """Write a text file below the temporary resource folder."""
    def _write(relative: str, content: str):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


# ============================================================================
# Application Fixtures
# ============================================================================

@pytest.fixture
def di_container(settings, markup_source):
    """Dependency injection container for testing."""
    return create_container(settings, markup_source)


@pytest.fixture
def application(di_container):
    """Application built by the container."""
    app = di_container.get(Application)
    yield app
    app.stop()
