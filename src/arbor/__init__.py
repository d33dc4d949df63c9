"""Arbor - server-side component tree rendering."""

from .core import (
    Settings,
    get_settings,
    configure_logging,
    create_container,
    ArborError,
    LifecycleError,
    UninitializedLifecycleError,
    IllegalLifecycleStateError,
    DuplicateComponentError,
    MarkupNotFoundError,
    InvalidResourceFinderConfigurationError,
    MissingResourceError,
    ResourceAccessDeniedError,
)
from .markup import ComponentTag, MarkupElement, DictMarkupSource, CachingMarkupSource
from .components import Component, MarkupContainer, Label, Page, LifecycleState, Renderable
from .behaviors import Behavior, AttributeModifier
from .lifecycle import LifecycleController, ComponentListener, ComponentListeners
from .settings import ResourceSettings
from .application import Application

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "create_container",
    "ArborError",
    "LifecycleError",
    "UninitializedLifecycleError",
    "IllegalLifecycleStateError",
    "DuplicateComponentError",
    "MarkupNotFoundError",
    "InvalidResourceFinderConfigurationError",
    "MissingResourceError",
    "ResourceAccessDeniedError",
    "ComponentTag",
    "MarkupElement",
    "DictMarkupSource",
    "CachingMarkupSource",
    "Component",
    "MarkupContainer",
    "Label",
    "Page",
    "LifecycleState",
    "Renderable",
    "Behavior",
    "AttributeModifier",
    "LifecycleController",
    "ComponentListener",
    "ComponentListeners",
    "ResourceSettings",
    "Application",
]
