"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
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
from .logging_config import configure_logging, get_logger, LogContext
from .hash import Algorithm, hash_string, hash_bytes
from .cache import LRUCache, Stats


def create_container(settings=None, markup_source=None, application_class=None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    if application_class is None:
        return _create_container(settings, markup_source)
    return _create_container(settings, markup_source, application_class)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ArborError",
    "LifecycleError",
    "UninitializedLifecycleError",
    "IllegalLifecycleStateError",
    "DuplicateComponentError",
    "MarkupNotFoundError",
    "InvalidResourceFinderConfigurationError",
    "MissingResourceError",
    "ResourceAccessDeniedError",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # Hashing
    "Algorithm",
    "hash_string",
    "hash_bytes",
    # Caching
    "LRUCache",
    "Stats",
    # DI
    "create_container",
]
