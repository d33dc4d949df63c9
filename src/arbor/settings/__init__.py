"""Application settings records."""

from .resource_settings import ResourceSettings, build_resource_settings

__all__ = ["ResourceSettings", "build_resource_settings"]
