"""Markup elements, render-time tags and markup sources."""

from .tag import ComponentTag
from .source import (
    ROOT_PATH,
    MarkupElement,
    MarkupSource,
    DictMarkupSource,
    CachingMarkupSource,
)

__all__ = [
    "ComponentTag",
    "ROOT_PATH",
    "MarkupElement",
    "MarkupSource",
    "DictMarkupSource",
    "CachingMarkupSource",
]
