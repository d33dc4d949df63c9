"""Attachable behaviors."""

from .base import Behavior
from .attributes import AttributeModifier, AttributeValue, ModifyMode

__all__ = ["Behavior", "AttributeModifier", "AttributeValue", "ModifyMode"]
