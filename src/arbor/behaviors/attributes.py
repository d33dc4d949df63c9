"""Attribute modifying behaviors."""

from enum import Enum
from typing import Any, Callable, Union

from ..markup import ComponentTag
from .base import Behavior

AttributeValue = Union[str, Callable[[], Any], None]


class ModifyMode(str, Enum):
    """How the new value combines with the template value."""

    REPLACE = "replace"
    APPEND = "append"
    PREPEND = "prepend"
    REMOVE = "remove"


class AttributeModifier(Behavior):
    """
    Sets, extends or removes one tag attribute.

    Examples:
        >>> label.add_behavior(AttributeModifier.append("class", "error"))
        >>> link.add_behavior(AttributeModifier.replace("href", lambda: url))
    """

    stateless = True

    def __init__(
        self,
        attribute: str,
        value: AttributeValue = None,
        mode: ModifyMode = ModifyMode.REPLACE,
        separator: str = " ",
    ):
        if not attribute:
            raise ValueError("Attribute name may not be empty")
        self.attribute = attribute
        self.value = value
        self.mode = mode
        self.separator = separator

    @classmethod
    def replace(cls, attribute: str, value: AttributeValue) -> "AttributeModifier":
        return cls(attribute, value, ModifyMode.REPLACE)

    @classmethod
    def append(cls, attribute: str, value: AttributeValue, separator: str = " ") -> "AttributeModifier":
        return cls(attribute, value, ModifyMode.APPEND, separator)

    @classmethod
    def prepend(cls, attribute: str, value: AttributeValue, separator: str = " ") -> "AttributeModifier":
        return cls(attribute, value, ModifyMode.PREPEND, separator)

    @classmethod
    def remove(cls, attribute: str) -> "AttributeModifier":
        return cls(attribute, None, ModifyMode.REMOVE)

    def _resolve(self) -> str | None:
        value = self.value() if callable(self.value) else self.value
        return None if value is None else str(value)

    def new_value(self, current: str | None, replacement: str | None) -> str | None:
        """Combine the template value with the modifier's value."""
        if self.mode is ModifyMode.REMOVE:
            return None
        if self.mode is ModifyMode.REPLACE:
            return replacement
        if not current:
            return replacement
        if not replacement:
            return current
        if self.mode is ModifyMode.APPEND:
            return f"{current}{self.separator}{replacement}"
        return f"{replacement}{self.separator}{current}"

    def on_component_tag(self, component, tag: ComponentTag) -> None:
        value = self.new_value(tag.get(self.attribute), self._resolve())
        if value is None:
            tag.remove(self.attribute)
        else:
            tag[self.attribute] = value

    def __repr__(self) -> str:
        return f"AttributeModifier({self.attribute!r}, mode={self.mode.value})"


__all__ = ["AttributeModifier", "AttributeValue", "ModifyMode"]
