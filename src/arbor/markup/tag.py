"""Render-time tag representation."""

from html import escape
from typing import Iterator, Mapping


class ComponentTag:
    """
    Mutable view of one markup element for a single render pass.

    Attribute values of None render as bare boolean attributes
    (``<input disabled>``).
    """

    def __init__(
        self,
        name: str,
        attributes: Mapping[str, str | None] | None = None,
        open_close: bool = False,
    ):
        if not name:
            raise ValueError("Tag name may not be empty")
        self.name = name
        self.attributes: dict[str, str | None] = dict(attributes or {})
        self.open_close = open_close

    def __getitem__(self, key: str) -> str | None:
        return self.attributes[key]

    def __setitem__(self, key: str, value: str | None) -> None:
        self.attributes[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self.attributes)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.attributes.get(key, default)

    def put(self, key: str, value: str | None) -> "ComponentTag":
        """Set an attribute and return the tag for chaining."""
        self.attributes[key] = value
        return self

    def remove(self, key: str) -> None:
        self.attributes.pop(key, None)

    def copy(self) -> "ComponentTag":
        return ComponentTag(self.name, self.attributes, self.open_close)

    def _attribute_markup(self) -> str:
        parts = []
        for key, value in self.attributes.items():
            if value is None:
                parts.append(f" {key}")
            else:
                parts.append(f' {key}="{escape(str(value), quote=True)}"')
        return "".join(parts)

    def open_markup(self) -> str:
        if self.open_close:
            return f"<{self.name}{self._attribute_markup()}/>"
        return f"<{self.name}{self._attribute_markup()}>"

    def close_markup(self) -> str:
        if self.open_close:
            return ""
        return f"</{self.name}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentTag):
            return NotImplemented
        return (
            self.name == other.name
            and self.attributes == other.attributes
            and self.open_close == other.open_close
        )

    def __repr__(self) -> str:
        return f"ComponentTag({self.open_markup()!r})"


__all__ = ["ComponentTag"]
