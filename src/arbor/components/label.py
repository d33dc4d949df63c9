"""Label component."""

from html import escape
from typing import Any, Callable, Union

from ..markup import ComponentTag, MarkupElement
from .component import Component

LabelModel = Union[str, Callable[[], Any], None]


class Label(Component):
    """Replaces its tag body with text.

    The text is a string or a zero-argument callable evaluated on every
    render. Open-close tags (``<span/>``) are expanded so the text fits.
    """

    def __init__(self, id: str, text: LabelModel = None, escape_markup: bool = True):
        super().__init__(id)
        self.model = text
        self.escape_markup = escape_markup

    @property
    def text(self) -> str:
        value = self.model() if callable(self.model) else self.model
        return "" if value is None else str(value)

    def on_component_tag(self, tag: ComponentTag) -> None:
        super().on_component_tag(tag)
        tag.open_close = False

    def on_component_tag_body(self, markup: MarkupElement, tag: ComponentTag) -> str:
        text = self.text
        return escape(text) if self.escape_markup else text


__all__ = ["Label", "LabelModel"]
