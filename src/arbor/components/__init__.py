"""Component tree: base component, containers, labels and pages."""

from .types import LifecycleState, Renderable
from .component import Component, PATH_SEPARATOR
from .container import MarkupContainer
from .label import Label, LabelModel
from .page import Page

__all__ = [
    "LifecycleState",
    "Renderable",
    "Component",
    "PATH_SEPARATOR",
    "MarkupContainer",
    "Label",
    "LabelModel",
    "Page",
]
