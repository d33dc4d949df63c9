"""Page: the root of a component tree."""

import itertools

from ..core.id import PageID, new_page_id
from .container import MarkupContainer


class Page(MarkupContainer):
    """
    Root container owning the tree for one render pass.

    A page is rendered by an application (see ``Application.render``), which
    it keeps a reference to for localization.
    """

    _is_page = True

    def __init__(self, application=None, locale: str | None = None):
        self.page_id: PageID = new_page_id()
        super().__init__(self.page_id)
        self._application = application
        self.locale = locale
        self._markup_ids = itertools.count(1)

    @property
    def application(self):
        return self._application

    @application.setter
    def application(self, application) -> None:
        self._application = application

    def next_markup_id(self) -> int:
        """Page-unique counter for generated markup ids."""
        return next(self._markup_ids)


__all__ = ["Page"]
