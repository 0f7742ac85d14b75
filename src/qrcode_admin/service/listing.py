"""State owned by the QR code listing screen."""

from __future__ import annotations

from collections.abc import Iterable

from qrcode_admin.models.listing import SortSpec
from qrcode_admin.models.qrcode import QRCode
from qrcode_admin.service.filters import FilterSet
from qrcode_admin.service.projector import project
from qrcode_admin.service.views import ViewRegistry
from qrcode_admin.settings import Settings


class ListingState:
    """Views, filters, search text and sort for one listing screen.

    The presentation layer mutates this object in response to gestures and
    calls :meth:`project` whenever it needs the rows to display.
    """

    def __init__(
        self,
        views: ViewRegistry | None = None,
        filters: FilterSet | None = None,
        query: str = "",
        sort: SortSpec | None = None,
        settings: Settings | None = None,
    ) -> None:
        # Anything not passed in starts from the configured defaults
        if settings is None:
            settings = Settings()
        self.views = views or ViewRegistry(settings.default_views)
        self.filters = filters or FilterSet.default(settings)
        self.query = query
        self.sort = sort or SortSpec.from_option(settings.default_sort)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ListingState:
        return cls(settings=settings)

    def set_query(self, query: str) -> None:
        self.query = query

    def clear_query(self) -> None:
        self.query = ""

    def set_sort(self, sort: SortSpec | str) -> None:
        self.sort = SortSpec.from_option(sort) if isinstance(sort, str) else sort

    def clear_all(self) -> None:
        """Reset every filter and the search text; views and sort are kept."""
        self.filters.reset_all()
        self.clear_query()

    def project(self, collection: Iterable[QRCode]) -> list[QRCode]:
        return project(collection, self.views.selected, self.filters, self.query, self.sort)
