"""Listing models: views, sort specification and applied-filter summaries."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from pydantic import BaseModel

from qrcode_admin.models.qrcode import Destination

# View name -> destination it narrows to.  Names not listed pass everything.
VIEW_CATEGORIES: dict[str, Destination] = {
    "Product Links": Destination.PRODUCT,
    "Checkout Links": Destination.CART,
}


class View(BaseModel):
    """A named lens over the listing."""

    name: str

    @property
    def category(self) -> Destination | None:
        return VIEW_CATEGORIES.get(self.name)


class SortField(StrEnum):
    TITLE = "title"
    CREATED_AT = "created_at"
    SCANS = "scans"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


# Option value prefix -> field, as offered by the listing's sort menu
_OPTION_FIELDS: dict[str, SortField] = {
    "campaign": SortField.TITLE,
    "created": SortField.CREATED_AT,
    "scans": SortField.SCANS,
}

SORT_OPTIONS: list[tuple[str, str]] = [
    ("Campaign Ascending", "campaign_asc"),
    ("Campaign Descending", "campaign_desc"),
    ("Date created Ascending", "created_asc"),
    ("Date created Descending", "created_desc"),
    ("Scans Ascending", "scans_asc"),
    ("Scans Descending", "scans_desc"),
]


class SortSpec(BaseModel):
    """Field and direction the listing is ordered by."""

    field: SortField = SortField.TITLE
    direction: SortDirection = SortDirection.ASC

    model_config = {"frozen": True}

    @classmethod
    def from_option(cls, value: str) -> SortSpec:
        """Parse a sort option value such as ``campaign_desc``."""
        prefix, _, direction = value.rpartition("_")
        if prefix not in _OPTION_FIELDS or direction not in {d.value for d in SortDirection}:
            raise ValueError(f"Unknown sort option '{value}'")
        return cls(field=_OPTION_FIELDS[prefix], direction=SortDirection(direction))

    @property
    def option(self) -> str:
        prefix = next(p for p, f in _OPTION_FIELDS.items() if f == self.field)
        return f"{prefix}_{self.direction.value}"


class AppliedFilter(BaseModel):
    """A filter whose value differs from its default, with its removal action."""

    key: str
    label: str
    remove: Callable[[], None]
