"""Derive the displayed listing from the raw QR code collection."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from typing import Any

from qrcode_admin.models.listing import SortDirection, SortField, SortSpec, View
from qrcode_admin.models.qrcode import QRCode
from qrcode_admin.service.filters import FilterSet


def collation_key(text: str) -> tuple[str, str, str]:
    """Sort key approximating locale-aware string comparison.

    Primary: letters without accents or case.  Secondary: accents.
    Tertiary: case, lower-case first.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), text.casefold(), text.swapcase()


_SORT_KEYS: dict[SortField, Callable[[QRCode], Any]] = {
    SortField.TITLE: lambda code: collation_key(code.title),
    SortField.CREATED_AT: lambda code: code.created_at,
    SortField.SCANS: lambda code: code.scans,
}


def matches_category(code: QRCode, view: View) -> bool:
    category = view.category
    return category is None or code.destination == category


def matches_query(code: QRCode, query: str) -> bool:
    if not query.strip():
        return True
    return query.casefold() in code.title.casefold()


def sort_codes(codes: Iterable[QRCode], sort: SortSpec) -> list[QRCode]:
    """Stable sort; equal keys keep their input order in both directions."""
    # sorted() with reverse=True still keeps equal elements in input order
    return sorted(codes, key=_SORT_KEYS[sort.field], reverse=sort.direction == SortDirection.DESC)


def project(
    collection: Iterable[QRCode],
    view: View,
    filters: FilterSet,
    query: str = "",
    sort: SortSpec | None = None,
) -> list[QRCode]:
    """Category -> filters -> search -> sort.  The input is never mutated."""
    predicate = filters.predicate()
    narrowed = [
        code
        for code in collection
        if matches_category(code, view) and predicate(code) and matches_query(code, query)
    ]
    return sort_codes(narrowed, sort or SortSpec())
