"""In-memory resource store for development and tests."""

from __future__ import annotations

from collections.abc import Iterable

from qrcode_admin.models.qrcode import QRCode
from qrcode_admin.service.validation import destination_url
from qrcode_admin.storage.repository import ResourceStore, StoreError


class InMemoryResourceStore(ResourceStore):
    """Keeps QR codes in a dict keyed by an incrementing id."""

    def __init__(self, codes: Iterable[QRCode] = ()) -> None:
        self._store: dict[int, QRCode] = {}
        self._next_id = 1
        for code in codes:
            self._insert(code)

    def _insert(self, code: QRCode) -> QRCode:
        code_id = code.id if code.id is not None else self._next_id
        self._next_id = max(self._next_id, code_id + 1)
        stored = code.model_copy(
            update={"id": code_id, "destination_url": destination_url(code.shop, code)},
            deep=True,
        )
        self._store[code_id] = stored
        return stored.model_copy(deep=True)

    def _require(self, code_id: int) -> QRCode:
        try:
            return self._store[code_id]
        except KeyError:
            raise StoreError(f"No QR code with id {code_id}") from None

    async def fetch_collection(self, shop: str) -> list[QRCode]:
        return [c.model_copy(deep=True) for c in self._store.values() if c.shop == shop]

    async def fetch_one(self, code_id: int) -> QRCode:
        return self._require(code_id).model_copy(deep=True)

    async def create(self, code: QRCode) -> QRCode:
        return self._insert(code.model_copy(update={"id": None}))

    async def update(self, code_id: int, code: QRCode) -> QRCode:
        existing = self._require(code_id)
        # id, creation time and scan count belong to the store
        return self._insert(
            code.model_copy(
                update={"id": code_id, "created_at": existing.created_at, "scans": existing.scans}
            )
        )

    async def delete(self, code_id: int) -> None:
        self._require(code_id)
        del self._store[code_id]
