"""Abstract resource store the client talks to."""

from __future__ import annotations

from abc import ABC, abstractmethod

from qrcode_admin.models.qrcode import QRCode


class StoreError(Exception):
    """Raised by a store when a backend call fails (network, backend, missing record)."""


class ResourceStore(ABC):
    """Backend persistence for QR codes.  Every call may raise :class:`StoreError`."""

    @abstractmethod
    async def fetch_collection(self, shop: str) -> list[QRCode]: ...

    @abstractmethod
    async def fetch_one(self, code_id: int) -> QRCode: ...

    @abstractmethod
    async def create(self, code: QRCode) -> QRCode: ...

    @abstractmethod
    async def update(self, code_id: int, code: QRCode) -> QRCode: ...

    @abstractmethod
    async def delete(self, code_id: int) -> None: ...
