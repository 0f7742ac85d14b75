"""Resource store interface and in-memory implementation."""

from qrcode_admin.storage.memory_repo import InMemoryResourceStore
from qrcode_admin.storage.repository import ResourceStore, StoreError

__all__ = ["InMemoryResourceStore", "ResourceStore", "StoreError"]
