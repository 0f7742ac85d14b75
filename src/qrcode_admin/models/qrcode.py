"""QR code (artifact) and linked product models."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Destination(StrEnum):
    PRODUCT = "product"
    CART = "cart"


class ProductRef(BaseModel):
    """The product a QR code links to."""

    id: str
    variant_id: str = Field(alias="variantId")
    handle: str
    title: str
    image: str | None = None
    alt: str | None = None

    model_config = {"populate_by_name": True}


class QRCode(BaseModel):
    """A generated QR code as held in memory by the client.

    ``id`` is ``None`` until the store has created the record.  Colours are
    kept in their persisted hex encoding; the editor converts them to HSV.
    """

    id: int | None = None
    shop: str = ""
    title: str = ""
    destination: Destination | None = Destination.PRODUCT
    product: ProductRef | None = None
    foreground_color: str | None = Field(None, alias="foregroundColor")
    background_color: str | None = Field(None, alias="backgroundColor")
    created_at: datetime = Field(default_factory=_utcnow, alias="createdAt")
    scans: int = Field(0, ge=0)
    image: str | None = None
    destination_url: str | None = Field(None, alias="destinationUrl")
    # Listing-only attributes read by the stock filter criteria
    money_spent: float = Field(0.0, alias="moneySpent")
    tags: list[str] = []

    model_config = {"populate_by_name": True}

    @property
    def product_title(self) -> str | None:
        return self.product.title if self.product else None
