"""Form validation and destination URL helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from qrcode_admin.models.qrcode import Destination, QRCode


class ValidationError(Exception):
    """Raised when a QR code form cannot be submitted.

    ``errors`` maps form field names to the message shown next to them.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


def validate(data: Mapping[str, Any]) -> dict[str, str]:
    """Return per-field error messages; an empty dict means valid."""
    errors: dict[str, str] = {}
    if not (data.get("title") or "").strip():
        errors["title"] = "Title is required"
    if not data.get("product_id"):
        errors["product_id"] = "Product is required"
    if not data.get("destination"):
        errors["destination"] = "Destination is required"
    return errors


def ensure_valid(data: Mapping[str, Any]) -> None:
    errors = validate(data)
    if errors:
        raise ValidationError(errors)


def destination_url(shop: str, code: QRCode) -> str | None:
    """Public URL a scan lands on, or None when no product is linked."""
    if code.product is None:
        return None
    if code.destination == Destination.PRODUCT:
        return f"https://{shop}/products/{code.product.handle}"
    # Variant ids arrive as gid://shopify/ProductVariant/<n>
    variant = code.product.variant_id.rsplit("/", 1)[-1]
    return f"https://{shop}/cart/{variant}:1"
