"""Product picker collaborator."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel


class PickedProduct(BaseModel):
    """The product returned by the picker (first variant and first image)."""

    id: str
    variant_id: str
    title: str
    handle: str
    image: str | None = None
    alt: str | None = None

    def form_values(self) -> dict[str, str | None]:
        return {
            "product_id": self.id,
            "product_variant_id": self.variant_id,
            "product_title": self.title,
            "product_handle": self.handle,
            "product_alt": self.alt,
            "product_image": self.image,
        }


class ProductPicker(ABC):
    """Modal product selection.  Returns None when the user cancels."""

    @abstractmethod
    async def pick(self) -> PickedProduct | None: ...


class StaticProductPicker(ProductPicker):
    """Picker that always answers with the same product (or cancels)."""

    def __init__(self, product: PickedProduct | None) -> None:
        self._product = product

    async def pick(self) -> PickedProduct | None:
        return self._product
