"""Editable form state for a single QR code."""

from __future__ import annotations

from pydantic import BaseModel, Field

from qrcode_admin.models.color import BACKGROUND_DEFAULT, FOREGROUND_DEFAULT, ColorHSV
from qrcode_admin.models.qrcode import Destination


class FormFields(BaseModel):
    """The fields a user can edit on the QR code form."""

    title: str = ""
    destination: Destination | None = Destination.PRODUCT
    product_id: str | None = None
    product_variant_id: str | None = None
    product_handle: str | None = None
    product_title: str | None = None
    product_alt: str | None = None
    product_image: str | None = None

    model_config = {"validate_assignment": True}


class FormSnapshot(BaseModel):
    """All tracked form state: fields plus both picker colours."""

    fields: FormFields = Field(default_factory=FormFields)
    foreground: ColorHSV = FOREGROUND_DEFAULT
    background: ColorHSV = BACKGROUND_DEFAULT
