"""Dirty tracking for the QR code form."""

from __future__ import annotations

from typing import Any, Literal

from qrcode_admin.models.color import BACKGROUND_DEFAULT, FOREGROUND_DEFAULT, ColorHSV
from qrcode_admin.models.form import FormFields, FormSnapshot
from qrcode_admin.models.qrcode import ProductRef, QRCode
from qrcode_admin.service.color_bridge import to_hex, to_hsv

ColorSlot = Literal["foreground", "background"]

_PRODUCT_FIELDS = (
    "product_id",
    "product_variant_id",
    "product_handle",
    "product_title",
    "product_alt",
    "product_image",
)


def snapshot_from_code(code: QRCode) -> FormSnapshot:
    """Capture the editable state of a loaded (or blank) QR code."""
    product = code.product
    fields = FormFields(
        title=code.title,
        destination=code.destination,
        product_id=product.id if product else None,
        product_variant_id=product.variant_id if product else None,
        product_handle=product.handle if product else None,
        product_title=product.title if product else None,
        product_alt=product.alt if product else None,
        product_image=product.image if product else None,
    )
    return FormSnapshot(
        fields=fields,
        foreground=to_hsv(code.foreground_color, FOREGROUND_DEFAULT),
        background=to_hsv(code.background_color, BACKGROUND_DEFAULT),
    )


class FormStateTracker:
    """Keeps the last-saved baseline next to the in-progress edit.

    The form is dirty when any field or either colour differs from the
    baseline (structural comparison).  :meth:`commit` is called once a save
    succeeds and makes the current state the new baseline.
    """

    def __init__(self, baseline: FormSnapshot | None = None) -> None:
        self._baseline = (baseline or FormSnapshot()).model_copy(deep=True)
        self._current = self._baseline.model_copy(deep=True)

    @classmethod
    def from_code(cls, code: QRCode) -> FormStateTracker:
        return cls(snapshot_from_code(code))

    # -- state ---------------------------------------------------------------

    @property
    def baseline(self) -> FormSnapshot:
        return self._baseline.model_copy(deep=True)

    @property
    def current(self) -> FormSnapshot:
        return self._current.model_copy(deep=True)

    @property
    def fields(self) -> FormFields:
        return self._current.fields.model_copy()

    # -- mutations -----------------------------------------------------------

    def set_field(self, key: str, value: Any) -> None:
        """Set one form field.  Raises ``KeyError`` for unknown fields."""
        self.set_fields(**{key: value})

    def set_fields(self, **values: Any) -> None:
        """Set several fields at once; nothing changes if any key is unknown."""
        unknown = [k for k in values if k not in FormFields.model_fields]
        if unknown:
            raise KeyError(f"Unknown form field(s): {', '.join(sorted(unknown))}")
        merged = self._current.fields.model_dump() | values
        self._current.fields = FormFields.model_validate(merged)

    def clear_product(self) -> None:
        self.set_fields(**dict.fromkeys(_PRODUCT_FIELDS))

    def set_color(self, which: ColorSlot, color: ColorHSV) -> None:
        _check_slot(which)
        setattr(self._current, which, color)

    # -- queries -------------------------------------------------------------

    def is_dirty(self) -> bool:
        return self._current != self._baseline

    def commit(self, snapshot: FormSnapshot | None = None) -> None:
        """Accept *snapshot* (default: the current state) as saved."""
        self._baseline = (snapshot or self._current).model_copy(deep=True)

    def payload(self) -> dict[str, Any]:
        """Build the save payload; colours are encoded back to hex."""
        fields = self._current.fields
        return {
            "title": fields.title,
            "destination": fields.destination,
            "product_id": fields.product_id or "",
            "product_variant_id": fields.product_variant_id or "",
            "product_handle": fields.product_handle or "",
            "foreground_color": to_hex(self._current.foreground),
            "background_color": to_hex(self._current.background),
        }

    def apply_to(self, code: QRCode) -> QRCode:
        """Return a copy of *code* carrying the current form state."""
        fields = self._current.fields
        product = None
        if fields.product_id:
            product = ProductRef(
                id=fields.product_id,
                variant_id=fields.product_variant_id or "",
                handle=fields.product_handle or "",
                title=fields.product_title or "",
                image=fields.product_image,
                alt=fields.product_alt,
            )
        return code.model_copy(
            update={
                "title": fields.title,
                "destination": fields.destination,
                "product": product,
                "foreground_color": to_hex(self._current.foreground),
                "background_color": to_hex(self._current.background),
            }
        )


def _check_slot(which: str) -> None:
    if which not in ("foreground", "background"):
        raise ValueError(f"Unknown colour slot '{which}' (expected foreground or background)")
