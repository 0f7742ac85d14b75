"""Pydantic domain models for QR Code Admin."""

from qrcode_admin.models.color import BACKGROUND_DEFAULT, FOREGROUND_DEFAULT, ColorHSV
from qrcode_admin.models.errors import Notice, NoticeLevel
from qrcode_admin.models.form import FormFields, FormSnapshot
from qrcode_admin.models.listing import (
    SORT_OPTIONS,
    AppliedFilter,
    SortDirection,
    SortField,
    SortSpec,
    View,
)
from qrcode_admin.models.qrcode import Destination, ProductRef, QRCode

__all__ = [
    "BACKGROUND_DEFAULT",
    "FOREGROUND_DEFAULT",
    "SORT_OPTIONS",
    "AppliedFilter",
    "ColorHSV",
    "Destination",
    "FormFields",
    "FormSnapshot",
    "Notice",
    "NoticeLevel",
    "ProductRef",
    "QRCode",
    "SortDirection",
    "SortField",
    "SortSpec",
    "View",
]
