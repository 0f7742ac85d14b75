"""Unit tests for form validation and destination URLs."""

from __future__ import annotations

import pytest

from qrcode_admin.models.qrcode import Destination, QRCode
from qrcode_admin.service.validation import ValidationError, destination_url, ensure_valid, validate
from tests.conftest import SHOP, SNOWBOARD


class TestValidate:
    def test_all_required_missing(self) -> None:
        errors = validate({"title": "", "product_id": "", "destination": None})
        assert errors == {
            "title": "Title is required",
            "product_id": "Product is required",
            "destination": "Destination is required",
        }

    def test_whitespace_title_is_missing(self) -> None:
        errors = validate({"title": "  ", "product_id": "p", "destination": "cart"})
        assert list(errors) == ["title"]

    def test_valid(self) -> None:
        assert validate({"title": "t", "product_id": "p", "destination": "product"}) == {}

    def test_ensure_valid_raises_with_errors(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            ensure_valid({"title": "t"})
        assert set(excinfo.value.errors) == {"product_id", "destination"}


class TestDestinationUrl:
    def test_product_page(self) -> None:
        code = QRCode(shop=SHOP, product=SNOWBOARD, destination=Destination.PRODUCT)
        assert destination_url(SHOP, code) == f"https://{SHOP}/products/snowboard"

    def test_cart_uses_numeric_variant_id(self) -> None:
        code = QRCode(shop=SHOP, product=SNOWBOARD, destination=Destination.CART)
        assert destination_url(SHOP, code) == f"https://{SHOP}/cart/11:1"

    def test_no_product(self) -> None:
        assert destination_url(SHOP, QRCode(shop=SHOP)) is None
