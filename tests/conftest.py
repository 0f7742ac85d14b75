"""Shared test fixtures for QR Code Admin."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from qrcode_admin.models.qrcode import Destination, ProductRef, QRCode
from qrcode_admin.service.filters import FilterSet
from qrcode_admin.settings import Settings
from qrcode_admin.storage.memory_repo import InMemoryResourceStore

SHOP = "test-shop.myshopify.com"


def make_code(title: str, **kwargs: object) -> QRCode:
    """Build a QR code with sensible defaults for listing tests."""
    kwargs.setdefault("shop", SHOP)
    kwargs.setdefault("destination", Destination.PRODUCT)
    return QRCode(title=title, **kwargs)


SNOWBOARD = ProductRef(
    id="gid://shopify/Product/1",
    variant_id="gid://shopify/ProductVariant/11",
    handle="snowboard",
    title="The Snowboard",
    image="https://cdn.example.com/snowboard.png",
    alt="A snowboard",
)


@pytest.fixture
def settings() -> Settings:
    return Settings(shop=SHOP, app_url="https://qr.example.com")


@pytest.fixture
def filters(settings: Settings) -> FilterSet:
    return FilterSet.default(settings)


@pytest.fixture
def sample_codes() -> list[QRCode]:
    """Three codes: two product links and one cart link."""
    return [
        make_code(
            "Banner",
            id=1,
            scans=12,
            money_spent=120,
            tags=["Summer", "VIP"],
            created_at=datetime(2024, 3, 1, tzinfo=UTC),
        ),
        make_code(
            "apple",
            id=2,
            destination=Destination.CART,
            scans=3,
            money_spent=900,
            tags=["winter"],
            created_at=datetime(2024, 1, 1, tzinfo=UTC),
        ),
        make_code(
            "Card",
            id=3,
            scans=40,
            money_spent=40,
            created_at=datetime(2024, 2, 1, tzinfo=UTC),
        ),
    ]


@pytest.fixture
def saved_code() -> QRCode:
    return make_code(
        "Spring campaign",
        product=SNOWBOARD,
        foreground_color="#1a2b3c",
        background_color="#ffffff",
    )


@pytest.fixture
def store(saved_code: QRCode) -> InMemoryResourceStore:
    return InMemoryResourceStore([saved_code])
