"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the QR code admin client.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "INFO"

    # Store / URLs
    shop: str = "example.myshopify.com"
    app_url: str = "http://localhost:3000"  # public QR code pages live under /qrcodes/<id>

    # Listing
    default_views: list[str] = ["All", "Product Links", "Checkout Links"]
    default_sort: str = "campaign_asc"

    # Money spent filter: default (unapplied) range and slider bounds
    money_spent_default_min: float = 0
    money_spent_default_max: float = 500
    money_spent_lower_bound: float = 0
    money_spent_upper_bound: float = 2000
